"""Health-check helpers."""

from compounding import __version__
from compounding.schemas.health import PingResponse


def get_ping() -> PingResponse:
    """Return the static ping reply with the running package version."""
    return PingResponse(message="pong", version=__version__)
