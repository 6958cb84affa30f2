# compounding/config.py

import os

# --- HTTP ---
# Comma-separated list of frontend origins allowed to call /api/*
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "COMPOUNDING_CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")
    if origin.strip()
]

# --- Logging ---
LOG_LEVEL = os.getenv("COMPOUNDING_LOG_LEVEL", "INFO").upper()

# --- Projection defaults ---
# Rate (percent) used by /api/examples when the caller does not pass one
DEFAULT_RATE = float(os.getenv("COMPOUNDING_DEFAULT_RATE", "7"))
# Longest horizon the API will simulate; longer requests are clamped
MAX_YEARS = int(os.getenv("COMPOUNDING_MAX_YEARS", "100"))
