"""Compound vs simple growth projection backend."""

__version__ = "0.1.0"
