"""Configuration module exports (env names, defaults and import-time constants)."""

from .http import RELAY_ENDPOINT_PATH
from .logging import LOG_LEVEL, LOG_FORMAT

__all__ = [
    "LOG_FORMAT",
    "LOG_LEVEL",
    "RELAY_ENDPOINT_PATH",
]
