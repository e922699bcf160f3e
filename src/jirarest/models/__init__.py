"""Data models for jirarest."""

from .config import ClientConfig, DEFAULT_TIMEOUT

__all__ = [
    "ClientConfig",
    "DEFAULT_TIMEOUT",
]
