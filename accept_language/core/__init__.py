"""Core infrastructure modules for logging."""

from accept_language.core.logging_config import configure_logging

__all__ = [
    "configure_logging",
]
