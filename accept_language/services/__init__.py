"""
Services layer for locale negotiation.
"""

from .locale_service import LocaleService

__all__ = [
    "LocaleService",
]
