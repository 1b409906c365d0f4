"""Models package - Pydantic schemas, settings and domain exceptions."""

from .schemas import (
    LanguageTag,
    MatchOptions,
    MatchOutcome,
    MatchResult,
    SupportedLocale,
)

__all__ = [
    "LanguageTag",
    "MatchOptions",
    "MatchOutcome",
    "MatchResult",
    "SupportedLocale",
]
