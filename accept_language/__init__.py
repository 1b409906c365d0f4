"""
Accept-Language parsing and locale negotiation.

    >>> from accept_language import parse, pick
    >>> pick(["fr-CA", "fr-FR", "fr"], "en-GB,en-US;q=0.9,fr-CA;q=0.7,en;q=0.8")
    'fr-CA'
    >>> pick(["fr", "en"], "en-GB,en-US;q=0.9,fr-CA;q=0.7,en;q=0.8", loose=True)
    'en'
"""

from accept_language.helpers.aliases import LEGACY_LOCALE_ALIASES, map_locales
from accept_language.helpers.language import parse, parse_accept_language
from accept_language.models.schemas import (
    LanguageTag,
    MatchOptions,
    MatchOutcome,
    MatchResult,
    SupportedLocale,
)
from accept_language.services.locale_service import LocaleService, negotiate, pick

__all__ = [
    "LEGACY_LOCALE_ALIASES",
    "LanguageTag",
    "LocaleService",
    "MatchOptions",
    "MatchOutcome",
    "MatchResult",
    "SupportedLocale",
    "map_locales",
    "negotiate",
    "parse",
    "parse_accept_language",
    "pick",
]
