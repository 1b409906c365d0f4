"""
Locale negotiation service.

Picks the best supported locale for an Accept-Language header.
"""

from collections.abc import Callable, Sequence

from accept_language.helpers.aliases import map_locales as default_map_locales
from accept_language.helpers.language import parse_accept_language, split_locale
from accept_language.models.schemas import (
    LanguageTag,
    MatchOptions,
    MatchOutcome,
    MatchResult,
    SupportedLocale,
)

_INVALID = MatchResult(outcome=MatchOutcome.INVALID_INPUT)
_NO_MATCH = MatchResult(outcome=MatchOutcome.NO_MATCH)


def _lower(value: str | None) -> str | None:
    return value.lower() if value is not None else None


class LocaleService:
    """Service for Accept-Language negotiation."""

    @staticmethod
    def supported_locales(candidates: Sequence[object]) -> list[SupportedLocale]:
        """
        Split candidates into subtags, skipping anything that is not a
        non-empty string. No alias mapping is applied to candidates.
        """
        supported = []
        for candidate in candidates:
            if not isinstance(candidate, str) or not candidate:
                continue
            code, script, region = split_locale(candidate)
            supported.append(
                SupportedLocale(tag=candidate, code=code, script=script, region=region)
            )
        return supported

    @staticmethod
    def matches(
        preference: LanguageTag, supported: SupportedLocale, loose: bool = False
    ) -> bool:
        """
        Check a single preference against a single candidate.

        Comparison is case-insensitive. In strict mode a script or region
        present on the preference must equal the candidate's; in loose mode
        only the primary codes are compared.
        """
        if preference.code.lower() != supported.code.lower():
            return False
        if loose:
            return True
        if preference.script is not None and preference.script.lower() != _lower(
            supported.script
        ):
            return False
        if preference.region is not None and preference.region.lower() != _lower(
            supported.region
        ):
            return False
        return True

    @staticmethod
    def negotiate(
        candidates: Sequence[str],
        header: str,
        options: MatchOptions | None = None,
    ) -> MatchResult:
        """
        Pick the best candidate for a header.

        Preferences are scanned in quality order and, for each one,
        candidates in the order given. The first pair that matches wins, so
        quality beats candidate order and candidate order breaks ties.

        Args:
            candidates: Supported locale tags, highest priority first.
            header: Raw Accept-Language value.
            options: Matching options (strict with alias mapping by default).

        Returns:
            MatchResult with outcome MATCH, NO_MATCH or INVALID_INPUT.
        """
        if not isinstance(candidates, Sequence) or isinstance(candidates, str):
            return _INVALID
        supported = LocaleService.supported_locales(candidates)
        if not supported or not isinstance(header, str):
            return _INVALID

        options = options or MatchOptions()
        mapper = options.map_locales or default_map_locales

        for preference in parse_accept_language(header, mapper):
            for locale in supported:
                if LocaleService.matches(preference, locale, options.loose):
                    return MatchResult(
                        outcome=MatchOutcome.MATCH,
                        locale=locale.tag,
                        preference=preference,
                    )

        return _NO_MATCH

    @staticmethod
    def pick(
        candidates: Sequence[str],
        header: str,
        options: MatchOptions | None = None,
        *,
        loose: bool | None = None,
        map_locales: Callable[[str], str] | None = None,
    ) -> str | None:
        """
        Return the best candidate for a header, or None.

        None covers both an unusable call (no string candidates, non-string
        header) and a valid call with no match. Use negotiate() to tell them
        apart.
        """
        if options is None:
            options = MatchOptions()
        if loose is not None or map_locales is not None:
            options = options.model_copy(
                update={
                    key: value
                    for key, value in (("loose", loose), ("map_locales", map_locales))
                    if value is not None
                }
            )
        return LocaleService.negotiate(candidates, header, options).locale


negotiate = LocaleService.negotiate
pick = LocaleService.pick
