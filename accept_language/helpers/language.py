"""Accept-Language header parsing.

Handles formats like:
- "fr" -> [fr (q=1.0)]
- "fr-CA,fr;q=0.9,en;q=0.8" -> [fr-CA, fr, en]
- "zh-Hant-TW" -> [zh (script Hant, region TW)]
- "*;q=0.1" -> [* (q=0.1)]
"""

import re
from collections.abc import Callable
from operator import attrgetter

from accept_language.models.schemas import LanguageTag

MapLocale = Callable[[str], str]

# One term per match: a language range followed by an optional quality value.
# Anything that cannot start a term (commas, whitespace, junk) is skipped.
_TERM_PATTERN = re.compile(
    r"(?P<range>[A-Za-z]+(?:-[0-9A-Za-z]+){0,2}|\*)"
    r"(?:;q=(?P<quality>[01](?:\.[0-9]+)?))?"
)

DEFAULT_QUALITY = 1.0


def _identity(value: str) -> str:
    return value


def split_locale(tag: str) -> tuple[str, str | None, str | None]:
    """
    Split a locale tag into (code, script, region).

    - "en" -> ("en", None, None)
    - "en-GB" -> ("en", None, "GB")
    - "zh-Hant-TW" -> ("zh", "Hant", "TW")

    Only a tag with exactly three segments carries a script. Longer tags
    keep the code and read the second segment as the region.
    """
    bits = tag.split("-")
    if len(bits) == 3:
        return bits[0], bits[1], bits[2]
    region = bits[1] if len(bits) > 1 else None
    return bits[0], None, region


def parse_accept_language(
    header: str, map_locale: MapLocale | None = None
) -> list[LanguageTag]:
    """
    Parse an Accept-Language header into quality-ranked language tags.

    Args:
        header: Raw header value (may be empty).
        map_locale: Applied to each language range before it is split into
            subtags. Defaults to identity.

    Returns:
        Tags sorted by quality, highest first. Tags sharing a quality keep
        their header order. Empty or unparsable input returns an empty list.
    """
    if not isinstance(header, str) or not header:
        return []

    mapper = map_locale or _identity
    tags = []
    for match in _TERM_PATTERN.finditer(header):
        code, script, region = split_locale(mapper(match.group("range")))
        if not code:
            continue
        quality = match.group("quality")
        tags.append(
            LanguageTag(
                code=code,
                script=script,
                region=region,
                quality=float(quality) if quality else DEFAULT_QUALITY,
            )
        )

    return sorted(tags, key=attrgetter("quality"), reverse=True)


parse = parse_accept_language
