from collections.abc import Callable
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Match outcome enum (used by the matcher and the HTTP layer)
class MatchOutcome(str, Enum):
    """Result kinds of a locale negotiation."""

    MATCH = "match"
    NO_MATCH = "no_match"
    INVALID_INPUT = "invalid_input"


# Parsed header entries
class LanguageTag(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=1, description="Primary language subtag")
    script: Optional[str] = Field(
        default=None, description="Script subtag, e.g. 'Hant'"
    )
    region: Optional[str] = Field(
        default=None, description="Country code or numeric area code"
    )
    quality: float = 1.0


class SupportedLocale(BaseModel):
    """A caller-supplied candidate split into subtags."""

    model_config = ConfigDict(frozen=True)

    tag: str
    code: str
    script: Optional[str] = None
    region: Optional[str] = None


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    outcome: MatchOutcome
    locale: Optional[str] = None
    preference: Optional[LanguageTag] = None

    @property
    def matched(self) -> bool:
        return self.outcome == MatchOutcome.MATCH


class MatchOptions(BaseModel):
    """
    Options for locale matching.

    Attributes:
        loose: Ignore script and region, compare primary codes only.
        map_locales: Normalization applied to each header range before it is
            split into subtags. None selects the built-in alias mapping.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    loose: bool = False
    map_locales: Optional[Callable[[str], str]] = None
