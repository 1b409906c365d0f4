"""
Locale negotiation middleware and request helpers for FastAPI.

The middleware negotiates a locale from the Accept-Language header once per
request and stores it on ``request.state``. The helpers read it back, or
negotiate on the spot when the middleware is not installed.
"""

from collections.abc import Awaitable, Callable, Sequence
from typing import Optional

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from accept_language.models.config import settings
from accept_language.models.exceptions import (
    NotAcceptableException,
    ValidationException,
)
from accept_language.models.schemas import MatchOptions, MatchResult
from accept_language.services.locale_service import LocaleService


def _match_options(loose: bool | None) -> MatchOptions:
    if loose is None:
        loose = settings.LOOSE_LOCALE_MATCHING
    return MatchOptions(loose=loose)


def negotiate_request(
    request: Request,
    supported_locales: Optional[Sequence[str]] = None,
    loose: Optional[bool] = None,
) -> MatchResult:
    """
    Negotiate a locale for the request.

    Reuses the result stored by LocaleNegotiationMiddleware when present and
    neither supported_locales nor loose is given.

    Args:
        request: FastAPI request object
        supported_locales: Candidates, highest priority first. Defaults to
            settings.SUPPORTED_LOCALES.
        loose: Loose matching. Defaults to settings.LOOSE_LOCALE_MATCHING.

    Returns:
        MatchResult for the request's Accept-Language header
    """
    stored = getattr(request.state, "locale_match", None)
    if (
        isinstance(stored, MatchResult)
        and supported_locales is None
        and loose is None
    ):
        return stored

    candidates = (
        settings.SUPPORTED_LOCALES if supported_locales is None else supported_locales
    )
    header = request.headers.get("Accept-Language", "")
    return LocaleService.negotiate(candidates, header, _match_options(loose))


def get_request_locale(request: Request) -> str:
    """
    Get the locale for the request, falling back to settings.DEFAULT_LOCALE.

    Usable as a FastAPI dependency.
    """
    locale = getattr(request.state, "locale", None)
    if locale:
        return locale

    result = negotiate_request(request)
    return result.locale or settings.DEFAULT_LOCALE


def require_request_locale(request: Request) -> str:
    """
    Get the negotiated locale for the request without any fallback.

    Usable as a FastAPI dependency.

    Raises:
        NotAcceptableException: If no supported locale matches.
    """
    result = negotiate_request(request)
    if not result.matched:
        header = request.headers.get("Accept-Language")
        raise NotAcceptableException(
            f"No supported locale matches Accept-Language: {header!r}",
            accept_language=header,
        )
    return result.locale


class LocaleNegotiationMiddleware(BaseHTTPMiddleware):
    """
    Middleware that negotiates a locale for every request.

    Sets:
    - request.state.locale_match: the MatchResult
    - request.state.locale: the matched locale, or the default locale
    - Content-Language response header (when enabled)
    """

    def __init__(
        self,
        app: ASGIApp,
        supported_locales: Optional[Sequence[str]] = None,
        default_locale: Optional[str] = None,
        loose: Optional[bool] = None,
        set_content_language: Optional[bool] = None,
    ) -> None:
        super().__init__(app)
        self.supported_locales = list(
            settings.SUPPORTED_LOCALES
            if supported_locales is None
            else supported_locales
        )
        if not self.supported_locales:
            raise ValidationException("supported_locales must not be empty")

        self.default_locale = default_locale or settings.DEFAULT_LOCALE
        supported = {locale.lower() for locale in self.supported_locales}
        if self.default_locale.lower() not in supported:
            raise ValidationException(
                f"default_locale {self.default_locale!r} is not in supported_locales"
            )

        self.options = _match_options(loose)
        self.set_content_language = (
            settings.SET_CONTENT_LANGUAGE
            if set_content_language is None
            else set_content_language
        )

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Negotiate the request locale and tag the response with it."""
        header = request.headers.get("Accept-Language", "")
        result = LocaleService.negotiate(self.supported_locales, header, self.options)

        if result.matched:
            locale = result.locale
            logger.debug(f"Negotiated locale {locale} for Accept-Language {header!r}")
        else:
            locale = self.default_locale
            logger.info(
                f"No locale match for Accept-Language {header!r} "
                f"({result.outcome.value}); using {locale}"
            )

        request.state.locale_match = result
        request.state.locale = locale

        response = await call_next(request)

        if self.set_content_language and "Content-Language" not in response.headers:
            response.headers["Content-Language"] = locale

        return response
