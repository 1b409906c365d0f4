# ruff: noqa: E402
# E402 disabled: load_dotenv() must run before settings are imported

import time
from collections.abc import Awaitable, Callable

from dotenv import load_dotenv

load_dotenv()

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from accept_language.core.logging_config import configure_logging
from accept_language.helpers.locale_middleware import (
    LocaleNegotiationMiddleware,
    get_request_locale,
    negotiate_request,
    require_request_locale,
)
from accept_language.helpers.language import parse_accept_language
from accept_language.models.config import settings
from accept_language.models.exceptions import NotAcceptableException

configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL, settings.LOG_FILE)

app = FastAPI(title="Accept-Language Negotiation API")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log all incoming requests with timing information."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Process request and log timing information."""
        start_time = time.perf_counter()

        client_host = request.client.host if request.client else "unknown"
        logger.info(f"Request: {request.method} {request.url.path} from {client_host}")

        response = await call_next(request)

        duration = time.perf_counter() - start_time
        logger.info(
            f"Response: {request.method} {request.url.path} "
            f"status={response.status_code} duration={duration:.3f}s"
        )

        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        return response


# Note: Middleware runs in reverse order - request logging (added last) wraps
# everything, locale negotiation runs inside it
app.add_middleware(LocaleNegotiationMiddleware)
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(NotAcceptableException)
async def not_acceptable_exception_handler(
    request: Request, exc: NotAcceptableException
) -> JSONResponse:
    """Handle requests that no supported locale satisfies."""
    logger.warning(f"Not acceptable: {request.url.path}: {exc.message!r}")
    return JSONResponse(
        status_code=status.HTTP_406_NOT_ACCEPTABLE,
        content={"detail": exc.message},
    )


@app.get("/api/health")
def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/api/locale")
def negotiated_locale(
    request: Request, locale: str = Depends(get_request_locale)
) -> dict:
    """Report the locale negotiated for this request and the parsed header."""
    result = negotiate_request(request)
    header = request.headers.get("Accept-Language", "")
    return {
        "locale": locale,
        "matched": result.matched,
        "outcome": result.outcome.value,
        "supported": settings.SUPPORTED_LOCALES,
        "preferences": [tag.model_dump() for tag in parse_accept_language(header)],
    }


@app.get("/api/locale/strict")
def strict_locale(locale: str = Depends(require_request_locale)) -> dict:
    """Like /api/locale, but answers 406 instead of using the default locale."""
    return {"locale": locale}
