"""Map pipeline exceptions to HTTP responses.

InvalidInput is user-correctable, so its message goes back verbatim as a 400.
Everything else becomes a generic 503; the detail stays in the server log.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .scraper import FetchError, InvalidInput

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Internal server error"


async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": str(exc)},
    )


async def fetch_error_handler(request: Request, exc: FetchError) -> JSONResponse:
    logger.error(
        "Fetch failed for %s (status=%s, attempts=%d): %s",
        exc.url, exc.status_code, exc.attempts, exc,
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": GENERIC_ERROR},
    )


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turn any other exception into the generic 503.

    Must stay the innermost middleware so the 503 still passes through the
    CORS and security header layers.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s", request.url.path)
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"error": GENERIC_ERROR},
            )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidInput, invalid_input_handler)
    app.add_exception_handler(FetchError, fetch_error_handler)
    app.add_middleware(UnhandledErrorMiddleware)
