# This file defines HTML error pages and the exception handlers that produce them.
# It exists so every failure outside the calculator flow still answers with text/html.
# Unknown paths and wrong methods are handled here; the request middleware uses the 500 page builder.
# Stack traces go to the log, never to the client.

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.pages import render_error_page

LOGGER = logging.getLogger("gcd.api")


def _status_title(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _html_error(
    *,
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> HTMLResponse:
    return HTMLResponse(
        content=render_error_page(
            status_code=status_code,
            title=_status_title(status_code),
            message=message,
        ),
        status_code=status_code,
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> HTMLResponse:
        return _html_error(
            status_code=exc.status_code,
            message=str(exc.detail),
            headers=getattr(exc, "headers", None),
        )


def internal_error_response(request: Request, exc: Exception) -> HTMLResponse:
    """Log an unexpected failure and build the generic 500 page."""

    LOGGER.error(
        "Unhandled error method=%s path=%s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return _html_error(
        status_code=500,
        message="The server encountered an unexpected error.",
    )
