# This file builds the FastAPI application and registers the calculator routes.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app adds request IDs, timing headers, and optional request logging to every response, 500s included.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.api.api_config import ApiConfig, get_api_config
from src.api.error_handlers import internal_error_response, register_error_handlers
from src.api.routers.calculator import build_calculator_router
from src.api.services.gcd_service import GcdService
from src.common.logging import configure_logging

LOGGER = logging.getLogger("gcd.api")


def create_app(config: ApiConfig | None = None) -> FastAPI:
    """Create configured FastAPI application instance."""

    config = config or get_api_config()
    configure_logging(config.log_level)

    app = FastAPI(
        title=config.api_name,
        description="Computes the greatest common divisor of two numbers submitted through an HTML form.",
        version=config.app_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.gcd_service = GcdService(config=config)

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception as exc:
            response = internal_error_response(request, exc)
        duration_ms = (time.perf_counter() - started) * 1000.0

        response.headers["x-request-id"] = request_id
        response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"

        if config.enable_request_logging:
            LOGGER.info(
                "request method=%s path=%s status=%s duration_ms=%.2f request_id=%s",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                request_id,
            )
        return response

    register_error_handlers(app)

    app.include_router(build_calculator_router(computation_path=config.computation_path))

    return app


app = create_app()
