# This file defines the two calculator routes: the form page and the form submission.
# It exists so HTTP transport details stay separate from parsing and computation in the service.
# The submission route reads the raw body and lets the service decide between result and rejection.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from src.api.dependencies import get_gcd_service
from src.api.pages import HtmlPage
from src.api.services.gcd_service import GcdService

GcdServiceDep = Annotated[GcdService, Depends(get_gcd_service)]


def _to_response(page: HtmlPage) -> HTMLResponse:
    return HTMLResponse(content=page.body, status_code=page.status_code)


async def read_limited_body(request: Request, *, limit: int) -> bytes:
    """Read at most limit + 1 bytes so oversized bodies are never buffered in full."""

    chunks: list[bytes] = []
    received = 0
    async for chunk in request.stream():
        chunks.append(chunk)
        received += len(chunk)
        if received > limit:
            break
    return b"".join(chunks)[: limit + 1]


def build_calculator_router(*, computation_path: str) -> APIRouter:
    """Router table: GET / serves the form, POST <computation_path> computes."""

    router = APIRouter(tags=["calculator"])

    @router.get("/", response_class=HTMLResponse)
    def get_index(service: GcdServiceDep) -> HTMLResponse:
        return _to_response(service.serve_form())

    @router.post(computation_path, response_class=HTMLResponse)
    async def post_gcd(request: Request, service: GcdServiceDep) -> HTMLResponse:
        form_body = await read_limited_body(request, limit=service.config.max_form_bytes)
        page = service.handle_computation(
            form_body,
            content_type=request.headers.get("content-type"),
        )
        return _to_response(page)

    return router
