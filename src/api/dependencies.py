# This file provides dependency factories for FastAPI routes.
# It exists so routes use the service built by the app factory from that app's own config.
# Tests override this factory to swap in a spy kernel.

from __future__ import annotations

from fastapi import Request

from src.api.services.gcd_service import GcdService


def get_gcd_service(request: Request) -> GcdService:
    return request.app.state.gcd_service
