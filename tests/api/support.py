# This file provides shared helpers for API endpoint tests.
# It exists so tests can build the app against a deterministic config without reading `.env`.
# The helpers wire a scoped TestClient and optionally swap the gcd kernel for a spy.

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from fastapi.testclient import TestClient

from src.api.api_config import ApiConfig
from src.api.app import create_app
from src.api.dependencies import get_gcd_service
from src.api.services.gcd_service import GcdService
from src.gcd.kernel import gcd

FORM_HEADERS = {"content-type": "application/x-www-form-urlencoded"}


def build_test_config(**overrides: object) -> ApiConfig:
    """Create deterministic service config for tests."""

    values: dict[str, object] = {
        "api_name": "GCD Calculator",
        "host": "127.0.0.1",
        "port": 3000,
        "environment": "test",
        "log_level": "INFO",
        "computation_path": "/gcd",
        "max_form_bytes": 16 * 1024,
        "enable_request_logging": False,
        "app_version": "0.1.0",
    }
    values.update(overrides)
    return ApiConfig.model_validate(values)


class KernelSpy:
    """Records every call and delegates to the real kernel."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []

    def __call__(self, n: int, m: int) -> int:
        self.calls.append((n, m))
        return gcd(n, m)


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    kernel: Callable[[int, int], int] | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient for an app built from the given config.

    Without a kernel the app's own service is used untouched.
    """

    resolved_config = config or build_test_config()
    app = create_app(resolved_config)
    if kernel is not None:
        service = GcdService(config=resolved_config, kernel=kernel)
        app.dependency_overrides[get_gcd_service] = lambda: service

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
