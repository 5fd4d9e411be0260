"""
Shared test configuration.
It keeps the repository importable and pins environment-driven settings for the whole suite.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure config-related environment variables are predictable during tests."""

    from src.api.api_config import get_api_config

    for key in list(os.environ):
        if key.startswith("GCD_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "INFO")

    get_api_config.cache_clear()
    yield
    get_api_config.cache_clear()
