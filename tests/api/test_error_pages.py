# This file tests HTML error handling outside the calculator flow.
# It exists so unknown routes, wrong methods, and unexpected failures never crash the process.
# Request tracing headers are checked here because every response, good or bad, must carry them.

from __future__ import annotations

import logging

import pytest

from tests.api.support import FORM_HEADERS, api_test_client, build_test_config


def _exploding_kernel(n: int, m: int) -> int:
    raise RuntimeError("kernel exploded")


def test_unknown_path_returns_html_404() -> None:
    with api_test_client() as client:
        response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/html")
    assert "404 Not Found" in response.text


def test_wrong_method_returns_html_405() -> None:
    with api_test_client() as client:
        response = client.get("/gcd")

    assert response.status_code == 405
    assert response.headers["content-type"].startswith("text/html")
    assert "405 Method Not Allowed" in response.text
    assert "POST" in response.headers["allow"]


def test_unexpected_error_returns_generic_html_500(caplog: pytest.LogCaptureFixture) -> None:
    config = build_test_config(enable_request_logging=True)
    with caplog.at_level(logging.INFO, logger="gcd.api"):
        with api_test_client(config=config, kernel=_exploding_kernel) as client:
            response = client.post(
                "/gcd",
                content="n=4&m=6",
                headers={**FORM_HEADERS, "x-request-id": "rid-1"},
            )

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/html")
    assert "unexpected error" in response.text
    assert "kernel exploded" not in response.text
    assert response.headers["x-request-id"] == "rid-1"
    assert float(response.headers["x-response-time-ms"]) >= 0.0

    lines = [record.getMessage() for record in caplog.records if record.name == "gcd.api"]
    assert "Unhandled error method=POST path=/gcd" in lines
    assert any("method=POST path=/gcd status=500" in line and "request_id=rid-1" in line for line in lines)


def test_responses_carry_generated_request_id_and_timing() -> None:
    with api_test_client() as client:
        response = client.get("/")

    assert response.headers["x-request-id"]
    assert float(response.headers["x-response-time-ms"]) >= 0.0


def test_request_id_header_is_echoed() -> None:
    with api_test_client() as client:
        response = client.post(
            "/gcd",
            content="n=0&m=1",
            headers={**FORM_HEADERS, "x-request-id": "abc-123"},
        )

    assert response.status_code == 400
    assert response.headers["x-request-id"] == "abc-123"


def test_request_logging_writes_one_line_without_form_values(caplog: pytest.LogCaptureFixture) -> None:
    config = build_test_config(enable_request_logging=True)
    with caplog.at_level(logging.INFO, logger="gcd.api"):
        with api_test_client(config=config) as client:
            client.post("/gcd", content="n=0&m=987654321", headers=FORM_HEADERS)

    lines = [record.getMessage() for record in caplog.records if record.name == "gcd.api"]
    assert len(lines) == 1
    assert "method=POST path=/gcd status=400" in lines[0]
    assert "987654321" not in lines[0]
