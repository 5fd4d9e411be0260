# This file renders every HTML page the GCD service sends back.
# It exists so wording and markup live in one module instead of being scattered across handlers.
# Any text that did not come from a literal in this file is HTML-escaped before interpolation.

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from src.gcd.models import GcdResult, ValidationError

PAGE_TITLE = "GCD Calculator"


@dataclass(frozen=True)
class HtmlPage:
    """A complete HTML response body with its status code."""

    status_code: int
    body: str


def render_form_page(*, computation_path: str, title: str = PAGE_TITLE) -> str:
    action = escape(computation_path, quote=True)
    return (
        f"<title>{escape(title)}</title>\n"
        f'<form action="{action}" method="post">\n'
        '<input type="text" name="n"/>\n'
        '<input type="text" name="m"/>\n'
        '<button type="submit">Compute GCD</button>\n'
        "</form>\n"
    )


def render_result_page(result: GcdResult) -> str:
    return (
        f"The greatest common divisor of the numbers {result.n} and {result.m} "
        f"is <b>{result.divisor}</b>\n"
    )


def render_rejection_page(error: ValidationError) -> str:
    return f"{escape(error.message)}\n"


def render_error_page(*, status_code: int, title: str, message: str) -> str:
    """Page used for routing failures and unexpected server errors."""

    return (
        f"<title>{status_code} {escape(title)}</title>\n"
        f"<h1>{status_code} {escape(title)}</h1>\n"
        f"<p>{escape(message)}</p>\n"
    )
