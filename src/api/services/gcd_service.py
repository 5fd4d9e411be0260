# This file implements the form and computation behavior behind the calculator routes.
# It exists so routers stay transport-focused while parsing, validation, and rendering live in one layer.
# Every call returns exactly one HtmlPage; rejected input never reaches the gcd kernel.
# The service keeps no state between calls, so a single instance is shared by all requests.

from __future__ import annotations

from collections.abc import Callable

from src.api.api_config import ApiConfig
from src.api.forms import decode_gcd_form, is_form_content_type, unsupported_media_type
from src.api.pages import (
    HtmlPage,
    render_form_page,
    render_rejection_page,
    render_result_page,
)
from src.gcd.kernel import gcd
from src.gcd.models import REASON_BODY_TOO_LARGE, GcdRequest, GcdResult, ValidationError

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_PAYLOAD_TOO_LARGE = 413


def validate_request(request: GcdRequest) -> GcdRequest | ValidationError:
    if request.has_zero_operand():
        return ValidationError.zero_input()
    return request


class GcdService:
    """Serves the calculator form and answers form submissions."""

    def __init__(
        self,
        *,
        config: ApiConfig,
        kernel: Callable[[int, int], int] = gcd,
    ) -> None:
        self.config = config
        self.kernel = kernel

    def serve_form(self) -> HtmlPage:
        body = render_form_page(
            computation_path=self.config.computation_path,
            title=self.config.api_name,
        )
        return HtmlPage(status_code=HTTP_OK, body=body)

    def handle_computation(
        self,
        form_body: bytes,
        content_type: str | None = None,
    ) -> HtmlPage:
        if len(form_body) > self.config.max_form_bytes:
            error = ValidationError(
                reason=REASON_BODY_TOO_LARGE,
                message=f"The form data exceeds the {self.config.max_form_bytes} byte limit.",
            )
            return HtmlPage(status_code=HTTP_PAYLOAD_TOO_LARGE, body=render_rejection_page(error))

        if not is_form_content_type(content_type):
            return self._reject(unsupported_media_type(str(content_type)))

        decoded = decode_gcd_form(form_body)
        if isinstance(decoded, ValidationError):
            return self._reject(decoded)

        validated = validate_request(decoded)
        if isinstance(validated, ValidationError):
            return self._reject(validated)

        result = self.compute(validated)
        return HtmlPage(status_code=HTTP_OK, body=render_result_page(result))

    def compute(self, request: GcdRequest) -> GcdResult:
        divisor = self.kernel(request.n, request.m)
        return GcdResult(n=request.n, m=request.m, divisor=divisor)

    @staticmethod
    def _reject(error: ValidationError) -> HtmlPage:
        return HtmlPage(status_code=HTTP_BAD_REQUEST, body=render_rejection_page(error))
