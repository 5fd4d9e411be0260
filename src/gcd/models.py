# This module defines the request-scoped values exchanged between form decoding and the kernel.
# Every value is created by one request handler, rendered into a response, and then dropped.
# Expected input problems are carried as ValidationError values instead of raised exceptions.

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

U64_MAX: Final[int] = 2**64 - 1

REASON_MALFORMED_BODY: Final[str] = "malformed_body"
REASON_MISSING_FIELD: Final[str] = "missing_field"
REASON_INVALID_NUMBER: Final[str] = "invalid_number"
REASON_ZERO_INPUT: Final[str] = "zero_input"
REASON_UNSUPPORTED_MEDIA_TYPE: Final[str] = "unsupported_media_type"
REASON_BODY_TOO_LARGE: Final[str] = "body_too_large"

ZERO_INPUT_MESSAGE: Final[str] = "Computing the GCD with zero is boring."


@dataclass(frozen=True)
class GcdRequest:
    """Two parsed operands. Either may still be zero until validated."""

    n: int
    m: int

    def has_zero_operand(self) -> bool:
        return self.n == 0 or self.m == 0


@dataclass(frozen=True)
class GcdResult:
    n: int
    m: int
    divisor: int


@dataclass(frozen=True)
class ValidationError:
    """Rejected form input, with a message that is safe to show the user."""

    reason: str
    message: str
    field: str | None = None

    @classmethod
    def zero_input(cls) -> ValidationError:
        return cls(reason=REASON_ZERO_INPUT, message=ZERO_INPUT_MESSAGE)
