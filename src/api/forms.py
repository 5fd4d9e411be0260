# This file decodes URL-encoded form submissions into GCD operands.
# It exists so the service layer receives either a parsed request or a rejection value, never an exception.
# Operands follow unsigned 64-bit integer rules: ASCII digits with an optional leading '+', nothing else.
# Content type checks mirror what browsers send for a plain HTML form post.

from __future__ import annotations

import re
from urllib.parse import parse_qsl

from src.gcd.models import (
    REASON_INVALID_NUMBER,
    REASON_MALFORMED_BODY,
    REASON_MISSING_FIELD,
    REASON_UNSUPPORTED_MEDIA_TYPE,
    U64_MAX,
    GcdRequest,
    ValidationError,
)

FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"
OPERAND_FIELDS: tuple[str, str] = ("n", "m")

_UNSIGNED_RE = re.compile(r"\+?[0-9]+", re.ASCII)


def is_form_content_type(content_type: str | None) -> bool:
    """Return True when the header names the URL-encoded form media type.

    A missing header is treated as a form body.
    """

    if content_type is None:
        return True
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == FORM_MEDIA_TYPE


def unsupported_media_type(content_type: str) -> ValidationError:
    return ValidationError(
        reason=REASON_UNSUPPORTED_MEDIA_TYPE,
        message=f"Expected a form submission ({FORM_MEDIA_TYPE}), got {content_type!r}.",
    )


def decode_form_pairs(form_body: bytes) -> dict[str, str] | ValidationError:
    """Split a form body into a field mapping.

    Unknown keys are kept in the mapping; a repeated operand key is rejected.
    """

    try:
        text = form_body.decode("utf-8")
    except UnicodeDecodeError:
        return ValidationError(
            reason=REASON_MALFORMED_BODY,
            message="The form data is not valid UTF-8 text.",
        )

    try:
        pairs = parse_qsl(
            text,
            keep_blank_values=True,
            encoding="utf-8",
            errors="strict",
        )
    except (UnicodeDecodeError, ValueError):
        return ValidationError(
            reason=REASON_MALFORMED_BODY,
            message="The form data could not be decoded.",
        )

    fields: dict[str, str] = {}
    for key, value in pairs:
        if key in fields and key in OPERAND_FIELDS:
            return ValidationError(
                reason=REASON_MALFORMED_BODY,
                message=f"The field {key!r} was submitted more than once.",
                field=key,
            )
        fields.setdefault(key, value)
    return fields


def parse_unsigned(field: str, raw_value: str) -> int | ValidationError:
    """Parse one operand as an unsigned 64-bit integer."""

    if not _UNSIGNED_RE.fullmatch(raw_value):
        return ValidationError(
            reason=REASON_INVALID_NUMBER,
            message=f"The field {field!r} must be a whole number between 0 and {U64_MAX}.",
            field=field,
        )
    value = int(raw_value)
    if value > U64_MAX:
        return ValidationError(
            reason=REASON_INVALID_NUMBER,
            message=f"The field {field!r} is larger than {U64_MAX}.",
            field=field,
        )
    return value


def decode_gcd_form(form_body: bytes) -> GcdRequest | ValidationError:
    """Decode a form body into a GcdRequest, or describe why it was rejected.

    Zero operands are accepted here; rejecting them is the caller's job.
    """

    fields = decode_form_pairs(form_body)
    if isinstance(fields, ValidationError):
        return fields

    operands: dict[str, int] = {}
    for name in OPERAND_FIELDS:
        if name not in fields:
            return ValidationError(
                reason=REASON_MISSING_FIELD,
                message=f"The form is missing the field {name!r}.",
                field=name,
            )
        parsed = parse_unsigned(name, fields[name])
        if isinstance(parsed, ValidationError):
            return parsed
        operands[name] = parsed

    return GcdRequest(n=operands["n"], m=operands["m"])
