"""Decode and validate structured model output.

Model output is first unwrapped from an optional Markdown code fence, then
decoded as JSON and checked against the expected shape. Any deviation raises
:class:`AugmentationError` with ``MALFORMED_RESPONSE``; a partially valid
payload is never returned.
"""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import ValidationError

from sampurnan_schemas import ManuscriptAutofill

from .errors import AugmentationError, AugmentationErrorKind

_FENCE_RE = re.compile(r"^```(\w*)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)

UNEXPECTED_SHAPE = "unexpected response shape"


def strip_code_fence(text: str) -> str:
    stripped = text.strip()
    match = _FENCE_RE.match(stripped)
    if match and match.group(2):
        return match.group(2).strip()
    return stripped


def decode_json(text: str, *, operation: str) -> Any:
    payload = strip_code_fence(text or "")
    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:
        raise AugmentationError(
            AugmentationErrorKind.MALFORMED_RESPONSE,
            f"response is not valid JSON: {exc.msg}",
            operation=operation,
        ) from exc


def parse_autofill(text: str, *, operation: str = "autofill_manuscript") -> ManuscriptAutofill:
    data = decode_json(text, operation=operation)
    if not isinstance(data, dict):
        raise AugmentationError(
            AugmentationErrorKind.MALFORMED_RESPONSE,
            f"expected a JSON object, got {type(data).__name__}",
            operation=operation,
        )
    try:
        return ManuscriptAutofill.model_validate(data)
    except ValidationError as exc:
        raise AugmentationError(
            AugmentationErrorKind.MALFORMED_RESPONSE,
            f"{UNEXPECTED_SHAPE}: {exc.error_count()} invalid field(s)",
            operation=operation,
        ) from exc


def parse_string_list(text: str, *, operation: str) -> list[str]:
    data = decode_json(text, operation=operation)
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise AugmentationError(AugmentationErrorKind.MALFORMED_RESPONSE, UNEXPECTED_SHAPE, operation=operation)
    return data
