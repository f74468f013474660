"""Optional generative augmentation for catalog authoring."""

from .client import AugmentationClient
from .errors import AugmentationError, AugmentationErrorKind
from .guard import AvailabilityGuard
from .parsing import decode_json, parse_autofill, parse_string_list, strip_code_fence

__all__ = [
    "AugmentationClient",
    "AugmentationError",
    "AugmentationErrorKind",
    "AvailabilityGuard",
    "decode_json",
    "parse_autofill",
    "parse_string_list",
    "strip_code_fence",
]
