"""URL transport helpers for JSON payloads.

A JSON document travels to the visualizer inside a URL query parameter as
``base64(percent_encode(text))``, the same shape browsers produce with
``btoa(encodeURIComponent(text))``.  Percent-encoding first keeps the base64
input pure ASCII, so non-Latin text survives the round trip.

Encoded payloads are capped at 2 MiB, the practical URL limit of browsers.
"""

from __future__ import annotations

import base64
import logging
import re
from dataclasses import dataclass
from urllib.parse import quote, unquote

__all__ = [
    "MAX_ENCODED_BYTES",
    "SizeCheck",
    "decode_json_from_url",
    "encode_json_for_url",
    "validate_json_size",
]

logger = logging.getLogger(__name__)

MAX_ENCODED_BYTES = 2 * 1024 * 1024

# Characters encodeURIComponent leaves alone beyond letters, digits and "_.-~"
_URI_COMPONENT_SAFE = "!*'()"

# A "%" not followed by two hex digits; decodeURIComponent rejects these.
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True, slots=True)
class SizeCheck:
    """Outcome of validate_json_size().

    Attributes:
        valid: True when the encoded payload fits the limit.
        error: Human-readable message when it does not, otherwise None.
    """

    valid: bool
    error: str | None = None


def encode_json_for_url(text: str) -> str:
    """Encode a JSON text for use as a URL parameter value."""
    escaped = quote(text, safe=_URI_COMPONENT_SAFE)
    return base64.b64encode(escaped.encode("ascii")).decode("ascii")


def decode_json_from_url(encoded: str) -> str | None:
    """Invert encode_json_for_url(); return None when ``encoded`` is malformed."""
    try:
        escaped = base64.b64decode(encoded, validate=True).decode("ascii")
        if _MALFORMED_ESCAPE.search(escaped):
            raise ValueError("malformed percent escape")
        return unquote(escaped, errors="strict")
    except (ValueError, TypeError) as exc:
        logger.warning("Could not decode URL payload: %s", exc)
        return None


def validate_json_size(text: str, max_bytes: int = MAX_ENCODED_BYTES) -> SizeCheck:
    """Check that the URL-encoded form of ``text`` fits within ``max_bytes``.

    Args:
        text:      The JSON text to be sent.
        max_bytes: Limit on the encoded length. Defaults to 2 MiB.

    Returns:
        ``SizeCheck(valid=True)`` or ``SizeCheck(valid=False, error=...)``.
    """
    encoded_size = len(encode_json_for_url(text))
    if encoded_size > max_bytes:
        return SizeCheck(
            valid=False,
            error=(
                f"JSON too large ({encoded_size / 1024 / 1024:.2f}MB). "
                f"Max: {max_bytes / 1024 / 1024:g}MB"
            ),
        )
    return SizeCheck(valid=True)
