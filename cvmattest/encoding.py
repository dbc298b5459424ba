"""Base64 and base64url conversions between text and bytes."""

from __future__ import annotations

import base64
import binascii


def base64_to_binary(base64_data: str) -> bytes:
    """Decode standard base64 text to bytes; raises ValueError on bad input."""
    try:
        return base64.b64decode(base64_data, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 data: {exc}") from exc


def binary_to_base64(binary_data: bytes) -> str:
    """Encode bytes as padded standard base64 text."""
    return base64.b64encode(bytes(binary_data)).decode("ascii")


def binary_to_base64url(binary_data: bytes) -> str:
    """Encode bytes as base64url text without padding."""
    return base64.urlsafe_b64encode(bytes(binary_data)).decode("ascii").rstrip("=")


def base64url_to_binary(base64_data: str) -> bytes:
    """Decode base64url text, padded or not, to bytes; raises ValueError on bad input."""
    stripped = base64_data.rstrip("=")
    padded = stripped + "=" * (-len(stripped) % 4)
    try:
        return base64.b64decode(padded, altchars=b"-_", validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64url data: {exc}") from exc


def base64_encode(data: str) -> str:
    """Encode the UTF-8 bytes of a string as standard base64 text."""
    return binary_to_base64(data.encode("utf-8"))


def base64_decode(data: str) -> str:
    """Decode standard base64 text to a UTF-8 string."""
    return base64_to_binary(data).decode("utf-8")