"""Base64 encoding with a lenient decoder."""

from __future__ import annotations

import base64 as _b64

_ALPHABET = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)


def encode(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes as padded standard base64 text."""
    return _b64.b64encode(bytes(data)).decode("ascii")


def decode(encoded: str) -> bytes:
    """Decode base64 text leniently.

    Decoding stops at the first '=' or non-alphabet character; a trailing
    partial group yields as many whole bytes as it carries.
    """
    valid = []
    for char in encoded:
        if char not in _ALPHABET:
            break
        valid.append(char)
    text = "".join(valid)
    full = len(text) - len(text) % 4
    remainder = len(text) - full
    out_len = full // 4 * 3 + max(remainder - 1, 0)
    if remainder:
        text = text + "A" * (4 - remainder)
    return _b64.b64decode(text)[:out_len]