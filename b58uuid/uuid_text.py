from __future__ import annotations

import string
import uuid

from .errors import InvalidUUIDError
from .id58 import decode, encode

CANONICAL_LENGTH = 36
COMPACT_LENGTH = 32
HYPHEN_POSITIONS = (8, 13, 18, 23)

_HEX_DIGITS = frozenset(string.hexdigits)


def _uuid_bytes(text: str) -> bytes:
    if len(text) == CANONICAL_LENGTH:
        for pos in HYPHEN_POSITIONS:
            if text[pos] != "-":
                raise InvalidUUIDError(f"expected '-' at position {pos}, got {text[pos]!r}")
        hex_text = text.replace("-", "")
        if len(hex_text) != COMPACT_LENGTH:
            raise InvalidUUIDError("unexpected '-' outside positions 8, 13, 18, 23")
    elif len(text) == COMPACT_LENGTH:
        hex_text = text
    else:
        raise InvalidUUIDError(
            f"expected {CANONICAL_LENGTH} characters (or {COMPACT_LENGTH} without hyphens), got {len(text)}"
        )
    for pos, ch in enumerate(hex_text):
        if ch not in _HEX_DIGITS:
            raise InvalidUUIDError(f"invalid hex digit {ch!r} at position {pos}")
    return bytes.fromhex(hex_text)


def encode_uuid(value: str | uuid.UUID) -> str:
    """Encode canonical UUID text (or a ``uuid.UUID``) as a 22-character base58 id."""
    if isinstance(value, uuid.UUID):
        return encode(value.bytes)
    if not isinstance(value, str):
        raise InvalidUUIDError(f"expected str or uuid.UUID, got {type(value).__name__}")
    return encode(_uuid_bytes(value))


def decode_uuid(value: str) -> uuid.UUID:
    return uuid.UUID(bytes=decode(value))


def decode_to_uuid(value: str) -> str:
    """Decode a base58 id into lowercase hyphenated UUID text."""
    return str(decode_uuid(value))
