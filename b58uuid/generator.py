"""Fresh identifiers drawn from an injectable random source.

``generate`` keeps all 128 bits random. ``generate_uuid4`` and
``generate_uuid7`` stamp RFC 4122 version/variant bits so the decoded value is
a well-formed UUID of that version.
"""

from __future__ import annotations

import secrets
import struct
import time
from collections.abc import Callable
from typing import Protocol

from .errors import RandomSourceError
from .id58 import ID_BYTES, encode


class RandomSource(Protocol):
    def token_bytes(self, n: int) -> bytes: ...


class SystemRandomSource:
    """Operating-system CSPRNG via :mod:`secrets`."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


DEFAULT_RANDOM_SOURCE: RandomSource = SystemRandomSource()


def random_bytes(n: int, source: RandomSource | None = None) -> bytes:
    src = DEFAULT_RANDOM_SOURCE if source is None else source
    try:
        raw = src.token_bytes(n)
    except Exception as e:
        raise RandomSourceError(f"{type(e).__name__}: {e}") from e
    if not isinstance(raw, (bytes, bytearray)):
        raise RandomSourceError(f"expected bytes, got {type(raw).__name__}")
    if len(raw) != n:
        raise RandomSourceError(f"expected {n} bytes, got {len(raw)}")
    return bytes(raw)


def _stamp_version(raw: bytearray, version: int) -> None:
    raw[6] = (raw[6] & 0x0F) | (version << 4)
    raw[8] = (raw[8] & 0x3F) | 0x80


def generate(source: RandomSource | None = None) -> str:
    return encode(random_bytes(ID_BYTES, source))


def generate_uuid4(source: RandomSource | None = None) -> str:
    raw = bytearray(random_bytes(ID_BYTES, source))
    _stamp_version(raw, 4)
    return encode(bytes(raw))


def generate_uuid7(
    source: RandomSource | None = None,
    clock: Callable[[], float] | None = None,
) -> str:
    now = time.time if clock is None else clock
    ts = now()
    ts_ms = int(ts * 1000)
    if not 0 <= ts_ms < 1 << 48:
        raise ValueError(f"clock value {ts!r} is outside the 48-bit millisecond range of uuid7")
    ts_bytes = struct.pack(">Q", ts_ms)[2:]  # last 6 bytes
    raw = bytearray(ts_bytes + random_bytes(ID_BYTES - len(ts_bytes), source))
    _stamp_version(raw, 7)
    return encode(bytes(raw))
