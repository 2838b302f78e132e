from __future__ import annotations

from collections.abc import Sequence

from .errors import Base58OverflowError, InvalidBase58Error, InvalidLengthError

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE = len(BASE58_ALPHABET)
ID_BYTES = 16
ID_LENGTH = 22
MAX_MAGNITUDE = (1 << (8 * ID_BYTES)) - 1

_INVALID = 0xFF


def _build_reverse_table(alphabet: str) -> bytes:
    table = bytearray([_INVALID]) * 256
    for digit, symbol in enumerate(alphabet):
        table[ord(symbol)] = digit
    return bytes(table)


# Indexed by code point for the first 256 code points; anything else is invalid.
_REVERSE_TABLE = _build_reverse_table(BASE58_ALPHABET)


def symbol_for(digit: int) -> str:
    if not 0 <= digit < BASE:
        raise ValueError(f"base58 digit out of range: {digit}")
    return BASE58_ALPHABET[digit]


def digit_for(symbol: str) -> int | None:
    if not isinstance(symbol, str) or len(symbol) != 1:
        return None
    code = ord(symbol)
    if code >= len(_REVERSE_TABLE):
        return None
    digit = _REVERSE_TABLE[code]
    return None if digit == _INVALID else digit


def magnitude_to_digits(value: int) -> tuple[int, ...]:
    """Split ``value`` into exactly ``ID_LENGTH`` base-58 digits, most significant first.

    Small magnitudes are left-padded with zero digits. 58**22 exceeds 2**128,
    so every 128-bit value fits.
    """
    if value < 0 or value > MAX_MAGNITUDE:
        raise ValueError(f"magnitude out of 128-bit range: {value}")
    digits = [0] * ID_LENGTH
    for pos in range(ID_LENGTH - 1, -1, -1):
        value, digits[pos] = divmod(value, BASE)
    return tuple(digits)


def digits_to_magnitude(digits: Sequence[int]) -> int:
    """Fold ``ID_LENGTH`` base-58 digits back into an integer.

    Raises ``Base58OverflowError`` when the result does not fit in 128 bits;
    22 digits can describe values up to 58**22 - 1, which is above 2**128 - 1.
    """
    if len(digits) != ID_LENGTH:
        raise InvalidLengthError(expected=ID_LENGTH, got=len(digits))
    acc = 0
    for d in digits:
        if not 0 <= d < BASE:
            raise ValueError(f"base58 digit out of range: {d}")
        acc = acc * BASE + d
    if acc > MAX_MAGNITUDE:
        raise Base58OverflowError()
    return acc


def encode(raw: bytes) -> str:
    if not isinstance(raw, (bytes, bytearray)):
        raise TypeError(f"base58 id encoder requires bytes, got {type(raw).__name__}")
    if len(raw) != ID_BYTES:
        raise InvalidLengthError(expected=ID_BYTES, got=len(raw))
    n = int.from_bytes(raw, "big")
    return "".join(symbol_for(d) for d in magnitude_to_digits(n))


def decode(value: str) -> bytes:
    if not isinstance(value, str):
        raise TypeError(f"base58 id decoder requires str, got {type(value).__name__}")
    if len(value) != ID_LENGTH:
        raise InvalidLengthError(expected=ID_LENGTH, got=len(value))
    digits: list[int] = []
    for pos, ch in enumerate(value):
        d = digit_for(ch)
        if d is None:
            raise InvalidBase58Error(value, pos)
        digits.append(d)
    try:
        n = digits_to_magnitude(digits)
    except Base58OverflowError as e:
        raise Base58OverflowError(value) from e
    return n.to_bytes(ID_BYTES, "big")


def is_b58uuid(value: object) -> bool:
    if not isinstance(value, str):
        return False
    try:
        decode(value)
    except (InvalidLengthError, InvalidBase58Error, Base58OverflowError):
        return False
    return True
