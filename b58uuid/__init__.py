"""Fixed-width base58 encoding for UUIDs.

Every 128-bit identifier maps to exactly 22 characters over the alphabet
``123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz`` and back. The
``b58uuid`` command-line tool is implemented with Typer and Rich in
:mod:`b58uuid.cli`.
"""

from .errors import (
    B58UUIDError,
    Base58OverflowError,
    InvalidBase58Error,
    InvalidLengthError,
    InvalidUUIDError,
    RandomSourceError,
)
from .generator import (
    RandomSource,
    SystemRandomSource,
    generate,
    generate_uuid4,
    generate_uuid7,
)
from .id58 import (
    BASE58_ALPHABET,
    ID_BYTES,
    ID_LENGTH,
    MAX_MAGNITUDE,
    decode,
    digit_for,
    digits_to_magnitude,
    encode,
    is_b58uuid,
    magnitude_to_digits,
    symbol_for,
)
from .uuid_text import decode_to_uuid, decode_uuid, encode_uuid

__all__ = [
    "__version__",
    "BASE58_ALPHABET",
    "ID_BYTES",
    "ID_LENGTH",
    "MAX_MAGNITUDE",
    "B58UUIDError",
    "Base58OverflowError",
    "InvalidBase58Error",
    "InvalidLengthError",
    "InvalidUUIDError",
    "RandomSourceError",
    "RandomSource",
    "SystemRandomSource",
    "decode",
    "decode_to_uuid",
    "decode_uuid",
    "digit_for",
    "digits_to_magnitude",
    "encode",
    "encode_uuid",
    "generate",
    "generate_uuid4",
    "generate_uuid7",
    "is_b58uuid",
    "magnitude_to_digits",
    "symbol_for",
]

__version__ = "0.1.0"
