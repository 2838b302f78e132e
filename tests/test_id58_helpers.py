import pytest

from b58uuid import id58
from b58uuid.errors import Base58OverflowError, InvalidBase58Error, InvalidLengthError

MAX_ID = "YcVfxkQb6JRzqk5kF2tNLv"

SAMPLE_BYTES = bytes(
    [0x55, 0x0E, 0x84, 0x00, 0xE2, 0x9B, 0x41, 0xD4, 0xA7, 0x16, 0x44, 0x66, 0x55, 0x44, 0x00, 0x00]
)


def test_alphabet_excludes_ambiguous_symbols():
    assert len(id58.BASE58_ALPHABET) == 58
    assert len(set(id58.BASE58_ALPHABET)) == 58
    for ch in "0OIl":
        assert ch not in id58.BASE58_ALPHABET
    assert list(id58.BASE58_ALPHABET) == sorted(id58.BASE58_ALPHABET)


def test_symbol_and_digit_lookup_are_inverse():
    for digit in range(58):
        assert id58.digit_for(id58.symbol_for(digit)) == digit
    assert id58.symbol_for(0) == "1"
    assert id58.symbol_for(57) == "z"


def test_digit_for_rejects_non_alphabet_symbols():
    for ch in ["0", "O", "I", "l", "!", " ", "\x00", "\xff", "ä", "中", "😀"]:
        assert id58.digit_for(ch) is None


def test_magnitude_to_digits_is_fixed_width_and_msd_first():
    assert id58.magnitude_to_digits(0) == (0,) * 22
    assert id58.magnitude_to_digits(1) == (0,) * 21 + (1,)
    assert id58.magnitude_to_digits(58) == (0,) * 20 + (1, 0)
    assert id58.magnitude_to_digits(58**21) == (1,) + (0,) * 21


def test_magnitude_to_digits_rejects_out_of_range_values():
    with pytest.raises(ValueError):
        id58.magnitude_to_digits(-1)
    with pytest.raises(ValueError):
        id58.magnitude_to_digits(id58.MAX_MAGNITUDE + 1)


def test_digits_to_magnitude_accepts_maximum_value():
    digits = id58.magnitude_to_digits(id58.MAX_MAGNITUDE)
    assert id58.digits_to_magnitude(digits) == 2**128 - 1


def test_digits_to_magnitude_overflows_just_past_maximum():
    digits = list(id58.magnitude_to_digits(id58.MAX_MAGNITUDE))
    digits[-1] += 1
    with pytest.raises(Base58OverflowError):
        id58.digits_to_magnitude(digits)
    with pytest.raises(Base58OverflowError):
        id58.digits_to_magnitude([57] * 22)


def test_digits_to_magnitude_requires_22_digits():
    with pytest.raises(InvalidLengthError) as exc:
        id58.digits_to_magnitude([0] * 21)
    assert exc.value == InvalidLengthError(expected=22, got=21)


def test_digits_to_magnitude_rejects_out_of_range_digit():
    with pytest.raises(ValueError, match="out of range"):
        id58.digits_to_magnitude([0] * 21 + [58])


def test_zero_padding_contract():
    assert id58.encode(b"\x00" * 16) == "1" * 22
    assert id58.decode("1" * 22) == b"\x00" * 16


def test_known_vectors():
    assert id58.encode(SAMPLE_BYTES) == "BWBeN28Vb7cMEx7Ym8AUzs"
    assert id58.decode("BWBeN28Vb7cMEx7Ym8AUzs") == SAMPLE_BYTES
    assert id58.encode(b"\xff" * 16) == MAX_ID
    assert id58.decode(MAX_ID) == b"\xff" * 16
    assert id58.encode(bytes(range(1, 17))) == "18DfbjXLth7APvt3qQPgtf"
    assert id58.encode(b"\x00" * 15 + b"\x01") == "1111111111111111111112"


def test_encode_accepts_bytearray():
    assert id58.encode(bytearray(SAMPLE_BYTES)) == "BWBeN28Vb7cMEx7Ym8AUzs"


def test_encode_requires_exactly_16_bytes():
    with pytest.raises(InvalidLengthError) as exc:
        id58.encode(b"\x01" * 15)
    assert (exc.value.expected, exc.value.got) == (16, 15)
    with pytest.raises(InvalidLengthError):
        id58.encode(b"\x01" * 17)
    with pytest.raises(TypeError):
        id58.encode("0123456789abcdef")  # type: ignore[arg-type]


def test_leading_zero_bytes_encode_with_leading_ones():
    for zeros in range(1, 16):
        raw = b"\x00" * zeros + b"\xff" * (16 - zeros)
        encoded = id58.encode(raw)
        assert len(encoded) == 22
        assert encoded.startswith("1")
        assert id58.decode(encoded) == raw


@pytest.mark.parametrize("value", ["", "1", "1" * 21, "1" * 23, "1" * 1000, "invalid!"])
def test_decode_rejects_wrong_length(value):
    with pytest.raises(InvalidLengthError) as exc:
        id58.decode(value)
    assert exc.value.expected == 22
    assert exc.value.got == len(value)
    assert str(exc.value) == f"Invalid length: expected 22, got {len(value)}"


@pytest.mark.parametrize("bad", ["0", "O", "I", "l", "!", "-", "ä", "中", "😀"])
def test_decode_rejects_characters_outside_alphabet(bad):
    value = "BWBeN28Vb7cMEx7Ym8AUz" + bad
    assert len(value) == 22
    with pytest.raises(InvalidBase58Error) as exc:
        id58.decode(value)
    assert exc.value.value == value
    assert exc.value.position == 21
    assert str(exc.value).startswith("Invalid Base58: ")


def test_decode_reports_first_invalid_position():
    with pytest.raises(InvalidBase58Error) as exc:
        id58.decode("1111O11111111111111l11")
    assert exc.value.position == 4


def test_decode_overflow_boundary():
    assert id58.decode(MAX_ID) == b"\xff" * 16
    with pytest.raises(Base58OverflowError) as exc:
        id58.decode("YcVfxkQb6JRzqk5kF2tNLw")
    assert exc.value.value == "YcVfxkQb6JRzqk5kF2tNLw"
    assert str(exc.value) == "Arithmetic overflow: value exceeds maximum UUID value"
    with pytest.raises(Base58OverflowError):
        id58.decode("z" * 22)
    with pytest.raises(Base58OverflowError):
        id58.decode("Z" + "1" * 21)


def test_decode_accepts_values_above_58_pow_21():
    assert id58.decode("2" + "1" * 21) == (58**21).to_bytes(16, "big")
    assert id58.decode("Y" + "1" * 21) == (31 * 58**21).to_bytes(16, "big")


def test_decode_rejects_non_str():
    with pytest.raises(TypeError):
        id58.decode(b"BWBeN28Vb7cMEx7Ym8AUzs")  # type: ignore[arg-type]


def test_is_b58uuid():
    assert id58.is_b58uuid("BWBeN28Vb7cMEx7Ym8AUzs")
    assert id58.is_b58uuid("1" * 22)
    assert not id58.is_b58uuid("z" * 22)
    assert not id58.is_b58uuid("BWBeN28Vb7cMEx7Ym8AUz0")
    assert not id58.is_b58uuid("BWBeN28Vb7cMEx7Ym8AUz")
    assert not id58.is_b58uuid(None)
    assert not id58.is_b58uuid(b"BWBeN28Vb7cMEx7Ym8AUzs")


@pytest.mark.parametrize("digit", [-1, -58, 58, 100])
def test_symbol_for_rejects_out_of_range_digit(digit):
    with pytest.raises(ValueError, match="out of range"):
        id58.symbol_for(digit)


@pytest.mark.parametrize("symbol", ["", "12", "zz", None, 1])
def test_digit_for_returns_none_for_non_single_characters(symbol):
    assert id58.digit_for(symbol) is None  # type: ignore[arg-type]
