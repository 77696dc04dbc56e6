import pytest

from ff1_crypto import codec
from ff1_crypto.errors import InvalidCharacterError, InvalidRadixError


def test_decode_hex_is_case_insensitive():
    assert codec.decode("0aFf", 16) == [0, 10, 15, 15]


def test_encode_hex_is_lower_case():
    assert codec.encode([0, 10, 15, 15], 16) == "0aff"


def test_round_trip_normalizes_case():
    assert codec.encode(codec.decode("DeadBEEF", 16), 16) == "deadbeef"


def test_decode_rejects_character_outside_alphabet():
    with pytest.raises(InvalidCharacterError, match="'g' at position 2"):
        codec.decode("abg0", 16)


def test_decode_radix_10_rejects_hex_letter():
    with pytest.raises(InvalidCharacterError):
        codec.decode("12a", 10)


def test_radix_above_36_is_case_sensitive():
    assert codec.decode("aA", 62) == [10, 36]
    with pytest.raises(InvalidCharacterError):
        codec.decode("Z", 40)


def test_explicit_alphabet():
    assert codec.decode("xyx", 2, alphabet="xy") == [0, 1, 0]
    assert codec.encode([1, 1, 0], 2, alphabet="xy") == "yyx"


def test_explicit_alphabet_must_match_radix():
    with pytest.raises(InvalidRadixError):
        codec.resolve_alphabet(3, "ab")
    with pytest.raises(InvalidRadixError):
        codec.resolve_alphabet(2, "aa")


def test_large_radix_needs_explicit_alphabet():
    assert codec.resolve_alphabet(100) is None
    with pytest.raises(InvalidRadixError):
        codec.decode("00", 100)


def test_num_and_str_m():
    assert codec.num([1, 0, 0], 16) == 256
    assert codec.num([], 16) == 0
    assert codec.str_m(256, 16, 4) == [0, 1, 0, 0]
    assert codec.str_m(0, 10, 3) == [0, 0, 0]


def test_str_m_rejects_value_that_does_not_fit():
    with pytest.raises(ValueError):
        codec.str_m(256, 16, 2)


def _naive_num(digits, radix):
    x = 0
    for d in digits:
        x = x * radix + d
    return x


@pytest.mark.parametrize("radix", [2, 10, 16, 36, 1000, 65536])
def test_num_and_str_m_on_long_inputs(radix):
    digits = [(i * 7919) % radix for i in range(1000)]
    x = codec.num(digits, radix)
    assert x == _naive_num(digits, radix)
    assert codec.str_m(x, radix, 1000) == digits
    assert codec.str_m(x, radix, 1005) == [0] * 5 + digits


def test_str_m_keeps_leading_zeros():
    assert codec.str_m(1, 10, 100) == [0] * 99 + [1]
    assert codec.str_m(1, 16, 100) == [0] * 99 + [1]


def test_large_hex_conversion_is_linear_enough():
    digits = [i % 16 for i in range(400000)]
    x = codec.num(digits, 16)
    assert codec.str_m(x, 16, len(digits)) == digits
