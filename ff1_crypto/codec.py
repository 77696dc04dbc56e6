"""
Radix codec: maps numeral strings to digit lists and back.

The default alphabet for radix r is the first r characters of
0-9a-zA-Z. Up to radix 36 the alphabet is case-insensitive and output is
always lower case. Radices above 62 have no default alphabet.
"""

import string
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import InvalidCharacterError, InvalidRadixError

BASE62 = string.digits + string.ascii_lowercase + string.ascii_uppercase


def resolve_alphabet(radix: int, alphabet: Optional[str] = None) -> Optional[str]:
    """Return the alphabet used for `radix`, or None if it has no string form."""
    if alphabet is not None:
        if len(alphabet) != radix or len(set(alphabet)) != radix:
            raise InvalidRadixError(
                f"alphabet must contain exactly {radix} unique characters"
            )
        return alphabet
    if radix <= len(BASE62):
        return BASE62[:radix]
    return None


def _lookup(radix: int, alphabet: Optional[str]) -> Tuple[str, Dict[str, int], bool]:
    chars = resolve_alphabet(radix, alphabet)
    if chars is None:
        raise InvalidRadixError(
            f"radix {radix} has no default alphabet; pass one explicitly"
        )
    fold_case = alphabet is None and radix <= 36
    return chars, {c: i for i, c in enumerate(chars)}, fold_case


def decode(s: str, radix: int, alphabet: Optional[str] = None) -> List[int]:
    """Convert a numeral string into its digit list.

    Raises InvalidCharacterError on the first character outside the alphabet.
    """
    _, index, fold_case = _lookup(radix, alphabet)
    if fold_case:
        s = s.lower()
    digits = []
    for pos, ch in enumerate(s):
        try:
            digits.append(index[ch])
        except KeyError:
            raise InvalidCharacterError(
                f"character {ch!r} at position {pos} is not a radix-{radix} digit"
            ) from None
    return digits


def encode(digits: Sequence[int], radix: int, alphabet: Optional[str] = None) -> str:
    chars, _, _ = _lookup(radix, alphabet)
    return ''.join(chars[d] for d in digits)


# Below this many digits the plain loops beat splitting.
_SPLIT_DIGITS = 64


def _bits_per_digit(radix: int) -> int:
    """log2(radix) when radix is a power of two, else 0."""
    if radix & (radix - 1) == 0:
        return radix.bit_length() - 1
    return 0


def num(digits: Sequence[int], radix: int) -> int:
    """NUM_radix(X): the number a digit list represents, most significant first."""
    if not digits:
        return 0
    k = _bits_per_digit(radix)
    if k:
        # int(..., 2) is linear and exempt from the int/str digit limit
        fmt = '0%db' % k
        return int(''.join(format(d, fmt) for d in digits), 2)
    return _num_split(digits, radix)


def _num_split(digits: Sequence[int], radix: int) -> int:
    n = len(digits)
    if n <= _SPLIT_DIGITS:
        x = 0
        for d in digits:
            x = x * radix + d
        return x
    half = n // 2
    return (_num_split(digits[:half], radix) * radix ** (n - half)
            + _num_split(digits[half:], radix))


def str_m(x: int, radix: int, m: int) -> List[int]:
    """STR^m_radix(x): `x` as exactly `m` digits, zero-padded on the left."""
    k = _bits_per_digit(radix)
    fits = x.bit_length() <= m * k if k else x < radix ** m
    if x < 0 or not fits:
        raise ValueError(f"{x} does not fit in {m} radix-{radix} digits")
    if k:
        bits = format(x, 'b').zfill(m * k)
        return [int(bits[i:i + k], 2) for i in range(0, m * k, k)]
    digits = [0] * m
    _str_split(x, radix, digits, 0, m)
    return digits


def _str_split(x: int, radix: int, out: List[int], start: int, m: int) -> None:
    if m <= _SPLIT_DIGITS:
        for i in range(start + m - 1, start - 1, -1):
            x, out[i] = divmod(x, radix)
        return
    low = m // 2
    high, x = divmod(x, radix ** low)
    _str_split(high, radix, out, start, m - low)
    _str_split(x, radix, out, start + m - low, low)
