"""
FF1 format-preserving encryption (NIST SP 800-38G) on top of AES.

High-level API:
- FF1Cipher(radix, max_tweak_len, key, tweak=b"", alphabet=None)
    .encrypt(s) / .decrypt(s) -> str of the same length and alphabet
    .encrypt_with_tweak(s, tweak) / .decrypt_with_tweak(s, tweak)
    .encrypt_digits(digits) / .decrypt_digits(digits)
    .close() zeroes the key; also usable as a context manager
- key_material(key_path, tweak_path) -> (key, tweak) buffers wiped on exit
- run_known_answers() -> numbers of failing NIST samples

Exceptions derive from FF1Error and are raised instead of printed.
"""

from .cipher import FF1Cipher, min_length
from .errors import (
    FF1Error,
    ClosedCipherError,
    InvalidKeyLengthError,
    InvalidTweakLengthError,
    InvalidRadixError,
    InvalidLengthError,
    InvalidCharacterError,
    PrimitiveFailureError,
)
from .keyfile import key_material, load_hex_file, read_lines
from .textio import prepare_input, wrap_lines
from .vectors import run_known_answers

__all__ = [
    "FF1Cipher",
    "min_length",
    "FF1Error",
    "ClosedCipherError",
    "InvalidKeyLengthError",
    "InvalidTweakLengthError",
    "InvalidRadixError",
    "InvalidLengthError",
    "InvalidCharacterError",
    "PrimitiveFailureError",
    "key_material",
    "load_hex_file",
    "read_lines",
    "prepare_input",
    "wrap_lines",
    "run_known_answers",
]
