"""
FF1 format-preserving encryption (NIST SP 800-38G) over AES.

FF1 is a ten round Feistel network on a numeral string of length n:

    u = floor(n/2), v = n - u
    A = X[1..u], B = X[u+1..n]
    P = [1]^1 || [2]^1 || [1]^1 || [radix]^3 || [10]^1 || [u mod 256]^1 || [n]^4 || [t]^4
    for i in 0..9:
        Q = T || [0]^((-t-b-1) mod 16) || [i]^1 || [NUM(B)]^b
        R = PRF(P || Q)                  # CBC-MAC, zero IV
        S = first d bytes of R || CIPH(R ^ [1]^16) || CIPH(R ^ [2]^16) ...
        m = u if i is even else v
        C = STR^m((NUM(A) + NUM(S)) mod radix^m)
        A, B = B, C
    return A || B

Decryption runs the rounds from 9 down to 0, takes the round input from A
and subtracts instead of adding.
"""

from typing import List, Optional, Sequence, Union

from cryptography.exceptions import AlreadyFinalized, InternalError, UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from . import codec
from .errors import (
    ClosedCipherError,
    InvalidCharacterError,
    InvalidKeyLengthError,
    InvalidLengthError,
    InvalidRadixError,
    InvalidTweakLengthError,
    PrimitiveFailureError,
)

NUM_ROUNDS = 10
BLOCK_SIZE = 16  # AES block size in bytes
KEY_SIZES = (16, 24, 32)
FEISTEL_MIN = 100  # radix^minlen must reach this
MIN_RADIX = 2
MAX_RADIX = 65536
MAX_LEN = 2 ** 32 - 1  # n is encoded in 4 bytes of P

BytesLike = Union[bytes, bytearray, memoryview]


def min_length(radix: int) -> int:
    length = 2
    while radix ** length < FEISTEL_MIN:
        length += 1
    return length


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


class FF1Cipher:
    """An FF1 context bound to one key, one default tweak and one radix.

    The context is reusable and safe to share between threads: the AES
    contexts are built once and every operation creates its own encryptor.
    `close()` (or leaving a `with` block) zeroes the held key copy.
    """

    def __init__(self, radix: int, max_tweak_len: int, key: BytesLike,
                 tweak: BytesLike = b"", alphabet: Optional[str] = None):
        if not MIN_RADIX <= radix <= MAX_RADIX:
            raise InvalidRadixError(
                f"radix must be between {MIN_RADIX} and {MAX_RADIX}, inclusive"
            )

        klen = len(key)
        if klen not in KEY_SIZES:
            raise InvalidKeyLengthError(
                f"key length is {klen} bytes but must be 128, 192, or 256 bits"
            )

        if max_tweak_len < 0:
            raise InvalidTweakLengthError("max_tweak_len must not be negative")
        self.max_tweak_len = max_tweak_len
        self._check_tweak(tweak)

        self.radix = radix
        self.alphabet = codec.resolve_alphabet(radix, alphabet)
        self._explicit_alphabet = alphabet is not None
        self.min_len = min_length(radix)
        self.max_len = MAX_LEN

        self._key = bytearray(key)
        self._tweak = bytes(tweak)
        try:
            aes = algorithms.AES(bytes(self._key))
            self._ecb = Cipher(aes, modes.ECB(), backend=default_backend())
            self._cbc = Cipher(aes, modes.CBC(bytes(BLOCK_SIZE)), backend=default_backend())
        except (ValueError, UnsupportedAlgorithm) as e:
            raise PrimitiveFailureError(f"failed to set up AES: {e}") from e

    # --- lifecycle ---

    @property
    def closed(self) -> bool:
        return self._ecb is None

    def close(self) -> None:
        """Zero the key copy and drop the AES contexts."""
        for i in range(len(self._key)):
            self._key[i] = 0
        self._ecb = None
        self._cbc = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # --- public API ---

    def encrypt(self, plaintext: str) -> str:
        """Encrypt a numeral string; the result has the same length and alphabet."""
        return self.encrypt_with_tweak(plaintext, self._tweak)

    def decrypt(self, ciphertext: str) -> str:
        return self.decrypt_with_tweak(ciphertext, self._tweak)

    def encrypt_with_tweak(self, plaintext: str, tweak: BytesLike) -> str:
        digits = self._decode(plaintext, tweak)
        return self._encode(self._feistel(digits, bytes(tweak), decrypt=False))

    def decrypt_with_tweak(self, ciphertext: str, tweak: BytesLike) -> str:
        digits = self._decode(ciphertext, tweak)
        return self._encode(self._feistel(digits, bytes(tweak), decrypt=True))

    def encrypt_digits(self, digits: Sequence[int], tweak: Optional[BytesLike] = None) -> List[int]:
        """Digit-level encryption, usable with any radix including those above 62."""
        tweak = self._tweak if tweak is None else bytes(tweak)
        self._check_digits(digits, tweak)
        return self._feistel(list(digits), tweak, decrypt=False)

    def decrypt_digits(self, digits: Sequence[int], tweak: Optional[BytesLike] = None) -> List[int]:
        tweak = self._tweak if tweak is None else bytes(tweak)
        self._check_digits(digits, tweak)
        return self._feistel(list(digits), tweak, decrypt=True)

    # --- validation ---

    def _check_tweak(self, tweak: BytesLike) -> None:
        if len(tweak) > self.max_tweak_len:
            raise InvalidTweakLengthError(
                f"tweak length {len(tweak)} exceeds the maximum of {self.max_tweak_len} bytes"
            )

    def _check_length(self, n: int) -> None:
        if n < self.min_len or n > self.max_len:
            raise InvalidLengthError(
                f"message length {n} is not within min {self.min_len} and "
                f"max {self.max_len} bounds"
            )

    def _check_open(self) -> None:
        if self.closed:
            raise ClosedCipherError("FF1 cipher has been closed")

    def _decode(self, s: str, tweak: BytesLike) -> List[int]:
        self._check_open()
        self._check_length(len(s))
        self._check_tweak(tweak)
        return codec.decode(s, self.radix, self._alphabet_arg())

    def _encode(self, digits: Sequence[int]) -> str:
        return codec.encode(digits, self.radix, self._alphabet_arg())

    def _alphabet_arg(self) -> Optional[str]:
        # Default alphabets are resolved by the codec so case folding applies.
        return self.alphabet if self._explicit_alphabet else None

    def _check_digits(self, digits: Sequence[int], tweak: bytes) -> None:
        self._check_open()
        self._check_length(len(digits))
        self._check_tweak(tweak)
        for pos, d in enumerate(digits):
            if not 0 <= d < self.radix:
                raise InvalidCharacterError(
                    f"digit {d} at position {pos} is not in [0, {self.radix})"
                )

    # --- AES primitives ---

    def _aes(self, cipher: Cipher, data: bytes) -> bytes:
        try:
            encryptor = cipher.encryptor()
            return encryptor.update(data) + encryptor.finalize()
        except (ValueError, UnsupportedAlgorithm, AlreadyFinalized, InternalError) as e:
            raise PrimitiveFailureError(f"AES operation failed: {e}") from e

    def _prf(self, data: bytes) -> bytes:
        """CBC-MAC of `data` (a whole number of blocks): the last CBC block."""
        return self._aes(self._cbc, data)[-BLOCK_SIZE:]

    def _expand(self, r: bytes, d: int) -> bytes:
        """Stretch the round block `r` to at least `d` bytes."""
        blocks = (d + BLOCK_SIZE - 1) // BLOCK_SIZE
        if blocks == 1:
            return r
        counters = b"".join(
            _xor(r, j.to_bytes(BLOCK_SIZE, 'big')) for j in range(1, blocks)
        )
        # ECB keeps the blocks independent, so one call covers every counter.
        return r + self._aes(self._ecb, counters)

    def _round_value(self, p: bytes, q_prefix: bytes, i: int, source: int, b: int, d: int) -> int:
        q = q_prefix + bytes([i]) + source.to_bytes(b, 'big')
        r = self._prf(p + q)
        return int.from_bytes(self._expand(r, d)[:d], 'big')

    # --- Feistel network ---

    def _feistel(self, digits: List[int], tweak: bytes, decrypt: bool) -> List[int]:
        radix = self.radix
        n = len(digits)
        u = n // 2
        v = n - u
        a, b_half = digits[:u], digits[u:]

        # b = ceil(ceil(v * log2(radix)) / 8), computed without floats
        b = ((radix ** v - 1).bit_length() + 7) // 8
        d = 4 * ((b + 3) // 4) + 4
        t = len(tweak)

        p = (bytes([1, 2, 1]) + radix.to_bytes(3, 'big') + bytes([NUM_ROUNDS, u % 256])
             + n.to_bytes(4, 'big') + t.to_bytes(4, 'big'))
        q_prefix = tweak + bytes((-t - b - 1) % BLOCK_SIZE)

        mod_u = radix ** u
        mod_v = radix ** v

        rounds = range(NUM_ROUNDS - 1, -1, -1) if decrypt else range(NUM_ROUNDS)
        for i in rounds:
            if i % 2 == 0:
                m, modulus = u, mod_u
            else:
                m, modulus = v, mod_v

            if decrypt:
                y = self._round_value(p, q_prefix, i, codec.num(a, radix), b, d)
                c = (codec.num(b_half, radix) - y) % modulus
                a, b_half = codec.str_m(c, radix, m), a
            else:
                y = self._round_value(p, q_prefix, i, codec.num(b_half, radix), b, d)
                c = (codec.num(a, radix) + y) % modulus
                a, b_half = b_half, codec.str_m(c, radix, m)

        return a + b_half
