class FF1Error(Exception):
    """Base class for every error raised by the FF1 core."""


class InvalidKeyLengthError(FF1Error, ValueError):
    pass


class InvalidTweakLengthError(FF1Error, ValueError):
    pass


class InvalidRadixError(FF1Error, ValueError):
    pass


class InvalidLengthError(FF1Error, ValueError):
    pass


class InvalidCharacterError(FF1Error, ValueError):
    pass


class PrimitiveFailureError(FF1Error, RuntimeError):
    """The underlying AES operation failed. Never expected in practice."""


class ClosedCipherError(FF1Error, ValueError):
    """The cipher context was used after close()."""
