"""Error kinds raised by the cipher adapters and the registry.

Every adapter operation either returns text or raises exactly one of these.
Messages are meant to be shown to the end user as-is.
"""


class CryptoUtilsError(Exception):
    pass


class ValidationError(CryptoUtilsError, ValueError):
    """Missing or malformed input, caught before any primitive runs."""


class EmptyKeyError(ValidationError):
    pass


class DecodingError(CryptoUtilsError):
    """Malformed base64 or a corrupt binary envelope."""


class InvalidKeyError(CryptoUtilsError):
    """Key text does not parse into the expected key structure."""


class DecryptionError(CryptoUtilsError):
    """Wrong key, corrupted ciphertext or a padding check failure."""


class EncryptionError(CryptoUtilsError):
    """Input exceeds the algorithm's capacity or the primitive failed."""
