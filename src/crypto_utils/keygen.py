"""Key generators for the symmetric and classical ciphers.

Randomness is passed in as a RandomSource so tests can substitute a
deterministic one. The default reads from the OS CSPRNG.
"""
import os
import string
from typing import List, Optional, Protocol

from crypto_utils import config
from crypto_utils.errors import ValidationError


XOR_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
VIGENERE_ALPHABET = string.ascii_uppercase


class RandomSource(Protocol):
    def token_bytes(self, n: int) -> bytes: ...


class SystemRandomSource:
    """Cryptographically secure bytes from os.urandom."""

    def token_bytes(self, n: int) -> bytes:
        return os.urandom(n)


def default_random_source() -> RandomSource:
    return SystemRandomSource()


def _random_indices(source: RandomSource, alphabet_size: int, count: int) -> List[int]:
    """Uniform indices in [0, alphabet_size) by rejection sampling single bytes."""
    limit = 256 - (256 % alphabet_size)
    indices: List[int] = []
    while len(indices) < count:
        for byte in source.token_bytes(count - len(indices)):
            if byte < limit:
                indices.append(byte % alphabet_size)
    return indices


def _check_length(length: int) -> int:
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise ValidationError(f"Key length must be a positive integer, got {length!r}")
    return length


def generate_aes_key(random_source: Optional[RandomSource] = None) -> str:
    """256-bit key, hex encoded."""
    source = random_source or default_random_source()
    return source.token_bytes(32).hex()


def generate_triple_des_key(random_source: Optional[RandomSource] = None) -> str:
    """192-bit key, hex encoded."""
    source = random_source or default_random_source()
    return source.token_bytes(24).hex()


def generate_xor_key(
    length: int = config.DEFAULT_XOR_KEY_LENGTH,
    random_source: Optional[RandomSource] = None,
) -> str:
    source = random_source or default_random_source()
    indices = _random_indices(source, len(XOR_ALPHABET), _check_length(length))
    return "".join(XOR_ALPHABET[i] for i in indices)


def generate_caesar_shift(random_source: Optional[RandomSource] = None) -> int:
    source = random_source or default_random_source()
    (index,) = _random_indices(source, 25, 1)
    return index + 1


def generate_vigenere_key(
    length: int = config.DEFAULT_VIGENERE_KEY_LENGTH,
    random_source: Optional[RandomSource] = None,
) -> str:
    source = random_source or default_random_source()
    indices = _random_indices(source, len(VIGENERE_ALPHABET), _check_length(length))
    return "".join(VIGENERE_ALPHABET[i] for i in indices)
