import random

import pytest

from crypto_utils.ciphers import rsa
from crypto_utils.models.keys import Keypair


class DeterministicRandomSource:
    """Seeded stand-in for the OS CSPRNG, for reproducible tests only."""

    def __init__(self, seed: int = 0):
        self._random = random.Random(seed)

    def token_bytes(self, n: int) -> bytes:
        return self._random.randbytes(n)


class FixedRandomSource:
    """Hands out the given bytes in order."""

    def __init__(self, data: bytes):
        self._data = bytearray(data)

    def token_bytes(self, n: int) -> bytes:
        if n > len(self._data):
            raise AssertionError("FixedRandomSource ran out of bytes")
        chunk = bytes(self._data[:n])
        del self._data[:n]
        return chunk


@pytest.fixture
def random_source() -> DeterministicRandomSource:
    return DeterministicRandomSource(seed=1234)


@pytest.fixture
def fixed_random_source():
    return FixedRandomSource


@pytest.fixture
def seeded_random_source():
    return DeterministicRandomSource


@pytest.fixture(scope="session")
def keypair() -> Keypair:
    return rsa.generate_keypair()


@pytest.fixture(scope="session")
def other_keypair() -> Keypair:
    return rsa.generate_keypair()
