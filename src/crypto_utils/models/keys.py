from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Passphrase:
    """Text secret for AES, TripleDES and XOR."""

    value: str


@dataclass(frozen=True, slots=True)
class Shift:
    """Caesar rotation. Any integer works; generated shifts are in [1, 25]."""

    value: int


@dataclass(frozen=True, slots=True)
class Keyword:
    """Vigenère keyword. Only its letters are used."""

    value: str


@dataclass(frozen=True, slots=True)
class PublicKey:
    """Base64 of a DER SubjectPublicKeyInfo RSA key."""

    text: str


@dataclass(frozen=True, slots=True)
class PrivateKey:
    """Base64 of a DER PKCS#8 RSA key."""

    text: str


@dataclass(frozen=True, slots=True)
class Keypair:
    public_key: str
    private_key: str

    @property
    def public(self) -> PublicKey:
        return PublicKey(self.public_key)

    @property
    def private(self) -> PrivateKey:
        return PrivateKey(self.private_key)


type KeyMaterial = Union[Passphrase, Shift, Keyword, PublicKey, PrivateKey]
