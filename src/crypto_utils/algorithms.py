from dataclasses import dataclass
from enum import Enum
from typing import Dict

from crypto_utils.errors import ValidationError


class Algorithm(str, Enum):
    AES = "AES"
    TRIPLE_DES = "TripleDES"
    RSA = "RSA"
    XOR = "XOR"
    CAESAR = "Caesar"
    VIGENERE = "Vigenere"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, name: "str | Algorithm") -> "Algorithm":
        """Case-insensitive lookup by value, with a few common aliases."""
        if isinstance(name, Algorithm):
            return name
        wanted = name.strip().lower()
        wanted = _ALIASES.get(wanted, wanted)
        for algorithm in cls:
            if algorithm.value.lower() == wanted:
                return algorithm
        choices = ", ".join(a.value for a in cls)
        raise ValidationError(f"Unknown algorithm: {name!r} (expected one of {choices})")


_ALIASES = {
    "3des": "tripledes",
    "des3": "tripledes",
    "triple-des": "tripledes",
    "vigenère": "vigenere",
}


class KeyShape(str, Enum):
    PASSPHRASE = "passphrase"
    KEYPAIR = "keypair"
    SHIFT = "shift"
    KEYWORD = "keyword"

    def __str__(self):
        return self.value


class CiphertextEncoding(str, Enum):
    BASE64 = "base64"
    PLAIN = "plain"

    def __str__(self):
        return self.value


@dataclass(frozen=True, slots=True)
class AlgorithmInfo:
    algorithm: Algorithm
    name: str
    key_shape: KeyShape
    encoding: CiphertextEncoding
    description: str
    details: str


ALGORITHMS: Dict[Algorithm, AlgorithmInfo] = {
    Algorithm.AES: AlgorithmInfo(
        algorithm=Algorithm.AES,
        name="AES (Advanced Encryption Standard)",
        key_shape=KeyShape.PASSPHRASE,
        encoding=CiphertextEncoding.BASE64,
        description="Industry-standard symmetric block cipher.",
        details=(
            "AES-256 in CBC mode with the key and IV derived from a passphrase. "
            "The output is an OpenSSL-compatible salted token, so the same "
            "passphrase always decrypts it."
        ),
    ),
    Algorithm.TRIPLE_DES: AlgorithmInfo(
        algorithm=Algorithm.TRIPLE_DES,
        name="3DES (Triple Data Encryption Standard)",
        key_shape=KeyShape.PASSPHRASE,
        encoding=CiphertextEncoding.BASE64,
        description="Legacy symmetric cipher that applies DES three times.",
        details=(
            "Triple DES with a 192-bit key schedule. Slower and weaker than AES "
            "and mostly found in legacy payment systems."
        ),
    ),
    Algorithm.RSA: AlgorithmInfo(
        algorithm=Algorithm.RSA,
        name="RSA (Rivest-Shamir-Adleman)",
        key_shape=KeyShape.KEYPAIR,
        encoding=CiphertextEncoding.BASE64,
        description="Asymmetric public-key encryption.",
        details=(
            "2048-bit RSA with OAEP/SHA-256 padding. Encrypt with the public key, "
            "decrypt with the matching private key. A single message is limited "
            "to 190 bytes."
        ),
    ),
    Algorithm.XOR: AlgorithmInfo(
        algorithm=Algorithm.XOR,
        name="XOR Cipher",
        key_shape=KeyShape.PASSPHRASE,
        encoding=CiphertextEncoding.BASE64,
        description="Bitwise exclusive-or with a repeating key. Educational only.",
        details=(
            "Each byte of the text is XORed with the key byte at the same "
            "position, repeating the key as needed. Applying it twice with the "
            "same key gives back the original text."
        ),
    ),
    Algorithm.CAESAR: AlgorithmInfo(
        algorithm=Algorithm.CAESAR,
        name="Caesar Cipher",
        key_shape=KeyShape.SHIFT,
        encoding=CiphertextEncoding.PLAIN,
        description="Shifts every letter by a fixed number of positions.",
        details=(
            "One of the oldest substitution ciphers. Letters keep their case and "
            "everything else passes through unchanged. Trivial to break."
        ),
    ),
    Algorithm.VIGENERE: AlgorithmInfo(
        algorithm=Algorithm.VIGENERE,
        name="Vigenère Cipher",
        key_shape=KeyShape.KEYWORD,
        encoding=CiphertextEncoding.PLAIN,
        description="Polyalphabetic substitution driven by a keyword.",
        details=(
            "Each letter is shifted by the matching letter of a repeating "
            "keyword. Characters that are not letters do not advance the keyword."
        ),
    ),
}


def describe(algorithm: "str | Algorithm") -> AlgorithmInfo:
    return ALGORITHMS[Algorithm.parse(algorithm)]
