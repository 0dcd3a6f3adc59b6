"""Single entry point for every algorithm.

Routes encrypt / decrypt / generate_key to exactly one adapter per Algorithm
and turns raw caller text into the key variant that adapter expects.
"""
from concurrent.futures import Executor, Future
from typing import Literal, Optional, Union

import structlog

from crypto_utils import keygen
from crypto_utils.algorithms import Algorithm
from crypto_utils.ciphers import caesar, rsa, vigenere, xor
from crypto_utils.ciphers import passphrase as passphrase_cipher
from crypto_utils.ciphers.passphrase import PassphraseCipher
from crypto_utils.errors import CryptoUtilsError, ValidationError
from crypto_utils.executor import submit
from crypto_utils.keygen import RandomSource
from crypto_utils.models.keys import KeyMaterial, Keyword, Keypair, Passphrase, PrivateKey, PublicKey, Shift


log = structlog.get_logger()

type Direction = Literal["encrypt", "decrypt"]
type RawKey = Union[str, int, KeyMaterial]

KEY_VARIANTS = (Passphrase, Shift, Keyword, PublicKey, PrivateKey)


def parse_shift(text: str) -> Shift:
    try:
        return Shift(int(text.strip()))
    except ValueError as exc:
        raise ValidationError("Please enter a valid shift number") from exc


def coerce_key(algorithm: Algorithm, key: RawKey, direction: Direction) -> KeyMaterial:
    """Turn raw caller input into the key variant the algorithm requires.
    A variant of the wrong shape is rejected rather than converted."""
    if isinstance(key, KEY_VARIANTS):
        material = key
    elif isinstance(key, bool):
        raise ValidationError(f"Invalid key for {algorithm}: {key!r}")
    elif isinstance(key, int):
        material = Shift(key)
    elif isinstance(key, str):
        match algorithm:
            case Algorithm.AES | Algorithm.TRIPLE_DES | Algorithm.XOR:
                material = Passphrase(key)
            case Algorithm.CAESAR:
                material = parse_shift(key)
            case Algorithm.VIGENERE:
                material = Keyword(key)
            case Algorithm.RSA:
                material = PublicKey(key) if direction == "encrypt" else PrivateKey(key)
            case _:
                raise ValueError(f"Invalid algorithm: {algorithm}")
    else:
        raise ValidationError(f"Invalid key for {algorithm}: expected text, got {type(key).__name__}")

    expected = _expected_variant(algorithm, direction)
    if not isinstance(material, expected):
        raise ValidationError(
            f"{algorithm} {direction}ion needs a {expected.__name__} key, got {type(material).__name__}"
        )
    return material


def _expected_variant(algorithm: Algorithm, direction: Direction) -> type:
    match algorithm:
        case Algorithm.AES | Algorithm.TRIPLE_DES | Algorithm.XOR:
            return Passphrase
        case Algorithm.CAESAR:
            return Shift
        case Algorithm.VIGENERE:
            return Keyword
        case Algorithm.RSA:
            return PublicKey if direction == "encrypt" else PrivateKey
        case _:
            raise ValueError(f"Invalid algorithm: {algorithm}")


def check_request(algorithm: "str | Algorithm", text: str, key: Optional[RawKey], direction: Direction) -> None:
    """Input checks a front end runs before calling the core: non-empty text,
    a key present, and a non-zero Caesar shift."""
    algorithm = Algorithm.parse(algorithm)
    if not text:
        raise ValidationError(f"Please enter text to {direction}")

    if algorithm is Algorithm.RSA:
        if not key:
            which = "public" if direction == "encrypt" else "private"
            raise ValidationError(f"Please generate or enter a {which} key")
        return

    if key is None or key == "":
        raise ValidationError("Please enter a key")

    if algorithm is Algorithm.CAESAR:
        shift = coerce_key(algorithm, key, direction)
        if shift.value == 0:
            raise ValidationError("Please enter a valid shift number")


def encrypt(algorithm: "str | Algorithm", plaintext: str, key: RawKey) -> str:
    algorithm = Algorithm.parse(algorithm)
    material = coerce_key(algorithm, key, "encrypt")
    try:
        match algorithm:
            case Algorithm.AES:
                return passphrase_cipher.encrypt(PassphraseCipher.AES, plaintext, material.value)
            case Algorithm.TRIPLE_DES:
                return passphrase_cipher.encrypt(PassphraseCipher.TRIPLE_DES, plaintext, material.value)
            case Algorithm.RSA:
                return rsa.encrypt(plaintext, material.text)
            case Algorithm.XOR:
                return xor.encrypt(plaintext, material.value)
            case Algorithm.CAESAR:
                return caesar.encrypt(plaintext, material.value)
            case Algorithm.VIGENERE:
                return vigenere.encrypt(plaintext, material.value)
            case _:
                raise ValueError(f"Invalid algorithm: {algorithm}")
    except CryptoUtilsError as e:
        log.warning("encrypt failed", algorithm=str(algorithm), error_kind=type(e).__name__)
        raise


def decrypt(algorithm: "str | Algorithm", ciphertext: str, key: RawKey) -> str:
    algorithm = Algorithm.parse(algorithm)
    material = coerce_key(algorithm, key, "decrypt")
    try:
        match algorithm:
            case Algorithm.AES:
                return passphrase_cipher.decrypt(PassphraseCipher.AES, ciphertext, material.value)
            case Algorithm.TRIPLE_DES:
                return passphrase_cipher.decrypt(PassphraseCipher.TRIPLE_DES, ciphertext, material.value)
            case Algorithm.RSA:
                return rsa.decrypt(ciphertext, material.text)
            case Algorithm.XOR:
                return xor.decrypt(ciphertext, material.value)
            case Algorithm.CAESAR:
                return caesar.decrypt(ciphertext, material.value)
            case Algorithm.VIGENERE:
                return vigenere.decrypt(ciphertext, material.value)
            case _:
                raise ValueError(f"Invalid algorithm: {algorithm}")
    except CryptoUtilsError as e:
        log.warning("decrypt failed", algorithm=str(algorithm), error_kind=type(e).__name__)
        raise


def generate_key(
    algorithm: "str | Algorithm",
    length: Optional[int] = None,
    *,
    random_source: Optional[RandomSource] = None,
) -> str:
    """Generate key material as text. Only XOR and Vigenère keys take a length."""
    algorithm = Algorithm.parse(algorithm)

    if length is not None and algorithm not in (Algorithm.XOR, Algorithm.VIGENERE):
        raise ValidationError(f"{algorithm} keys have a fixed length")

    match algorithm:
        case Algorithm.AES:
            key = keygen.generate_aes_key(random_source)
        case Algorithm.TRIPLE_DES:
            key = keygen.generate_triple_des_key(random_source)
        case Algorithm.RSA:
            raise ValidationError("RSA uses a keypair, call generate_keypair() instead")
        case Algorithm.XOR:
            if length is None:
                key = keygen.generate_xor_key(random_source=random_source)
            else:
                key = keygen.generate_xor_key(length, random_source)
        case Algorithm.CAESAR:
            key = str(keygen.generate_caesar_shift(random_source))
        case Algorithm.VIGENERE:
            if length is None:
                key = keygen.generate_vigenere_key(random_source=random_source)
            else:
                key = keygen.generate_vigenere_key(length, random_source)
        case _:
            raise ValueError(f"Invalid algorithm: {algorithm}")

    log.debug("generated key", algorithm=str(algorithm), key_len=len(key))
    return key


def generate_keypair() -> Keypair:
    """RSA only. Blocking; see generate_keypair_future()."""
    return rsa.generate_keypair()


def generate_keypair_future(executor: Optional[Executor] = None) -> "Future[Keypair]":
    return rsa.generate_keypair_future(executor)


def encrypt_future(
    algorithm: "str | Algorithm",
    plaintext: str,
    key: RawKey,
    *,
    executor: Optional[Executor] = None,
) -> "Future[str]":
    return submit(encrypt, algorithm, plaintext, key, executor=executor)


def decrypt_future(
    algorithm: "str | Algorithm",
    ciphertext: str,
    key: RawKey,
    *,
    executor: Optional[Executor] = None,
) -> "Future[str]":
    return submit(decrypt, algorithm, ciphertext, key, executor=executor)
