"""Passphrase-based block cipher encryption for AES and TripleDES.

Tokens use the OpenSSL "Salted__" envelope, the format written by
`openssl enc -aes-256-cbc -md md5` and by CryptoJS passphrase encryption:

    base64( b"Salted__" || salt[8] || CBC(PKCS7(plaintext)) )

The key and IV are derived from the passphrase and salt with EVP_BytesToKey
(MD5, one iteration).
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES
from cryptography.hazmat.primitives import hashes, padding
from cryptography.hazmat.primitives.ciphers import BlockCipherAlgorithm, Cipher, algorithms, modes
import structlog

from crypto_utils import config
from crypto_utils.errors import DecodingError, DecryptionError, EncryptionError
from crypto_utils.keygen import RandomSource, default_random_source
from crypto_utils.utils import b64_decode, b64_encode, decode_text


log = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class BlockCipherParams:
    label: str
    key_size: int  # bytes
    block_size: int  # bytes
    factory: Callable[[bytes], BlockCipherAlgorithm]


class PassphraseCipher(Enum):
    AES = BlockCipherParams("AES", key_size=32, block_size=16, factory=algorithms.AES)
    TRIPLE_DES = BlockCipherParams("TripleDES", key_size=24, block_size=8, factory=TripleDES)

    def __str__(self):
        return self.value.label


def evp_bytes_to_key(passphrase: bytes, salt: bytes, key_size: int, iv_size: int) -> Tuple[bytes, bytes]:
    """OpenSSL EVP_BytesToKey with MD5 and a single iteration."""
    derived = b""
    block = b""
    while len(derived) < key_size + iv_size:
        digest = hashes.Hash(hashes.MD5())
        digest.update(block + passphrase + salt)
        block = digest.finalize()
        derived += block
    return derived[:key_size], derived[key_size:key_size + iv_size]


def _cipher(params: BlockCipherParams, passphrase: str, salt: bytes) -> Cipher:
    key, iv = evp_bytes_to_key(passphrase.encode("utf-8"), salt, params.key_size, params.block_size)
    return Cipher(params.factory(key), modes.CBC(iv))


def encrypt(
    suite: PassphraseCipher,
    plaintext: str,
    passphrase: str,
    *,
    random_source: Optional[RandomSource] = None,
) -> str:
    """Encrypt text under a passphrase and return a self-contained base64 token.
    Empty plaintext and empty passphrases are accepted."""
    params = suite.value
    random_source = random_source or default_random_source()
    salt = random_source.token_bytes(config.SALT_LENGTH)

    try:
        padder = padding.PKCS7(params.block_size * 8).padder()
        padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()
        encryptor = _cipher(params, passphrase, salt).encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
    except ValueError as exc:
        log.warning("encryption failed", cipher=str(suite), error=str(exc))
        raise EncryptionError(f"{suite} encryption failed: {exc}") from exc

    token = b64_encode(config.SALT_MAGIC + salt + ciphertext)
    log.debug("encrypted", cipher=str(suite), plaintext_len=len(plaintext), token_len=len(token))
    return token


def decrypt(suite: PassphraseCipher, token: str, passphrase: str) -> str:
    """Decrypt a token produced by encrypt().
    A wrong passphrase never yields text: bad padding, non UTF-8 output and an
    empty result all raise DecryptionError."""
    params = suite.value
    failure = f"{suite} decryption failed: invalid key or corrupted data"

    raw = b64_decode(token, what=f"{suite} ciphertext")
    header_len = len(config.SALT_MAGIC) + config.SALT_LENGTH
    if not raw.startswith(config.SALT_MAGIC) or len(raw) <= header_len:
        raise DecodingError(f"{suite} decryption failed: not a salted {suite} token")

    salt = raw[len(config.SALT_MAGIC):header_len]
    body = raw[header_len:]

    try:
        decryptor = _cipher(params, passphrase, salt).decryptor()
        padded = decryptor.update(body) + decryptor.finalize()
        unpadder = padding.PKCS7(params.block_size * 8).unpadder()
        unpadded = unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        log.warning("decryption failed", cipher=str(suite), error=str(exc))
        raise DecryptionError(failure) from exc

    plaintext = decode_text(unpadded, failure=failure)
    if not plaintext:
        raise DecryptionError(failure)

    log.debug("decrypted", cipher=str(suite), token_len=len(token), plaintext_len=len(plaintext))
    return plaintext
