"""RSA-OAEP text encryption with base64 DER keys.

Public keys are SubjectPublicKeyInfo, private keys unencrypted PKCS#8, both
DER then base64. Key generation is CPU bound and takes tens to hundreds of
milliseconds for a 2048-bit modulus; use generate_keypair_future() to keep
it off the calling thread.
"""
from concurrent.futures import Executor, Future
from typing import Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
import structlog

from crypto_utils import config
from crypto_utils.executor import submit
from crypto_utils.errors import DecryptionError, DecodingError, EncryptionError, InvalidKeyError
from crypto_utils.models.keys import Keypair
from crypto_utils.utils import b64_decode, b64_encode, decode_text


log = structlog.get_logger()

HASH_SIZE = hashes.SHA256.digest_size


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


def generate_keypair(key_size: int = config.RSA_KEY_SIZE) -> Keypair:
    """Generate a fresh keypair. Blocks for the duration of prime generation."""
    private_key = rsa.generate_private_key(public_exponent=config.RSA_PUBLIC_EXPONENT, key_size=key_size)
    private_der = private_key.private_bytes(
        serialization.Encoding.DER,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )
    public_der = private_key.public_key().public_bytes(
        serialization.Encoding.DER,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    log.info("generated keypair", cipher="RSA", key_size=key_size)
    return Keypair(public_key=b64_encode(public_der), private_key=b64_encode(private_der))


def generate_keypair_future(executor: Optional[Executor] = None) -> "Future[Keypair]":
    return submit(generate_keypair, executor=executor)


def load_public_key(public_key_text: str) -> rsa.RSAPublicKey:
    """Import a base64 DER public key, rejecting anything that is not RSA."""
    try:
        der = b64_decode(public_key_text, what="public key")
        key = serialization.load_der_public_key(der)
    except (DecodingError, ValueError, UnsupportedAlgorithm) as exc:
        raise InvalidKeyError("Invalid RSA public key") from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise InvalidKeyError("Public key is not an RSA key")
    return key


def load_private_key(private_key_text: str) -> rsa.RSAPrivateKey:
    """Import a base64 DER PKCS#8 private key, rejecting anything that is not RSA."""
    try:
        der = b64_decode(private_key_text, what="private key")
        key = serialization.load_der_private_key(der, password=None)
    except (DecodingError, ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise InvalidKeyError("Invalid RSA private key") from exc
    if not isinstance(key, rsa.RSAPrivateKey):
        raise InvalidKeyError("Private key is not an RSA key")
    return key


def max_payload_size(public_key: rsa.RSAPublicKey) -> int:
    """Largest OAEP plaintext in bytes: k - 2*hLen - 2 (190 for RSA-2048/SHA-256)."""
    modulus_bytes = (public_key.key_size + 7) // 8
    return modulus_bytes - 2 * HASH_SIZE - 2


def encrypt(plaintext: str, public_key_text: str) -> str:
    public_key = load_public_key(public_key_text)
    data = plaintext.encode("utf-8")

    limit = max_payload_size(public_key)
    if len(data) > limit:
        raise EncryptionError(
            f"RSA encryption failed: message is {len(data)} bytes, the limit for this key is {limit} bytes"
        )

    try:
        ciphertext = public_key.encrypt(data, _oaep())
    except ValueError as exc:
        log.warning("encryption failed", cipher="RSA", error=str(exc))
        raise EncryptionError(f"RSA encryption failed: {exc}") from exc

    log.debug("encrypted", cipher="RSA", plaintext_len=len(data), key_size=public_key.key_size)
    return b64_encode(ciphertext)


def decrypt(ciphertext: str, private_key_text: str) -> str:
    private_key = load_private_key(private_key_text)
    data = b64_decode(ciphertext, what="RSA ciphertext")
    failure = "RSA decryption failed: wrong key or corrupted data"

    try:
        plaintext = private_key.decrypt(data, _oaep())
    except ValueError as exc:
        log.warning("decryption failed", cipher="RSA", error=str(exc))
        raise DecryptionError(failure) from exc

    log.debug("decrypted", cipher="RSA", ciphertext_len=len(data), key_size=private_key.key_size)
    return decode_text(plaintext, failure=failure)
