import structlog

from crypto_utils.errors import EmptyKeyError
from crypto_utils.utils import b64_decode, b64_encode, decode_text


log = structlog.get_logger()


def xor_bytes(data: bytes, key: bytes) -> bytes:
    """XOR data with a repeating key. Applying it twice with the same key is a no-op."""
    if not key:
        raise EmptyKeyError("Key cannot be empty")
    return bytes(b ^ key[i % len(key)] for i, b in enumerate(data))


def encrypt(plaintext: str, key: str) -> str:
    if not key:
        raise EmptyKeyError("Key cannot be empty")
    ciphertext = xor_bytes(plaintext.encode("utf-8"), key.encode("utf-8"))
    log.debug("encrypted", cipher="XOR", plaintext_len=len(plaintext))
    return b64_encode(ciphertext)


def decrypt(ciphertext: str, key: str) -> str:
    if not key:
        raise EmptyKeyError("Key cannot be empty")
    data = b64_decode(ciphertext, what="XOR ciphertext")
    plaintext = xor_bytes(data, key.encode("utf-8"))
    log.debug("decrypted", cipher="XOR", ciphertext_len=len(data))
    return decode_text(plaintext, failure="XOR decryption failed: Invalid data or key")
