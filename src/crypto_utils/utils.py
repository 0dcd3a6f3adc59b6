import base64
import binascii
from typing import Union

from crypto_utils.errors import DecodingError, DecryptionError

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(
    data: Union[str, BytesLike],
    *,
    encoding: str = "utf-8",
) -> bytes:
    """Normalize values to type bytes."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode(encoding)
    raise TypeError(f"Expected str or bytes-like, got {type(data).__name__}")


def b64_encode(
    data: Union[str, BytesLike],
    *,
    text_encoding: str = "utf-8",
) -> str:
    """Accepts str/bytes/etc and returns a standard base64 string."""
    raw = _as_bytes(data, encoding=text_encoding)
    return base64.b64encode(raw).decode("ascii")


def b64_decode(b64_text: str, *, what: str = "data") -> bytes:
    """Strictly decode standard base64. Surrounding whitespace and missing '='
    padding are tolerated; anything else raises DecodingError."""
    b64_text = "".join(b64_text.split())

    # normalize padding
    missing = len(b64_text) % 4
    if missing:
        b64_text += "=" * (4 - missing)

    try:
        return base64.b64decode(b64_text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodingError(f"Invalid base64 {what}") from exc


def decode_text(data: bytes, *, failure: str) -> str:
    """Decode recovered plaintext bytes as UTF-8 or raise DecryptionError."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecryptionError(failure) from exc
