import os

# Fixed cryptographic parameters. These are not read from the environment.
RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537
SALT_LENGTH = 8
SALT_MAGIC = b"Salted__"

DEFAULT_XOR_KEY_LENGTH = 16
DEFAULT_VIGENERE_KEY_LENGTH = 8

ENV_PREFIX = "CRYPTO_UTILS_"

LOG_FORMATS = ("console", "json")


def _env(name: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def log_level() -> str:
    return _env("LOG_LEVEL", "INFO").upper()


def log_format() -> str:
    fmt = _env("LOG_FORMAT", "console").lower()
    if fmt not in LOG_FORMATS:
        raise ValueError(f"{ENV_PREFIX}LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}")
    return fmt


def api_host() -> str:
    return _env("API_HOST", "127.0.0.1")


def api_port() -> int:
    value = _env("API_PORT", "8000")
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}API_PORT must be an integer") from exc
