import string


def _rotate(char: str, shift: int) -> str:
    base = ord("A") if char in string.ascii_uppercase else ord("a")
    return chr((ord(char) - base + shift) % 26 + base)


def encrypt(text: str, shift: int) -> str:
    """Rotate ASCII letters by `shift` within their case. Other characters are kept."""
    return "".join(
        _rotate(char, shift) if char in string.ascii_letters else char
        for char in text
    )


def decrypt(text: str, shift: int) -> str:
    return encrypt(text, 26 - shift)
