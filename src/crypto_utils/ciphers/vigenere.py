import string
from typing import List

from crypto_utils.errors import EmptyKeyError


def keyword_shifts(keyword: str) -> List[int]:
    """Shift values (A=0 .. Z=25) for the letters of the keyword, ignoring case
    and any non-letter characters."""
    shifts = [ord(c.upper()) - ord("A") for c in keyword if c in string.ascii_letters]
    if not shifts:
        raise EmptyKeyError("Keyword must contain at least one letter")
    return shifts


def _transform(text: str, keyword: str, direction: int) -> str:
    shifts = keyword_shifts(keyword)
    result = []
    position = 0
    for char in text:
        if char not in string.ascii_letters:
            # Non-letters do not consume a keyword position.
            result.append(char)
            continue
        base = ord("A") if char in string.ascii_uppercase else ord("a")
        shift = shifts[position % len(shifts)] * direction
        result.append(chr((ord(char) - base + shift) % 26 + base))
        position += 1
    return "".join(result)


def encrypt(text: str, keyword: str) -> str:
    return _transform(text, keyword, 1)


def decrypt(text: str, keyword: str) -> str:
    return _transform(text, keyword, -1)
