"""Small text helpers used while reading scene description files."""

from __future__ import annotations

_ATOI_WHITESPACE = " \t\n\v\f\r"


def check_extension(file: str, ext: str) -> bool:
    """Return True when ``file`` ends with the extension ``ext``."""
    return file.endswith(ext)


def len_to_space(s: str) -> int:
    """Return the number of characters before the first space in ``s``."""
    index = s.find(" ")
    return len(s) if index < 0 else index


def fix_spaces(s: str) -> str:
    """Collapse runs of spaces into one and drop leading and trailing spaces.

    Only the space character is treated as a separator; tabs and other
    whitespace are kept as part of the words.
    """
    return " ".join(word for word in s.split(" ") if word)


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. A string with no digits yields 0.
    """
    rest = s.lstrip(_ATOI_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return value * sign


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    return [piece for piece in s.split(sep) if piece]