"""String helpers: splitting, trimming, searching and comparing."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional, Union

Char = Union[str, int]


def _char(c: Char) -> str:
    """Turn a one-character string or a character code into a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def split(text: str, sep: Char) -> list[str]:
    """Split text on a single separator character, dropping empty parts."""
    return [part for part in text.split(_char(sep)) if part]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character found in charset."""
    if not text:
        return ""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text from index start.

    A start at or past the end of text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find needle within the first length characters of haystack.

    Returns the index of the first occurrence, 0 for an empty needle, or
    None when needle does not lie wholly inside that window.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the sign of the result orders s1 and s2.

    Comparison stops at the first difference or at the end of the strings,
    and the result is the difference of the character codes there.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in islice(zip_longest(s1, s2, fillvalue="\0"), n):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying func(index, char) to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of c, len(text) for NUL, else None."""
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of c, len(text) for NUL, else None."""
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index