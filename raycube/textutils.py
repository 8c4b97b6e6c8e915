"""Small text helpers used when reading scene descriptions."""

from __future__ import annotations

from collections.abc import Iterable

_ATOI_SPACE = " \t\n\v\f\r"
_SPACE = "\t\v\n\r\f "


def atoi(text: str) -> int:
    """Parse a leading integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, then
    decimal digits are read until the first non-digit. Text with no
    digits gives 0.
    """
    body = text.lstrip(_ATOI_SPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    result = 0
    for char in body:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
    return sign * result


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def split_many(text: str, charset: str) -> list[str]:
    """Split ``text`` on any character of ``charset``, dropping empty words."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in charset:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def count_words(line: str, sep: str) -> int:
    """Count the ``sep``-separated words of ``line`` before its first newline."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    first_line = line.split("\n", 1)[0]
    return sum(1 for word in first_line.split(sep) if word)


def strtrim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start`` on."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code-point difference.

    The end of a string compares as a zero character, so the result is
    negative, zero or positive like C's strncmp.
    """
    if n <= 0:
        return 0
    for index in range(n):
        left = ord(first[index]) if index < len(first) else 0
        right = ord(second[index]) if index < len(second) else 0
        if left != right or left == 0 or index == n - 1:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, or None when there is none.
    An empty needle matches at index 0.
    """
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(length, 0))
    return None if index < 0 else index


def is_digit(char: str) -> bool:
    """True for a decimal digit or a sign character."""
    return len(char) == 1 and ("0" <= char <= "9" or char in "+-")


def is_space(char: str) -> bool:
    """True for the ASCII whitespace characters."""
    return len(char) == 1 and char in _SPACE


def _is_alpha(char: str) -> bool:
    return "A" <= char <= "Z" or "a" <= char <= "z"


def is_alnum_str(text: str) -> bool:
    """True when every character is an ASCII letter, digit or sign."""
    return all(_is_alpha(char) or is_digit(char) for char in text)


def _prefix_less(first: str, second: str) -> bool:
    return strncmp(first, second, len(first)) < 0


def sort_strings(items: Iterable[str]) -> list[str]:
    """Return the strings in ascending order.

    Two strings compare equal when the first is a prefix of the second,
    which keeps such pairs in the order the exchange passes leave them.
    """
    result = list(items)
    count = len(result)
    for i in range(count):
        for j in range(count):
            if _prefix_less(result[i], result[j]):
                result[i], result[j] = result[j], result[i]
    return result