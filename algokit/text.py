"""String problems: searching, prefixes, palindromes and parentheses."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENING = set(_PAIRS.values())


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest prefix shared by every string in ``strs``."""
    if not strs:
        raise ValueError("at least one string is needed")
    first, last = min(strs), max(strs)
    length = 0
    for a, b in zip(first, last):
        if a != b:
            break
        length += 1
    return first[:length]


def _is_palindrome(s: str, i: int, j: int) -> bool:
    while i < j:
        if s[i] != s[j]:
            return False
        i += 1
        j -= 1
    return True


def valid_palindrome(s: str) -> bool:
    """Whether ``s`` becomes a palindrome after deleting at most one character."""
    i, j = 0, len(s) - 1
    while i < j:
        if s[i] != s[j]:
            return _is_palindrome(s, i + 1, j) or _is_palindrome(s, i, j - 1)
        i += 1
        j -= 1
    return True


def is_valid_parentheses(s: str) -> bool:
    """Whether every bracket in ``s`` is closed by its matching kind, in order.

    Any character that is not an opening bracket is treated as a closer.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENING:
            stack.append(char)
        elif not stack or _PAIRS.get(char) != stack.pop():
            return False
    return not stack


def _balanced(n: int, prefix: str, opened: int, closed: int) -> Iterator[str]:
    if closed == n:
        yield prefix
        return
    if opened < n:
        yield from _balanced(n, prefix + "(", opened + 1, closed)
    if closed < opened:
        yield from _balanced(n, prefix + ")", opened, closed + 1)


def generate_parentheses(n: int) -> list[str]:
    """Every balanced string of ``n`` pairs of round brackets, in sorted order."""
    return list(_balanced(n, "", 0, 0))


def reverse_words(s: str) -> str:
    """The space-separated words of ``s`` in reverse order, single-spaced."""
    words = [word for word in s.split(" ") if word]
    if not words:
        raise ValueError("the string holds no words")
    return " ".join(reversed(words))