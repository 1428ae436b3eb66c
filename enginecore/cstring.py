"""C-style string comparison and case conversion on Python strings.

Strings end at their first NUL character, as C strings do. Case folding
covers ASCII letters only.
"""

from __future__ import annotations

_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def _terminated(text: str) -> str:
    return text.split("\0", 1)[0]


def _code(text: str, index: int, fold: bool = False) -> int:
    if index >= len(text):
        return 0
    ch = text[index]
    return ord(ch.translate(_LOWER) if fold else ch)


def _compare(str1: str, str2: str, limit: int | None, fold: bool) -> int:
    a, b = _terminated(str1), _terminated(str2)
    length = max(len(a), len(b)) + 1
    if limit is not None:
        length = min(length, limit)
    for i in range(length):
        ca, cb = _code(a, i, fold), _code(b, i, fold)
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strcmp(str1: str, str2: str) -> int:
    """Negative, zero or positive as ``str1`` sorts before, equal to or after ``str2``."""
    return _compare(str1, str2, None, fold=False)


def strncmp(str1: str, str2: str, count: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``count`` characters."""
    return _compare(str1, str2, count, fold=False)


def stricmp(str1: str, str2: str) -> int:
    """Case-insensitive :func:`strcmp`."""
    return _compare(str1, str2, None, fold=True)


def strnicmp(str1: str, str2: str, count: int) -> int:
    """Case-insensitive comparison bounded by ``count``.

    The counter is spent before each character is checked: a mismatch on the
    last counted character reports equality, and when all ``count``
    characters match the following character pair decides the result.
    """
    a, b = _terminated(str1), _terminated(str2)
    remaining = count
    index = 0
    while True:
        if remaining == 0:
            remaining = -1
            break
        remaining -= 1
        current = _code(a, index, fold=True)
        if current == 0 or current != _code(b, index, fold=True):
            break
        index += 1
    if remaining:
        return _code(a, index, fold=True) - _code(b, index, fold=True)
    return 0


def strupr(text: str) -> str:
    """Upper-case ASCII letters up to the first NUL."""
    head, sep, tail = text.partition("\0")
    return head.translate(_UPPER) + sep + tail


def strlwr(text: str) -> str:
    """Lower-case ASCII letters up to the first NUL."""
    head, sep, tail = text.partition("\0")
    return head.translate(_LOWER) + sep + tail