"""Interned names compared case-insensitively by hash."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

NAME_SIZE = 256
_MASK = 0xFFFFFFFF
_DJB2_SEED = 5381


def _hash_bytes(data: bytes) -> int:
    result = _DJB2_SEED
    for byte in data:
        if byte == 0:
            break
        signed = byte - 256 if byte > 127 else byte
        result = (result * 33 + signed) & _MASK
    return result


def hash_string(text: str) -> int:
    """32-bit djb2 hash of the UTF-8 bytes of ``text``, up to the first NUL."""
    return _hash_bytes(text.encode("utf-8"))


def hash_string_lower(text: str) -> int:
    """:func:`hash_string` of ``text`` with ASCII letters lower-cased."""
    return _hash_bytes(text.encode("utf-8").lower())


@dataclass(frozen=True)
class NameEntry:
    """A stored name and the comparison hash it belongs to."""

    comparison_id: int
    length: int
    name: str


class NamePool:
    """Stores names by their case-sensitive and case-insensitive hashes."""

    def __init__(self) -> None:
        self._display_pool: dict[int, NameEntry] = {}
        self._comparison_pool: dict[int, NameEntry] = {}

    def __len__(self) -> int:
        return len(self._display_pool)

    def resolve(self, display_hash: int) -> NameEntry:
        """The entry stored under ``display_hash``; raises ``KeyError`` if none."""
        return self._display_pool[display_hash]

    def find_or_store(self, text: str) -> int:
        """Store ``text`` if its display hash is new; return the display hash."""
        display_hash = hash_string(text)
        if display_hash in self._display_pool:
            return display_hash

        length = len(text.encode("utf-8"))
        comparison_hash = hash_string_lower(text)
        if comparison_hash not in self._comparison_pool:
            self._comparison_pool[comparison_hash] = NameEntry(0, length, text)

        self._display_pool[display_hash] = NameEntry(comparison_hash, length, text)
        return display_hash


_default_pool = NamePool()


class Name:
    """A pooled name; two names are equal when they match ignoring case.

    A name built from nothing, or from text of ``NAME_SIZE`` bytes or more,
    is the none name.
    """

    __slots__ = ("_display_index", "_comparison_index", "_pool")

    def __init__(self, text: Optional[str] = None, pool: Optional[NamePool] = None):
        self._pool = pool if pool is not None else _default_pool
        self._display_index = 0
        self._comparison_index = 0
        if text is None or len(text.encode("utf-8")) >= NAME_SIZE:
            return
        display_id = self._pool.find_or_store(text)
        self._display_index = display_id
        if display_id:
            self._comparison_index = self._pool.resolve(display_id).comparison_id

    @property
    def display_index(self) -> int:
        return self._display_index

    @property
    def comparison_index(self) -> int:
        return self._comparison_index

    def is_none(self) -> bool:
        return self._display_index == 0 and self._comparison_index == 0

    def to_string(self) -> str:
        """The name as first stored, or ``"None"`` for the none name."""
        if self.is_none():
            return "None"
        return self._pool.resolve(self._display_index).name.split("\0", 1)[0]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Name({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._comparison_index == other._comparison_index

    def __hash__(self) -> int:
        return hash(self._comparison_index)