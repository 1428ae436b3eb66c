"""Allocation statistics and container index-size types."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import IntEnum

_U64_MASK = (1 << 64) - 1
_SUPPORTED_INDEX_SIZES = (8, 16, 32, 64)


class AllocationType(IntEnum):
    """What an allocation is made for."""

    OBJECT = 0
    CONTAINER = 1


class MemoryStats:
    """Thread-safe running totals of allocated bytes and live allocations.

    The totals are unsigned 64-bit counters: freeing more than was recorded
    wraps around rather than going negative.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._bytes = dict.fromkeys(AllocationType, 0)
        self._counts = dict.fromkeys(AllocationType, 0)

    @staticmethod
    def _checked(alloc_type: AllocationType, size: int) -> AllocationType:
        kind = AllocationType(alloc_type)
        if size < 0:
            raise ValueError("allocation size must not be negative")
        return kind

    def record_alloc(self, alloc_type: AllocationType, size: int) -> None:
        """Count one allocation of ``size`` bytes."""
        kind = self._checked(alloc_type, size)
        with self._lock:
            self._bytes[kind] = (self._bytes[kind] + size) & _U64_MASK
            self._counts[kind] = (self._counts[kind] + 1) & _U64_MASK

    def record_free(self, alloc_type: AllocationType, size: int) -> None:
        """Count the release of one allocation of ``size`` bytes."""
        kind = self._checked(alloc_type, size)
        with self._lock:
            self._bytes[kind] = (self._bytes[kind] - size) & _U64_MASK
            self._counts[kind] = (self._counts[kind] - 1) & _U64_MASK

    def allocation_bytes(self, alloc_type: AllocationType) -> int:
        """Bytes currently recorded for ``alloc_type``."""
        with self._lock:
            return self._bytes[AllocationType(alloc_type)]

    def allocation_count(self, alloc_type: AllocationType) -> int:
        """Allocations currently recorded for ``alloc_type``."""
        with self._lock:
            return self._counts[AllocationType(alloc_type)]


@dataclass(frozen=True)
class SizeType:
    """A signed integer type of ``bits`` bits used for container indices."""

    bits: int

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    @property
    def unsigned_max(self) -> int:
        """Largest value of the unsigned type of the same width."""
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


def size_type_for_bits(index_size: int) -> SizeType:
    """The signed index type for an index size of 8, 16, 32 or 64 bits."""
    if index_size not in _SUPPORTED_INDEX_SIZES:
        raise ValueError(f"unsupported allocator index size: {index_size}")
    return SizeType(index_size)


DEFAULT_SIZE_TYPE = size_type_for_bits(32)
DEFAULT_SIZE_TYPE_64 = size_type_for_bits(64)

platform_memory = MemoryStats()