"""Array, map, set and pair containers with engine-style operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from enginecore.fstring import INDEX_NONE

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

_MISSING: Any = object()


@dataclass
class Pair(Generic[K, V]):
    """A key/value pair; unpacks like a two-element tuple."""

    key: K = None  # type: ignore[assignment]
    value: V = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self.value

    def to_tuple(self) -> tuple[K, V]:
        return (self.key, self.value)

    @classmethod
    def from_tuple(cls, pair: tuple[K, V]) -> Pair[K, V]:
        key, value = pair
        return cls(key, value)


def make_pair(first: K, second: V) -> Pair[K, V]:
    """Build a :class:`Pair` from two values."""
    return Pair(first, second)


class Array(Generic[T]):
    """A growable sequence with index-returning add and remove helpers."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()):
        self._items: list[T] = list(items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Array):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __iadd__(self, other: Iterable[T]) -> Array[T]:
        self._items.extend(other)
        return self

    def __repr__(self) -> str:
        return f"Array({self._items!r})"

    def init(self, element: T, number: int) -> None:
        """Replace the contents with ``number`` copies of ``element``."""
        if number < 0:
            raise ValueError("number must not be negative")
        self._items = [element] * number

    def add(self, item: T) -> int:
        """Append ``item`` and return its index."""
        self._items.append(item)
        return len(self._items) - 1

    def add_unique(self, item: T) -> int:
        """Return the index of ``item``, appending it first if it is absent."""
        index = self.find(item)
        if index != INDEX_NONE:
            return index
        return self.add(item)

    def is_empty(self) -> bool:
        return not self._items

    def empty(self) -> None:
        """Remove every element."""
        self._items.clear()

    def remove(self, item: T) -> int:
        """Remove every element equal to ``item``; return how many went."""
        return self.remove_all(lambda element: element == item)

    def remove_single(self, item: T) -> bool:
        """Remove the first element equal to ``item``; return whether one was found."""
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    def remove_at(self, index: int) -> None:
        """Remove the element at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self._items):
            del self._items[index]

    def remove_all(self, predicate: Callable[[T], bool]) -> int:
        """Remove every element matching ``predicate``; return how many went."""
        old_size = len(self._items)
        self._items = [element for element in self._items if not predicate(element)]
        return old_size - len(self._items)

    def find(self, item: T) -> int:
        """Index of the first element equal to ``item``, or ``INDEX_NONE``."""
        return next(
            (index for index, element in enumerate(self._items) if element == item),
            INDEX_NONE,
        )

    def contains(self, item: T) -> bool:
        return item in self._items

    def num(self) -> int:
        return len(self._items)

    def set_num(self, number: int) -> None:
        """Resize to ``number`` elements, padding with ``None``."""
        if number < 0:
            raise ValueError("number must not be negative")
        if number <= len(self._items):
            del self._items[number:]
        else:
            self._items.extend([None] * (number - len(self._items)))  # type: ignore[list-item]

    def sort(self, key: Optional[Callable[[T], Any]] = None) -> None:
        """Sort in place, optionally by ``key``."""
        self._items.sort(key=key)

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._items)


class Map(Generic[K, V]):
    """A key/value map whose iteration yields :class:`Pair` objects.

    ``default_factory`` supplies the value for keys added without one; it
    defaults to producing ``None``.
    """

    __slots__ = ("_data", "_default_factory")

    def __init__(
        self,
        items: Iterable[tuple[K, V]] | dict[K, V] = (),
        default_factory: Optional[Callable[[], V]] = None,
    ):
        self._data: dict[K, V] = dict(items)
        self._default_factory = default_factory

    def _default(self) -> V:
        return self._default_factory() if self._default_factory else None  # type: ignore[return-value]

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._data[key] = value

    def __iter__(self) -> Iterator[Pair[K, V]]:
        return (Pair(key, value) for key, value in list(self._data.items()))

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Map):
            return self._data == other._data
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Map({self._data!r})"

    def keys(self):
        return self._data.keys()

    def values(self):
        return self._data.values()

    def items(self):
        return self._data.items()

    def add(self, key: K, value: V) -> None:
        """Insert ``key`` or overwrite its value."""
        self._data[key] = value

    def emplace(self, key: K, value: V = _MISSING) -> V:
        """Insert ``key`` only if absent; return the value now stored for it."""
        if key not in self._data:
            self._data[key] = self._default() if value is _MISSING else value
        return self._data[key]

    def remove(self, key: K) -> None:
        """Remove ``key`` if present."""
        self._data.pop(key, None)

    def empty(self) -> None:
        self._data.clear()

    def contains(self, key: K) -> bool:
        return key in self._data

    def find(self, key: K) -> Optional[V]:
        """Value for ``key``, or ``None`` when absent."""
        return self._data.get(key)

    def find_or_add(self, key: K) -> V:
        """Value for ``key``, inserting the default value first if absent."""
        return self.emplace(key)

    def num(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data


class Set(Generic[T]):
    """A set of unique items that keeps insertion order."""

    __slots__ = ("_data",)

    def __init__(self, items: Iterable[T] = ()):
        self._data: dict[T, None] = dict.fromkeys(items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, item: object) -> bool:
        return item in self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Set):
            return self._data.keys() == other._data.keys()
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Set({list(self._data)!r})"

    def add(self, item: T) -> int:
        """Add ``item`` if absent; return its position in iteration order."""
        self._data.setdefault(item, None)
        return next(index for index, element in enumerate(self._data) if element == item)

    def contains(self, item: T) -> bool:
        return item in self._data

    def remove(self, item: T) -> int:
        """Remove ``item``; return 1 if it was present, else 0."""
        if item in self._data:
            del self._data[item]
            return 1
        return 0

    def empty(self) -> None:
        self._data.clear()

    def is_empty(self) -> bool:
        return not self._data

    def num(self) -> int:
        return len(self._data)

    def array(self) -> Array[T]:
        """The items as an :class:`Array`."""
        return Array(self._data)