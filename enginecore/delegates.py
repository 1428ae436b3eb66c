"""Single-cast and multicast delegates with handle-based unbinding."""

from __future__ import annotations

import itertools
import threading
from typing import Any, Callable, Optional

_HANDLE_MASK = (1 << 64) - 1


class UnboundDelegateError(RuntimeError):
    """Raised when an unbound delegate is executed."""


class DelegateHandle:
    """Identifies one binding of a multicast delegate; id 0 means invalid."""

    __slots__ = ("_handle_id",)

    _counter = itertools.count(1)
    _lock = threading.Lock()

    def __init__(self, handle_id: int = 0):
        self._handle_id = handle_id & _HANDLE_MASK

    @classmethod
    def _generate_new_id(cls) -> int:
        with cls._lock:
            result = next(cls._counter) & _HANDLE_MASK
            if result == 0:
                # The 64-bit counter wrapped around; zero is reserved.
                result = next(cls._counter) & _HANDLE_MASK
        return result

    @classmethod
    def create(cls) -> DelegateHandle:
        """A new handle with an id no other live handle shares."""
        return cls(cls._generate_new_id())

    @property
    def handle_id(self) -> int:
        return self._handle_id

    def is_valid(self) -> bool:
        return self._handle_id != 0

    def invalidate(self) -> None:
        """Mark the handle as no longer referring to a binding."""
        self._handle_id = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelegateHandle):
            return NotImplemented
        return self._handle_id == other._handle_id

    def __hash__(self) -> int:
        return hash(self._handle_id)

    def __repr__(self) -> str:
        return f"DelegateHandle({self._handle_id})"


class Delegate:
    """Holds at most one callable."""

    __slots__ = ("_func",)

    def __init__(self, func: Optional[Callable[..., Any]] = None):
        self._func = func

    def bind(self, func: Callable[..., Any]) -> None:
        """Bind ``func``, replacing any previous binding."""
        self._func = func

    def unbind(self) -> None:
        self._func = None

    def is_bound(self) -> bool:
        return self._func is not None

    def execute(self, *args: Any) -> Any:
        """Call the bound callable and return its result."""
        if self._func is None:
            raise UnboundDelegateError("delegate is not bound")
        return self._func(*args)

    def execute_if_bound(self, *args: Any) -> bool:
        """Call the bound callable if there is one; return whether it ran."""
        if self._func is None:
            return False
        self._func(*args)
        return True


class MulticastDelegate:
    """Holds any number of callables, each reachable by its handle."""

    __slots__ = ("_bindings",)

    def __init__(self) -> None:
        self._bindings: dict[DelegateHandle, Callable[..., None]] = {}

    def __len__(self) -> int:
        return len(self._bindings)

    def add(self, func: Callable[..., Any], *args: Any) -> DelegateHandle:
        """Bind ``func``; ``args`` are passed before the broadcast arguments."""
        handle = DelegateHandle.create()

        def invoke(*params: Any) -> None:
            func(*args, *params)

        self._bindings[handle] = invoke
        return handle

    def remove(self, handle: DelegateHandle) -> bool:
        """Drop the binding of ``handle``; return False for an invalid handle."""
        if not handle.is_valid():
            return False
        self._bindings.pop(handle, None)
        return True

    def broadcast(self, *args: Any) -> None:
        """Call every binding present when the broadcast starts."""
        for invoke in list(self._bindings.values()):
            invoke(*args)