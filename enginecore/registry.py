"""Object registry: UUIDs, class-indexed lookup, construction and destruction."""

from __future__ import annotations

import copy
import itertools
import logging
import threading
from typing import Iterator, Optional, TypeVar, Union

from enginecore.names import Name
from enginecore.uobject import UClass, UObject

logger = logging.getLogger(__name__)

ObjT = TypeVar("ObjT", bound=UObject)


class UUIDGenerator:
    """Hands out increasing object ids starting from zero."""

    def __init__(self, start: int = 0) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def generate(self) -> int:
        """The next unused id."""
        with self._lock:
            uuid = next(self._counter)
        logger.debug("Generate UUID : %d", uuid)
        return uuid


def _require_object_type(object_type: type) -> None:
    if not (isinstance(object_type, type) and issubclass(object_type, UObject)):
        raise TypeError(f"{object_type!r} is not a UObject subclass")


def _as_uclass(target: Union[type, UClass]) -> UClass:
    if isinstance(target, UClass):
        return target
    _require_object_type(target)
    return target.static_class()


class ObjectRegistry:
    """Tracks live objects, indexes them by class and defers their destruction."""

    def __init__(self, uuid_generator: Optional[UUIDGenerator] = None) -> None:
        self.uuid_generator = uuid_generator if uuid_generator is not None else UUIDGenerator()
        self._objects: dict[UObject, None] = {}
        self._pending_destroy: list[UObject] = []
        self._class_to_children: dict[UClass, dict[UClass, None]] = {}
        self._class_to_objects: dict[UClass, dict[UObject, None]] = {}

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, obj: object) -> bool:
        return obj in self._objects

    @property
    def objects(self) -> list[UObject]:
        """Every live object."""
        return list(self._objects)

    @property
    def pending_destroy(self) -> list[UObject]:
        """Objects marked for removal but not yet destroyed."""
        return list(self._pending_destroy)

    def _add_to_class_map(self, obj: UObject) -> None:
        uclass = obj.uclass
        if uclass is None:
            raise ValueError("object has no class information")
        self._class_to_objects.setdefault(uclass, {})[obj] = None
        for super_class in itertools.islice(uclass.lineage(), 1, None):
            self._class_to_children.setdefault(super_class, {})[uclass] = None
            uclass = super_class

    def _remove_from_class_map(self, obj: UObject) -> None:
        uclass = obj.uclass
        if uclass is None:
            raise ValueError("object has no class information")
        object_set = self._class_to_objects.setdefault(uclass, {})
        if object_set.pop(obj, _ABSENT) is _ABSENT:
            del self._class_to_objects[uclass]

    def add_object(self, obj: UObject) -> None:
        """Register ``obj`` and index it under its class."""
        self._objects[obj] = None
        self._add_to_class_map(obj)

    def mark_remove_object(self, obj: UObject) -> None:
        """Unregister ``obj`` and queue it for destruction."""
        self._objects.pop(obj, None)
        self._remove_from_class_map(obj)
        if not any(pending is obj for pending in self._pending_destroy):
            self._pending_destroy.append(obj)

    def process_pending_destroy_objects(self) -> list[UObject]:
        """Release every queued object; return the objects released."""
        destroyed, self._pending_destroy = self._pending_destroy, []
        for obj in destroyed:
            logger.debug("UObject Deleted : %s", obj.name)
        return destroyed

    def _derived_classes(self, parent: UClass) -> list[UClass]:
        # Breadth-first: each class found is later searched for its own children.
        found: list[UClass] = []
        queue = [parent]
        for search_class in queue:
            children = list(self._class_to_children.get(search_class, ()))
            found.extend(children)
            queue.extend(children)
        return found

    def objects_of_class(
        self, class_to_look_for: Union[type, UClass], include_derived: bool = True
    ) -> list[UObject]:
        """Objects of the given class, and of its subclasses if ``include_derived``."""
        uclass = _as_uclass(class_to_look_for)
        classes = [uclass]
        if include_derived:
            classes.extend(self._derived_classes(uclass))
        return [
            obj
            for search_class in classes
            for obj in self._class_to_objects.get(search_class, ())
        ]

    def iterate(self, object_type: type[ObjT], include_derived: bool = True) -> Iterator[ObjT]:
        """Yield the live objects of ``object_type``."""
        _require_object_type(object_type)
        for obj in self.objects_of_class(object_type, include_derived):
            if obj is not None:
                yield obj  # type: ignore[misc]

    def _register_new(self, obj: ObjT, uclass: UClass, name: str, uuid: int) -> ObjT:
        obj.uclass = uclass
        obj.fname = Name(name)
        obj.uuid = uuid
        self.add_object(obj)
        return obj

    def construct_object(self, object_type: type[ObjT]) -> ObjT:
        """Create, name and register a new object of ``object_type``."""
        _require_object_type(object_type)
        uuid = self.uuid_generator.generate()
        uclass = object_type.static_class()
        name = f"{uclass.name}_{uuid}"
        obj = self._register_new(object_type(), uclass, name, uuid)
        logger.debug("Created New Object : %s", name)
        return obj

    def construct_object_from(self, source: ObjT) -> ObjT:
        """Register a shallow copy of ``source`` under a new id and name."""
        object_type = type(source)
        _require_object_type(object_type)
        uuid = self.uuid_generator.generate()
        uclass = object_type.static_class()
        name = f"{uclass.name}_Copy_{uuid}"
        obj = self._register_new(copy.copy(source), uclass, name, uuid)
        logger.debug("Cloned Object : %s", name)
        return obj


_ABSENT = object()

object_registry = ObjectRegistry()