"""Base object type with runtime class information and checked casts."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import ClassVar, Iterator, Optional, TypeVar, Union

from enginecore.names import Name
from enginecore.vector import Vector4

INDEX_UNSET = 0xFFFFFFFF

_class_info_lock = threading.RLock()

ObjT = TypeVar("ObjT", bound="UObject")


class ObjectKind(IntEnum):
    SPHERE = 0
    CUBE = 1
    SPOT_LIGHT = 2
    PARTICLE = 3
    TEXT = 4
    TRIANGLE = 5
    CAMERA = 6
    PLAYER = 7


class ArrowDir(IntEnum):
    X = 0
    Y = 1
    Z = 2


class ControlMode(IntEnum):
    TRANSLATION = 0
    ROTATION = 1
    SCALE = 2


class CoordiMode(IntEnum):
    WORLD = 0
    LOCAL = 1


class PrimitiveColor(IntEnum):
    RED_X = 0
    GREEN_Y = 1
    BLUE_Z = 2
    NONE = 3
    RED_X_ROT = 4
    GREEN_Y_ROT = 5
    BLUE_Z_ROT = 6


class UClass:
    """Runtime class information: a name and a link to the parent class."""

    __slots__ = ("fname", "super_class")

    def __init__(self, class_name: str, super_class: Optional[UClass] = None):
        self.fname = Name(class_name)
        self.super_class = super_class

    @property
    def name(self) -> str:
        return self.fname.to_string()

    def lineage(self) -> Iterator[UClass]:
        """This class followed by each of its ancestors."""
        current: Optional[UClass] = self
        while current is not None:
            yield current
            current = current.super_class

    def is_child_of(self, some_base: Union[UClass, type, None]) -> bool:
        """Whether this class is ``some_base`` or derives from it."""
        if some_base is None:
            return False
        if isinstance(some_base, type):
            some_base = some_base.static_class()
        return any(cls is some_base for cls in self.lineage())

    def __repr__(self) -> str:
        return f"UClass({self.name!r})"


class UObject:
    """Base of every engine object.

    Each subclass gets its own :class:`UClass`, whose parent is the class
    information of its nearest ``UObject`` base.
    """

    _static_class: ClassVar[UClass]

    def __init__(self) -> None:
        self.uuid = 0
        self.internal_index = INDEX_UNSET
        self.fname = Name("None")
        self.uclass: UClass = type(self).static_class()

    @classmethod
    def static_class(cls) -> UClass:
        """The class information of ``cls``, created on first use."""
        info = cls.__dict__.get("_static_class")
        if info is not None:
            return info
        with _class_info_lock:
            info = cls.__dict__.get("_static_class")
            if info is None:
                base = next((b for b in cls.__bases__ if issubclass(b, UObject)), None)
                info = UClass(cls.__name__, base.static_class() if base else None)
                cls._static_class = info
        return info

    @property
    def name(self) -> str:
        return self.fname.to_string()

    def is_a(self, some_base: Union[UClass, type]) -> bool:
        """Whether this object's class is ``some_base`` or derives from it."""
        return self.uclass.is_child_of(some_base)

    def duplicate(self) -> UObject:
        """A new object into which this one's sub-objects are copied."""
        new_object = UObject()
        new_object.duplicate_sub_objects(self)
        return new_object

    def duplicate_sub_objects(self, source: UObject) -> None:
        """Deep-copy owned sub-objects from ``source``; subclasses override."""

    def post_duplicate(self) -> None:
        """Hook run after duplication; subclasses override."""

    def encode_uuid(self) -> Vector4:
        """The UUID spread over four components, as used for picking colours."""
        uuid = self.uuid
        return Vector4(
            float(uuid % 0xFF),
            float(uuid >> 8 & 0xFF),
            float(uuid >> 16 & 0xFF),
            float(uuid >> 24 & 0xFF),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, uuid={self.uuid})"


def cast(obj: Optional[UObject], target_class: Union[type, UClass]) -> Optional[UObject]:
    """``obj`` if it is of ``target_class`` or one of its subclasses, else ``None``."""
    if obj is None:
        return None
    if isinstance(target_class, type) and isinstance(obj, target_class):
        return obj
    return obj if obj.is_a(target_class) else None


def cast_checked(obj: Optional[UObject], target_class: Union[type, UClass]) -> UObject:
    """Like :func:`cast` but raises instead of returning ``None``."""
    if obj is None:
        raise ValueError("cannot cast a missing object")
    result = cast(obj, target_class)
    if result is None:
        target_name = target_class.__name__ if isinstance(target_class, type) else target_class.name
        raise TypeError(f"{obj!r} is not a {target_name}")
    return result