import pytest

from enginecore.names import Name
from enginecore.uobject import (
    INDEX_UNSET,
    UClass,
    UObject,
    cast,
    cast_checked,
)


class AActor(UObject):
    pass


class APawn(AActor):
    pass


class UComponent(UObject):
    pass


def test_base_class_info():
    info = UObject.static_class()
    assert info.name == "UObject"
    assert info.super_class is None


def test_subclass_info_links_to_parent():
    assert APawn.static_class().name == "APawn"
    assert APawn.static_class().super_class is AActor.static_class()
    assert AActor.static_class().super_class is UObject.static_class()


def test_static_class_is_cached():
    root = UObject.static_class()
    assert UObject.static_class() is root
    assert APawn.static_class() is APawn.static_class()
    assert (APawn.static_class() is AActor.static_class()) is False


def test_lineage_walks_to_root():
    names = [cls.name for cls in APawn.static_class().lineage()]
    assert names == ["APawn", "AActor", "UObject"]
    leaf = UClass("Leaf", UClass("Root"))
    assert [cls.name for cls in leaf.lineage()] == ["Leaf", "Root"]
    assert [cls.name for cls in UObject.static_class().lineage()] == ["UObject"]


def test_is_child_of():
    root = UObject.static_class()
    pawn = APawn.static_class()
    assert root.is_child_of(root) is True
    assert root.is_child_of(pawn) is False
    assert pawn.is_child_of(pawn) is True
    assert pawn.is_child_of(AActor.static_class()) is True
    assert pawn.is_child_of(UObject) is True
    assert pawn.is_child_of(UComponent.static_class()) is False
    assert AActor.static_class().is_child_of(APawn) is False
    assert pawn.is_child_of(None) is False


def test_standalone_uclass():
    root = UClass("Root")
    leaf = UClass("Leaf", root)
    assert leaf.is_child_of(root)
    assert not root.is_child_of(leaf)


def test_object_defaults():
    base = UObject()
    assert base.uuid == 0
    assert base.internal_index == INDEX_UNSET
    assert base.name == "None"
    assert base.uclass is UObject.static_class()
    actor = AActor()
    assert actor.uuid == 0
    assert actor.internal_index == INDEX_UNSET
    assert actor.name == "None"
    assert actor.uclass is AActor.static_class()


def test_name_can_be_set():
    obj = UObject()
    obj.fname = Name("AActor_7")
    assert obj.name == "AActor_7"


def test_is_a():
    pawn = APawn()
    assert pawn.is_a(AActor) is True
    assert pawn.is_a(UObject.static_class()) is True
    assert pawn.is_a(UComponent) is False
    assert AActor().is_a(APawn) is False
    assert UObject().is_a(AActor) is False


def test_cast_up_and_down():
    pawn = APawn()
    assert cast(pawn, UObject) is pawn
    assert cast(pawn, AActor.static_class()) is pawn
    assert cast(AActor(), APawn) is None
    assert cast(UComponent(), AActor) is None
    assert cast(None, AActor) is None


def test_cast_checked():
    pawn = APawn()
    assert cast_checked(pawn, AActor) is pawn
    with pytest.raises(TypeError):
        cast_checked(UComponent(), AActor)
    with pytest.raises(ValueError):
        cast_checked(None, AActor)


def test_duplicate_makes_new_base_object():
    base = UObject()
    base.uuid = 9
    base_copy = base.duplicate()
    assert base_copy is not base
    assert type(base_copy) is UObject
    assert base_copy.uuid == 0

    source = AActor()
    source.uuid = 5
    copy = source.duplicate()
    assert copy is not source
    assert type(copy) is UObject
    assert copy.uuid == 0


def test_duplicate_calls_sub_object_hook():
    class Holder(UObject):
        def __init__(self):
            super().__init__()
            self.copied_from = None

        def duplicate_sub_objects(self, source):
            self.copied_from = source

        def duplicate(self):
            new_object = Holder()
            new_object.duplicate_sub_objects(self)
            return new_object

    original = Holder()
    copy = original.duplicate()
    assert copy.copied_from is original
    assert copy.uclass is Holder.static_class()
    assert copy.uclass.super_class is UObject.static_class()
    assert cast(copy, UObject) is copy


def test_encode_uuid_bytes():
    obj = UObject()
    obj.uuid = 0x04030200
    encoded = obj.encode_uuid()
    assert (encoded.y, encoded.z, encoded.a) == (2.0, 3.0, 4.0)


def test_encode_uuid_low_component_is_modulo_255():
    obj = UObject()
    obj.uuid = 254
    assert obj.encode_uuid().x == 254.0
    obj.uuid = 0xFF
    assert obj.encode_uuid().x == 0.0