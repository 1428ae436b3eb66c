# enginecore

The core runtime layer of a small 3D engine, in plain Python with no
third-party dependencies: vector and matrix math, quaternions, engine-style
containers, string helpers, interned names, delegates, allocation statistics
and an object system with runtime class information.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Modules

- `enginecore.mathutil`: `clamp`, `lerp`, `radians_to_degrees`,
  `degrees_to_radians`, `inv_sqrt`, `ceil_to_int`, `sin_cos` and
  `unwind_degrees`, plus the constants `PI`, `SMALL_NUMBER` and
  `KINDA_SMALL_NUMBER`.
- `enginecore.vector`: frozen dataclasses `Vector2D`, `Vector` and `Vector4`.
  `Vector` has `dot`, `cross`, `magnitude`, `normalize` (the zero vector stays
  zero) and `distance`, and the constants `Vector.ZERO`, `Vector.ONE`,
  `Vector.FORWARD`, `Vector.RIGHT` and `Vector.UP`.
- `enginecore.matrix`: an immutable 4x4 `Matrix` using row vectors
  (translation sits in the last row). It supports `+`, `-`, `*` (by a matrix or
  a scalar) and `/`, plus `identity`, `transpose`, `determinant` and
  `inverse`; `inverse` returns the identity for a matrix whose determinant is
  below `1e-6` in magnitude. `create_rotation` (degrees), `create_scale` and
  `create_translation` build transforms, and `transform_vector`,
  `transform_vector4` and `transform_position` apply them.
- `enginecore.quat`: `Quat` with `from_axis_angle` (radians),
  `create_rotation` (degrees), `*`, `rotate_vector`, `is_normalized`,
  `normalize` and `to_matrix`.
- `enginecore.jungle_math`: `create_model_matrix` (rotation given as Euler
  degrees or a `Quat`), `create_view_matrix`, `create_projection_matrix`,
  `create_ortho_projection_matrix`, `create_rotation_matrix`, `rotate_vector`,
  `euler_to_quaternion`, `quaternion_to_euler`, `convert_v3_to_v4`,
  `rad_to_deg` and `deg_to_rad`.
- `enginecore.cstring`: C-style `strcmp`, `strncmp`, `stricmp`, `strnicmp`,
  `strupr` and `strlwr`. Strings end at their first NUL and case folding
  covers ASCII letters only.
- `enginecore.fstring`: `find`, `contains` and `equals` with `SearchCase` and
  `SearchDir`, returning `INDEX_NONE` (-1) when nothing is found; `from_int`,
  `sanitize_float` (single precision, six decimals) and `to_float`, which
  parses the leading number of a string and raises `ValueError` when there
  is none.
- `enginecore.containers`: `Array`, `Map`, `Set` and `Pair` (with
  `make_pair`). `Array.add` returns the new index, `Array.find` returns
  `INDEX_NONE` when absent, `Map.find` returns `None` when absent and
  iterating a `Map` yields `Pair` objects. `Set` keeps insertion order.
- `enginecore.delegates`: `Delegate` holds one callable; `execute` raises
  `UnboundDelegateError` when nothing is bound. `MulticastDelegate.add`
  returns a `DelegateHandle` that `remove` takes back; `broadcast` calls every
  binding present when it starts.
- `enginecore.names`: `Name` values interned in a `NamePool` by a 32-bit djb2
  hash (`hash_string`, `hash_string_lower`). Names compare equal when they
  match ignoring ASCII case; `to_string` returns the spelling first stored,
  or `"None"` for an empty name or one of 256 UTF-8 bytes or more.
- `enginecore.serializer`: `write_string`/`read_string` (32-bit little-endian
  byte count, then UTF-8) and `write_wide_string`/`read_wide_string` (code-unit
  count, then UTF-16LE) on binary streams. Reading raises `EOFError` on a
  short stream.
- `enginecore.memory`: `MemoryStats`, a thread-safe record of bytes and
  allocation counts per `AllocationType`, kept as wrapping unsigned 64-bit
  totals; `size_type_for_bits` describes the signed index type for 8, 16, 32
  or 64 bits. A shared instance is `enginecore.memory.platform_memory`.
- `enginecore.uobject`: the `UObject` base class. Every subclass gets its own
  `UClass` through `static_class()`, linked to its parent's. `is_a`, `cast`
  (returns `None` on mismatch) and `cast_checked` (raises) test the
  class chain. `encode_uuid` spreads the UUID over a `Vector4`. Also the
  enums `ObjectKind`, `ArrowDir`, `ControlMode`, `CoordiMode` and
  `PrimitiveColor`.
- `enginecore.registry`: `ObjectRegistry` constructs objects with a fresh id
  and a name such as `UObject_0` (`construct_object`) or `UObject_Copy_1`
  (`construct_object_from`, a shallow copy), indexes them by class, finds them
  with `objects_of_class` or `iterate` (optionally including subclasses) and
  queues them for removal with `mark_remove_object` until
  `process_pending_destroy_objects`. `UUIDGenerator` issues ids from zero. A
  shared instance is `enginecore.registry.object_registry`.

## Example

```python
from enginecore.matrix import Matrix
from enginecore.quat import Quat
from enginecore.registry import ObjectRegistry
from enginecore.uobject import UObject
from enginecore.vector import Vector

m = Matrix.create_translation(Vector(1, 2, 3))
print(m.transform_position(Vector(0, 0, 0)))  # Vector(x=1.0, y=2.0, z=3.0)

q = Quat.create_rotation(0, 0, 90)
print(q.rotate_vector(Vector(1, 0, 0)))

class Actor(UObject):
    pass

registry = ObjectRegistry()
actor = registry.construct_object(Actor)
print(actor.name)                                 # Actor_0
print(actor.is_a(UObject))                        # True
print(list(registry.iterate(UObject, True)))      # [Actor(name='Actor_0', uuid=0)]
```

## What it does not do

This is a library of runtime building blocks only. There is no renderer, no
window or input handling, no world, level or editor, and no command-line
tool. `UObject` carries no reference to a world or engine, and
`ObjectRegistry.process_pending_destroy_objects` simply drops its queued
objects and returns them; nothing else is torn down.