# a4engine

The core pieces of a small 2D game engine. Everything is Python. The only
dependency is `lz4`, which the compressed model format uses.

- `a4engine.vectors` provides `Vector3` and `Vector4`. Both are immutable
  dataclasses with component-wise `+`, `-`, `*` and `/`. Multiplication and
  division also accept a plain number, and `splat(value)` sets every component to
  `value`. The module also defines the constants `PI`, `DEG2RAD` and `RAD2DEG`.
- `a4engine.matrices` provides `Matrix3` for 2D affine transforms and `Matrix4`
  for 3D transforms. Both are row-major.
  - Elements are read and written as `m[i, j]`.
  - Both have `inverse()`, which raises `ValueError` when the matrix is singular,
    and `transpose()`.
  - `Matrix3` also has `determinant()`.
  - The constructors are `identity()`, `rotate(degrees)`, `scale((sx, sy))` and
    `translate((tx, ty))` on `Matrix3`, and `identity()`,
    `rotate_around_x/y/z(degrees)`, `scale(Vector3)` and `translate(Vector3)` on
    `Matrix4`.
  - `transform_point` applies a matrix to a point. `*` multiplies two matrices, or
    a matrix and a point.
- `a4engine.input` maps events to named actions. `InputManager` binds keys,
  mouse buttons (`MouseButton`) and controller buttons to those actions. It takes
  `InputEvent(EventType, code)` values and tracks whether each action is active,
  was pressed this frame, or was released this frame. Callbacks registered with
  `on_action` receive `True` on trigger and `False` on release.
- `a4engine.spritesheet` provides `Spritesheet`, an ordered list of `Animation`
  entries. Each entry has a frame size, a start position, a frame count and a
  frame duration. Entries can also be looked up by name.
- `a4engine.model` provides `Model` and `ModelVertex`.
  - A vertex holds a position, a UV pair and an RGBA colour.
  - A model holds vertices, optional indices and an optional texture path.
  - Models convert to and from a JSON document with `to_json()` and `from_json()`.
  - They are saved and loaded as JSON (`.model`), LZ4-compressed JSON
    (`.cmodel`) or a packed little-endian binary format (`.bmodel`).

## Install

```
pip install .
```

## Examples

Transforming a point:

```python
from a4engine.matrices import Matrix3

m = Matrix3.translate((10.0, 5.0)) * Matrix3.rotate(90.0)
print(m.transform_point((1.0, 0.0)))
```

Mapping input to actions:

```python
from a4engine.input import EventType, InputEvent, InputManager

with InputManager() as inputs:
    inputs.bind_key_pressed(1073741904, "MoveLeft")
    inputs.handle_event(InputEvent(EventType.KEY_DOWN, 1073741904))
    assert inputs.is_active("MoveLeft")
    assert inputs.is_pressed("MoveLeft")
    inputs.update()
    assert not inputs.is_pressed("MoveLeft")
```

Only one `InputManager` can exist at a time. A second one raises `RuntimeError`
until the first is closed, either with `close()` or when its `with` block ends.
`InputManager.instance()` returns the live manager and raises `RuntimeError` if
there is none.

Saving and loading a model:

```python
from a4engine.model import Model, ModelVertex

model = Model(vertices=[ModelVertex(pos=(0.0, 0.0)), ModelVertex(pos=(1.0, 0.0))])
model.save("triangle.cmodel")
loaded = Model.load("triangle.cmodel")
```

The file extension picks the format. The following raise `ModelError`:

- an unknown extension
- a newer file version
- a truncated or corrupt file
- a compressed file whose declared size is over 10,000,000 bytes

## What this package does not do

The package opens no window and draws nothing. It plays no sound and has no
physics. It also does not read events from a real keyboard, mouse or controller.
You build `InputEvent` values yourself and pass them to `InputManager`. A model's
texture is only a path string: no image is loaded, and
`Model.transformed_positions` is the nearest thing to drawing a model. There is no
command-line program.

## Tests

```
pip install .[test]
pytest
```