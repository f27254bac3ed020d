# eso

Building blocks for a small textured 3D scene with a first-person player:
mesh builders, PNG texture decoding (linear or swizzled), an asset store that
loads each texture once, and the movement logic for the player.

## Modules

- **`eso.geometry`**: `Mesh` with the builders `cube`, `cube_indexed`,
  `cube_stripped`, `cuboid`, `plane` and `subdivided_plane`; `Vertex`
  (`u`, `v`, `x`, `y`, `z`); `Material`, which keeps a weak reference to its
  texture and returns it from `texture()` while it is alive; and the enums
  `Primitive` and `TextureFormat`.
- **`eso.image`**: `load_png` decodes PNG bytes to RGBA8888 with each row
  padded to a multiple of 8 pixels and returns a `DecodedImage` (`width`,
  `height`, `pitch`, `pixels`). `load_png_swizzled` does the same and then
  reorders the pixels with `swizzle`, which lays a linear buffer out as
  16-byte by 8-row blocks. Data that is not a decodable PNG raises
  `ImageDecodeError`.
- **`eso.assets`**: `Image` (loaded swizzled) and `Font` (loaded linear)
  assets, `TextureHandle`, `read_file`, and `AssetServer`. The server keys
  textures by file name (the last path component): `add` loads an asset or
  returns the texture already stored under that name, `get` looks one up,
  `size` counts them, `check_references` reports `(strong, weak)` reference
  counts, and `drop_unused` forgets every texture that is held by nothing but
  the server and has no weak references (a `Material` counts as one). Missing,
  unreadable or undecodable files raise `AssetError`.
- **`eso.vmath`**: `sinf`, `cosf`, a 32-bit Mersenne Twister `Mt19937`, and
  `rand(tick)`, which returns the first output of a generator seeded with the
  tick (the current time in microseconds when no tick is given).
- **`eso.controls`**: `Buttons` flags, `PadState`, `normalize_axis` (maps a
  raw 0..255 stick reading around a centre of 128, with a dead zone of 16,
  and raises `ValueError` outside 0..255) and `read_pad`.
- **`eso.debugtext`**: `TextBuffer`, which keeps UTF-8 text up to a fixed
  byte capacity (256 by default) and reports whether anything was cut off,
  and `format_text`, which returns text as a NUL-terminated string of at most
  256 bytes plus the NUL.
- **`eso.game`**: `Transform`, `Controller`, `Time`, `Entity`, `World`,
  `update_player` and `setup_world`.

## Installation

```
pip install .
```

## Example

```python
import math

from eso.assets import Image
from eso.geometry import Material, Mesh, TextureFormat
from eso.game import Entity, Transform, World

world = World()
brick = world.assets.add(Image("assets/cell_brick.png"))

world.spawn(Entity(
    mesh=Mesh.cube_indexed(1.0),
    transform=Transform.from_xyz(0.0, 0.0, -2.0),
    material=Material(brick, TextureFormat.PSM_8888, True, False),
))
world.spawn(Entity(
    mesh=Mesh.subdivided_plane(10.0, 10.0, 2, 2),
    transform=Transform.from_xyz(0.0, -0.5, 0.0).with_rotation(-math.pi / 2, 0.0, 0.0),
    material=Material(brick, TextureFormat.PSM_8888, True, False),
))

for mesh, transform, material in world.renderables():
    print(len(mesh.vertices), transform.translation)
```

`World.renderables()` yields `(mesh, transform, material)` for every entity
that has both a mesh and a material.

`setup_world(world, asset_root)` loads `default_font.png` and
`cell_brick.png` from `asset_root`, spawns the player entity and a starting
scene of a cube, a cuboid, a floor and a font-textured plane. A texture that
cannot be loaded raises `AssetError`.

## Moving the player

`update_player(transform, time, controller)` moves a transform in the X/Z
plane from the stick position in `controller.analog`, relative to the current
yaw, at 2.5 units per second. Holding `Buttons.SQUARE` or `Buttons.CIRCLE`
turns the yaw at π radians per second, and the yaw is kept within ±π.
`Time.tick(now)` takes a timestamp in microseconds (the current monotonic
time by default) and updates `delta` and `total`; `delta_seconds()` gives
the last frame's length in seconds.

## What this package does not do

It holds the scene and works out what should be drawn, but it does not draw
anything: there is no window, display, GPU upload or render loop. It does not
read a game pad either; `read_pad` and `Controller` take values you supply.
There is no command to run.

## Running the tests

```
pip install .[test]
pytest
```