"""Scene state, player movement and the world the game is built from."""

from __future__ import annotations

import math
import time as _time
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterator, Optional, Union

from eso.assets import AssetError, AssetServer, Font, Image
from eso.controls import Buttons
from eso.geometry import Material, Mesh, TextureFormat
from eso.vmath import cosf, sinf

PLAYER_SPEED = 2.5
CAMERA_ROTATION_SPEED = math.pi

FONT_FILE = "default_font.png"
BRICK_FILE = "cell_brick.png"

Vec3 = tuple[float, float, float]


@dataclass
class Transform:
    """Position and Euler rotation (radians) of an object in the world."""

    translation: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> Transform:
        """A transform at the given position with no rotation."""
        return cls(translation=(x, y, z))

    def with_translation(self, x: float, y: float, z: float) -> Transform:
        """A copy moved to the given position, keeping the rotation."""
        return replace(self, translation=(x, y, z))

    def with_rotation(self, x: float, y: float, z: float) -> Transform:
        """A copy with the given rotation, keeping the position."""
        return replace(self, rotation=(x, y, z))


@dataclass
class Controller:
    """Latest pad input: buttons held and stick position."""

    buttons: Buttons = Buttons.NONE
    analog: tuple[float, float] = (0.0, 0.0)


def _now_us() -> int:
    return _time.monotonic_ns() // 1000


@dataclass
class Time:
    """Frame timing in microseconds."""

    delta: int = 0
    total: int = 0
    time: int = field(default_factory=_now_us)

    def tick(self, now: Optional[int] = None) -> None:
        """Advance to a new timestamp in microseconds, the current time by default."""
        if now is None:
            now = _now_us()
        delta = now - self.time
        self.delta = delta
        self.total += delta
        self.time = now

    def delta_seconds(self) -> float:
        """Length of the last frame in seconds."""
        return self.delta * 1.0e-6


@dataclass(eq=False)
class Entity:
    """A thing in the world; drawn when it has both a mesh and a material."""

    transform: Transform = field(default_factory=Transform)
    mesh: Optional[Mesh] = None
    material: Optional[Material] = None
    player: bool = False


@dataclass
class World:
    """Entities together with the shared timing, input and asset state."""

    entities: list[Entity] = field(default_factory=list)
    time: Time = field(default_factory=Time)
    controller: Controller = field(default_factory=Controller)
    assets: AssetServer = field(default_factory=AssetServer)

    def spawn(self, entity: Entity) -> Entity:
        """Add an entity to the world and return it."""
        self.entities.append(entity)
        return entity

    def renderables(self) -> Iterator[tuple[Mesh, Transform, Material]]:
        """Yield (mesh, transform, material) for every drawable entity."""
        for entity in self.entities:
            if entity.mesh is not None and entity.material is not None:
                yield entity.mesh, entity.transform, entity.material


def update_player(transform: Transform, time: Time, controller: Controller) -> None:
    """Move and turn the player's transform from stick and button input."""
    sx, sy = controller.analog
    rx, ry, rz = transform.rotation
    sin = sinf(ry)
    cos = cosf(ry)

    dx = sx * cos - sy * sin
    dz = sx * sin + sy * cos

    dt = time.delta_seconds()
    x, y, z = transform.translation
    transform.translation = (x + dx * PLAYER_SPEED * dt, y, z + dz * PLAYER_SPEED * dt)

    if Buttons.SQUARE in controller.buttons:
        ry -= CAMERA_ROTATION_SPEED * dt
    if Buttons.CIRCLE in controller.buttons:
        ry += CAMERA_ROTATION_SPEED * dt

    if ry > math.pi:
        ry -= 2.0 * math.pi
    if ry < -math.pi:
        ry += 2.0 * math.pi

    transform.rotation = (rx, ry, rz)


def _add(world: World, asset: Union[Font, Image]):
    try:
        return world.assets.add(asset)
    except AssetError as exc:
        raise AssetError(f"Could not add image: {asset.path}") from exc


def setup_world(world: World, asset_root: Union[str, Path]) -> None:
    """Load the textures and spawn the player and the starting scene."""
    root = Path(asset_root)
    font_handle = _add(world, Font(str(root / FONT_FILE)))
    brick_handle = _add(world, Image(str(root / BRICK_FILE)))

    world.spawn(Entity(transform=Transform(), player=True))

    def brick() -> Material:
        return Material(brick_handle, TextureFormat.PSM_8888, swizzle=True, blend=False)

    font_material = Material(font_handle, TextureFormat.PSM_8888, swizzle=False, blend=True)
    half_pi = math.pi / 2.0

    world.spawn(Entity(
        Transform.from_xyz(0.0, 0.0, -2.0),
        Mesh.cube_indexed(1.0),
        brick(),
    ))
    world.spawn(Entity(
        Transform.from_xyz(3.0, 0.5, -2.0).with_rotation(0.0, half_pi, 0.0),
        Mesh.cuboid(0.5, 2.0, 3.0),
        brick(),
    ))
    world.spawn(Entity(
        Transform.from_xyz(0.0, -0.5, 0.0).with_rotation(-half_pi, 0.0, 0.0),
        Mesh.subdivided_plane(10.0, 10.0, 2, 2),
        brick(),
    ))
    world.spawn(Entity(
        Transform.from_xyz(-1.0, 1.0, -1.0).with_rotation(0.0, half_pi, 0.0),
        Mesh.plane(3.0, 3.0),
        font_material,
    ))