"""Vertices, materials and mesh builders for textured primitives."""

from __future__ import annotations

import enum
import itertools
import weakref
from dataclasses import dataclass, field
from typing import Any, Optional


class Primitive(enum.IntEnum):
    """Primitive types understood by the graphics engine."""

    POINTS = 0
    LINES = 1
    LINE_STRIP = 2
    TRIANGLES = 3
    TRIANGLE_STRIP = 4
    TRIANGLE_FAN = 5
    SPRITES = 6


class TextureFormat(enum.IntEnum):
    """Texture pixel formats."""

    PSM_5650 = 0
    PSM_5551 = 1
    PSM_4444 = 2
    PSM_8888 = 3
    PSM_T4 = 4
    PSM_T8 = 5
    PSM_T16 = 6
    PSM_T32 = 7
    PSM_DXT1 = 8
    PSM_DXT3 = 9
    PSM_DXT5 = 10


@dataclass(frozen=True)
class Vertex:
    """A textured vertex: texture coordinates then position."""

    u: float
    v: float
    x: float
    y: float
    z: float


def _v(x: float, y: float, z: float, u: float, v: float) -> Vertex:
    return Vertex(u, v, x, y, z)


@dataclass
class Material:
    """Surface settings with a weak reference to the texture it draws with."""

    handle: Optional[Any] = None
    texture_format: TextureFormat = TextureFormat.PSM_T4
    swizzle: bool = False
    blend: bool = False

    def __post_init__(self) -> None:
        if self.handle is not None and not isinstance(self.handle, weakref.ref):
            self.handle = weakref.ref(self.handle)

    def texture(self) -> Optional[Any]:
        """Return the texture if it is still alive, otherwise None."""
        return self.handle() if self.handle is not None else None


def _box(x: float, y: float, z: float) -> tuple[Vertex, ...]:
    return (
        # +Z
        _v(-x, -y, z, 0.0, 0.0), _v(-x, y, z, 0.0, 1.0), _v(x, y, z, 1.0, 1.0),
        _v(-x, -y, z, 0.0, 0.0), _v(x, y, z, 1.0, 1.0), _v(x, -y, z, 1.0, 0.0),
        # -Z
        _v(-x, -y, -z, 1.0, 0.0), _v(x, -y, -z, 0.0, 0.0), _v(x, y, -z, 0.0, 1.0),
        _v(-x, -y, -z, 1.0, 0.0), _v(x, y, -z, 0.0, 1.0), _v(-x, y, -z, 1.0, 1.0),
        # +X
        _v(x, -y, -z, 0.0, 0.0), _v(x, -y, z, 1.0, 0.0), _v(x, y, z, 1.0, 1.0),
        _v(x, -y, -z, 0.0, 0.0), _v(x, y, z, 1.0, 1.0), _v(x, y, -z, 0.0, 1.0),
        # -X
        _v(-x, -y, -z, 1.0, 0.0), _v(-x, y, -z, 0.0, 0.0), _v(-x, y, z, 0.0, 1.0),
        _v(-x, -y, -z, 1.0, 0.0), _v(-x, y, z, 0.0, 1.0), _v(-x, -y, z, 1.0, 1.0),
        # +Y
        _v(-x, y, -z, 0.0, 0.0), _v(x, y, -z, 1.0, 0.0), _v(x, y, z, 1.0, 1.0),
        _v(-x, y, -z, 0.0, 0.0), _v(x, y, z, 1.0, 1.0), _v(-x, y, z, 0.0, 1.0),
        # -Y
        _v(-x, -y, -z, 1.0, 0.0), _v(-x, -y, z, 0.0, 0.0), _v(x, -y, z, 0.0, 1.0),
        _v(-x, -y, -z, 1.0, 0.0), _v(x, -y, z, 0.0, 1.0), _v(x, -y, -z, 1.0, 1.0),
    )


@dataclass
class Mesh:
    """Vertex data, optional 16-bit indices and the primitive used to draw them."""

    vertices: tuple[Vertex, ...] = ()
    indices: Optional[tuple[int, ...]] = None
    primitive_type: Primitive = field(default=Primitive.TRIANGLES)

    @classmethod
    def cube(cls, size: float) -> Mesh:
        """Non-indexed cube of 36 vertices centred at the origin."""
        h = size * 0.5
        return cls(_box(h, h, h))

    @classmethod
    def cube_indexed(cls, size: float) -> Mesh:
        """Cube of 24 shared vertices and 36 indices, two triangles per face."""
        h = size * 0.5
        verts = (
            # +Z
            _v(-h, -h, h, 0.0, 1.0), _v(-h, h, h, 0.0, 0.0),
            _v(h, h, h, 1.0, 0.0), _v(h, -h, h, 1.0, 1.0),
            # -Z
            _v(-h, -h, -h, 1.0, 1.0), _v(h, -h, -h, 0.0, 1.0),
            _v(h, h, -h, 0.0, 0.0), _v(-h, h, -h, 1.0, 0.0),
            # +X
            _v(h, -h, -h, 0.0, 1.0), _v(h, -h, h, 1.0, 1.0),
            _v(h, h, h, 1.0, 0.0), _v(h, h, -h, 0.0, 0.0),
            # -X
            _v(-h, -h, -h, 1.0, 1.0), _v(-h, h, -h, 0.0, 1.0),
            _v(-h, h, h, 0.0, 0.0), _v(-h, -h, h, 1.0, 0.0),
            # +Y
            _v(-h, h, -h, 0.0, 1.0), _v(h, h, -h, 1.0, 1.0),
            _v(h, h, h, 1.0, 0.0), _v(-h, h, h, 0.0, 0.0),
            # -Y
            _v(-h, -h, -h, 1.0, 1.0), _v(-h, -h, h, 0.0, 1.0),
            _v(h, -h, h, 0.0, 0.0), _v(h, -h, -h, 1.0, 0.0),
        )
        indices = tuple(
            o + step for o in range(0, 24, 4) for step in (0, 1, 2, 0, 2, 3)
        )
        return cls(verts, indices)

    @classmethod
    def cube_stripped(cls, size: float) -> Mesh:
        """Cube drawn as one indexed triangle strip joined by degenerate links."""
        h = size * 0.5
        verts = (
            # +Z front
            _v(-h, -h, h, 0.0, 0.0), _v(-h, h, h, 0.0, 1.0),
            _v(h, -h, h, 1.0, 0.0), _v(h, h, h, 1.0, 1.0),
            # +X right
            _v(h, -h, h, 0.0, 0.0), _v(h, h, h, 0.0, 1.0),
            _v(h, -h, -h, 1.0, 0.0), _v(h, h, -h, 1.0, 1.0),
            # -Z back
            _v(h, -h, -h, 0.0, 0.0), _v(h, h, -h, 0.0, 1.0),
            _v(-h, -h, -h, 1.0, 0.0), _v(-h, h, -h, 1.0, 1.0),
            # -X left
            _v(-h, -h, -h, 0.0, 0.0), _v(-h, h, -h, 0.0, 1.0),
            _v(-h, -h, h, 1.0, 0.0), _v(-h, h, h, 1.0, 1.0),
            # +Y top
            _v(-h, h, h, 0.0, 0.0), _v(-h, h, -h, 0.0, 1.0),
            _v(h, h, h, 1.0, 0.0), _v(h, h, -h, 1.0, 1.0),
            # -Y bottom
            _v(-h, -h, -h, 0.0, 0.0), _v(-h, -h, h, 0.0, 1.0),
            _v(h, -h, -h, 1.0, 0.0), _v(h, -h, h, 1.0, 1.0),
        )
        indices = (
            0, 3, 1, 2,
            2, 4,
            7, 5, 6,
            6, 8,
            11, 9, 10,
            10, 12,
            15, 13, 14,
            14, 16,
            19, 17, 18,
            18, 20,
            23, 21, 22,
        )
        return cls(verts, indices, Primitive.TRIANGLE_STRIP)

    @classmethod
    def cuboid(cls, x_len: float, y_len: float, z_len: float) -> Mesh:
        """Non-indexed box of 36 vertices centred at the origin."""
        return cls(_box(x_len * 0.5, y_len * 0.5, z_len * 0.5))

    @classmethod
    def plane(cls, x_len: float, y_len: float) -> Mesh:
        """Two-triangle plane in the XY plane, centred at the origin."""
        x = x_len * 0.5
        y = y_len * 0.5
        return cls((
            _v(-x, -y, 0.0, 0.0, 1.0),
            _v(-x, y, 0.0, 0.0, 0.0),
            _v(x, y, 0.0, 1.0, 0.0),
            _v(-x, -y, 0.0, 0.0, 1.0),
            _v(x, y, 0.0, 1.0, 0.0),
            _v(x, -y, 0.0, 1.0, 1.0),
        ))

    @classmethod
    def subdivided_plane(cls, x_len: float, y_len: float, subdivs_x: int, subdivs_y: int) -> Mesh:
        """Plane centred at the origin split into subdivs_x by subdivs_y quads."""
        if subdivs_x < 0 or subdivs_y < 0:
            raise ValueError("subdivision counts must not be negative")
        if subdivs_x == 0 or subdivs_y == 0:
            return cls()
        half_x = x_len * 0.5
        half_y = y_len * 0.5
        dx = x_len / subdivs_x
        dy = y_len / subdivs_y

        def quad(i: int, j: int) -> tuple[Vertex, ...]:
            x0 = -half_x + i * dx
            x1 = x0 + dx
            y0 = -half_y + j * dy
            y1 = y0 + dy
            u0, u1 = i / subdivs_x, (i + 1) / subdivs_x
            v0, v1 = j / subdivs_y, (j + 1) / subdivs_y
            return (
                _v(x0, y0, 0.0, u0, v0),
                _v(x0, y1, 0.0, u0, v1),
                _v(x1, y1, 0.0, u1, v1),
                _v(x0, y0, 0.0, u0, v0),
                _v(x1, y1, 0.0, u1, v1),
                _v(x1, y0, 0.0, u1, v0),
            )

        verts = tuple(
            itertools.chain.from_iterable(
                quad(i, j) for i, j in itertools.product(range(subdivs_x), range(subdivs_y))
            )
        )
        return cls(verts)