"""Cube geometry: vertices, triangle indices and texture coordinates."""

from __future__ import annotations

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

CUBE_VERTICES: tuple[Vec3, ...] = (
    (-0.5, -0.5, 0.5),
    (0.5, -0.5, 0.5),
    (0.5, 0.5, 0.5),
    (-0.5, 0.5, 0.5),
    (-0.5, -0.5, -0.5),
    (-0.5, 0.5, -0.5),
    (0.5, 0.5, -0.5),
    (0.5, -0.5, -0.5),
    (-0.5, 0.5, -0.5),
    (-0.5, 0.5, 0.5),
    (0.5, 0.5, 0.5),
    (0.5, 0.5, -0.5),
    (-0.5, -0.5, 0.5),
    (-0.5, -0.5, -0.5),
    (0.5, -0.5, -0.5),
    (0.5, -0.5, 0.5),
    (-0.5, -0.5, -0.5),
    (-0.5, 0.5, -0.5),
    (-0.5, 0.5, 0.5),
    (-0.5, -0.5, 0.5),
    (0.5, -0.5, 0.5),
    (0.5, 0.5, 0.5),
    (0.5, 0.5, -0.5),
    (0.5, -0.5, -0.5),
)

CUBE_INDICES: tuple[int, ...] = (
    0, 1, 2, 2, 3, 0,        # front
    4, 5, 6, 6, 7, 4,        # back
    8, 9, 10, 10, 11, 8,     # top
    12, 13, 14, 14, 15, 12,  # bottom
    16, 17, 18, 18, 19, 16,  # left
    20, 21, 22, 22, 23, 20,  # right
    0, 3, 16, 16, 19, 3,
    1, 2, 21, 21, 20, 2,
)

_FRONT: tuple[Vec2, ...] = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))
_BACK: tuple[Vec2, ...] = ((1.0, 0.0), (0.0, 0.0), (0.0, 1.0), (1.0, 1.0))
_SECOND_TILE: tuple[Vec2, ...] = ((1.0, 0.0), (2.0, 0.0), (2.0, 1.0), (1.0, 1.0))
_THIRD_TILE: tuple[Vec2, ...] = ((2.0, 0.0), (3.0, 0.0), (3.0, 1.0), (2.0, 1.0))

# One atlas tile on every face.
CUBE1T_TEXCOORDS: tuple[Vec2, ...] = _FRONT + _BACK + _FRONT * 4
# Sides use the first tile, top and bottom the second.
CUBE2T_TEXCOORDS: tuple[Vec2, ...] = _FRONT + _BACK + _SECOND_TILE * 2 + _FRONT * 2
# Sides use the first tile, top the second, bottom the third.
CUBE3T_TEXCOORDS: tuple[Vec2, ...] = _FRONT + _BACK + _SECOND_TILE + _THIRD_TILE + _FRONT * 2

_TEX_COORDS_BY_COUNT = {1: CUBE1T_TEXCOORDS, 2: CUBE2T_TEXCOORDS, 3: CUBE3T_TEXCOORDS}


def cube_tex_coords(tex_count: int) -> list[Vec2]:
    """Return a fresh list of texture coordinates for a cube using ``tex_count`` tiles.

    Counts other than 1, 2 or 3 give an empty list.
    """
    return list(_TEX_COORDS_BY_COUNT.get(tex_count, ()))