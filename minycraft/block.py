"""A single textured cube placed in the world."""

from __future__ import annotations

from collections.abc import Sequence

from minycraft.shapes import CUBE_INDICES, CUBE_VERTICES, cube_tex_coords

ATLAS_TILES = 16  # the atlas is 16 x 16 tiles


class Block:
    """A cube's vertices, texture coordinates and indices for one position."""

    def __init__(self, position: Sequence[float], atlas_position: Sequence[float], tex_count: int):
        px, py, pz = (float(c) for c in position)
        ax, ay = (float(c) for c in atlas_position)
        self.vertices: list[tuple[float, float, float]] = [
            (x + px, y + py, z + pz) for x, y, z in CUBE_VERTICES
        ]
        self.tex_coords: list[tuple[float, float]] = [
            ((u + ax) / ATLAS_TILES, (v + ay) / ATLAS_TILES)
            for u, v in cube_tex_coords(tex_count)
        ]
        self.indices: list[int] = list(CUBE_INDICES)

    def __repr__(self) -> str:
        return f"Block(vertices={len(self.vertices)}, tex_coords={len(self.tex_coords)})"