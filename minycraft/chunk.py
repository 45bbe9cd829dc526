"""Terrain chunks: a Perlin heightmap and the cube mesh built on top of it."""

from __future__ import annotations

import math
import random
from typing import Protocol

from minycraft.block import Block
from minycraft.shapes import CUBE_VERTICES

MAX_LENGTH = 16
MAX_HEIGHT = 32
HEIGHT_VARIATION = 10000.0
NOISE_SEED = 2
NOISE_SCALE = 0.1
NOISE_OCTAVES = 2
NOISE_PERSISTENCE = 0.5
TERRAIN_ATLAS_POSITION = (0.0, 1.0)
TERRAIN_TEX_COUNT = 3

Position = tuple[int, int, int]


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _grad(hash_value: int, x: float, y: float, z: float = 0.0) -> float:
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return int(rounded if value >= 0 else -rounded)


class PerlinNoise:
    """Improved Perlin noise over a permutation shuffled from ``seed``."""

    def __init__(self, seed: int = NOISE_SEED):
        self.seed = seed
        permutation = list(range(256))
        random.Random(seed).shuffle(permutation)
        self._p = permutation * 2

    def noise2d(self, x: float, y: float) -> float:
        """Noise value at (x, y), roughly in [-1, 1]; zero on lattice points."""
        p = self._p
        x0 = math.floor(x)
        y0 = math.floor(y)
        xf = x - x0
        yf = y - y0
        xi = int(x0) & 255
        yi = int(y0) & 255
        u = _fade(xf)
        v = _fade(yf)

        a = p[xi] + yi
        aa, ab = p[a], p[a + 1]
        b = p[xi + 1] + yi
        ba, bb = p[b], p[b + 1]

        return _lerp(
            v,
            _lerp(u, _grad(p[aa], xf, yf), _grad(p[ba], xf - 1, yf)),
            _lerp(u, _grad(p[ab], xf, yf - 1), _grad(p[bb], xf - 1, yf - 1)),
        )

    def octave2d(self, x: float, y: float, octaves: int, persistence: float) -> float:
        """Sum of ``octaves`` layers, each at double frequency and scaled amplitude."""
        result = 0.0
        amplitude = 1.0
        for _ in range(octaves):
            result += self.noise2d(x, y) * amplitude
            x *= 2
            y *= 2
            amplitude *= persistence
        return result

    def octave2d_01(self, x: float, y: float, octaves: int, persistence: float) -> float:
        """Layered noise mapped to [0, 1] and clamped there."""
        value = self.octave2d(x, y, octaves, persistence) * 0.5 + 0.5
        return min(1.0, max(0.0, value))


class HeightNoise(Protocol):
    def octave2d_01(self, x: float, y: float, octaves: int, persistence: float) -> float: ...


def _in_bounds(x: int, z: int) -> bool:
    return 0 <= x < MAX_LENGTH and 0 <= z < MAX_LENGTH


_NEIGHBOUR_OFFSETS = tuple(
    (dx, dz) for dx in (-1, 0, 1) for dz in (-1, 0, 1) if (dx, dz) != (0, 0)
)


class Chunk:
    """A MAX_LENGTH x MAX_LENGTH column of terrain with a heightmap and a mesh."""

    def __init__(self, chunk_x: int, chunk_z: int, noise: HeightNoise | None = None):
        self.chunk_x = chunk_x
        self.chunk_z = chunk_z
        self.noise: HeightNoise = noise if noise is not None else PerlinNoise(NOISE_SEED)
        self.height_map: list[list[int]] = [
            [
                _round_half_away(
                    self.noise.octave2d_01(
                        x * NOISE_SCALE, z * NOISE_SCALE, NOISE_OCTAVES, NOISE_PERSISTENCE
                    )
                    * MAX_HEIGHT
                )
                for z in range(MAX_LENGTH)
            ]
            for x in range(MAX_LENGTH)
        ]
        self.vertices: list[tuple[float, float, float]] = []
        self.indices: list[int] = []
        self.normals: list[tuple[float, float, float]] = []
        self.tex_coords: list[tuple[float, float]] = []
        self.air_blocks: set[Position] = set()
        self.terrain_blocks: set[Position] = set()

    def _find_air_blocks(self) -> set[Position]:
        hm = self.height_map
        air = {(x, hm[x][z], z) for x in range(MAX_LENGTH) for z in range(MAX_LENGTH)}
        # Fill in air beside steep drops so the cliff faces get blocks too.
        for x in range(MAX_LENGTH):
            for z in range(MAX_LENGTH):
                for dx, dz in _NEIGHBOUR_OFFSETS:
                    nx, nz = x + dx, z + dz
                    if not _in_bounds(nx, nz):
                        continue
                    diff = hm[x][z] - hm[nx][nz]
                    if diff > 1:
                        air.update((nx, hm[x][z] - i, nz) for i in range(1, diff + 1))
        return air

    def _find_terrain_blocks(self, air: set[Position]) -> set[Position]:
        hm = self.height_map
        terrain: set[Position] = set()
        for x, y, z in air:
            if y < hm[x][z]:
                continue
            for dx, dz in _NEIGHBOUR_OFFSETS:
                nx, nz = x + dx, z + dz
                if _in_bounds(nx, nz) and y <= hm[nx][nz]:
                    terrain.add((nx, y, nz))
        return terrain

    def generate_mesh(self) -> None:
        """Build vertices, indices and texture coordinates from the heightmap."""
        self.air_blocks = self._find_air_blocks()
        self.terrain_blocks = self._find_terrain_blocks(self.air_blocks)

        per_block = len(CUBE_VERTICES)
        self.vertices = []
        self.indices = []
        self.tex_coords = []
        for i, position in enumerate(sorted(self.terrain_blocks)):
            block = Block(position, TERRAIN_ATLAS_POSITION, TERRAIN_TEX_COUNT)
            self.vertices.extend(block.vertices)
            self.indices.extend(index + i * per_block for index in block.indices)
            self.tex_coords.extend(block.tex_coords)

    def __repr__(self) -> str:
        return f"Chunk({self.chunk_x}, {self.chunk_z}, blocks={len(self.terrain_blocks)})"