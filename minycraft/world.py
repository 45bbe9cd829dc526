"""A square grid of chunks whose heightmaps are blended at their borders."""

from __future__ import annotations

from minycraft.chunk import MAX_LENGTH, Chunk, HeightNoise, PerlinNoise

VIEW_DISTANCE = 6
BLEND_FACTOR = 6


class World:
    """``view_distance`` x ``view_distance`` chunks, blended and meshed on creation."""

    def __init__(self, view_distance: int = VIEW_DISTANCE, noise: HeightNoise | None = None):
        if view_distance < 0:
            raise ValueError(f"view distance must not be negative: {view_distance}")
        self.view_distance = view_distance
        noise = noise if noise is not None else PerlinNoise()
        self.chunks: list[Chunk] = [
            Chunk(chunk_x, chunk_z, noise)
            for chunk_x in range(view_distance)
            for chunk_z in range(view_distance)
        ]
        self.blend_chunks()
        self.blend_chunks()
        for chunk in self.chunks:
            chunk.generate_mesh()

    def blend_chunks(self) -> None:
        """Smooth each chunk's far edges towards the first row of the next chunks."""
        chunks = self.chunks
        count = len(chunks)
        inner = MAX_LENGTH - BLEND_FACTOR

        for i, chunk in enumerate(chunks):
            hm = chunk.height_map
            if i + 1 < count:
                next_hm = chunks[i + 1].height_map
                for x in range(inner):
                    for z in range(inner, MAX_LENGTH):
                        hm[x][z] = (hm[x][z - 1] + next_hm[x][0]) // 2
            if i + self.view_distance < count:
                next_hm = chunks[i + self.view_distance].height_map
                for x in range(inner, MAX_LENGTH):
                    for z in range(inner):
                        hm[x][z] = (hm[x - 1][z] + next_hm[0][z]) // 2

        for i, chunk in enumerate(chunks):
            if i + self.view_distance + 1 < count:
                hm = chunk.height_map
                corner = chunks[i + self.view_distance + 1].height_map[0][0]
                for x in range(inner, MAX_LENGTH):
                    for z in range(inner, MAX_LENGTH):
                        hm[x][z] = (hm[x - 1][z - 1] + corner) // 2