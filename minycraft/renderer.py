"""Drawing one chunk's mesh with its shaders and texture atlas."""

from __future__ import annotations

import math
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

import numpy as np

from minycraft.buffers import ElementBuffer, VertexBuffer, pack_attributes, pack_indices
from minycraft.camera import perspective, translation
from minycraft.chunk import MAX_LENGTH
from minycraft.shaders import (
    GL_FRAGMENT_SHADER,
    GL_VERTEX_SHADER,
    Shader,
    ShaderError,
    ShaderProgram,
)
from minycraft.texture import Texture, TextureError

FIELD_OF_VIEW = math.radians(80.0)
NEAR_PLANE = 0.1
FAR_PLANE = 1000.0
VERTEX_SHADER_NAME = "vertex.shader"
FRAGMENT_SHADER_NAME = "fragment.shader"
DEFAULT_SHADER_DIR = Path("src/Shaders")
DEFAULT_ATLAS_PATH = Path("Textures/atlas.png")
MVP_UNIFORM = "mvp"


def model_view_projection(
    chunk_x: int, chunk_z: int, view: Sequence[Sequence[float]], aspect: float
) -> np.ndarray:
    """Return projection @ view @ model for the chunk at grid position (chunk_x, chunk_z)."""
    view_matrix = np.asarray(view, dtype=float)
    if view_matrix.shape != (4, 4):
        raise ValueError(f"view must be a 4x4 matrix, got shape {view_matrix.shape}")
    projection = perspective(FIELD_OF_VIEW, aspect, NEAR_PLANE, FAR_PLANE)
    model = translation(chunk_x * MAX_LENGTH, 0.0, chunk_z * MAX_LENGTH)
    return projection @ view_matrix @ model


class ChunkRenderer:
    """Owns the GPU resources for one chunk and draws them."""

    def __init__(
        self,
        chunk_x: int,
        chunk_z: int,
        shader_dir: str | PathLike[str] = DEFAULT_SHADER_DIR,
        atlas_path: str | PathLike[str] = DEFAULT_ATLAS_PATH,
    ):
        self.chunk_x = chunk_x
        self.chunk_z = chunk_z
        self.shader_dir = Path(shader_dir)
        self.atlas_path = Path(atlas_path)
        self.vertices: list[tuple[float, float, float]] = []
        self.indices: list[int] = []
        self.tex_coords: list[tuple[float, float]] = []
        self.mvp = np.identity(4)
        self._vbo: VertexBuffer | None = None
        self._ebo: ElementBuffer | None = None
        self._program: ShaderProgram | None = None
        self._texture: Texture | None = None

    def update(
        self,
        vertices: Sequence[Sequence[float]],
        indices: Sequence[int],
        tex_coords: Sequence[Sequence[float]],
    ) -> None:
        """Upload a new mesh, compile the shaders and load the atlas."""
        vertices = [tuple(v) for v in vertices]
        indices = list(indices)
        tex_coords = [tuple(t) for t in tex_coords]
        pack_attributes(vertices, tex_coords)
        pack_indices(indices)

        vertex_path = self.shader_dir / VERTEX_SHADER_NAME
        fragment_path = self.shader_dir / FRAGMENT_SHADER_NAME
        for path in (vertex_path, fragment_path):
            if not path.is_file():
                raise ShaderError(f"Failed to load shader: {path}")
        if not self.atlas_path.is_file():
            raise TextureError(f"Failed to locate image: {self.atlas_path}")

        vbo = VertexBuffer(vertices, tex_coords)
        ebo = ElementBuffer(indices)
        vertex_shader = Shader(GL_VERTEX_SHADER, vertex_path)
        fragment_shader = Shader(GL_FRAGMENT_SHADER, fragment_path)
        program = ShaderProgram(vertex_shader, fragment_shader)
        texture = Texture(self.atlas_path)

        self._release()
        self.vertices = vertices
        self.indices = indices
        self.tex_coords = tex_coords
        self._vbo = vbo
        self._ebo = ebo
        self._program = program
        self._texture = texture

    def render(self, view: Sequence[Sequence[float]], aspect: float) -> None:
        """Draw the chunk as seen through ``view`` on a viewport of ratio ``aspect``."""
        if self._vbo is None or self._ebo is None or self._program is None or self._texture is None:
            raise RuntimeError("chunk renderer has no mesh; call update() first")
        self.mvp = model_view_projection(self.chunk_x, self.chunk_z, view, aspect)

        from pyglet import gl

        self._vbo.bind()
        self._ebo.bind()
        self._texture.bind()
        self._program.use()

        column_major = tuple(float(v) for v in self.mvp.astype(np.float32).flatten(order="F"))
        self._program.set_uniform(MVP_UNIFORM, column_major)
        gl.glDrawElements(gl.GL_TRIANGLES, self._ebo.count, gl.GL_UNSIGNED_INT, None)

    def _release(self) -> None:
        for resource in (self._vbo, self._ebo, self._texture):
            if resource is not None:
                resource.delete()
        self._vbo = self._ebo = self._program = self._texture = None

    def __repr__(self) -> str:
        return f"ChunkRenderer({self.chunk_x}, {self.chunk_z}, indices={len(self.indices)})"