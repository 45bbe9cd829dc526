"""Vertex and element buffers holding chunk meshes on the GPU."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from minycraft.log import TRACE, get_engine_logger

FLOAT_SIZE = np.dtype(np.float32).itemsize
_MAX_INDEX = 0xFFFFFFFF


def _gl():
    from pyglet import gl

    return gl


def _as_rows(values: Sequence[Sequence[float]], width: int, name: str) -> np.ndarray:
    array = np.asarray(values, dtype=np.float32)
    if array.size == 0:
        return array.reshape(0, width)
    if array.ndim != 2 or array.shape[1] != width:
        raise ValueError(f"{name} must be a sequence of {width}-component vectors")
    return array


def pack_attributes(
    vertices: Sequence[Sequence[float]], tex_coords: Sequence[Sequence[float]]
) -> np.ndarray:
    """Flatten positions then texture coordinates into one float32 array.

    All positions come first, followed by all texture coordinates, which is the
    layout the vertex buffer describes to the shader.
    """
    positions = _as_rows(vertices, 3, "vertices")
    uvs = _as_rows(tex_coords, 2, "tex_coords")
    return np.concatenate((positions.ravel(), uvs.ravel())).astype(np.float32)


def pack_indices(indices: Sequence[int]) -> np.ndarray:
    """Return the triangle indices as a flat uint32 array."""
    array = np.asarray(indices, dtype=np.int64)
    if array.ndim != 1:
        raise ValueError("indices must be a flat sequence")
    if array.size and (array.min() < 0 or array.max() > _MAX_INDEX):
        raise ValueError("indices must fit in an unsigned 32-bit integer")
    return array.astype(np.uint32)


def _gen_one(gl, generator) -> int:
    names = (gl.GLuint * 1)()
    generator(1, names)
    return int(names[0])


def _delete_one(gl, deleter, name: int) -> None:
    deleter(1, (gl.GLuint * 1)(name))


class VertexBuffer:
    """A vertex array object with positions (attribute 0) and texture coordinates (attribute 1)."""

    def __init__(self, vertices: Sequence[Sequence[float]], tex_coords: Sequence[Sequence[float]]):
        gl = _gl()
        data = pack_attributes(vertices, tex_coords)
        vertex_count = len(_as_rows(vertices, 3, "vertices"))
        tex_offset = vertex_count * 3 * FLOAT_SIZE

        self.vao = _gen_one(gl, gl.glGenVertexArrays)
        gl.glBindVertexArray(self.vao)
        self.id = _gen_one(gl, gl.glGenBuffers)
        self._deleted = False
        get_engine_logger().log(TRACE, "Creating vertex buffer object id = %d", self.id)

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.id)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, data.nbytes, data.tobytes(), gl.GL_STATIC_DRAW)
        gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, 3 * FLOAT_SIZE, 0)
        gl.glEnableVertexAttribArray(0)
        gl.glVertexAttribPointer(1, 2, gl.GL_FLOAT, gl.GL_FALSE, 2 * FLOAT_SIZE, tex_offset)
        gl.glEnableVertexAttribArray(1)

    def bind(self) -> None:
        gl = _gl()
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.id)
        gl.glBindVertexArray(self.vao)

    def delete(self) -> None:
        """Free the buffer and its vertex array; calling twice does nothing."""
        if self._deleted:
            return
        gl = _gl()
        get_engine_logger().log(TRACE, "Deleting vertex buffer object id = %d", self.id)
        _delete_one(gl, gl.glDeleteBuffers, self.id)
        _delete_one(gl, gl.glDeleteVertexArrays, self.vao)
        self._deleted = True


class ElementBuffer:
    """An element array buffer of triangle indices."""

    def __init__(self, indices: Sequence[int]):
        gl = _gl()
        data = pack_indices(indices)
        self.id = _gen_one(gl, gl.glGenBuffers)
        self.count = int(data.size)
        self._deleted = False
        get_engine_logger().log(TRACE, "Creating element buffer object id = %d", self.id)

        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self.id)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER, data.nbytes, data.tobytes(), gl.GL_STATIC_DRAW
        )

    def bind(self) -> None:
        gl = _gl()
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self.id)

    def delete(self) -> None:
        """Free the buffer; calling twice does nothing."""
        if self._deleted:
            return
        gl = _gl()
        get_engine_logger().log(TRACE, "Deleting element buffer object id = %d", self.id)
        _delete_one(gl, gl.glDeleteBuffers, self.id)
        self._deleted = True