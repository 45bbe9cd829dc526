"""Loading images into OpenGL textures."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from minycraft.log import TRACE, get_engine_logger

GL_RED = 0x1903
GL_RGB = 0x1907
GL_RGBA = 0x1908

_FORMATS = {1: GL_RED, 3: GL_RGB, 4: GL_RGBA}


class TextureError(RuntimeError):
    """An image could not be found or turned into a texture."""


def pixel_format(channels: int) -> int:
    """Return the OpenGL pixel format for an image with ``channels`` channels."""
    try:
        return _FORMATS[channels]
    except KeyError:
        raise TextureError(f"unsupported number of channels: {channels}") from None


class Texture:
    """A 2D texture with nearest filtering and mirrored wrapping."""

    def __init__(self, path: str | PathLike[str]):
        self.path = Path(path)
        if not self.path.is_file():
            raise TextureError(f"Failed to locate image: {self.path}")

        import pyglet.image
        from pyglet import gl
        from pyglet.image.codecs import ImageDecodeException

        try:
            image = pyglet.image.load(str(self.path)).get_image_data()
        except (OSError, ImageDecodeException) as exc:
            raise TextureError(f"Failed to load image: {self.path}") from exc

        channels = len(image.format)
        try:
            fmt = pixel_format(channels)
        except TextureError as exc:
            raise TextureError(f"Failed to load image: {self.path}") from exc
        layout = {GL_RGB: "RGB", GL_RGBA: "RGBA"}.get(fmt, image.format)
        self.width = image.width
        self.height = image.height
        # A negative pitch gives rows top to bottom, as image files store them.
        pixels = bytes(image.get_data(layout, -self.width * channels))

        names = (gl.GLuint * 1)()
        gl.glGenTextures(1, names)
        self.id = int(names[0])
        self._deleted = False
        get_engine_logger().log(TRACE, "Creating a texture id = %d", self.id)

        gl.glBindTexture(gl.GL_TEXTURE_2D, self.id)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_MIRRORED_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_MIRRORED_REPEAT)
        if fmt == GL_RGB:
            gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, fmt, self.width, self.height, 0, fmt, gl.GL_UNSIGNED_BYTE, pixels
        )
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
        get_engine_logger().info("Succesfully loaded texture: %s", self.path)

    def bind(self) -> None:
        from pyglet import gl

        gl.glBindTexture(gl.GL_TEXTURE_2D, self.id)

    def delete(self) -> None:
        """Free the texture; calling twice does nothing."""
        if self._deleted:
            return
        from pyglet import gl

        get_engine_logger().log(TRACE, "Deleting texture: %d", self.id)
        gl.glDeleteTextures(1, (gl.GLuint * 1)(self.id))
        self._deleted = True