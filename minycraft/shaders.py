"""Reading, compiling and linking GLSL shaders."""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from minycraft.log import get_engine_logger

GL_FRAGMENT_SHADER = 0x8B30
GL_VERTEX_SHADER = 0x8B31

_STAGE_NAMES = {GL_VERTEX_SHADER: "vertex", GL_FRAGMENT_SHADER: "fragment"}


class ShaderError(RuntimeError):
    """A shader could not be read, compiled or linked."""


def read_shader_source(path: str | PathLike[str]) -> str:
    """Return the text of a shader file, every line ending in a newline plus a final one."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ShaderError(f"Failed to load shader: {path}") from exc
    return text + "\n"


class Shader:
    """A compiled shader stage read from a file."""

    def __init__(self, shader_type: int, path: str | PathLike[str]):
        source = read_shader_source(path)
        self.shader_type = shader_type
        self.path = Path(path)
        stage = _STAGE_NAMES.get(shader_type)
        if stage is None:
            raise ShaderError(f"unsupported shader type: 0x{shader_type:04X}")

        from pyglet.graphics import shader as pyglet_shader

        try:
            self._shader = pyglet_shader.Shader(source, stage)
        except pyglet_shader.ShaderException as exc:
            raise ShaderError(f"Failed to compile shader {self.path}: {exc}") from exc
        self.id = self._shader.id


class ShaderProgram:
    """A linked program made of a vertex and a fragment shader."""

    def __init__(self, vertex_shader: Shader, fragment_shader: Shader):
        from pyglet.graphics import shader as pyglet_shader

        try:
            self._program = pyglet_shader.ShaderProgram(
                vertex_shader._shader, fragment_shader._shader
            )
        except pyglet_shader.ShaderException as exc:
            get_engine_logger().error("Failed to create the program")
            raise ShaderError(f"Failed to create the program: {exc}") from exc
        self.id = self._program.id

    def use(self) -> None:
        self._program.use()

    def set_uniform(self, name: str, value: float | Sequence[float]) -> None:
        """Set a uniform of the program; matrices are given column-major."""
        self._program[name] = value