"""The game window, its frame loop and the command that starts it."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from minycraft.camera import SceneCamera
from minycraft.debug import enable_debug_output
from minycraft.events import CursorMode, InputState
from minycraft.log import get_engine_logger
from minycraft.renderer import DEFAULT_ATLAS_PATH, DEFAULT_SHADER_DIR, ChunkRenderer
from minycraft.timing import FrameClock
from minycraft.world import World

DEFAULT_TITLE = "Minycraft"
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
DEFAULT_FPS = 60.0
BACKGROUND = (0.65, 0.9, 1.0, 1.0)


def frame_sleep(delta_time: float, fps: float = DEFAULT_FPS) -> float:
    """Seconds to sleep after a frame that took ``delta_time`` when running faster than ``fps``."""
    if fps <= 0:
        raise ValueError(f"fps must be positive: {fps}")
    rate = math.inf if delta_time == 0 else 1 / delta_time
    if rate <= fps:
        return 0.0
    micros = int(1_000_000 / fps - 1_000_000 * delta_time)
    return (micros // 2) / 1_000_000


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="minycraft", description="Walk over generated terrain.")
    parser.add_argument("--title", default=DEFAULT_TITLE, help="window title")
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WIDTH, help="window width")
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_HEIGHT, help="window height")
    parser.add_argument("--fps", type=_positive_float, default=DEFAULT_FPS, help="frame rate cap")
    parser.add_argument(
        "--shader-dir", type=Path, default=DEFAULT_SHADER_DIR, help="directory holding the shaders"
    )
    parser.add_argument("--atlas", type=Path, default=DEFAULT_ATLAS_PATH, help="texture atlas image")
    parser.add_argument("--quiet", action="store_true", help="do not print the frame rate")
    return parser.parse_args(argv)


class GameWindow:
    """A window showing the world through a camera driven by keyboard and mouse."""

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        shader_dir: str | PathLike[str] = DEFAULT_SHADER_DIR,
        atlas_path: str | PathLike[str] = DEFAULT_ATLAS_PATH,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive: {width}x{height}")
        self.title = title
        self.width = width
        self.height = height
        self.inputs = InputState(cursor_listener=self._apply_cursor_mode)
        self.camera = SceneCamera()
        self.window = self._create_window()
        try:
            self._configure_gl()
            self.world = World()
            self.renderers: list[ChunkRenderer] = []
            for chunk in self.world.chunks:
                renderer = ChunkRenderer(chunk.chunk_x, chunk.chunk_z, shader_dir, atlas_path)
                renderer.update(chunk.vertices, chunk.indices, chunk.tex_coords)
                self.renderers.append(renderer)
        except Exception:
            self.window.close()
            raise

    def _create_window(self):
        try:
            import pyglet

            window = pyglet.window.Window(
                width=self.width, height=self.height, caption=self.title, vsync=False
            )
        except Exception as exc:
            get_engine_logger().error("Failed to create the window")
            raise RuntimeError("Failed to create the window") from exc
        window.push_handlers(
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_mouse_press=self._on_mouse_press,
            on_mouse_release=self._on_mouse_release,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
        )
        return window

    def _configure_gl(self) -> None:
        from pyglet import gl

        try:
            enable_debug_output()
        except Exception as exc:
            get_engine_logger().warning("OpenGL debug output unavailable: %s", exc)
        gl.glEnable(gl.GL_DEPTH_TEST)
        fb_width, fb_height = self.window.get_framebuffer_size()
        gl.glViewport(0, 0, fb_width, fb_height)

    def _apply_cursor_mode(self, mode: CursorMode) -> None:
        self.window.set_exclusive_mouse(mode is CursorMode.DISABLED)
        self.window.set_mouse_visible(mode is CursorMode.NORMAL)

    def _on_key_press(self, symbol, modifiers):
        self.inputs.on_key_press(symbol)

    def _on_key_release(self, symbol, modifiers):
        self.inputs.on_key_release(symbol)

    def _on_mouse_press(self, x, y, button, modifiers):
        self.inputs.on_mouse_press(button)

    def _on_mouse_release(self, x, y, button, modifiers):
        self.inputs.on_mouse_release(button)

    def _on_mouse_motion(self, x, y, dx, dy):
        # Screen y grows downwards for the camera, so the vertical step is flipped.
        mx, my = self.inputs.mouse_pos
        self.inputs.on_mouse_motion(mx + dx, my - dy)

    def _on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self._on_mouse_motion(x, y, dx, dy)

    @property
    def closed(self) -> bool:
        return bool(self.window.has_exit)

    def on_draw(self) -> None:
        """Clear the frame and draw every chunk."""
        from pyglet import gl

        gl.glClearColor(*BACKGROUND)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        view = self.camera.view_matrix()
        aspect = self.width / self.height
        for renderer in self.renderers:
            renderer.render(view, aspect)

    def update(self, delta_time: float) -> None:
        """Advance the camera by one frame."""
        self.camera.move(self.inputs, delta_time)

    def _close(self) -> None:
        self.window.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run the frame loop until it is closed."""
    args = parse_args(argv)
    try:
        game = GameWindow(args.title, args.width, args.height, args.shader_dir, args.atlas)
    except RuntimeError as exc:
        get_engine_logger().error("%s", exc)
        return 1

    clock = FrameClock()
    clock.tick(time.perf_counter())
    try:
        while not game.closed:
            game.window.dispatch_events()
            if game.closed:
                break
            delta = clock.tick(time.perf_counter())
            pause = frame_sleep(delta, args.fps)
            if pause > 0:
                time.sleep(pause)
            if not args.quiet:
                print(math.inf if delta == 0 else 1 / delta)
            game.update(delta)
            game.on_draw()
            game.window.flip()
    finally:
        game._close()
    return 0