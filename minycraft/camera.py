"""Free-flying scene camera and the matrices used to project the world."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from minycraft.events import KEY_A, KEY_D, KEY_S, KEY_W, MOUSE_RIGHT, CursorMode, InputState


def _normalize(v: np.ndarray) -> np.ndarray:
    norm = float(np.linalg.norm(v))
    return v / norm if norm else v


def look_at(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``target``."""
    eye = np.asarray(eye, dtype=float)
    target = np.asarray(target, dtype=float)
    up = np.asarray(up, dtype=float)
    f = _normalize(target - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -(s @ eye)
    m[1, 3] = -(u @ eye)
    m[2, 3] = f @ eye
    return m


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection to clip space with depth in [-1, 1].

    ``fovy`` is in radians.
    """
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2)
    if tan_half == 0:
        raise ValueError("field of view must be non-zero")
    m = np.zeros((4, 4))
    m[0, 0] = 1 / (aspect * tan_half)
    m[1, 1] = 1 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def translation(x: float, y: float, z: float) -> np.ndarray:
    """Matrix that moves points by (x, y, z)."""
    m = np.identity(4)
    m[:3, 3] = (x, y, z)
    return m


@dataclass
class SceneCamera:
    """Camera steered by the mouse while the right button is held, moved with WASD."""

    yaw: float = 0.0
    pitch: float = 0.0
    position: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, -3.0]))
    direction: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, -1.0]))
    up: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    last_mouse_pos: tuple[float, float] = (640.0, 360.0)
    speed: float = 20.0
    sensitivity: float = 100.0

    def move(self, inputs: InputState, delta_time: float) -> None:
        """Update orientation and position from the current input state."""
        mouse = inputs.mouse_pos
        if not inputs.is_button_down(MOUSE_RIGHT):
            inputs.set_cursor_mode(CursorMode.NORMAL)
            self.last_mouse_pos = mouse
            return
        inputs.set_cursor_mode(CursorMode.DISABLED)

        dx = mouse[0] - self.last_mouse_pos[0]
        dy = mouse[1] - self.last_mouse_pos[1]
        self.yaw += dx * self.sensitivity * delta_time
        self.pitch -= dy * self.sensitivity * delta_time
        if self.pitch > 90.0:
            self.pitch = 90.0
        if self.pitch < -90.0:
            self.pitch = -89.0

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.direction = _normalize(np.array([
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ]))
        self.last_mouse_pos = mouse

        step = self.speed * delta_time
        right = _normalize(np.cross(self.direction, self.up))
        if inputs.is_key_down(KEY_W):
            self.position = self.position + step * self.direction
        if inputs.is_key_down(KEY_S):
            self.position = self.position - step * self.direction
        if inputs.is_key_down(KEY_A):
            self.position = self.position - step * right
        if inputs.is_key_down(KEY_D):
            self.position = self.position + step * right

    def view_matrix(self) -> np.ndarray:
        return look_at(self.position, self.position + self.direction, self.up)