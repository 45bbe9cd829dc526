"""Reporting OpenGL debug messages and error codes."""

from __future__ import annotations

import enum
from itertools import count, takewhile

from minycraft.log import TRACE, get_engine_logger

SEPARATOR = "---------------"

# Driver notifications that are too noisy to report.
IGNORED_IDS = frozenset({131169, 131185, 131218, 131204})

SOURCE_NAMES = {
    0x8246: "API",
    0x8247: "Window System",
    0x8248: "Shader Compiler",
    0x8249: "Third Party",
    0x824A: "Application",
    0x824B: "Other",
}

TYPE_NAMES = {
    0x824C: "Error",
    0x824D: "Deprecated Behaviour",
    0x824E: "Undefined Behaviour",
    0x824F: "Portability",
    0x8250: "Performance",
    0x8268: "Marker",
    0x8269: "Push Group",
    0x826A: "Pop Group",
    0x8251: "Other",
}

SEVERITY_NAMES = {
    0x9146: "high",
    0x9147: "medium",
    0x9148: "low",
    0x826B: "notification",
}


class GLError(enum.IntEnum):
    """Codes returned by glGetError."""

    NONE = 0
    INVALID_ENUM = 0x0500
    INVALID_VALUE = 0x0501
    INVALID_OPERATION = 0x0502
    OUT_OF_MEMORY = 0x0505
    INVALID_FRAMEBUFFER_OPERATION = 0x0506


def _labelled(label: str, names: dict[int, str], value: int) -> str:
    name = names.get(value)
    return f"{label}: {name}" if name is not None else ""


def format_debug_message(
    source: int, message_type: int, message_id: int, severity: int, message: str
) -> str | None:
    """Return the report for one debug message, or None if its id is ignored."""
    if message_id in IGNORED_IDS:
        return None
    lines = [
        SEPARATOR,
        message,
        _labelled("Source", SOURCE_NAMES, source),
        _labelled("Type", TYPE_NAMES, message_type),
        _labelled("Severity", SEVERITY_NAMES, severity),
        "",
    ]
    return "\n".join(lines)


def check_gl_error(code: int) -> GLError:
    """Return GLError.NONE for a zero code; raise RuntimeError for any error code."""
    error = GLError(code)
    if error is not GLError.NONE:
        raise RuntimeError(f"OpenGL error {error.name} (0x{error.value:04X})")
    return error


def _message_bytes(message, length: int) -> bytes:
    if length >= 0:
        return bytes(message[:length])
    chars = takewhile(lambda ch: ch != b"\x00", (message[i] for i in count()))
    return b"".join(chars)


_callbacks: list[object] = []


def enable_debug_output() -> None:
    """Turn on OpenGL debug output and print every message that is not ignored."""
    from pyglet import gl

    def callback(source, message_type, message_id, severity, length, message, user_param):
        text = _message_bytes(message, length).decode("utf-8", errors="replace")
        report = format_debug_message(source, message_type, message_id, severity, text)
        if report is not None:
            get_engine_logger().log(TRACE, text)
            print(report)

    proc = gl.GLDEBUGPROC(callback)
    _callbacks.append(proc)  # the driver holds a raw pointer to it
    gl.glEnable(gl.GL_DEBUG_OUTPUT)
    gl.glDebugMessageCallback(proc, None)