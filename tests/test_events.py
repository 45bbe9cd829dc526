import pytest

from minycraft.events import KEY_W, MOUSE_LEFT, MOUSE_RIGHT, CursorMode, InputState


def test_bound_functions_run_in_order_on_press():
    inputs = InputState()
    calls = []
    inputs.bind_key(KEY_W, lambda: calls.append("first"))
    inputs.bind_key(KEY_W, lambda: calls.append("second"))
    inputs.on_key_press(KEY_W)
    assert calls == ["first", "second"]


def test_release_does_not_call_bindings():
    inputs = InputState()
    calls = []
    inputs.bind_key(KEY_W, lambda: calls.append(1))
    inputs.on_key_release(KEY_W)
    assert calls == []


def test_other_key_does_not_trigger():
    inputs = InputState()
    calls = []
    inputs.bind_key(KEY_W, lambda: calls.append(1))
    inputs.on_key_press(KEY_W + 1)
    assert calls == []
    assert inputs.is_key_down(KEY_W + 1)


def test_key_down_state():
    inputs = InputState()
    assert not inputs.is_key_down(KEY_W)
    inputs.on_key_press(KEY_W)
    assert inputs.is_key_down(KEY_W)
    inputs.on_key_release(KEY_W)
    assert not inputs.is_key_down(KEY_W)


def test_button_bindings_and_state():
    inputs = InputState()
    calls = []
    inputs.bind_button(MOUSE_LEFT, lambda: calls.append("left"))
    inputs.on_mouse_press(MOUSE_RIGHT)
    assert calls == []
    assert inputs.is_button_down(MOUSE_RIGHT)
    inputs.on_mouse_press(MOUSE_LEFT)
    assert calls == ["left"]
    inputs.on_mouse_release(MOUSE_RIGHT)
    assert not inputs.is_button_down(MOUSE_RIGHT)


def test_mouse_motion_updates_position():
    inputs = InputState()
    assert inputs.mouse_pos == (0.0, 0.0)
    inputs.on_mouse_motion(12, 34.5)
    assert inputs.mouse_pos == (12.0, 34.5)


def test_cursor_listener_called_on_change_only():
    seen = []
    inputs = InputState(cursor_listener=seen.append)
    inputs.set_cursor_mode(CursorMode.NORMAL)
    assert seen == []
    inputs.set_cursor_mode(CursorMode.DISABLED)
    inputs.set_cursor_mode(CursorMode.DISABLED)
    assert seen == [CursorMode.DISABLED]
    assert inputs.cursor_mode is CursorMode.DISABLED


def test_invalid_cursor_mode_raises():
    inputs = InputState()
    with pytest.raises(ValueError):
        inputs.set_cursor_mode("sideways")