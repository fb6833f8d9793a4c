from asaogea.input_manager import (
    CursorMoved,
    InputManager,
    KeyboardInput,
    LineDelta,
    MouseButton,
    MouseInput,
    MouseWheel,
    PixelDelta,
)


def test_key_press_and_release():
    manager = InputManager()
    manager.consume_event(KeyboardInput("a", True))
    assert manager.is_key_pressed("a") is True
    manager.consume_event(KeyboardInput("a", False))
    assert manager.is_key_pressed("a") is False


def test_unknown_key_not_pressed():
    assert InputManager().is_key_pressed("z") is False


def test_mouse_button_state():
    manager = InputManager()
    manager.consume_event(MouseInput(MouseButton.LEFT, True))
    assert manager.is_mouse_button_pressed(MouseButton.LEFT) is True
    assert manager.is_mouse_button_pressed(MouseButton.RIGHT) is False
    manager.consume_event(MouseInput(MouseButton.LEFT, False))
    assert manager.is_mouse_button_pressed(MouseButton.LEFT) is False


def test_cursor_position():
    manager = InputManager()
    assert manager.mouse_position() == (0.0, 0.0)
    manager.consume_event(CursorMoved(10.5, 20.25))
    assert manager.mouse_position() == (10.5, 20.25)


def test_line_delta_is_scaled():
    manager = InputManager()
    manager.consume_event(MouseWheel(LineDelta(1.0, -2.0)))
    assert manager.scroll_delta() == (12.0, -24.0)


def test_pixel_delta_passes_through():
    manager = InputManager()
    manager.consume_event(MouseWheel(PixelDelta(3.5, 7.0)))
    assert manager.scroll_delta() == (3.5, 7.0)


def test_begin_frame_resets_scroll_only():
    manager = InputManager()
    manager.consume_event(MouseWheel(PixelDelta(3.0, 4.0)))
    manager.consume_event(CursorMoved(1.0, 2.0))
    manager.begin_frame()
    assert manager.scroll_delta() == (0.0, 0.0)
    assert manager.mouse_position() == (1.0, 2.0)


def test_other_events_are_ignored():
    manager = InputManager()
    manager.consume_event("RedrawRequested")
    manager.consume_event(object())
    assert manager.mouse_position() == (0.0, 0.0)
    assert manager.scroll_delta() == (0.0, 0.0)