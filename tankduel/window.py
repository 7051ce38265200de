"""Window state, input event buffering and dispatch to input controllers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from tankduel.mathutils import clear_bit, is_bit_set, set_bit

# Key codes
KEY_SPACE = 32
KEY_A = 65
KEY_B = 66
KEY_C = 67
KEY_D = 68
KEY_E = 69
KEY_M = 77
KEY_O = 79
KEY_Q = 81
KEY_S = 83
KEY_W = 87
KEY_ESCAPE = 256
KEY_ENTER = 257
KEY_RIGHT = 262
KEY_LEFT = 263
KEY_DOWN = 264
KEY_UP = 265
KEY_F3 = 292
KEY_F5 = 294

# Modifier bits
MOD_SHIFT = 0x1
MOD_CONTROL = 0x2
MOD_ALT = 0x4
MOD_SUPER = 0x8

# Mouse buttons
MOUSE_BUTTON_LEFT = 0
MOUSE_BUTTON_RIGHT = 1
MOUSE_BUTTON_MIDDLE = 2

# Key and button actions
RELEASE = 0
PRESS = 1
REPEAT = 2


@dataclass
class WindowProperties:
    """Settings and live geometry of the game window."""

    self_dir: str = ""
    name: str = "WindowName"
    resolution: tuple[int, int] = (1280, 720)
    scale_factor: float = 1.0
    position: tuple[int, int] = (0, 0)
    cursor_pos: tuple[int, int] = (640, 360)
    aspect_ratio: float = 1280.0 / 720.0
    resizable: bool = True
    visible: bool = True
    full_screen: bool = False
    centered: bool = True
    hide_on_close: bool = False
    v_sync: bool = True


class InputController:
    """Receives input events from an InputState it is subscribed to.

    Subclasses override the on_* callbacks they care about; the defaults
    only remember the latest event they were given in ``last_unhandled``.
    """

    def __init__(self, window: InputState | None = None) -> None:
        self.window = window
        self.last_unhandled: tuple[str, tuple[Any, ...]] | None = None
        if window is not None:
            window.subscribe(self)
        self._is_attached = True

    def is_active(self) -> bool:
        """Tell whether the controller receives events."""
        return self._is_attached

    def set_active(self, value: bool) -> None:
        """Attach the controller to its window, or detach it."""
        self._is_attached = value
        if self.window is None:
            return
        if value:
            self.window.subscribe(self)
        else:
            self.window.unsubscribe(self)

    def _unhandled(self, name: str, *args: Any) -> None:
        self.last_unhandled = (name, args)

    def on_input_update(self, delta_time: float, mods: int) -> None:
        """Called every frame with the frame time and active modifiers."""
        self._unhandled("input_update", delta_time, mods)

    def on_key_press(self, key: int, mods: int) -> None:
        """Called when a key goes down."""
        self._unhandled("key_press", key, mods)

    def on_key_release(self, key: int, mods: int) -> None:
        """Called when a key goes up."""
        self._unhandled("key_release", key, mods)

    def on_mouse_move(self, mouse_x: int, mouse_y: int, delta_x: int, delta_y: int) -> None:
        """Called when the pointer moved since the last frame."""
        self._unhandled("mouse_move", mouse_x, mouse_y, delta_x, delta_y)

    def on_mouse_btn_press(self, mouse_x: int, mouse_y: int, button: int, mods: int) -> None:
        """Called with a bit mask of the buttons pressed this frame."""
        self._unhandled("mouse_btn_press", mouse_x, mouse_y, button, mods)

    def on_mouse_btn_release(self, mouse_x: int, mouse_y: int, button: int, mods: int) -> None:
        """Called with a bit mask of the buttons released this frame."""
        self._unhandled("mouse_btn_release", mouse_x, mouse_y, button, mods)

    def on_mouse_scroll(self, mouse_x: int, mouse_y: int, offset_x: int, offset_y: int) -> None:
        """Called when the wheel scrolled since the last frame."""
        self._unhandled("mouse_scroll", mouse_x, mouse_y, offset_x, offset_y)

    def on_window_resize(self, width: int, height: int) -> None:
        """Called when the window was resized since the last frame."""
        self._unhandled("window_resize", width, height)


class InputState:
    """Buffers raw window events and hands them to controllers once per frame."""

    def __init__(self, props: WindowProperties | None = None) -> None:
        self.props = replace(props) if props is not None else WindowProperties()
        width, height = self.props.resolution
        self.props.aspect_ratio = width / height
        self.should_close = False
        self.frame_id = 0

        self._observers: list[InputController] = []
        self._key_states: dict[int, bool] = {}
        self._key_events: list[int] = []
        self._key_mods = 0

        self._mouse_button_action = 0
        self._mouse_button_states = 0

        self._mouse_move_event = False
        self._mouse_delta = (0, 0)

        self._scroll_event = False
        self._scroll_delta = (0, 0)

        self._resize_event = False

    # Subscription

    def subscribe(self, controller: InputController) -> None:
        """Start sending events to controller."""
        if controller not in self._observers:
            self._observers.append(controller)

    def unsubscribe(self, controller: InputController) -> None:
        """Stop sending events to controller."""
        self._observers = [obs for obs in self._observers if obs is not controller]

    # Raw event intake

    def key_callback(self, key: int, scan_code: int, action: int, mods: int) -> None:
        """Record a key event; repeats of the current state are ignored."""
        self._key_mods = mods
        pressed = bool(action)
        if self._key_states.get(key, False) == pressed:
            return
        self._key_states[key] = pressed
        self._key_events.append(key)

    def mouse_button_callback(self, button: int, action: int, mods: int) -> None:
        """Record a mouse button press or release."""
        self._key_mods = mods
        self._mouse_button_action = set_bit(self._mouse_button_action, button)
        if action:
            self._mouse_button_states = set_bit(self._mouse_button_states, button)
        else:
            self._mouse_button_states = clear_bit(self._mouse_button_states, button)

    def mouse_move(self, pos_x: int, pos_y: int) -> None:
        """Record a pointer move, accumulating deltas within a frame."""
        cx, cy = self.props.cursor_pos
        dx, dy = pos_x - cx, pos_y - cy
        if self._mouse_move_event:
            ox, oy = self._mouse_delta
            self._mouse_delta = (ox + dx, oy + dy)
        else:
            self._mouse_move_event = True
            self._mouse_delta = (dx, dy)
        self.props.cursor_pos = (pos_x, pos_y)

    def mouse_scroll(self, offset_x: float, offset_y: float) -> None:
        """Record a scroll; offsets are truncated to whole steps."""
        self._scroll_event = True
        self._scroll_delta = (int(offset_x), int(offset_y))

    def set_size(self, width: int, height: int) -> None:
        """Resize the window and flag a resize event."""
        self.props.resolution = (width, height)
        self.props.aspect_ratio = width / height
        self._resize_event = True

    def close(self) -> None:
        """Hide the window if it hides on close, otherwise ask it to close."""
        if self.props.hide_on_close:
            self.props.visible = False
        else:
            self.should_close = True

    # Queries

    def key_hold(self, key_code: int) -> bool:
        """Tell whether a key is held down."""
        return self._key_states.get(key_code, False)

    def mouse_hold(self, button: int) -> bool:
        """Tell whether a mouse button is held down."""
        return is_bit_set(self._mouse_button_states, button)

    def special_key_state(self) -> int:
        """Modifier bits of the latest key or mouse event."""
        return self._key_mods

    def cursor_position(self) -> tuple[int, int]:
        """Current pointer position in window pixels."""
        return self.props.cursor_pos

    # Dispatch

    def update_observers(self, delta_time: float) -> None:
        """Deliver the buffered events of this frame to every controller."""
        self.frame_id += 1
        observers = list(self._observers)
        mods = self._key_mods

        if self._resize_event:
            self._resize_event = False
            width, height = self.props.resolution
            for obs in observers:
                obs.on_window_resize(width, height)

        cx, cy = self.props.cursor_pos

        if self._mouse_move_event:
            self._mouse_move_event = False
            dx, dy = self._mouse_delta
            for obs in observers:
                obs.on_mouse_move(cx, cy, dx, dy)

        press_event = self._mouse_button_action & self._mouse_button_states
        if press_event:
            for obs in observers:
                obs.on_mouse_btn_press(cx, cy, press_event, mods)

        release_event = self._mouse_button_action & ~self._mouse_button_states
        if release_event:
            for obs in observers:
                obs.on_mouse_btn_release(cx, cy, release_event, mods)

        if self._scroll_event:
            self._scroll_event = False
            sx, sy = self._scroll_delta
            for obs in observers:
                obs.on_mouse_scroll(cx, cy, sx, sy)

        events, self._key_events = self._key_events, []
        for key in events:
            for obs in observers:
                if self._key_states.get(key, False):
                    obs.on_key_press(key, mods)
                else:
                    obs.on_key_release(key, mods)

        for obs in observers:
            obs.on_input_update(float(delta_time), mods)

        self._mouse_button_action = 0