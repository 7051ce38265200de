"""The frame loop that drives a scene."""

from __future__ import annotations

import time
from collections import deque
from typing import Callable

from tankduel.window import KEY_ESCAPE, InputController, InputState


def _elapsed_clock() -> Callable[[], float]:
    start = time.perf_counter()
    return lambda: time.perf_counter() - start


class _SceneInput(InputController):
    """Closes the scene when Escape is pressed."""

    def __init__(self, window: InputState | None, on_exit: Callable[[], None]) -> None:
        self._on_exit = on_exit
        super().__init__(window)

    def on_key_press(self, key: int, mods: int) -> None:
        if key == KEY_ESCAPE:
            self._on_exit()


class World(InputController):
    """A scene updated once per frame until its window closes.

    The clock returns seconds elapsed since start; the frame delta is the
    difference between two readings.
    """

    def __init__(
        self,
        window: InputState | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        super().__init__(window)
        self.previous_time = 0.0
        self.elapsed_time = 0.0
        self.delta_time = 0.0
        self.paused = False
        self.should_close = False
        self.frame_started_at = 0.0
        self.frames_completed = 0
        self.frames_presented = 0
        self._pending_events: deque[Callable[[], None]] = deque()
        self._clock = clock if clock is not None else _elapsed_clock()
        self._scene_input = _SceneInput(window, self.exit)

    def init(self) -> None:
        """Prepare the scene before the first frame."""

    def frame_start(self) -> None:
        """Called at the start of every frame; records when it began."""
        self.frame_started_at = self.elapsed_time

    def update(self, delta_time: float) -> None:
        """Advance the scene by delta_time seconds."""

    def frame_end(self) -> None:
        """Called at the end of every frame; counts finished frames."""
        self.frames_completed += 1

    def post_event(self, event: Callable[[], None]) -> None:
        """Queue a platform event to be fed in at the next frame."""
        self._pending_events.append(event)

    def _poll_events(self) -> None:
        """Feed pending platform events into the window state."""
        while self._pending_events:
            self._pending_events.popleft()()

    def _swap_buffers(self) -> None:
        """Present the finished frame."""
        self.frames_presented += 1

    def run(self) -> None:
        """Run frames until the window is asked to close."""
        if self.window is None:
            return
        while not self.window.should_close:
            self.loop_update()

    def pause(self) -> None:
        """Toggle the paused flag."""
        self.paused = not self.paused

    def exit(self) -> None:
        """Ask the scene and its window to close."""
        self.should_close = True
        if self.window is not None:
            self.window.close()

    def last_frame_time(self) -> float:
        """Duration of the last frame in seconds."""
        return self.delta_time

    def _compute_frame_delta_time(self) -> None:
        self.elapsed_time = self._clock()
        self.delta_time = self.elapsed_time - self.previous_time
        self.previous_time = self.elapsed_time

    def loop_update(self) -> None:
        """Run one frame: events, input dispatch, update, presentation."""
        self._poll_events()
        self._compute_frame_delta_time()
        if self.window is not None:
            self.window.update_observers(self.delta_time)
        self.frame_start()
        self.update(float(self.delta_time))
        self.frame_end()
        self._swap_buffers()