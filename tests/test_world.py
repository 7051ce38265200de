import pytest

from tankduel.window import KEY_A, KEY_ESCAPE, PRESS, InputState
from tankduel.world import World


def make_clock(readings):
    it = iter(readings)
    return lambda: next(it)


class Recording(World):
    def __init__(self, window=None, clock=None, stop_after=None):
        self.calls = []
        self.deltas = []
        self.stop_after = stop_after
        super().__init__(window, clock)

    def frame_start(self):
        self.calls.append("start")

    def update(self, delta_time):
        self.calls.append("update")
        self.deltas.append(delta_time)
        if self.stop_after is not None and len(self.deltas) >= self.stop_after:
            self.exit()

    def frame_end(self):
        self.calls.append("end")

    def on_input_update(self, delta_time, mods):
        self.calls.append("input")

    def on_key_press(self, key, mods):
        self.calls.append(("key", key))


def test_frame_delta_from_clock():
    readings = [1.0, 3.0]
    world = Recording(InputState(), make_clock(readings))
    world.loop_update()
    assert world.last_frame_time() == pytest.approx(readings[0])
    world.loop_update()
    assert world.last_frame_time() == pytest.approx(readings[1] - readings[0])
    assert world.deltas == pytest.approx([readings[0], readings[1] - readings[0]])


def test_loop_order():
    world = Recording(InputState(), make_clock([0.5]))
    world.loop_update()
    assert world.calls == ["input", "start", "update", "end"]


def test_run_until_exit():
    state = InputState()
    world = Recording(state, make_clock([float(i) for i in range(10)]), stop_after=3)
    world.run()
    assert len(world.deltas) == 3
    assert state.should_close
    assert world.should_close


def test_run_without_window_returns():
    world = World(None, make_clock([]))
    World.run(world)
    assert world.last_frame_time() == 0.0
    recording = Recording(None, make_clock([]))
    World.run(recording)
    assert recording.calls == []


def test_escape_closes_window():
    state = InputState()
    world = Recording(state, make_clock([0.1, 0.2]))
    state.key_callback(KEY_ESCAPE, 0, PRESS, 0)
    world.loop_update()
    assert state.should_close
    assert ("key", KEY_ESCAPE) in world.calls


def test_other_keys_do_not_close():
    state = InputState()
    world = Recording(state, make_clock([0.1]))
    state.key_callback(KEY_A, 0, PRESS, 0)
    world.loop_update()
    assert not state.should_close
    assert ("key", KEY_A) in world.calls


def test_pause_toggles():
    world = World(InputState(), make_clock([]))
    world.pause()
    assert world.paused is True
    world.pause()
    assert world.paused is False


def test_exit_without_window():
    world = World(None, make_clock([]))
    world.exit()
    assert world.should_close is True


def test_default_clock_is_monotonic():
    world = World(InputState())
    world.loop_update()
    first = world.elapsed_time
    world.loop_update()
    assert world.elapsed_time >= first
    assert world.last_frame_time() >= 0.0