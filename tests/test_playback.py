"""Tests for the animation controller."""

from climatespiral.controller.playback import AnimationController


class FakeSlider:
    """Stands in for the QSlider position control."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self.writes = 0

    def value(self) -> int:
        return self._value

    def setValue(self, value: int) -> None:
        self._value = value
        self.writes += 1


def test_initial_state():
    controller = AnimationController(12)
    assert controller.running
    assert controller.index == 0


def test_run_to_completion():
    controller = AnimationController(12)
    visited = [controller.index]
    while controller.running:
        if controller.tick():
            visited.append(controller.index)
    assert visited == list(range(12))
    assert not controller.running
    assert controller.index == 11


def test_no_wrap_after_end():
    controller = AnimationController(3)
    for _ in range(10):
        controller.tick()
    assert controller.index == 2
    assert not controller.running


def test_toggle_keeps_index():
    controller = AnimationController(12)
    controller.tick()
    controller.tick()
    controller.toggle()
    assert not controller.running
    assert controller.index == 2
    assert not controller.tick()
    assert controller.index == 2
    controller.toggle()
    assert controller.running
    assert controller.index == 2


def test_scrub_clamps_and_pauses():
    controller = AnimationController(12)
    controller.scrub(999)
    assert controller.index == 11
    assert not controller.running
    controller.scrub(-5)
    assert controller.index == 0


def test_sync_pushes_while_running():
    controller = AnimationController(12)
    slider = FakeSlider()
    controller.tick()
    controller.sync(slider)
    assert slider.value() == 1
    controller.sync(slider)
    assert slider.writes == 1


def test_sync_reads_while_paused():
    controller = AnimationController(12)
    controller.pause()
    slider = FakeSlider(7)
    controller.sync(slider)
    assert controller.index == 7
    slider.setValue(50)
    controller.sync(slider)
    assert controller.index == 11


def test_empty_series_never_runs():
    controller = AnimationController(0)
    assert not controller.running
    controller.toggle()
    assert not controller.running
    assert not controller.tick()
    controller.scrub(4)
    assert controller.index == 0
    assert list(controller.visible_segments()) == []


def test_single_point_pauses_on_first_tick():
    controller = AnimationController(1)
    assert controller.running
    assert not controller.tick()
    assert not controller.running
    assert controller.index == 0
    assert list(controller.visible_segments()) == []


def test_visible_segments():
    controller = AnimationController(12)
    assert list(controller.visible_segments()) == []
    controller.tick()
    controller.tick()
    assert list(controller.visible_segments()) == [1, 2]
