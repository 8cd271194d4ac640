"""
Playback Controller
===================
Advances, pauses and scrubs the animation index over the precomputed series.

States are Running and Paused. While running, every tick moves the index one
month forward and the index is pushed to the position control; the last month
stops the animation instead of wrapping. While paused, the position control
is the source of truth and the index is read back from it.
"""
from __future__ import annotations

import logging
from typing import Protocol

from climatespiral.model.state import EngineState

logger = logging.getLogger(__name__)


class PositionControl(Protocol):
    """A scrub-able position input bound to [0, datalen - 1]."""
    def value(self) -> int: ...
    def setValue(self, value: int) -> None: ...


class AnimationController:
    def __init__(self, datalen: int) -> None:
        self.datalen = max(datalen, 0)
        # An empty series never enters Running
        self.state = EngineState(index=0, running=self.datalen > 0)

    @property
    def index(self) -> int:
        return self.state.index

    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def last_index(self) -> int:
        return max(self.datalen - 1, 0)

    def clamp(self, index: int) -> int:
        return min(max(int(index), 0), self.last_index)

    def tick(self) -> bool:
        """
        Advance one frame.

        Returns:
            True if the index moved.
        """
        if not self.state.running:
            return False
        if self.state.index < self.datalen - 1:
            self.state.index += 1
            return True
        self.state.running = False
        logger.info(f"Animation finished at index {self.state.index}.")
        return False

    def toggle(self) -> None:
        """Flip Running and Paused, keeping the index."""
        if self.datalen == 0:
            return
        self.state.running = not self.state.running
        logger.debug(f"Playback {'resumed' if self.state.running else 'paused'} at index {self.state.index}.")

    def pause(self) -> None:
        self.state.running = False

    def scrub(self, index: int) -> None:
        """Pause and jump to `index`, clamped to the series."""
        self.state.running = False
        self.state.index = self.clamp(index)

    def sync(self, control: PositionControl) -> None:
        """
        Mirror the index to the control while running, read it back while paused.
        """
        if self.state.running:
            if control.value() != self.state.index:
                control.setValue(self.state.index)
        else:
            self.state.index = self.clamp(control.value())

    def visible_segments(self) -> range:
        """Segment indices to draw; segment i joins point i - 1 to point i."""
        if self.datalen < 2:
            return range(0)
        return range(1, self.state.index + 1)
