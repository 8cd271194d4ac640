"""
Engine State (Data Model)
=========================
This module defines the mutable state of the running visualization.

Why is this file needed?
------------------------
1. State Management: playback position and display mode live in one place
   instead of in widget callbacks.
2. Decoupling: Views read from these objects; the controller writes to them.

Classes:
    DisplayOptions: Grid/axes/ticks toggles and the active mapping.
    EngineState: Playback index and running flag.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from climatespiral.model.mapping import MappingKind

logger = logging.getLogger(__name__)


class DisplayFlag(StrEnum):
    GRID = "grid"
    AXES = "axes"
    TICKS = "ticks"


# dependent flag -> flag it requires
FLAG_REQUIRES: dict[DisplayFlag, DisplayFlag] = {
    DisplayFlag.TICKS: DisplayFlag.AXES,
}


@dataclass
class DisplayOptions:
    """
    Mode controls of the spiral.

    Dependencies between flags are resolved here from FLAG_REQUIRES, so the
    widgets only mirror the result.
    """
    flags: dict[DisplayFlag, bool] = field(default_factory=lambda: {
        DisplayFlag.GRID: True,
        DisplayFlag.AXES: False,
        DisplayFlag.TICKS: False,
    })
    mapping: MappingKind = MappingKind.LINEAR

    def is_on(self, flag: DisplayFlag) -> bool:
        return self.flags[flag]

    @property
    def show_grid(self) -> bool:
        return self.is_on(DisplayFlag.GRID)

    @property
    def show_axes(self) -> bool:
        return self.is_on(DisplayFlag.AXES)

    @property
    def show_ticks(self) -> bool:
        return self.is_on(DisplayFlag.TICKS)

    def set_flag(self, flag: DisplayFlag | str, on: bool) -> None:
        """
        Switch a flag and propagate the dependency rules.

        Switching a flag on also switches on what it requires; switching it off
        also switches off what depends on it.
        """
        flag = DisplayFlag(flag)
        self.flags[flag] = on
        if on:
            required = FLAG_REQUIRES.get(flag)
            if required is not None and not self.flags[required]:
                self.set_flag(required, True)
        else:
            for dependent, required in FLAG_REQUIRES.items():
                if required == flag and self.flags[dependent]:
                    self.set_flag(dependent, False)

    def set_mapping(self, kind: MappingKind | str) -> None:
        """
        Select the radius mapping.

        Raises:
            ValueError: For an unknown kind; the previous mapping is kept.
        """
        self.mapping = MappingKind.parse(kind)
        logger.debug(f"Mapping switched to {self.mapping.value}.")


@dataclass
class EngineState:
    """Playback position; owned by the AnimationController."""
    index: int = 0
    running: bool = True
