"""The laser transformation: the platform grows guns and fires beams."""

from __future__ import annotations

from enum import Enum, auto
from typing import Protocol

from .state import (
    PlatformState,
    PlatformStateError,
    PlatformStateMachine,
    RegularSubstate,
    Transformation,
)


class FigureType(Enum):
    """Shapes that morph while the platform transforms."""

    ELLIPSE = auto()
    RECTANGLE = auto()
    ROUND_RECT_3X = auto()


class LaserBeamLauncher(Protocol):
    def fire(self, left_gun_x_pos: float, right_gun_x_pos: float) -> None:
        """Launch a pair of beams from the two guns."""


def expanding_value(start, end, ratio, scale):
    """Interpolate between ``start`` and ``end`` and scale to whole pixels."""
    return int((start + (end - start) * ratio) * scale)


class PlatformLaser:
    """Turns the platform into a laser gun and fires beams at a fixed pace."""

    MAX_TRANSFORMATION_STEP = 20

    def __init__(self, state: PlatformStateMachine, laser_beam_set, platform_width,
                 shot_timeout):
        self._state = state
        self._beams = laser_beam_set
        self.platform_width = platform_width
        self.shot_timeout = shot_timeout
        self.firing_enabled = False
        self.step = 0
        self.last_shot_time = 0

    def reset(self):
        """Start the transformation from the beginning."""
        self.step = 0

    def fire(self, fire_on):
        """Switch firing on or off; ignored until the platform is fully transformed."""
        if self._state.laser != Transformation.ACTIVE:
            return
        self.firing_enabled = fire_on

    def transformation_ratio(self):
        """0.0 for a plain platform, 1.0 for a fully transformed one."""
        return self.step / self.MAX_TRANSFORMATION_STEP

    def gun_pos(self, platform_x_pos, is_left):
        """X position of the left or right gun for a platform at ``platform_x_pos``."""
        if is_left:
            return platform_x_pos + 3.0
        return platform_x_pos + (self.platform_width - 4)

    def act(self, x_pos, current_tick):
        """Advance one tick; return ``(needs_redraw, next_state)``."""
        next_state = PlatformState.UNKNOWN

        match self._state.laser:
            case Transformation.INIT:
                if self.step < self.MAX_TRANSFORMATION_STEP:
                    self.step += 1
                else:
                    self._state.laser = Transformation.ACTIVE
                return True, next_state

            case Transformation.ACTIVE:
                if (
                    self.firing_enabled
                    and self.last_shot_time + self.shot_timeout <= current_tick
                ):
                    self.last_shot_time = current_tick + self.shot_timeout
                    self._beams.fire(
                        self.gun_pos(x_pos, True) + 0.5,
                        self.gun_pos(x_pos, False) + 0.5,
                    )
                return False, next_state

            case Transformation.FINALIZE:
                if self.step > 0:
                    self.step -= 1
                else:
                    self._state.laser = Transformation.UNKNOWN
                    next_state = self._state.set_state(RegularSubstate.NORMAL)
                    self.firing_enabled = False
                return True, next_state

            case other:
                raise PlatformStateError(f"laser cannot act in {other.name}")