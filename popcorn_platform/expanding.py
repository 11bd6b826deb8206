"""The expanding transformation: the platform widens and narrows back."""

from __future__ import annotations

from typing import NamedTuple

from .state import (
    PlatformState,
    PlatformStateError,
    PlatformStateMachine,
    RegularSubstate,
    Transformation,
)


class ExpandingStep(NamedTuple):
    """Outcome of one tick of the expanding transformation."""

    redraw: bool
    x_pos: float
    next_state: PlatformState
    correct_pos: bool


class PlatformExpanding:
    """Grows the platform to its maximum width and shrinks it back to normal."""

    MAX_WIDTH = 40.0
    WIDTH_STEP = 1.0

    def __init__(self, state: PlatformStateMachine, normal_width):
        self._state = state
        self.min_width = float(normal_width)
        self.width = 0.0

    def reset(self):
        """Start from the normal platform width."""
        self.width = self.min_width

    def extension_ratio(self):
        """1.0 at normal width, 0.0 at full expansion."""
        return (self.MAX_WIDTH - self.width) / (self.MAX_WIDTH - self.min_width)

    def act(self, x_pos):
        """Advance one tick with the platform at ``x_pos``."""
        next_state = PlatformState.UNKNOWN
        half_step = self.WIDTH_STEP / 2.0

        match self._state.expanding:
            case Transformation.INIT:
                if self.width < self.MAX_WIDTH:
                    self.width += self.WIDTH_STEP
                    return ExpandingStep(True, x_pos - half_step, next_state, True)
                self._state.expanding = Transformation.ACTIVE
                return ExpandingStep(True, x_pos, next_state, False)

            case Transformation.ACTIVE:
                return ExpandingStep(False, x_pos, next_state, False)

            case Transformation.FINALIZE:
                if self.width > self.min_width:
                    self.width -= self.WIDTH_STEP
                    return ExpandingStep(True, x_pos + half_step, next_state, True)
                self._state.expanding = Transformation.UNKNOWN
                next_state = self._state.set_state(RegularSubstate.NORMAL)
                return ExpandingStep(True, x_pos, next_state, False)

            case other:
                raise PlatformStateError(f"expanding cannot act in {other.name}")