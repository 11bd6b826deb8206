"""The glue transformation: glue spots grow on the platform and shrink away."""

from __future__ import annotations

from typing import Protocol

from .state import (
    PlatformState,
    PlatformStateError,
    PlatformStateMachine,
    RegularSubstate,
    Transformation,
)


class BallReleaser(Protocol):
    def release_next_ball(self) -> bool:
        """Release one glued ball; return False when none is left."""


class PlatformGlue:
    """Animates the glue spots and releases the balls when the glue wears off."""

    MAX_SPOT_HEIGHT_RATIO = 1.0
    MIN_SPOT_HEIGHT_RATIO = 0.4
    SPOT_HEIGHT_RATIO_STEP = 0.05

    def __init__(self, state: PlatformStateMachine):
        self._state = state
        self._ratio = 0.0

    @property
    def spot_height_ratio(self):
        """Height of the glue spots relative to their full height."""
        return self._ratio

    def reset(self):
        """Start again from the smallest glue spots."""
        self._ratio = self.MIN_SPOT_HEIGHT_RATIO

    def act(self, ball_set: BallReleaser):
        """Advance one tick; return ``(needs_redraw, next_state)``."""
        next_state = PlatformState.UNKNOWN

        match self._state.glue:
            case Transformation.INIT:
                if self._ratio < self.MAX_SPOT_HEIGHT_RATIO:
                    self._ratio += self.SPOT_HEIGHT_RATIO_STEP
                else:
                    self._state.glue = Transformation.ACTIVE
                return True, next_state

            case Transformation.ACTIVE:
                return False, next_state

            case Transformation.FINALIZE:
                if self._ratio > self.MIN_SPOT_HEIGHT_RATIO:
                    self._ratio -= self.SPOT_HEIGHT_RATIO_STEP
                    while ball_set.release_next_ball():
                        pass
                else:
                    self._state.glue = Transformation.UNKNOWN
                    next_state = self._state.set_state(RegularSubstate.NORMAL)
                return True, next_state

            case other:
                raise PlatformStateError(f"glue cannot act in {other.name}")