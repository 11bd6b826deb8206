"""Platform states and the state machine that moves between them."""

from __future__ import annotations

from enum import Enum, auto


class PlatformStateError(RuntimeError):
    """Raised when the platform is asked to make a transition it does not allow."""


class PlatformState(Enum):
    UNKNOWN = auto()
    REGULAR = auto()
    MELTDOWN = auto()
    ROLLING = auto()
    GLUE = auto()
    EXPANDING = auto()
    LASER = auto()


class RegularSubstate(Enum):
    UNKNOWN = auto()
    MISSING = auto()
    NORMAL = auto()
    READY = auto()


class MeltdownSubstate(Enum):
    UNKNOWN = auto()
    INIT = auto()
    ACTIVE = auto()


class RollingSubstate(Enum):
    UNKNOWN = auto()
    ROLL_IN = auto()
    EXPAND_ROLL_IN = auto()


class Transformation(Enum):
    UNKNOWN = auto()
    INIT = auto()
    ACTIVE = auto()
    FINALIZE = auto()


class MovingState(Enum):
    STOPPING = auto()
    STOP = auto()
    MOVING_LEFT = auto()
    MOVING_RIGHT = auto()


# States whose progress is tracked by a Transformation attribute.
_TRANSFORMATION_ATTRS = {
    PlatformState.GLUE: "glue",
    PlatformState.EXPANDING: "expanding",
    PlatformState.LASER: "laser",
}


class PlatformStateMachine:
    """Current platform state, its substates and a deferred next state."""

    def __init__(self):
        self._current = PlatformState.REGULAR
        self._next = PlatformState.UNKNOWN
        self.regular = RegularSubstate.MISSING
        self.meltdown = MeltdownSubstate.UNKNOWN
        self.rolling = RollingSubstate.UNKNOWN
        self.glue = Transformation.UNKNOWN
        self.expanding = Transformation.UNKNOWN
        self.laser = Transformation.UNKNOWN
        self.moving = MovingState.STOP

    @property
    def current(self):
        """The state the platform is in now."""
        return self._current

    @property
    def next_state(self):
        """The state to enter once the current transformation has finished."""
        return self._next

    def set_current(self, new_state):
        """Switch the current state directly, without any checks."""
        self._current = new_state

    def set_next_state(self, next_state):
        """Defer ``next_state`` and start finalising the current transformation."""
        if next_state == self._current:
            return

        match self._current:
            case PlatformState.REGULAR:
                raise PlatformStateError(
                    "leaving the regular state must be done explicitly"
                )
            case PlatformState.MELTDOWN:
                # Nothing follows a meltdown: the game has to be restarted.
                return
            case PlatformState.ROLLING:
                raise PlatformStateError(
                    "the rolling state moves on by itself"
                )
            case PlatformState.GLUE | PlatformState.EXPANDING | PlatformState.LASER:
                setattr(
                    self, _TRANSFORMATION_ATTRS[self._current], Transformation.FINALIZE
                )
            case _:
                raise PlatformStateError(
                    f"cannot defer a state from {self._current.name}"
                )

        self._next = next_state

    def set_state(self, new_regular_state):
        """Move towards the regular state; return a state the caller must enter next."""
        if (
            self._current == PlatformState.REGULAR
            and self.regular == new_regular_state
        ):
            return PlatformState.UNKNOWN

        if new_regular_state == RegularSubstate.NORMAL:
            attr = _TRANSFORMATION_ATTRS.get(self._current)
            if attr is not None:
                if getattr(self, attr) == Transformation.UNKNOWN:
                    # Finalisation has finished.
                    return self.set_next_or_regular_state(new_regular_state)
                setattr(self, attr, Transformation.FINALIZE)
                return PlatformState.UNKNOWN

        self._current = PlatformState.REGULAR
        self.regular = new_regular_state
        return PlatformState.UNKNOWN

    def set_next_or_regular_state(self, new_regular_state):
        """Return to the regular state and hand back any deferred state."""
        self._current = PlatformState.REGULAR

        next_state = self._next
        if next_state != PlatformState.UNKNOWN:
            self.regular = new_regular_state

        self._next = PlatformState.UNKNOWN
        return next_state