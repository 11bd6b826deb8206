import pytest

from popcorn_platform.state import (
    MovingState,
    PlatformState,
    PlatformStateError,
    PlatformStateMachine,
    RegularSubstate,
    Transformation,
)

TRANSFORMING = [
    (PlatformState.GLUE, "glue"),
    (PlatformState.EXPANDING, "expanding"),
    (PlatformState.LASER, "laser"),
]


def test_initial_state():
    sm = PlatformStateMachine()
    assert sm.current == PlatformState.REGULAR
    assert sm.regular == RegularSubstate.MISSING
    assert sm.next_state == PlatformState.UNKNOWN
    assert sm.moving == MovingState.STOP
    assert sm.glue == Transformation.UNKNOWN


def test_set_current():
    sm = PlatformStateMachine()
    sm.set_current(PlatformState.ROLLING)
    assert sm.current == PlatformState.ROLLING


@pytest.mark.parametrize(
    "current", [PlatformState.REGULAR, PlatformState.ROLLING, PlatformState.UNKNOWN]
)
def test_set_next_state_forbidden(current):
    sm = PlatformStateMachine()
    sm.set_current(current)
    with pytest.raises(PlatformStateError):
        sm.set_next_state(PlatformState.GLUE)


def test_set_next_state_same_state_is_ignored():
    sm = PlatformStateMachine()
    sm.set_next_state(PlatformState.REGULAR)
    assert sm.next_state == PlatformState.UNKNOWN


def test_set_next_state_after_meltdown_is_ignored():
    sm = PlatformStateMachine()
    sm.set_current(PlatformState.MELTDOWN)
    sm.set_next_state(PlatformState.LASER)
    assert sm.next_state == PlatformState.UNKNOWN


@pytest.mark.parametrize("current,attr", TRANSFORMING)
def test_set_next_state_finalizes_transformation(current, attr):
    sm = PlatformStateMachine()
    sm.set_current(current)
    setattr(sm, attr, Transformation.ACTIVE)
    sm.set_next_state(PlatformState.MELTDOWN)
    assert getattr(sm, attr) == Transformation.FINALIZE
    assert sm.next_state == PlatformState.MELTDOWN


def test_set_regular_state_from_regular():
    sm = PlatformStateMachine()
    assert sm.set_state(RegularSubstate.NORMAL) == PlatformState.UNKNOWN
    assert sm.current == PlatformState.REGULAR
    assert sm.regular == RegularSubstate.NORMAL


def test_set_same_regular_state_changes_nothing():
    sm = PlatformStateMachine()
    sm.set_state(RegularSubstate.READY)
    assert sm.set_state(RegularSubstate.READY) == PlatformState.UNKNOWN
    assert sm.regular == RegularSubstate.READY


@pytest.mark.parametrize("current,attr", TRANSFORMING)
def test_normal_starts_finalization(current, attr):
    sm = PlatformStateMachine()
    sm.set_current(current)
    setattr(sm, attr, Transformation.ACTIVE)
    assert sm.set_state(RegularSubstate.NORMAL) == PlatformState.UNKNOWN
    assert getattr(sm, attr) == Transformation.FINALIZE
    assert sm.current == current


@pytest.mark.parametrize("current,attr", TRANSFORMING)
def test_finished_transformation_returns_to_regular(current, attr):
    sm = PlatformStateMachine()
    sm.set_current(current)
    setattr(sm, attr, Transformation.UNKNOWN)
    assert sm.set_state(RegularSubstate.NORMAL) == PlatformState.UNKNOWN
    assert sm.current == PlatformState.REGULAR


def test_finished_transformation_hands_back_deferred_state():
    sm = PlatformStateMachine()
    sm.set_current(PlatformState.GLUE)
    sm.glue = Transformation.ACTIVE
    sm.set_next_state(PlatformState.LASER)
    sm.glue = Transformation.UNKNOWN

    assert sm.set_state(RegularSubstate.NORMAL) == PlatformState.LASER
    assert sm.current == PlatformState.REGULAR
    assert sm.regular == RegularSubstate.NORMAL
    assert sm.next_state == PlatformState.UNKNOWN


def test_non_normal_substate_leaves_transformation_directly():
    sm = PlatformStateMachine()
    sm.set_current(PlatformState.EXPANDING)
    sm.expanding = Transformation.ACTIVE
    assert sm.set_state(RegularSubstate.MISSING) == PlatformState.UNKNOWN
    assert sm.current == PlatformState.REGULAR
    assert sm.regular == RegularSubstate.MISSING
    assert sm.expanding == Transformation.ACTIVE


def test_set_next_or_regular_state_clears_deferred():
    sm = PlatformStateMachine()
    sm.set_current(PlatformState.LASER)
    sm.set_next_state(PlatformState.GLUE)
    assert sm.set_next_or_regular_state(RegularSubstate.READY) == PlatformState.GLUE
    assert sm.next_state == PlatformState.UNKNOWN
    assert sm.regular == RegularSubstate.READY
    assert sm.set_next_or_regular_state(RegularSubstate.NORMAL) == PlatformState.UNKNOWN