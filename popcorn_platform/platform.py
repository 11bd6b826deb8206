"""The player's platform: movement, state changes and its transformations."""

from __future__ import annotations

import math
import random
from dataclasses import replace
from typing import Protocol

from .expanding import PlatformExpanding
from .geometry import PlatformSettings, Rect
from .glue import PlatformGlue
from .laser import PlatformLaser
from .meltdown import Meltdown
from .state import (
    MeltdownSubstate,
    MovingState,
    PlatformState,
    PlatformStateError,
    PlatformStateMachine,
    RegularSubstate,
    RollingSubstate,
    Transformation,
)


class BallSet(Protocol):
    def release_from_the_platform(self, x_pos: float) -> None:
        """Launch the ball resting on the platform at ``x_pos``."""

    def release_next_ball(self) -> bool:
        """Release one glued ball; return False when none is left."""

    def on_platform_advance(self, direction: float, speed: float, max_speed: float) -> None:
        """Move the balls that stick to the platform."""


_TRANSFORMATION_ATTRS = {
    PlatformState.GLUE: "glue",
    PlatformState.EXPANDING: "expanding",
    PlatformState.LASER: "laser",
}


class Platform:
    """The platform the player steers, with its states and transformations."""

    def __init__(self, settings: PlatformSettings, ball_set, laser_beam_set):
        self.settings = settings
        self.ball_set = ball_set
        self.machine = PlatformStateMachine()
        self.glue = PlatformGlue(self.machine)
        self.expanding = PlatformExpanding(self.machine, settings.platform_normal_width)
        self.laser = PlatformLaser(
            self.machine,
            laser_beam_set,
            settings.platform_normal_width,
            settings.laser_shot_timeout,
        )
        self.rng = random.randrange
        self.meltdown: Meltdown | None = None

        self._x_pos = float((settings.max_x_pos - settings.platform_normal_width) // 2)
        self._speed = 0.0
        self._left_key_down = False
        self._right_key_down = False
        self.inner_width = settings.platform_normal_inner_width
        self.rolling_step = 0

        self._tick = 0
        self._last_redraw_tick = 0
        self.rect = Rect()
        self.prev_rect = Rect()
        self.invalidated: list[Rect] = []

    @property
    def state(self):
        """The platform's current state."""
        return self.machine.current

    @property
    def x_pos(self):
        """Left edge of the platform in game units."""
        return self._x_pos

    @property
    def speed(self):
        """Signed horizontal speed; negative moves left."""
        return self._speed

    def begin_movement(self):
        """Called before the movement phase of a frame; the platform needs no preparation."""

    def finish_movement(self, current_tick):
        """Redraw after a movement frame and come to rest if stopping."""
        self._tick = current_tick
        if self.machine.moving == MovingState.STOP:
            return

        self.redraw()

        if self.machine.moving == MovingState.STOPPING:
            self.machine.moving = MovingState.STOP

    def advance(self, max_speed):
        """Move one sub-step, clamp to the field and drag any glued balls along."""
        moving = self.machine.moving
        if moving in (MovingState.STOPPING, MovingState.STOP):
            return

        self._x_pos += self._speed / max_speed * self.settings.moving_step_size

        if self.correct_position():
            self._speed = 0.0
            self.machine.moving = MovingState.STOPPING

        carries_balls = (
            self.has_state(RegularSubstate.READY)
            or (
                self.machine.current == PlatformState.GLUE
                and self.machine.glue == Transformation.ACTIVE
            )
        )
        if not carries_balls:
            return

        if self.machine.moving == MovingState.MOVING_LEFT:
            self.ball_set.on_platform_advance(math.pi, abs(self._speed), max_speed)
        elif self.machine.moving == MovingState.MOVING_RIGHT:
            self.ball_set.on_platform_advance(0.0, abs(self._speed), max_speed)

    def act(self, current_tick):
        """Advance the animation of the current state by one tick."""
        self._tick = current_tick

        match self.machine.current:
            case PlatformState.MELTDOWN:
                self._act_for_meltdown()

            case PlatformState.ROLLING:
                self._act_for_rolling()

            case PlatformState.GLUE:
                redraw, next_state = self.glue.act(self.ball_set)
                if redraw:
                    self.redraw()
                if next_state != PlatformState.UNKNOWN:
                    self.set_state(next_state)

            case PlatformState.EXPANDING:
                step = self.expanding.act(self._x_pos)
                self._x_pos = step.x_pos
                if step.redraw:
                    self.redraw()
                if step.correct_pos:
                    self.correct_position()
                if step.next_state != PlatformState.UNKNOWN:
                    self.set_state(step.next_state)

            case PlatformState.LASER:
                redraw, next_state = self.laser.act(self._x_pos, current_tick)
                if redraw:
                    self.redraw()
                if next_state != PlatformState.UNKNOWN:
                    self.set_state(next_state)

    def set_state(self, new_state):
        """Enter ``new_state``, or defer it until the current transformation ends."""
        machine = self.machine
        if machine.current == new_state:
            return

        match new_state:
            case PlatformState.REGULAR:
                raise PlatformStateError(
                    "the regular state is entered through set_regular_state"
                )

            case PlatformState.MELTDOWN:
                if machine.current != PlatformState.REGULAR:
                    machine.set_next_state(new_state)
                    return
                self._speed = 0.0
                machine.meltdown = MeltdownSubstate.INIT
                settings = self.settings
                self.meltdown = Meltdown(
                    settings.platform_normal_width * settings.global_scale,
                    self.rect.top,
                    (settings.max_y_pos + 1) * settings.global_scale,
                    settings.meltdown_speed,
                    self.rng,
                )

            case PlatformState.ROLLING:
                machine.rolling = RollingSubstate.ROLL_IN
                self._x_pos = float(self.settings.max_x_pos - 1)
                self.rolling_step = self.settings.max_rolling_step - 1
                self.redraw()

            case PlatformState.GLUE:
                if self._set_transformation_state(new_state):
                    return
                self.glue.reset()

            case PlatformState.EXPANDING:
                if self._set_transformation_state(new_state):
                    return
                self.expanding.reset()

            case PlatformState.LASER:
                if self._set_transformation_state(new_state):
                    return
                self.laser.reset()

        machine.set_current(new_state)

    def set_regular_state(self, new_regular_state):
        """Head for a regular substate, entering any state that was deferred."""
        next_state = self.machine.set_state(new_regular_state)
        if next_state != PlatformState.UNKNOWN:
            self.set_state(next_state)

    def has_state(self, regular_state):
        """True when the platform is regular and in ``regular_state``."""
        return (
            self.machine.current == PlatformState.REGULAR
            and self.machine.regular == regular_state
        )

    def redraw(self, current_tick=None):
        """Recompute the platform rectangle and mark old and new areas for repainting."""
        if current_tick is not None:
            self._tick = current_tick

        if self._last_redraw_tick != self._tick:
            self.prev_rect = replace(self.rect)
            self._last_redraw_tick = self._tick

        settings = self.settings
        scale = settings.global_scale
        d_scale = settings.d_scale
        self.rect.left = int(self._x_pos * d_scale)
        self.rect.top = settings.platform_y_pos * scale
        self.rect.right = int((self._x_pos + self.current_width()) * d_scale)
        self.rect.bottom = self.rect.top + settings.platform_height * scale

        if self.machine.current == PlatformState.MELTDOWN:
            self.prev_rect.bottom = (settings.max_y_pos + 1) * scale

        self.invalidated.append(replace(self.prev_rect))
        self.invalidated.append(replace(self.rect))

    def move(self, to_left, key_down):
        """React to an arrow key being pressed or released."""
        machine = self.machine
        if not (
            self.has_state(RegularSubstate.NORMAL)
            or machine.current
            in (PlatformState.GLUE, PlatformState.EXPANDING, PlatformState.LASER)
        ):
            return

        if to_left:
            self._left_key_down = key_down
        else:
            self._right_key_down = key_down

        if self._left_key_down and self._right_key_down:
            return  # both keys at once are ignored

        if not self._left_key_down and not self._right_key_down:
            self._speed = 0.0
            machine.moving = MovingState.STOPPING
            return

        if self._left_key_down:
            machine.moving = MovingState.MOVING_LEFT
            self._speed = -float(self.settings.x_step)
        else:
            machine.moving = MovingState.MOVING_RIGHT
            self._speed = float(self.settings.x_step)

    def on_space_key(self, key_down):
        """Launch or release balls, or fire the laser."""
        if self.has_state(RegularSubstate.READY):
            if not key_down:
                self.ball_set.release_from_the_platform(self.middle_pos())
                self.set_regular_state(RegularSubstate.NORMAL)
        elif self.machine.current == PlatformState.GLUE:
            if not key_down:
                self.ball_set.release_next_ball()
        elif self.machine.current == PlatformState.LASER:
            self.laser.fire(key_down)

    def hit_by(self, letter_rect):
        """True when a falling letter's cell overlaps the platform."""
        return letter_rect.intersects(self.rect)

    def middle_pos(self):
        """X position of the platform's centre."""
        return self._x_pos + self.current_width() / 2.0

    def current_width(self):
        """Width of the platform in its current shape."""
        machine = self.machine
        if (
            machine.current == PlatformState.ROLLING
            and machine.rolling == RollingSubstate.ROLL_IN
        ):
            return float(self.settings.platform_circle_size)
        if machine.current == PlatformState.EXPANDING:
            return self.expanding.width
        return float(self.settings.platform_normal_width)

    def correct_position(self):
        """Keep the platform inside the field; return True if it had to be moved."""
        min_x = float(self.settings.border_x_offset + 1)
        max_x = self.settings.max_x_pos - self.current_width()
        corrected = False

        if self._x_pos <= min_x:
            self._x_pos = min_x
            corrected = True
        if self._x_pos >= max_x:
            self._x_pos = max_x
            corrected = True

        return corrected

    def _set_transformation_state(self, new_state):
        """Prepare a transformation; True means the state must not be entered now."""
        machine = self.machine
        if machine.current != PlatformState.REGULAR:
            machine.set_next_state(new_state)
            return True

        attr = _TRANSFORMATION_ATTRS[new_state]
        if getattr(machine, attr) == Transformation.FINALIZE:
            return True
        setattr(machine, attr, Transformation.INIT)
        return False

    def _act_for_meltdown(self):
        machine = self.machine
        if machine.meltdown == MeltdownSubstate.INIT:
            machine.meltdown = MeltdownSubstate.ACTIVE
            self.redraw()
            return

        self.redraw()
        if machine.meltdown == MeltdownSubstate.ACTIVE and self.meltdown is not None:
            self.meltdown.step()
            if self.meltdown.finished:
                # The whole platform has left the field.
                self.set_regular_state(RegularSubstate.MISSING)

    def _act_for_rolling(self):
        machine = self.machine
        settings = self.settings

        match machine.rolling:
            case RollingSubstate.ROLL_IN:
                self.rolling_step += 1
                if self.rolling_step >= settings.max_rolling_step:
                    self.rolling_step -= settings.max_rolling_step

                self._x_pos -= settings.rolling_speed
                if self._x_pos <= settings.roll_in_end_x_pos:
                    self._x_pos = float(settings.roll_in_end_x_pos)
                    machine.rolling = RollingSubstate.EXPAND_ROLL_IN
                    self.inner_width = 1

            case RollingSubstate.EXPAND_ROLL_IN:
                self._x_pos -= 1
                self.inner_width += 2
                if self.inner_width >= settings.platform_normal_inner_width:
                    self.inner_width = settings.platform_normal_inner_width
                    self.set_regular_state(RegularSubstate.READY)
                    machine.rolling = RollingSubstate.UNKNOWN
                    self.redraw()

        self.redraw()