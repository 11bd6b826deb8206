"""Game-field settings for the platform and integer screen rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class PlatformSettings:
    """Sizes of the game field and the platform, in game units."""

    border_x_offset: int
    max_x_pos: int
    max_y_pos: int
    platform_y_pos: int
    platform_height: int
    platform_circle_size: int
    platform_normal_width: int
    platform_normal_inner_width: int
    global_scale: int
    ball_radius: float
    moving_step_size: float
    fps: int

    meltdown_speed: int = 3
    max_rolling_step: int = 16
    roll_in_end_x_pos: int = 99
    rolling_speed: int = 3
    x_step: int = 6

    @property
    def d_scale(self):
        """The global scale as a float."""
        return float(self.global_scale)

    @property
    def laser_shot_timeout(self):
        """Ticks between two laser shots: half a second."""
        return self.fps // 2


@dataclass
class Rect:
    """A screen rectangle; ``right`` and ``bottom`` are exclusive."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self):
        return self.right - self.left

    @property
    def height(self):
        return self.bottom - self.top

    def intersects(self, other):
        """True when the two rectangles share at least one pixel."""
        return (
            max(self.left, other.left) < min(self.right, other.right)
            and max(self.top, other.top) < min(self.bottom, other.bottom)
        )