"""The melting platform: a captured image that trickles down column by column."""

from __future__ import annotations

import random
from typing import Any, NamedTuple


class PlatformImageError(ValueError):
    """Raised for a malformed platform image or a position outside it."""


class Stroke(NamedTuple):
    """A vertical run of same-coloured pixels in one image column."""

    y: int
    length: int
    color: Any


class PlatformImage:
    """A row-major pixel grid of the platform as it was drawn on the background."""

    def __init__(self, width, height, pixels):
        pixels = list(pixels)
        if width <= 0 or height <= 0:
            raise PlatformImageError("image size must be positive")
        if len(pixels) != width * height:
            raise PlatformImageError(
                f"expected {width * height} pixels, got {len(pixels)}"
            )
        self.width = width
        self.height = height
        self._pixels = pixels

    def _pixel(self, x, y):
        return self._pixels[y * self.width + x]

    def stroke_at(self, x, y):
        """The run of equal pixels starting at ``(x, y)`` going down, or None below the image."""
        if not 0 <= x < self.width:
            raise PlatformImageError(f"column {x} is outside the image")
        if y < 0:
            raise PlatformImageError(f"row {y} is outside the image")
        if y >= self.height:
            return None

        color = self._pixel(x, y)
        length = 1
        while y + length < self.height and self._pixel(x, y + length) == color:
            length += 1
        return Stroke(y, length, color)

    def column_strokes(self, x):
        """Yield the strokes that make up column ``x``, top to bottom."""
        y = 0
        while (stroke := self.stroke_at(x, y)) is not None:
            yield stroke
            y += stroke.length


class Meltdown:
    """Column positions of a melting platform sliding down at random speeds."""

    def __init__(self, width, top, max_y, speed, rng=None):
        if speed <= 0:
            raise ValueError("speed must be positive")
        self.max_y = max_y
        self.speed = speed
        self._rng = rng if rng is not None else random.randrange
        self.column_y = [top] * width
        self._finished = False

    @property
    def finished(self):
        """True once a step found every column below the field."""
        return self._finished

    def step(self):
        """Move every column still in the field; return ``(column, y, offset)`` per move."""
        moves = []
        for column, y in enumerate(self.column_y):
            if y > self.max_y:
                continue
            offset = self._rng(self.speed) + 1
            moves.append((column, y, offset))
            self.column_y[column] = y + offset

        if not moves:
            self._finished = True
        return moves