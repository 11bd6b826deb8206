"""Paddle logic for a brick-breaker arcade game: states, power-ups, meltdown and movement."""

__version__ = "0.1.0"