[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "popcorn-platform"
version = "0.1.0"
description = "State machine and game logic for the paddle of a brick-breaker arcade game"
requires-python = ">=3.10"
dependencies = []
keywords = ["arkanoid", "breakout", "game", "paddle", "state-machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["popcorn_platform"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
