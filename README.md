# popcorn-platform

The paddle ("platform") of a brick-breaker arcade game, as plain Python with
no dependencies. It covers the paddle's states, its power-up transformations,
its movement and its keyboard handling. It does not draw anything.

## Modules

- `popcorn_platform.state`
  - `PlatformStateMachine` holds the current `PlatformState`:
    - `REGULAR`, with the `RegularSubstate` values `MISSING`, `NORMAL` and
      `READY`;
    - `MELTDOWN`;
    - `ROLLING`;
    - the transformations `GLUE`, `EXPANDING` and `LASER`.
  - The machine also holds each state's sub-state and the `MovingState`.
  - A state that is asked for during a transformation is deferred. The
    machine enters it once the transformation has finished unwinding.
  - Transitions that are not allowed raise `PlatformStateError`.
- `popcorn_platform.glue`
  - `PlatformGlue` grows and shrinks the glue spots.
  - While the glue wears off, it releases every ball that is stuck to the
    platform.
- `popcorn_platform.expanding`
  - `PlatformExpanding` widens the platform one unit per tick, up to 40.
  - It then narrows it back to normal width.
  - Each tick returns an `ExpandingStep`.
- `popcorn_platform.laser`
  - `PlatformLaser` steps the transformation into a gun platform.
  - Once it is fully transformed and firing is on, it fires pairs of beams
    with at least the shot timeout between them.
  - `expanding_value()` interpolates a dimension between two shapes.
  - `FigureType` names the shapes that morph.
- `popcorn_platform.geometry`
  - `PlatformSettings` holds the field and platform sizes. All of its size
    fields are keyword-only and required.
  - `Rect` is an integer rectangle with an `intersects()` test.
- `popcorn_platform.meltdown`
  - `PlatformImage` splits a captured pixel grid of the platform into
    vertical `Stroke`s of one colour each.
  - `Meltdown` moves each column of the melting platform down by a random
    offset every step, until no column is left in the field.
  - A malformed image, or a position outside it, raises
    `PlatformImageError`.
- `popcorn_platform.platform`
  - `Platform` ties these together: state changes, ticks (`act`), movement
    (`move`, `advance`, `finish_movement`) and the space key.
  - It also handles overlap with a falling letter's rectangle (`hit_by`) and
    keeps the platform between the walls.
  - `redraw()` recomputes `rect` and `prev_rect` and appends both to the
    `invalidated` list.

## Installation

```
pip install .
```

## Example

```python
from popcorn_platform.geometry import PlatformSettings
from popcorn_platform.platform import Platform
from popcorn_platform.state import PlatformState, RegularSubstate


class Balls:
    def release_from_the_platform(self, x_pos):
        print("ball launched at", x_pos)

    def release_next_ball(self):
        return False

    def on_platform_advance(self, direction, speed, max_speed):
        pass


class Beams:
    def fire(self, left_x, right_x):
        print("beams at", left_x, right_x)


settings = PlatformSettings(
    border_x_offset=6, max_x_pos=201, max_y_pos=199,
    platform_y_pos=185, platform_height=7, platform_circle_size=7,
    platform_normal_width=28, platform_normal_inner_width=21,
    global_scale=3, ball_radius=2.0, moving_step_size=1.0 / 3, fps=20,
)
platform = Platform(settings, Balls(), Beams())

platform.set_state(PlatformState.ROLLING)
tick = 0
while not platform.has_state(RegularSubstate.READY):
    tick += 1
    platform.act(tick)

platform.on_space_key(key_down=False)   # launch the ball; the platform becomes NORMAL
platform.move(to_left=True, key_down=True)
platform.advance(max_speed=6.0)
print(platform.x_pos, platform.middle_pos())
```

The ball set needs these methods:

- `release_next_ball()`, which returns whether a ball was released;
- `release_from_the_platform(x)`;
- `on_platform_advance(direction, speed, max_speed)`.

The laser beam set needs `fire(left_x, right_x)`.

## What this package does not do

- **Drawing.** The package does not paint the platform. It only reports the
  rectangles to repaint in `Platform.invalidated`.
- **Capturing the image.** Nothing captures the pixels for `PlatformImage`.
  The caller supplies them.
- **Ball collisions.** The package does not reflect balls off the platform.
- **Game loop.** There is no game loop, window or command. The caller drives
  every tick.

## Running the tests

```
pip install .[test]
pytest
```