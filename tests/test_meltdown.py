import pytest

from popcorn_platform.meltdown import (
    Meltdown,
    PlatformImage,
    PlatformImageError,
    Stroke,
)

BG, RED, BLUE = "bg", "red", "blue"


def _image():
    # 2 columns x 4 rows
    pixels = [
        BG, RED,
        RED, RED,
        RED, BLUE,
        BG, BLUE,
    ]
    return PlatformImage(2, 4, pixels)


def test_wrong_pixel_count_is_rejected():
    with pytest.raises(PlatformImageError):
        PlatformImage(2, 2, [BG, BG, BG])


def test_non_positive_size_is_rejected():
    with pytest.raises(PlatformImageError):
        PlatformImage(0, 3, [])


def test_stroke_at_top_of_column():
    assert _image().stroke_at(1, 0) == Stroke(0, 2, RED)


def test_stroke_at_middle_of_run():
    assert _image().stroke_at(0, 2) == Stroke(2, 1, RED)


def test_stroke_below_image_is_none():
    assert _image().stroke_at(0, 4) is None


def test_stroke_outside_columns_raises():
    with pytest.raises(PlatformImageError):
        _image().stroke_at(2, 0)


def test_column_strokes_cover_column_in_order():
    image = _image()
    for x in range(image.width):
        strokes = list(image.column_strokes(x))
        assert sum(s.length for s in strokes) == image.height
        ys = [s.y for s in strokes]
        assert ys == sorted(ys)
        assert ys[0] == 0
        for a, b in zip(strokes, strokes[1:]):
            assert a.color != b.color
            assert a.y + a.length == b.y


def test_column_strokes_colours():
    strokes = list(_image().column_strokes(0))
    assert [s.color for s in strokes] == [BG, RED, BG]
    assert [s.length for s in strokes] == [1, 2, 1]


def test_uniform_column_is_one_stroke():
    image = PlatformImage(1, 5, [RED] * 5)
    assert list(image.column_strokes(0)) == [Stroke(0, 5, RED)]


def test_meltdown_moves_every_column_first_step():
    meltdown = Meltdown(4, 10, 50, 3, rng=lambda n: 0)
    moves = meltdown.step()
    assert [m[0] for m in moves] == [0, 1, 2, 3]
    assert all(y == 10 and offset == 1 for _, y, offset in moves)
    assert meltdown.column_y == [11, 11, 11, 11]
    assert not meltdown.finished


def test_meltdown_offset_is_rng_plus_one():
    calls = []

    def rng(n):
        calls.append(n)
        return n - 1

    meltdown = Meltdown(2, 0, 100, 3, rng=rng)
    moves = meltdown.step()
    assert calls == [3, 3]
    assert [offset for _, _, offset in moves] == [3, 3]


def test_meltdown_finishes_after_all_columns_leave():
    meltdown = Meltdown(3, 0, 5, 3, rng=lambda n: n - 1)
    steps = 0
    while not meltdown.finished:
        meltdown.step()
        steps += 1
        assert steps < 100
    assert all(y > 5 for y in meltdown.column_y)
    assert meltdown.step() == []


def test_meltdown_with_default_rng_stays_in_bounds():
    meltdown = Meltdown(10, 0, 1000, 3)
    before = list(meltdown.column_y)
    for _, y, offset in meltdown.step():
        assert 1 <= offset <= 3
    for old, new in zip(before, meltdown.column_y):
        assert 1 <= new - old <= 3


def test_meltdown_rejects_bad_speed():
    with pytest.raises(ValueError):
        Meltdown(3, 0, 10, 0)