import random

import pytest

from mesh_raster_renderer.color import (
    Color, RED, BLUE, WHITE, parse_hex_color,
    ConstantColorSource, RandomColorSource, CycleColorSource,
)


def test_named_constants():
    assert RED == Color(255, 0, 0, 255)
    assert RED.to_hex() == "#FF0000"


def test_parse_hex_color():
    assert parse_hex_color("#FF8800") == Color(255, 136, 0, 255)
    assert parse_hex_color("ff880080") == Color(255, 136, 0, 128)
    assert parse_hex_color("#FF8800", alpha=0).a == 0


@pytest.mark.parametrize("value", [None, "", "#FFF", "#GG0000", "1234567"])
def test_parse_hex_color_rejects(value):
    assert parse_hex_color(value) is None


def test_checked_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.checked(256, 0, 0)
    with pytest.raises(ValueError):
        Color.checked(0, 0, 0, -1)


def test_constant_source():
    source = ConstantColorSource(BLUE)
    assert source(0) == source(99) == BLUE


def test_random_source_is_reproducible():
    a = RandomColorSource(seed=3)
    b = RandomColorSource(rng=random.Random(3))
    colors = [a(i) for i in range(10)]
    assert colors == [b(i) for i in range(10)]
    assert all(c.a == 255 for c in colors)


def test_cycle_source():
    source = CycleColorSource([RED, WHITE])
    assert [source(i) for i in range(4)] == [RED, WHITE, RED, WHITE]
    with pytest.raises(ValueError):
        CycleColorSource([])
