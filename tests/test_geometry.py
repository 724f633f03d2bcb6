import pytest

from zappy.geometry import sound_direction
from zappy.resources import Direction


@pytest.mark.parametrize("facing", list(Direction))
def test_same_tile_is_zero(facing):
    assert sound_direction((3, 4), (3, 4), (10, 10), facing) == 0


def test_worked_example_facing_north():
    assert sound_direction((0, 0), (2, 0), (10, 10), Direction.NORD) == 1


@pytest.mark.parametrize(
    "source, target",
    [((0, 0), (2, 0)), ((0, 0), (0, 3)), ((5, 5), (1, 2)), ((9, 0), (0, 0))],
)
def test_each_facing_gives_a_different_sector(source, target):
    results = [sound_direction(source, target, (10, 10), f) for f in Direction]
    assert len(set(results)) == len(results)


@pytest.mark.parametrize(
    "source, target",
    [((1, 1), (4, 1)), ((2, 7), (2, 3)), ((0, 0), (9, 9))],
)
def test_result_is_a_valid_sector(source, target):
    for facing in Direction:
        result = sound_direction(source, target, (10, 10), facing)
        assert 0 <= result <= 8 + 2 * facing


def test_accepts_plain_int_facing():
    assert sound_direction((0, 0), (2, 0), (10, 10), 0) == sound_direction(
        (0, 0), (2, 0), (10, 10), Direction.NORD
    )


def test_result_does_not_depend_on_map_translation_without_wrap():
    first = sound_direction((1, 1), (3, 2), (20, 20), Direction.EST)
    moved = sound_direction((5, 6), (7, 7), (20, 20), Direction.EST)
    assert first == moved