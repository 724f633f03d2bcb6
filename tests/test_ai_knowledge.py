import math

import pytest

from zappy.ai_knowledge import (
    find_tiles,
    missing_resources,
    parse_inventory,
    parse_level,
    parse_view,
    plan_road,
    requirements,
    shortest_road,
)


def test_parse_inventory_server_format():
    answer = "{nourriture 10, linemate 0, deraumere 2}"
    assert parse_inventory(answer) == {"nourriture": 10, "linemate": 0, "deraumere": 2}


def test_parse_inventory_empty_raises():
    with pytest.raises(ValueError):
        parse_inventory("")


def test_parse_view_keeps_cells_in_order():
    assert parse_view("{joueur, linemate, , sibur}") == ["joueur", " linemate", " ", " sibur"]


def test_parse_view_without_braces_and_empty():
    assert parse_view("a,b") == ["a", "b"]
    with pytest.raises(ValueError):
        parse_view("")


def test_parse_level():
    assert parse_level("niveau actuel : 3") == 3
    assert parse_level("ok") is None


def test_requirements_first_level():
    assert requirements(1) == {
        "deraumere": 0,
        "linemate": 1,
        "mendiane": 0,
        "phiras": 0,
        "sibur": 0,
        "thystame": 0,
    }
    assert requirements(8) == {}


def test_requirements_last_level_needs_thystame():
    assert requirements(7)["thystame"] == 1


def test_missing_resources():
    assert missing_resources({"linemate": 0}, 1) == ["linemate"]
    assert missing_resources({"linemate": 1}, 1) == []
    assert missing_resources({}, 8) == []


def test_find_tiles_repeats_for_each_match():
    view = ["", "linemate", "sibur linemate"]
    assert find_tiles(view, ["linemate", "sibur"]) == [1, 2, 2]
    assert find_tiles(view, ["phiras"]) == []


def test_plan_road_near_tiles():
    assert plan_road(0) == []
    assert plan_road(1) == ["avance\n", "gauche\n", "avance\n"]
    assert plan_road(3) == ["avance\n", "droite\n", "avance\n"]
    assert plan_road(2) == ["avance\n"]


@pytest.mark.parametrize("index", range(81))
def test_plan_road_starts_with_row_depth(index):
    road = plan_road(index)
    depth = math.isqrt(index)
    assert road[:depth] == ["avance\n"] * depth
    assert all(step == "avance\n" for step in road[depth + 1:])


def test_plan_road_out_of_view():
    with pytest.raises(ValueError):
        plan_road(81)
    with pytest.raises(ValueError):
        plan_road(-1)


def test_shortest_road_picks_nearest_first():
    assert shortest_road([3, 0]) == (0, [])
    assert shortest_road([3, 1]) == (3, plan_road(3))
    assert shortest_road([]) is None
    assert shortest_road([200]) is None