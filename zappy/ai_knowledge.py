"""What the automatic player knows: answers it parses and roads it plans."""

import math

from zappy.text import _atoi

_LEVEL_MARK = "niveau actuel :"
_VIEW_ROWS = 9
_ROAD_LIMIT = 18
_FORWARD = "avance\n"
_LEFT = "gauche\n"
_RIGHT = "droite\n"

_STONES = ("deraumere", "linemate", "mendiane", "phiras", "sibur", "thystame")

_NEEDED = {
    1: {"linemate": 1},
    2: {"linemate": 1, "deraumere": 1, "sibur": 1},
    3: {"linemate": 2, "sibur": 1, "phiras": 2},
    4: {"linemate": 1, "deraumere": 1, "sibur": 2, "phiras": 1},
    5: {"linemate": 1, "deraumere": 2, "sibur": 1, "mendiane": 3},
    6: {"linemate": 1, "deraumere": 2, "sibur": 3, "phiras": 1},
    7: {
        "linemate": 2,
        "deraumere": 2,
        "sibur": 2,
        "mendiane": 2,
        "phiras": 2,
        "thystame": 1,
    },
}


def parse_inventory(answer):
    """Parse an ``inventaire`` answer into a name -> count mapping.

    Raises ValueError for an empty answer.
    """
    if answer == "":
        raise ValueError("empty inventory answer")
    body = answer
    if body.startswith("{"):
        body = body[1:]
    if body.endswith("}"):
        body = body[:-1]
    inventory = {}
    if body == "":
        return inventory
    for piece in body.split(", "):
        item = piece.split(",")[0]
        name, _, value = item.partition(" ")
        inventory[name] = _atoi(value if value else item)
    return inventory


def parse_view(answer):
    """Split a ``voir`` answer into the description of each tile.

    Raises ValueError for an empty answer.
    """
    if answer == "":
        raise ValueError("empty view answer")
    body = answer
    if body.startswith("{") and body.endswith("}"):
        body = body[1:-1]
    if body == "":
        return []
    cells = body.split(",")
    if cells[-1] == "":
        cells.pop()
    return cells


def parse_level(answer):
    """Level announced in ``niveau actuel : N``, or None if absent."""
    position = answer.find(_LEVEL_MARK)
    if position < 0:
        return None
    return _atoi(answer[position + len(_LEVEL_MARK):])


def requirements(level):
    """Stones needed to rise from ``level``; empty when nothing is known."""
    needed = _NEEDED.get(level)
    if needed is None:
        return {}
    return {stone: needed.get(stone, 0) for stone in _STONES}


def missing_resources(inventory, level):
    """Stone names the inventory lacks for the next incantation, in name order."""
    return [
        stone
        for stone, count in requirements(level).items()
        if inventory.get(stone, 0) < count
    ]


def find_tiles(view, wanted):
    """Indices of tiles holding a wanted object, once per object found."""
    return [
        index
        for index, cell in enumerate(view)
        for name in wanted
        if name in cell
    ]


def plan_road(tile_index):
    """Commands leading from the viewer to tile ``tile_index`` of its view.

    Raises ValueError for an index outside the known field of view.
    """
    if not 0 <= tile_index < _VIEW_ROWS * _VIEW_ROWS:
        raise ValueError(f"tile {tile_index} is out of view")
    row = math.isqrt(tile_index)
    offset = tile_index - (row * row + row)
    road = [_FORWARD] * row
    if offset < 0:
        road += [_LEFT] + [_FORWARD] * (-offset)
    elif offset > 0:
        road += [_RIGHT] + [_FORWARD] * offset
    return road


def shortest_road(targets):
    """Return ``(tile_index, road)`` for the nearest reachable target, or None."""
    best = None
    limit = _ROAD_LIMIT
    for index in targets:
        try:
            road = plan_road(index)
        except ValueError:
            continue
        if len(road) < limit:
            limit = len(road)
            best = (index, road)
    return best