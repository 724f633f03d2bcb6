"""Answers to the queries graphic monitors send to the server."""

from zappy.events import inventory_line, notify_graphics
from zappy.text import _atoi, args_after, has_arg_count

_BAD_PARAMETER = "sbp\n"


def map_size_line(world):
    """``msz`` line with the map size."""
    return f"msz {world.width} {world.height}\n"


def tile_line(tile):
    """``bct`` line with a tile's position and contents."""
    contents = " ".join(str(count) for count in tile.resources)
    return f"bct {tile.x} {tile.y} {contents}\n"


def all_tiles_lines(world):
    """``bct`` lines for every tile, column by column."""
    return [
        tile_line(world.tile(x, y))
        for x in range(world.width)
        for y in range(world.height)
    ]


def team_lines(teams):
    """One ``tna`` line per team name."""
    return [f"tna {team}\n" for team in teams]


def time_line(time_unit):
    """``sgt`` line with the time unit."""
    return f"sgt {time_unit}\n"


def tile_update(roster, player):
    """Send the contents of ``player``'s tile to every monitor."""
    notify_graphics(roster, tile_line(player.tile))


def _map_size(args, roster, world, teams):
    return [map_size_line(world)]


def _tile(args, roster, world, teams):
    try:
        return [tile_line(world.tile(_atoi(args[0]), _atoi(args[1])))]
    except IndexError:
        return [_BAD_PARAMETER]


def _all_tiles(args, roster, world, teams):
    return all_tiles_lines(world)


def _teams(args, roster, world, teams):
    return team_lines(teams)


def _located(args, roster):
    entry = roster.find(_atoi(args[0]))
    if entry is None or entry.tile is None:
        return None
    return entry


def _position(args, roster, world, teams):
    entry = _located(args, roster)
    if entry is None:
        return [_BAD_PARAMETER]
    return [f"ppo {entry.id} {entry.tile.x} {entry.tile.y} {int(entry.direction)}\n"]


def _level(args, roster, world, teams):
    entry = roster.find(_atoi(args[0]))
    if entry is None:
        return [_BAD_PARAMETER]
    return [f"plv {entry.id} {entry.level}\n"]


def _inventory(args, roster, world, teams):
    entry = _located(args, roster)
    if entry is None:
        return [_BAD_PARAMETER]
    return [inventory_line(entry)]


def _get_time(args, roster, world, teams):
    first = next(iter(roster), None)
    return [] if first is None else [time_line(first.time_unit)]


def _set_time(args, roster, world, teams):
    time_unit = _atoi(args[0])
    for entry in roster:
        entry.time_unit = time_unit
    return [time_line(time_unit)]


_QUERIES = (
    ("msz", 0, _map_size),
    ("bct ", 2, _tile),
    ("mct", 0, _all_tiles),
    ("tna", 0, _teams),
    ("ppo ", 1, _position),
    ("plv ", 1, _level),
    ("pin ", 1, _inventory),
    ("sgt", 0, _get_time),
    ("sst ", 1, _set_time),
)


def answer_graphic(command, roster, world, teams):
    """Return the lines answering a monitor's ``command``.

    An unknown command yields no line; a known one with the wrong number
    of arguments yields ``sbp``.
    """
    for prefix, count, handler in _QUERIES:
        if command.startswith(prefix):
            if not has_arg_count(command, len(prefix), count):
                return [_BAD_PARAMETER]
            return handler(args_after(command, len(prefix), count), roster, world, teams)
    return []