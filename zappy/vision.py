"""The ``voir`` command: what a player sees in front of it."""

from zappy.resources import Direction, PeerKind, Resource
from zappy.tasks import consume_food

# Heading along which the tiles of one row are read.
_ALONG_ROW = {
    Direction.NORD: Direction.EST,
    Direction.SUD: Direction.OUEST,
    Direction.OUEST: Direction.NORD,
    Direction.EST: Direction.SUD,
}

# Steps leading from the first tile of a row to the first tile of the next.
_NEXT_ROW = {
    Direction.NORD: (Direction.NORD, Direction.OUEST),
    Direction.SUD: (Direction.SUD, Direction.EST),
    Direction.OUEST: (Direction.OUEST, Direction.SUD),
    Direction.EST: (Direction.EST, Direction.NORD),
}


def tile_contents(roster, tile, viewer):
    """Describe ``tile`` as seen by ``viewer``: other players, then objects."""
    words = [
        "joueur"
        for entry in roster
        if entry is not viewer and entry.kind is PeerKind.PLAYER and entry.tile is tile
    ]
    for resource in Resource:
        words.extend([resource.name.lower()] * tile.resources[resource])
    return " ".join(words)


def _visible_tiles(world, player):
    """Tiles in view, row by row, nearest row first."""
    heading = Direction(player.direction)
    start = player.tile
    for depth in range(player.level + 1):
        tile = start
        for _ in range(2 * depth + 1):
            yield tile
            tile = world.step(tile, _ALONG_ROW[heading])
        for step in _NEXT_ROW[heading]:
            start = world.step(start, step)


def look(game, task, player):
    """Reply with the contents of every tile in the player's field of view."""
    cells = [
        tile_contents(game.roster, tile, player)
        for tile in _visible_tiles(game.world, player)
    ]
    text = "{" + ", ".join(cells) + "}\n"
    consume_food(game.roster, player, task, text, game.clock())
    task.time = player.schedule(7, game.clock())