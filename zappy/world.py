"""The toroidal grid of tiles the game is played on."""

import itertools
from dataclasses import dataclass, field

from zappy.resources import Direction, Resource

_OFFSETS = {
    Direction.NORD: (0, -1),
    Direction.EST: (1, 0),
    Direction.OUEST: (-1, 0),
    Direction.SUD: (0, 1),
}


@dataclass(eq=False)
class Tile:
    """One square of the map and the objects lying on it."""

    x: int
    y: int
    resources: list = field(default_factory=lambda: [0] * len(Resource))


class World:
    """A width x height map whose edges wrap around."""

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"map size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._rows = [[Tile(x, y) for x in range(width)] for y in range(height)]

    def tile(self, x, y):
        """Return the tile at (x, y); raises IndexError outside the map."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"no tile at ({x}, {y})")
        return self._rows[y][x]

    def step(self, tile, direction):
        """Return the neighbour of ``tile`` in ``direction``, wrapping at edges."""
        dx, dy = _OFFSETS[Direction(direction)]
        return self._rows[(tile.y + dy) % self.height][(tile.x + dx) % self.width]

    def drop_random(self, resource, rng):
        """Put one ``resource`` on a random tile and return that tile."""
        x = rng.randrange(self.width)
        y = rng.randrange(self.height)
        tile = self._rows[y][x]
        tile.resources[resource] += 1
        return tile

    def __iter__(self):
        return itertools.chain.from_iterable(self._rows)