"""Headings, resource kinds and connection kinds shared across the game."""

from enum import Enum, IntEnum


class Direction(IntEnum):
    """Compass heading of a player; on the wire it is sent as ``value + 1``."""

    NORD = 0
    EST = 1
    OUEST = 2
    SUD = 3

    def right(self):
        """Heading after a quarter turn clockwise."""
        return _RIGHT[self]

    def left(self):
        """Heading after a quarter turn counter-clockwise."""
        return _LEFT[self]


_RIGHT = {
    Direction.NORD: Direction.EST,
    Direction.EST: Direction.SUD,
    Direction.SUD: Direction.OUEST,
    Direction.OUEST: Direction.NORD,
}
_LEFT = {after: before for before, after in _RIGHT.items()}


class Resource(IntEnum):
    """Objects lying on tiles and carried by players, in wire order."""

    NOURRITURE = 0
    LINEMATE = 1
    DERAUMERE = 2
    SIBUR = 3
    MENDIANE = 4
    PHIRAS = 5
    THYSTAME = 6


class PeerKind(Enum):
    """What a connection or roster entry currently is."""

    PLAYER = 0
    GRAPHIC = 1
    PENDING = 2
    EGG = 3
    DEAD = 4


_BY_NAME = {resource.name.lower(): resource for resource in Resource}


def resource_by_name(name):
    """Return the resource whose protocol name is exactly ``name``.

    Raises KeyError for an unknown name.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"unknown resource: {name!r}") from None