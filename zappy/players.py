"""Connected peers, eggs and the roster that holds them."""

from dataclasses import dataclass, field

from zappy.resources import Direction, PeerKind, Resource

_START_FOOD = 1260
_WELCOME = "BIENVENUE\n"


def _starting_inventory():
    inventory = [0] * len(Resource)
    inventory[Resource.NOURRITURE] = _START_FOOD
    return inventory


@dataclass(eq=False)
class Player:
    """A roster entry: a player, a graphic monitor, a pending connection or an egg.

    ``connection`` is any object with ``sendall(bytes)`` and ``close()``.
    Food is kept in time units: 126 units make one item of food.
    """

    id: int
    connection: object = None
    kind: PeerKind = PeerKind.PENDING
    team: str = None
    tile: object = None
    direction: Direction = Direction.SUD
    level: int = 1
    resources: list = field(default_factory=_starting_inventory)
    time_unit: int = 100
    action: float = 0.0
    time_eat: float = 0.0
    parent: int = None

    def send(self, text):
        """Write ``text`` to the peer, ignoring a broken connection."""
        if self.connection is None:
            return
        try:
            self.connection.sendall(text.encode())
        except OSError:
            pass

    def schedule(self, units, now):
        """Book ``units`` of game time after the player's last action.

        Returns the moment the new action completes, or 0 for a dead entry.
        """
        if self.kind is PeerKind.DEAD:
            return 0
        start = max(now, self.action)
        self.action = start + units // self.time_unit
        return self.action

    def close(self):
        """Close the underlying connection, if any."""
        if self.connection is None:
            return
        try:
            self.connection.close()
        except OSError:
            pass


class Roster:
    """Every peer known to the server, newest connection first."""

    def __init__(self):
        self._entries = []
        self._next_player_id = 0
        self._next_egg_id = 0

    def __iter__(self):
        return iter(list(self._entries))

    def __len__(self):
        return len(self._entries)

    def add(self, player):
        """Put ``player`` at the front of the roster."""
        self._entries.insert(0, player)
        return player

    def insert_after(self, anchor, player):
        """Place ``player`` right after ``anchor``."""
        index = self._entries.index(anchor)
        self._entries.insert(index + 1, player)
        return player

    def remove(self, player):
        """Drop ``player``; raises ValueError if it is not in the roster."""
        self._entries.remove(player)

    def players(self):
        """Entries that are playing characters."""
        return [entry for entry in self._entries if entry.kind is PeerKind.PLAYER]

    def graphics(self):
        """Entries that are graphic monitors."""
        return [entry for entry in self._entries if entry.kind is PeerKind.GRAPHIC]

    def find(self, player_id):
        """First entry carrying ``player_id``, or None."""
        return next((entry for entry in self._entries if entry.id == player_id), None)

    def new_player_id(self):
        """Next connection identifier, counting from 0."""
        value = self._next_player_id
        self._next_player_id += 1
        return value

    def new_egg_id(self):
        """Next egg identifier, counting from 0."""
        value = self._next_egg_id
        self._next_egg_id += 1
        return value

    def accept(self, connection, world, time_unit, rng, now):
        """Register a fresh connection, greet it and return its entry."""
        x = rng.randrange(world.width)
        y = rng.randrange(world.height)
        player = Player(
            id=self.new_player_id(),
            connection=connection,
            kind=PeerKind.PENDING,
            tile=world.tile(x, y),
            direction=Direction.SUD,
            level=1,
            time_unit=time_unit,
            time_eat=now,
        )
        self.add(player)
        player.send(_WELCOME)
        return player

    def purge(self):
        """Remove and close every dead entry; return the removed entries."""
        dead = [entry for entry in self._entries if entry.kind is PeerKind.DEAD]
        for entry in dead:
            entry.close()
            self._entries.remove(entry)
        return dead