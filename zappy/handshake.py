"""First exchange with a new connection: monitor or team player."""

from zappy.events import (
    egg_connected,
    egg_line,
    inventory_line,
    joined_line,
    player_joined,
)
from zappy.graphic_queries import all_tiles_lines, map_size_line, team_lines, time_line
from zappy.resources import PeerKind

_GRAPHIC = "GRAPHIC"


def connect_graphic(game, peer):
    """Turn ``peer`` into a monitor and send it the whole game state."""
    peer.kind = PeerKind.GRAPHIC
    world = game.world
    entries = list(game.roster)
    lines = [map_size_line(world), time_line(peer.time_unit)]
    lines += all_tiles_lines(world)
    lines += team_lines(game.teams)
    for entry in entries:
        if entry.kind is PeerKind.PLAYER:
            lines.append(joined_line(entry))
        elif entry.kind is PeerKind.EGG:
            lines.append(egg_line(entry))
    lines += [inventory_line(entry) for entry in entries if entry.kind is PeerKind.PLAYER]
    for line in lines:
        peer.send(line)


def _hatch(game, egg, peer):
    egg_connected(game.roster, egg.id)
    egg.connection = peer.connection
    egg.id = peer.id
    egg.kind = PeerKind.PLAYER
    egg.level = 1
    egg.time_unit = peer.time_unit
    peer.connection = None
    game.roster.remove(peer)
    game.slots[egg.team] = game.slots.get(egg.team, 0) + 1
    return egg


def connect_player(game, peer, team):
    """Join ``peer`` to ``team``; return the playing entry, or None if refused.

    A waiting egg of the team takes over the connection when there is one.
    """
    if team not in game.teams:
        return None
    entry = peer
    egg = next(
        (e for e in game.roster if e.kind is PeerKind.EGG and e.team == team),
        None,
    )
    if egg is not None:
        entry = _hatch(game, egg, peer)
    free = game.slots.get(team, 0)
    if free < 1:
        return None
    entry.send(f"{free}\n")
    game.slots[team] = free - 1
    entry.kind = PeerKind.PLAYER
    entry.team = team
    player_joined(game.roster, entry)
    return entry


def handle_handshake(game, peer, line):
    """Handle the first line of a pending connection.

    Returns the entry now bound to the connection, or None once the
    connection has been refused and closed.
    """
    if line.endswith("\n"):
        line = line[:-1]
    if line == _GRAPHIC:
        connect_graphic(game, peer)
        return peer
    entry = connect_player(game, peer, line)
    if entry is not None:
        entry.send(f"{game.world.width} {game.world.height}\n")
        return entry
    peer.close()
    if peer in game.roster:
        game.roster.remove(peer)
    return None