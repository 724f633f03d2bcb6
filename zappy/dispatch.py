"""Routing of incoming lines to the command that handles them."""

from zappy.actions import expel, lay_egg
from zappy.commands import (
    advance,
    broadcast,
    connect_nbr,
    inventory,
    put_object,
    take_object,
    turn_left,
    turn_right,
)
from zappy.events import player_died
from zappy.graphic_queries import answer_graphic
from zappy.handshake import handle_handshake
from zappy.incantation import start_incantation
from zappy.resources import PeerKind
from zappy.tasks import Task
from zappy.text import split_words
from zappy.vision import look

_COMMANDS = {
    "avance": advance,
    "droite": turn_right,
    "gauche": turn_left,
    "voir": look,
    "inventaire": inventory,
    "prend": take_object,
    "pose": put_object,
    "broadcast": broadcast,
    "expulse": expel,
    "incantation": start_incantation,
    "fork": lay_egg,
    "connect_nbr": connect_nbr,
}


def handle_line(game, queue, player, line):
    """Act upon one line received from ``player``.

    Player commands are queued for their timed reply; monitor queries are
    answered at once. Returns the entry now bound to the connection, or
    None when the connection was refused during the handshake.
    """
    if line.endswith("\n"):
        line = line[:-1]
    if player.kind is PeerKind.PENDING:
        return handle_handshake(game, player, line)
    words = split_words(line, " ")
    handler = _COMMANDS.get(words[0]) if words else None
    task = Task(player=player, command=line, queued=handler is not None)
    if handler is not None:
        handler(game, task, player)
    for reply in answer_graphic(line, game.roster, game.world, game.teams):
        player.send(reply)
    if handler is not None:
        queue.push(task)
    return player


def handle_disconnect(game, queue, player):
    """Forget a peer whose connection closed, freeing its team place."""
    if player.team in game.slots:
        game.slots[player.team] += 1
    player_died(game.roster, player.id)
    print(f"The client has leave with id :{player.id}")
    player.close()
    if player in game.roster:
        game.roster.remove(player)
    queue.drop_player(player)