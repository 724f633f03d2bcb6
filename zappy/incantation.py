"""The ``incantation`` command: rising to the next level."""

from zappy.events import incantation_ended, incantation_started
from zappy.resources import PeerKind, Resource
from zappy.tasks import consume_food, deliver

_IN_PROGRESS = "elevation en cours\n"
_FAILED = "elevation fail\n"

_PLAYERS_NEEDED = (1, 2, 2, 4, 4, 6, 6, 0)

# Stones needed per level, in the order linemate .. thystame.
_STONES_NEEDED = (
    (1, 0, 0, 0, 0, 0),
    (1, 1, 1, 0, 0, 0),
    (2, 0, 1, 0, 2, 0),
    (1, 1, 2, 0, 1, 0),
    (1, 2, 1, 3, 0, 0),
    (1, 2, 3, 0, 1, 0),
    (2, 2, 2, 2, 2, 1),
    (0, 0, 0, 0, 0, 0),
)

_STONES = tuple(Resource)[1:]


def _level_message(level):
    return f"niveau actuel : {level}\n"


def _companions(roster, tile, index):
    return [
        entry
        for entry in roster
        if entry.kind is PeerKind.PLAYER and entry.tile is tile and entry.level - 1 == index
    ]


def can_elevate(roster, player, consume=False):
    """Tell whether ``player`` can rise a level on its tile right now.

    The tile must hold exactly the required number of players of the same
    level and at least the required stones; with ``consume`` the stones are
    taken from the tile.
    """
    index = player.level - 1
    if not 0 <= index < len(_STONES_NEEDED):
        return False
    tile = player.tile
    if len(_companions(roster, tile, index)) != _PLAYERS_NEEDED[index]:
        return False
    needed = _STONES_NEEDED[index]
    if any(tile.resources[stone] < count for stone, count in zip(_STONES, needed)):
        return False
    if consume:
        for stone, count in zip(_STONES, needed):
            tile.resources[stone] -= count
    return True


def start_incantation(game, task, player):
    """Announce the incantation and schedule its end, or fail at once."""
    consume_food(game.roster, player, task, _IN_PROGRESS, game.clock())
    deliver(task)
    if can_elevate(game.roster, player):
        task.time = player.schedule(300, game.clock())
        incantation_started(game.roster, player, player.level)
    else:
        consume_food(game.roster, player, task, _FAILED, game.clock())


def finish_incantation(game, task):
    """Complete an incantation whose time has come; return whether it succeeded."""
    player = task.player
    if player is None:
        return False
    roster = game.roster
    if task.reply != _FAILED:
        index = player.level - 1
        if can_elevate(roster, player, consume=True):
            consume_food(roster, player, task, "", game.clock())
            for entry in _companions(roster, player.tile, index):
                entry.level += 1
                entry.send(_level_message(entry.level))
            incantation_ended(roster, player, True)
            return True
    else:
        consume_food(roster, player, task, _level_message(player.level), game.clock())
    incantation_ended(roster, player, False)
    return False