"""The ``expulse`` and ``fork`` commands."""

from zappy.events import egg_laid, player_expelled, player_moved
from zappy.geometry import sound_direction
from zappy.players import Player
from zappy.resources import PeerKind
from zappy.tasks import Task, consume_food, deliver

_OK = "ok\n"
_KO = "ko\n"


def _same_tile(one, other):
    return (
        one.tile is not None
        and other.tile is not None
        and (one.tile.x, one.tile.y) == (other.tile.x, other.tile.y)
    )


def expel(game, task, player):
    """Push every other player on the tile one step in the player's heading."""
    roster = game.roster
    task.time = player.schedule(7, game.clock())
    others = [entry for entry in roster if entry is not player]
    if others:
        first = others[0]
        heading = 0
        if first.tile is not None and player.tile is not None:
            heading = sound_direction(
                (player.tile.x, player.tile.y),
                (first.tile.x, first.tile.y),
                (game.world.width, game.world.height),
                first.direction,
            )
        notice = f"deplacement: {heading}\n"
        announced = False
        for other in others:
            if other.kind is not PeerKind.PLAYER or not _same_tile(other, player):
                continue
            other.tile = game.world.step(other.tile, player.direction)
            if not announced:
                announced = True
                player_expelled(roster, player.id)
            player_moved(roster, other)
            deliver(Task(player=other, command="expulse", reply=notice, queued=False))
    consume_food(roster, player, task, _OK if others else _KO, game.clock())


def lay_egg(game, task, player):
    """Lay an egg of the player's team on its tile and return the egg."""
    roster = game.roster
    consume_food(roster, player, task, _OK, game.clock())
    task.time = player.schedule(42, game.clock())
    egg = Player(
        id=roster.new_egg_id(),
        kind=PeerKind.EGG,
        team=player.team,
        tile=player.tile,
        direction=player.direction,
        parent=player.id,
        time_unit=player.time_unit,
        time_eat=game.clock(),
    )
    egg.schedule(600, game.clock())
    roster.insert_after(player, egg)
    egg_laid(roster, egg, player)
    return egg