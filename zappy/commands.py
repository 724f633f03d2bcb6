"""Movement, inventory, object and broadcast commands of players."""

import random
from dataclasses import dataclass, field

from zappy.events import (
    message_line,
    player_broadcast,
    player_inventory,
    player_moved,
    resource_dropped,
    resource_taken,
)
from zappy.geometry import sound_direction
from zappy.graphic_queries import tile_update
from zappy.resources import Resource, resource_by_name
from zappy.tasks import consume_food, now
from zappy.text import split_words

_OK = "ok\n"
_KO = "ko\n"
_FOOD_UNITS = 126
_BROADCAST = len("broadcast")


@dataclass
class Game:
    """Shared state the commands act upon."""

    world: object
    roster: object
    teams: tuple = ()
    slots: dict = field(default_factory=dict)
    time_unit: int = 100
    rng: random.Random = field(default_factory=random.Random)
    clock: object = now


def _reply(game, task, player, text):
    consume_food(game.roster, player, task, text, game.clock())


def _schedule(game, task, player, units):
    task.time = player.schedule(units, game.clock())


def advance(game, task, player):
    """Move one tile forward."""
    _reply(game, task, player, _OK)
    _schedule(game, task, player, 7)
    player.tile = game.world.step(player.tile, player.direction)
    player_moved(game.roster, player)


def turn_right(game, task, player):
    """Turn a quarter clockwise."""
    _reply(game, task, player, _OK)
    _schedule(game, task, player, 7)
    player.direction = player.direction.right()
    player_moved(game.roster, player)


def turn_left(game, task, player):
    """Turn a quarter counter-clockwise."""
    _reply(game, task, player, _OK)
    _schedule(game, task, player, 7)
    player.direction = player.direction.left()
    player_moved(game.roster, player)


def inventory(game, task, player):
    """Reply with the player's inventory, food counted in items."""
    counts = [int(player.resources[Resource.NOURRITURE] / _FOOD_UNITS)]
    counts += player.resources[1:]
    body = ", ".join(f"{resource.name.lower()} {count}" for resource, count in zip(Resource, counts))
    text = f"{{{body}}}\n"
    _schedule(game, task, player, 7)
    _reply(game, task, player, text)


def connect_nbr(game, task, player):
    """Reply with the number of free places in the player's team."""
    text = f"{game.slots.get(player.team, 0)}\n"
    _schedule(game, task, player, 0)
    _reply(game, task, player, text)


def _named_resource(task):
    words = split_words(task.command, " ")
    if len(words) != 2:
        return None
    try:
        return resource_by_name(words[1])
    except KeyError:
        return None


def _units(resource):
    return _FOOD_UNITS if resource is Resource.NOURRITURE else 1


def take_object(game, task, player):
    """Pick an object up from the player's tile; it respawns elsewhere."""
    _schedule(game, task, player, 7)
    resource = _named_resource(task)
    if resource is None or player.tile.resources[resource] <= 0:
        _reply(game, task, player, _KO)
        return
    player.tile.resources[resource] -= 1
    player.resources[resource] += _units(resource)
    _reply(game, task, player, _OK)
    resource_taken(game.roster, player.id, resource)
    player_inventory(game.roster, player)
    tile_update(game.roster, player)
    game.world.drop_random(resource, game.rng)


def put_object(game, task, player):
    """Drop an object from the inventory onto the player's tile."""
    _schedule(game, task, player, 7)
    resource = _named_resource(task)
    if resource is None or player.resources[resource] <= 0:
        _reply(game, task, player, _KO)
        return
    player.resources[resource] -= _units(resource)
    player.tile.resources[resource] += 1
    resource_dropped(game.roster, player.id, resource)
    player_inventory(game.roster, player)
    tile_update(game.roster, player)
    _reply(game, task, player, _OK)


def broadcast(game, task, player):
    """Send the text after ``broadcast`` to every other player."""
    _reply(game, task, player, _OK)
    task.time = game.clock() + 7 // player.time_unit
    text = task.command[_BROADCAST:]
    size = (game.world.width, game.world.height)
    source = (player.tile.x, player.tile.y)
    for other in game.roster.players():
        if other is player:
            continue
        heading = sound_direction(source, (other.tile.x, other.tile.y), size, other.direction)
        other.send(message_line(text, heading))
    player_broadcast(game.roster, player.id, text[1:] if text else text)