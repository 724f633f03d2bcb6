import random

from zappy.commands import Game
from zappy.incantation import can_elevate, finish_incantation, start_incantation
from zappy.players import Player, Roster
from zappy.resources import Direction, PeerKind, Resource
from zappy.tasks import Task
from zappy.world import World

NOW = 1000.0


class FakeConnection:
    def __init__(self):
        self.sent = []
        self.closed = False

    def sendall(self, data):
        self.sent.append(data.decode())

    def close(self):
        self.closed = True


def make_game():
    return Game(
        world=World(5, 5),
        roster=Roster(),
        teams=("red",),
        slots={"red": 2},
        rng=random.Random(1),
        clock=lambda: NOW,
    )


def add_player(game, x=2, y=2, level=1):
    player = Player(
        id=game.roster.new_player_id(),
        connection=FakeConnection(),
        kind=PeerKind.PLAYER,
        team="red",
        tile=game.world.tile(x, y),
        direction=Direction.NORD,
        level=level,
        time_eat=NOW,
    )
    game.roster.add(player)
    return player


def add_graphic(game):
    graphic = Player(
        id=game.roster.new_player_id(),
        connection=FakeConnection(),
        kind=PeerKind.GRAPHIC,
        tile=game.world.tile(0, 0),
        time_eat=NOW,
    )
    game.roster.add(graphic)
    return graphic


def test_level_one_needs_one_linemate():
    game = make_game()
    player = add_player(game)
    player.tile.resources[Resource.LINEMATE] = 1
    assert can_elevate(game.roster, player) is True
    assert player.tile.resources[Resource.LINEMATE] == 1


def test_consume_takes_the_stones():
    game = make_game()
    player = add_player(game)
    player.tile.resources[Resource.LINEMATE] = 3
    assert can_elevate(game.roster, player, consume=True) is True
    assert player.tile.resources[Resource.LINEMATE] == 2


def test_missing_stone_prevents_elevation():
    game = make_game()
    player = add_player(game)
    assert can_elevate(game.roster, player) is False


def test_too_many_players_of_same_level():
    game = make_game()
    player = add_player(game)
    add_player(game)
    player.tile.resources[Resource.LINEMATE] = 1
    assert can_elevate(game.roster, player) is False


def test_players_of_other_levels_do_not_count():
    game = make_game()
    player = add_player(game)
    add_player(game, level=3)
    player.tile.resources[Resource.LINEMATE] = 1
    assert can_elevate(game.roster, player) is True


def test_level_two_needs_two_players():
    game = make_game()
    player = add_player(game, level=2)
    for stone in (Resource.LINEMATE, Resource.DERAUMERE, Resource.SIBUR):
        player.tile.resources[stone] = 1
    assert can_elevate(game.roster, player) is False
    add_player(game, level=2)
    assert can_elevate(game.roster, player) is True


def test_top_level_cannot_elevate():
    game = make_game()
    player = add_player(game, level=8)
    assert can_elevate(game.roster, player) is False


def test_start_sends_progress_and_schedules():
    game = make_game()
    graphic = add_graphic(game)
    player = add_player(game)
    player.tile.resources[Resource.LINEMATE] = 1
    task = Task(player=player, command="incantation")
    start_incantation(game, task, player)
    assert player.connection.sent == ["elevation en cours\n"]
    assert task.reply == "elevation en cours\n"
    assert task.time > NOW
    assert graphic.connection.sent[0].startswith(f"pic 2 2 1 {player.id}")


def test_start_fails_without_stones():
    game = make_game()
    graphic = add_graphic(game)
    player = add_player(game)
    task = Task(player=player, command="incantation")
    start_incantation(game, task, player)
    assert task.reply == "elevation fail\n"
    assert graphic.connection.sent == []


def test_finish_raises_level():
    game = make_game()
    graphic = add_graphic(game)
    player = add_player(game)
    player.tile.resources[Resource.LINEMATE] = 1
    task = Task(player=player, command="incantation")
    start_incantation(game, task, player)
    assert finish_incantation(game, task) is True
    assert player.level == 2
    assert player.connection.sent[-1] == "niveau actuel : 2\n"
    assert player.tile.resources[Resource.LINEMATE] == 0
    assert task.reply == ""
    assert graphic.connection.sent[-1] == "pie 2 2 1"


def test_finish_after_failure_reports_level():
    game = make_game()
    graphic = add_graphic(game)
    player = add_player(game)
    task = Task(player=player, command="incantation")
    start_incantation(game, task, player)
    assert finish_incantation(game, task) is False
    assert task.reply == "niveau actuel : 1\n"
    assert graphic.connection.sent[-1] == "pie 2 2 0"


def test_finish_fails_when_stones_vanished():
    game = make_game()
    player = add_player(game)
    player.tile.resources[Resource.LINEMATE] = 1
    task = Task(player=player, command="incantation")
    start_incantation(game, task, player)
    player.tile.resources[Resource.LINEMATE] = 0
    assert finish_incantation(game, task) is False
    assert player.level == 1
    assert task.reply == "elevation en cours\n"