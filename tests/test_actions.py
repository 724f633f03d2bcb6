import random

from zappy.actions import expel, lay_egg
from zappy.commands import Game
from zappy.players import Player, Roster
from zappy.resources import Direction, PeerKind
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


def add_entry(game, x=2, y=2, direction=Direction.NORD, kind=PeerKind.PLAYER):
    entry = Player(
        id=game.roster.new_player_id(),
        connection=FakeConnection(),
        kind=kind,
        team="red",
        tile=game.world.tile(x, y),
        direction=direction,
        time_eat=NOW,
    )
    game.roster.add(entry)
    return entry


def test_expel_alone_replies_ko():
    game = make_game()
    player = add_entry(game)
    task = Task(player=player, command="expulse")
    expel(game, task, player)
    assert task.reply == "ko\n"


def test_expel_pushes_players_on_the_tile():
    game = make_game()
    hurt = add_entry(game, direction=Direction.EST)
    victim = add_entry(game)
    task = Task(player=hurt, command="expulse")
    expel(game, task, hurt)
    assert victim.tile is game.world.tile(3, 2)
    assert victim.connection.sent == ["deplacement: 0\n"]
    assert task.reply == "ok\n"
    assert hurt.tile is game.world.tile(2, 2)


def test_expel_wraps_around():
    game = make_game()
    hurt = add_entry(game, 2, 0, Direction.NORD)
    victim = add_entry(game, 2, 0)
    expel(game, Task(player=hurt, command="expulse"), hurt)
    assert victim.tile is game.world.tile(2, 4)


def test_expel_announces_once_to_monitors():
    game = make_game()
    graphic = add_entry(game, 0, 0, kind=PeerKind.GRAPHIC)
    hurt = add_entry(game, direction=Direction.SUD)
    add_entry(game)
    add_entry(game)
    expel(game, Task(player=hurt, command="expulse"), hurt)
    assert graphic.connection.sent.count(f"pex {hurt.id}\n") == 1


def test_expel_leaves_other_tiles_and_eggs():
    game = make_game()
    hurt = add_entry(game, direction=Direction.SUD)
    far = add_entry(game, 4, 4)
    egg = add_entry(game, kind=PeerKind.EGG)
    task = Task(player=hurt, command="expulse")
    expel(game, task, hurt)
    assert far.tile is game.world.tile(4, 4)
    assert egg.tile is game.world.tile(2, 2)
    assert task.reply == "ok\n"


def test_lay_egg_places_egg_after_parent():
    game = make_game()
    graphic = add_entry(game, 0, 0, kind=PeerKind.GRAPHIC)
    player = add_entry(game)
    task = Task(player=player, command="fork")
    egg = lay_egg(game, task, player)
    entries = list(game.roster)
    assert entries[entries.index(player) + 1] is egg
    assert egg.kind is PeerKind.EGG
    assert egg.team == player.team
    assert egg.tile is player.tile
    assert egg.parent == player.id
    assert task.reply == "ok\n"
    assert graphic.connection.sent == [f"enw {egg.id} {player.id} 2 2\n"]


def test_egg_ids_increase():
    game = make_game()
    player = add_entry(game)
    first = lay_egg(game, Task(player=player, command="fork"), player)
    second = lay_egg(game, Task(player=player, command="fork"), player)
    assert second.id == first.id + 1