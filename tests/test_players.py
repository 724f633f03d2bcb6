import random

import pytest

from zappy.players import Player, Roster
from zappy.resources import Direction, PeerKind, Resource
from zappy.world import World


class FakeConn:
    def __init__(self):
        self.sent = []
        self.closed = False

    def sendall(self, data):
        self.sent.append(data.decode())

    def close(self):
        self.closed = True


class BrokenConn(FakeConn):
    def sendall(self, data):
        raise OSError("broken pipe")


def test_accept_greets_and_initialises():
    roster = Roster()
    world = World(5, 4)
    conn = FakeConn()
    player = roster.accept(conn, world, 100, random.Random(1), 42.0)
    assert conn.sent == ["BIENVENUE\n"]
    assert player.kind is PeerKind.PENDING
    assert player.level == 1
    assert player.direction is Direction.SUD
    assert player.resources[Resource.NOURRITURE] == 1260
    assert sum(player.resources) == 1260
    assert player.time_eat == 42.0
    assert player.time_unit == 100
    assert 0 <= player.tile.x < 5 and 0 <= player.tile.y < 4
    assert world.tile(player.tile.x, player.tile.y) is player.tile


def test_accept_puts_newest_first_and_numbers_ids():
    roster = Roster()
    world = World(3, 3)
    rng = random.Random(0)
    first = roster.accept(FakeConn(), world, 100, rng, 0.0)
    second = roster.accept(FakeConn(), world, 100, rng, 0.0)
    assert list(roster) == [second, first]
    assert (first.id, second.id) == (0, 1)


def test_player_and_egg_ids_are_independent():
    roster = Roster()
    assert [roster.new_player_id() for _ in range(3)] == [0, 1, 2]
    assert [roster.new_egg_id() for _ in range(2)] == [0, 1]


def test_insert_after_and_remove():
    roster = Roster()
    a = roster.add(Player(id=0))
    b = roster.add(Player(id=1))
    egg = Player(id=9, kind=PeerKind.EGG)
    roster.insert_after(b, egg)
    assert list(roster) == [b, egg, a]
    roster.remove(egg)
    assert list(roster) == [b, a]
    with pytest.raises(ValueError):
        roster.remove(egg)


def test_filters_and_find():
    roster = Roster()
    player = roster.add(Player(id=1, kind=PeerKind.PLAYER))
    graphic = roster.add(Player(id=2, kind=PeerKind.GRAPHIC))
    roster.add(Player(id=3, kind=PeerKind.EGG))
    assert roster.players() == [player]
    assert roster.graphics() == [graphic]
    assert roster.find(2) is graphic
    assert roster.find(77) is None


def test_purge_removes_and_closes_dead():
    roster = Roster()
    conn = FakeConn()
    alive = roster.add(Player(id=0, kind=PeerKind.PLAYER))
    dead = roster.add(Player(id=1, connection=conn, kind=PeerKind.DEAD))
    removed = roster.purge()
    assert removed == [dead]
    assert list(roster) == [alive]
    assert conn.closed


def test_schedule_chains_actions():
    player = Player(id=0, kind=PeerKind.PLAYER, time_unit=1)
    assert player.schedule(7, 10.0) == 17.0
    assert player.schedule(7, 12.0) == 24.0
    assert player.schedule(7, 30.0) == 37.0


def test_schedule_dead_returns_zero():
    player = Player(id=0, kind=PeerKind.DEAD, time_unit=1, action=5.0)
    assert player.schedule(7, 10.0) == 0
    assert player.action == 5.0


def test_send_encodes_and_survives_errors():
    conn = FakeConn()
    Player(id=0, connection=conn).send("ok\n")
    assert conn.sent == ["ok\n"]
    broken = BrokenConn()
    Player(id=1, connection=broken).send("ok\n")
    assert broken.sent == []