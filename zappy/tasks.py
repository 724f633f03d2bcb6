"""Timed replies waiting to be sent, and the food clock of players."""

import bisect
import itertools
import time
from dataclasses import dataclass

from zappy.events import egg_died, player_died
from zappy.resources import PeerKind, Resource

_DEATH = "mort\n"


@dataclass(eq=False)
class Task:
    """A command received from ``player`` and the reply due at ``time``.

    ``queued`` tells whether the task waits in the queue for its reply;
    graphic queries are answered at once and never queued.
    """

    player: object = None
    command: str = ""
    reply: str = None
    time: float = 0.0
    queued: bool = True


def now():
    """Current wall-clock time in seconds."""
    return time.time()


def consume_food(roster, player, task, reply, now):
    """Charge ``player`` the food eaten since its last meal and set the reply.

    A player that runs out of food gets ``mort`` as reply and is marked dead;
    an egg that runs out of food is marked dead as well.
    """
    elapsed = (now - player.time_eat) * player.time_unit
    food = int(player.resources[Resource.NOURRITURE] - elapsed)
    player.resources[Resource.NOURRITURE] = food
    player.time_eat = now
    if food > 0 and player.kind is not PeerKind.EGG:
        if task is not None:
            task.reply = reply
    elif player.kind is PeerKind.PLAYER:
        if task is not None:
            task.reply = _DEATH
        player_died(roster, player.id)
        player.kind = PeerKind.DEAD
    elif player.kind is PeerKind.EGG:
        egg_died(roster, player.id)
        player.kind = PeerKind.DEAD


def deliver(task):
    """Send the task's reply to its player; return whether anything was sent."""
    player = task.player
    if player is None or not task.reply:
        return False
    player.send(task.reply)
    print(f"\033[01;32mThe message send is :\033[01;31m {task.reply}\033[01;00m")
    if task.reply == _DEATH:
        print("The client is dead or has leave")
    return True


class TaskQueue:
    """Tasks ordered by the moment their reply becomes due."""

    def __init__(self):
        self._tasks = []

    def push(self, task):
        """Insert ``task`` before every task due at the same time or later."""
        index = bisect.bisect_left(self._tasks, task.time, key=lambda queued: queued.time)
        self._tasks.insert(index, task)
        return task

    def pop_due(self, now):
        """Remove and return, in order, the tasks due strictly before ``now``."""
        due = list(itertools.takewhile(lambda task: task.time < now, self._tasks))
        del self._tasks[: len(due)]
        return due

    def drop_player(self, player):
        """Forget every task belonging to ``player``."""
        self._tasks = [task for task in self._tasks if task.player is not player]

    def __len__(self):
        return len(self._tasks)

    def __iter__(self):
        return iter(list(self._tasks))