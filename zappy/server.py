"""The game server: listening socket, main loop and command line."""

import random
import select
import socket
import sys

from zappy.commands import Game
from zappy.config import load_config, populate
from zappy.dispatch import handle_disconnect, handle_line
from zappy.endgame import EndWatch
from zappy.incantation import finish_incantation
from zappy.options import OptionsError, parse_args
from zappy.players import Roster
from zappy.resources import PeerKind
from zappy.tasks import TaskQueue, consume_food, deliver
from zappy.world import World

_BACKLOG = 42
_TICK = 0.02
_CHUNK = 1024
_USAGE = (
    "-p numero de port\n-x largeur du monde\n-y hauteur du monde\n"
    "-n nom (team_1 team_2 ...)\n-c nombre de client par equipe\n"
    "-t delai temporel"
)


def build_world(options, rng, config_path=".conf"):
    """Create the map for ``options`` and scatter the configured resources."""
    world = World(options.width, options.height)
    config = load_config(config_path)
    # The map is seeded twice with the configured quantities.
    populate(world, config, rng)
    populate(world, config, rng)
    return world


class Server:
    """A listening game server holding the world, the peers and the task queue."""

    def __init__(self, options):
        self.options = options
        self.rng = random.Random()
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            listener.bind(("", options.port))
            listener.listen(_BACKLOG)
        except OSError:
            listener.close()
            raise
        self._listener = listener
        self.port = listener.getsockname()[1]
        print(f"y : {options.height}  x : {options.width}")
        world = build_world(options, self.rng)
        self.roster = Roster()
        self.queue = TaskQueue()
        self.game = Game(
            world=world,
            roster=self.roster,
            teams=tuple(options.teams),
            slots=dict(options.slots),
            time_unit=options.time_unit,
            rng=self.rng,
        )
        self._end = EndWatch()
        self._buffers = {}

    def serve_forever(self):
        """Run the main loop until a team has won."""
        while not self._end.check(self.roster):
            self._poll()

    def close(self):
        """Close every connection and the listening socket."""
        for entry in self.roster:
            entry.close()
        self._buffers.clear()
        self._listener.close()

    def _poll(self, timeout=_TICK):
        peers = {
            entry.connection: entry
            for entry in self.roster
            if entry.connection is not None and entry.kind is not PeerKind.EGG
        }
        readable, _, _ = select.select([self._listener, *peers], [], [], timeout)
        for sock in readable:
            if sock is self._listener:
                self._accept()
            elif sock in peers and peers[sock] in self.roster:
                self._receive(sock, peers[sock])
        moment = self.game.clock()
        for entry in self.roster:
            if entry.kind is PeerKind.EGG:
                consume_food(self.roster, entry, None, None, moment)
        self._run_due(moment)
        self._purge()

    def _accept(self):
        try:
            connection, _ = self._listener.accept()
        except OSError:
            print("Cannot connect to the server")
            return
        self.roster.accept(
            connection,
            self.game.world,
            self.options.time_unit,
            self.rng,
            self.game.clock(),
        )
        self._buffers[connection] = ""

    def _receive(self, sock, entry):
        try:
            data = sock.recv(_CHUNK)
        except OSError:
            data = b""
        if not data:
            self._buffers.pop(sock, None)
            handle_disconnect(self.game, self.queue, entry)
            return
        pending = self._buffers.get(sock, "") + data.decode(errors="replace")
        *lines, rest = pending.split("\n")
        self._buffers[sock] = rest
        for line in lines:
            entry = handle_line(self.game, self.queue, entry, line)
            if entry is None:
                self._buffers.pop(sock, None)
                return

    def _run_due(self, moment):
        for task in self.queue.pop_due(moment):
            if task.command == "incantation":
                finish_incantation(self.game, task)
            deliver(task)

    def _purge(self):
        dead = [entry for entry in self.roster if entry.kind is PeerKind.DEAD]
        for entry in dead:
            for task in self.queue:
                if task.player is entry:
                    deliver(task)
            self.queue.drop_player(entry)
        for entry in self.roster.purge():
            self._buffers.pop(entry.connection, None)


def main(argv=None):
    """Start the server from command-line arguments; return the exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        print(_USAGE)
        return 1
    try:
        options = parse_args(argv)
    except OptionsError as error:
        print(error)
        return 1
    try:
        server = Server(options)
    except OSError as error:
        print(f"Cannot bind: {error}")
        return 1
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.close()
    return 0