"""Command line and connection of the automatic player."""

import socket
import sys

from zappy.ai_agent import Agent
from zappy.linereader import LineReader
from zappy.text import _atoi

_DEFAULT_HOST = "127.0.0.1"
_DEFAULT_PORT = 4243
_USAGE = "Usage : -n team [-h ip] [-p port]"
_WELCOME = "BIENVENUE"


def parse_client_args(argv):
    """Return ``(host, port, team)``; raise ValueError on bad arguments."""
    argv = list(argv)
    host, port, team = _DEFAULT_HOST, _DEFAULT_PORT, ""
    index = 0
    while index < len(argv):
        flag = argv[index]
        if flag not in ("-n", "-h", "-p") or index + 1 >= len(argv):
            raise ValueError(_USAGE)
        value = argv[index + 1]
        if flag == "-n":
            team = value
        elif flag == "-h":
            host = value
        else:
            port = _atoi(value)
        index += 2
    if team == "":
        raise ValueError(_USAGE)
    return host, port, team


def _map_size(line):
    parts = line.split()
    width = _atoi(parts[0]) if parts else 0
    height = _atoi(parts[1]) if len(parts) > 1 else 0
    return width, height


def run_client(host, port, team):
    """Connect to the server as ``team`` and play until the game ends."""
    with socket.create_connection((host, port)) as sock:
        reader = LineReader(sock.recv)
        if reader.read_line() != _WELCOME:
            print("Error on initialisation of the connexion")
            return 0
        sock.sendall(f"{team}\n".encode())
        remaining = _atoi(reader.read_line())
        print(f"{remaining} connexion remaining")
        width, height = _map_size(reader.read_line())

        def send(text):
            if text:
                sock.sendall(text.encode())

        Agent(width, height, team, send).run(reader)
    return 0


def main(argv=None):
    """Entry point of the automatic player; return the exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        host, port, team = parse_client_args(argv)
    except ValueError as error:
        print(error)
        return 0
    try:
        return run_client(host, port, team)
    except OSError as error:
        print(f"Probleme lors de la connexion: {error}")
        return 1