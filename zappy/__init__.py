"""Tile-world multiplayer game: server, graphic monitor protocol and autonomous player."""

__version__ = "0.1.0"