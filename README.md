# zappy

A small networked game. Teams of players live on a wrapping grid of tiles.
They pick up food to stay alive, collect stones, and gather on a tile to
perform an incantation that raises their level. Once players of more than
one team have been in play, the game ends as soon as only one team has
players left.

The package holds:

* a game server (`zappy-server`, `zappy.server.Server`) that keeps the
  world, runs the players' timed commands and reports changes to connected
  graphic monitors;
* an autonomous player (`zappy-ai`, `zappy.ai_agent.Agent`) that connects to
  the server and plays on its own;
* a launcher (`zappy-client`) that starts two companion client programs
  together.

It needs nothing beyond the Python standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
zappy-server -p 4242 -x 20 -y 20 -n red blue -c 4 -t 100
```

| Option | Meaning | Default |
| ------ | ------- | ------- |
| `-p`   | port to listen on (required, must not be 0) | — |
| `-x`   | width of the world | 50 |
| `-y`   | height of the world | 50 |
| `-n`   | team names, one or more, separated by spaces | — |
| `-c`   | number of players allowed per team | 4 |
| `-t`   | time unit: an action of `n` units lasts `n / t` seconds | 100 |

Team names must be given, must not be empty and must all differ; otherwise
the server prints the problem and exits with status 1. Unknown options are
reported and skipped together with the word after them. Started with no
arguments at all, the server prints its usage and exits with status 1.

When the game ends the server prints `The team <name> has win` and sends
`seg <name>` to every monitor (`Nobody` when no player is left).

### Resource configuration

If a file named `.conf` is readable in the working directory, the server
reads it when it builds the world. Each line sets one value:

```
MaxNourriture:12
MaxLinemate:12
PopSibur:8
```

`Max<Resource>:` sets how many units of that resource are scattered over the
world; the world is seeded twice with these quantities at start-up.
`Pop<Resource>:` is read into the configuration (`zappy.config.RepopConfig`)
but the server does not use it: an object that a player picks up reappears
at once on a random tile. The resources are `Nourriture`, `Linemate`,
`Deraumere`, `Sibur`, `Mendiane`, `Phiras` and `Thystame`. Lines that match
none of these keys are ignored, and anything not set keeps its default.

## Connecting

A new connection is greeted with `BIENVENUE`. The first line it sends
decides what it is:

* `GRAPHIC` — a monitor. It receives the map size (`msz`), the time unit
  (`sgt`), the content of every tile (`bct`), the team names (`tna`), every
  player (`pnw`) and egg (`enw`) already in play and every player's
  inventory (`pin`). After that it is sent events as they happen: `ppo`,
  `pin`, `bct`, `pnw`, `pic`, `pie`, `pbc`, `pex`, `pdi`, `pdr`, `pgt`,
  `enw`, `ebo`, `edi` and `seg`. It may ask `msz`, `bct X Y`, `mct`, `tna`,
  `ppo N`, `plv N`, `pin N`, `sgt` and `sst T`; a request with the wrong
  number of arguments, or for a tile or player that does not exist, is
  answered with `sbp`, and an unknown request gets no answer.
* a team name — a player. The server replies with the number of free places
  in the team and then the world's width and height. An unknown team, or a
  full one, is disconnected. When an egg of that team is waiting, it takes
  over the new connection and the team gains a place.

Players send one command per line:

`avance`, `droite`, `gauche`, `voir`, `inventaire`, `prend <object>`,
`pose <object>`, `broadcast <text>`, `expulse`, `incantation`, `fork`,
`connect_nbr`.

Each takes a number of time units, and its reply is sent when the action
completes. Food runs down continuously; a player who runs out receives
`mort` and is removed. A player whose connection closes frees its place in
the team.

## Running an autonomous player

```
zappy-ai -n red -h 127.0.0.1 -p 4242
```

`-n` is required; the host defaults to `127.0.0.1` and the port to `4243`.
With a missing or unknown option it prints its usage. The player wanders,
keeps itself fed, looks around for the stones its next level needs, walks to
them and picks them up. It stops when the server answers `mort` or the
connection breaks.

## Running the client launcher

```
zappy-client -n red -p 4242 -h 127.0.0.1
```

The launcher takes either two or three option pairs (four or six
arguments). It joins them into one string and starts `./display` and `./ia`
from the current directory, each with that string as its single argument,
then waits for both to finish. With any other number of arguments it prints
its usage.

## What the package does not do

* It has no graphic monitor: nothing here draws the world. Any program that
  speaks the monitor protocol above can connect with `GRAPHIC`.
* The launcher does not provide the `./display` and `./ia` programs it
  starts; they must already exist in the current directory. The autonomous
  player in this package is run with `zappy-ai`.