"""Command-line options of the game server."""

from dataclasses import dataclass, field

from zappy.text import _atoi

_INT_FLAGS = ("-p", "-x", "-y", "-c", "-t")


class OptionsError(ValueError):
    """Raised when the server options cannot be used."""


@dataclass
class ServerOptions:
    """Settings the server runs with; ``slots`` maps team to free places."""

    port: int
    width: int = 50
    height: int = 50
    teams: tuple = ()
    slots: dict = field(default_factory=dict)
    time_unit: int = 100


def check_team_names(names):
    """Raise OptionsError unless the team names are present, non-empty and distinct."""
    if not names:
        raise OptionsError("Error : argument -n not specified")
    names = list(names)
    for index, name in enumerate(names):
        if name == "":
            raise OptionsError("Un nom d'équipe est vide")
        if name in names[index + 1:]:
            raise OptionsError("Deux équipes possèdent le même nom")


def _int_flag(argv, index):
    if argv[index] in _INT_FLAGS and index + 1 < len(argv):
        return _INT_FLAGS.index(argv[index])
    return None


def parse_args(argv):
    """Parse the server arguments (without the program name)."""
    argv = list(argv)
    values = [0] * len(_INT_FLAGS)
    teams = None
    index = 0
    while index < len(argv):
        flag = _int_flag(argv, index)
        if flag is not None:
            values[flag] = _atoi(argv[index + 1])
            index += 2
        elif argv[index] == "-n":
            end = index + 1
            while end < len(argv) and _int_flag(argv, end) is None:
                end += 1
            names = argv[index + 1:end]
            if names:
                teams = (teams or []) + names
            index = end
        else:
            print(f"unknow parameter :{argv[index]}")
            index += 2
    check_team_names(teams)
    port, width, height, per_team, time_unit = values
    if port == 0:
        raise OptionsError("the port cannot be null")
    return ServerOptions(
        port=port,
        width=width or 50,
        height=height or 50,
        teams=tuple(teams),
        slots={team: per_team or 4 for team in teams},
        time_unit=time_unit or 100,
    )