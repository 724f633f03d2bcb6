"""Detection of the end of a game."""

from zappy.events import game_over


def _teams(roster):
    return [player.team for player in roster.players()]


class EndWatch:
    """Ends the game once several teams have met and only one remains."""

    def __init__(self):
        self.contested = False
        self.winner = None

    def check(self, roster):
        """Return True, announcing the winner, when the game is over."""
        teams = _teams(roster)
        if not self.contested and len(set(teams)) > 1:
            self.contested = True
        if not self.contested:
            return False
        remaining = set(teams)
        if len(remaining) > 1:
            return False
        self.winner = teams[0] if teams else "Nobody"
        print(f"The team {self.winner} has win")
        game_over(roster, self.winner)
        return True


def check_endgame(roster):
    """Announce and return True when at most one team has players left."""
    teams = _teams(roster)
    if not teams:
        game_over(roster, "Nobody")
        return True
    first = teams[0]
    if all(team == first for team in teams):
        game_over(roster, first)
        return True
    return False