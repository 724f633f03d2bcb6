"""The automatic player: a table-driven state machine over server answers."""

import random
from enum import IntEnum

from zappy.ai_knowledge import (
    find_tiles,
    missing_resources,
    parse_inventory,
    parse_level,
    parse_view,
    requirements,
    shortest_road,
)


class Outcome(IntEnum):
    """Result of a step or of a server answer, selecting the next step."""

    OK = 0
    KO = 1
    PREND = 2
    START = 3
    END = 4
    CONNECT = 5
    ERROR = 6
    NONE = 7


class Step(IntEnum):
    """The agent's behaviours."""

    FAIM = 0
    MOVE_RD = 1
    PRENDRE_NOURRITURE = 2
    INVENTAIRE = 3
    MAJ = 4
    WHAT = 5
    VOIR = 6
    MAJ_VOIR = 7
    WHERE = 8
    MAKE_ROAD = 9
    FOLLOW_ROAD = 10
    PREND_OBJECT = 11
    CHECK_GROUP = 12
    INCANTATION = 13
    MAJ_LVL = 14
    VIDE_CASE = 15
    POSE_OBJECT = 16
    STAND = 17


# Next step after each step, indexed by OK, KO, PREND, START, END.
_TRANSITIONS = {
    Step.FAIM: (2, 1, 0, 0, 0),
    Step.MOVE_RD: (2, 2, 1, 0, 0),
    Step.PRENDRE_NOURRITURE: (3, 1, 2, 0, 0),
    Step.INVENTAIRE: (4, 4, 4, 0, 0),
    Step.MAJ: (0, 0, 4, 0, 0),
    Step.WHAT: (6, 12, 10, 0, 0),
    Step.VOIR: (7, 7, 6, 0, 0),
    Step.MAJ_VOIR: (8, 8, 7, 0, 0),
    Step.WHERE: (9, 1, 8, 0, 0),
    Step.MAKE_ROAD: (10, 0, 11, 0, 0),
    Step.FOLLOW_ROAD: (10, 0, 11, 0, 0),
    Step.PREND_OBJECT: (3, 0, 0, 0, 0),
    Step.CHECK_GROUP: (15, 0, 0, 0, 0),
    Step.INCANTATION: (12, 12, 12, 17, 14),
    Step.MAJ_LVL: (0, 0, 0, 0, 0),
    Step.VIDE_CASE: (0, 0, 0, 16, 0),
    Step.POSE_OBJECT: (0, 0, 0, 13, 0),
    Step.STAND: (0, 0, 0, 0, 14),
}

_HUNGRY_BELOW = 50
_FOOD = "nourriture"
_DEATH = "mort"
_MESSAGE = "message "


def _starting_inventory():
    inventory = {_FOOD: 10}
    inventory.update(
        dict.fromkeys(("linemate", "deraumere", "sibur", "mendiane", "phiras", "thystame"), 0)
    )
    return inventory


class Agent:
    """Plays one character: looks for food and stones and tries to rise.

    ``send`` is called with each command line to write to the server.
    """

    def __init__(self, width, height, team, send, rng=None):
        self.width = width
        self.height = height
        self.team = team
        self._send = send
        self.rng = rng if rng is not None else random.Random()
        self.level = 1
        self.group = 0
        self.last_step = Step.MOVE_RD
        self.silent = False
        self.answer = ""
        self.future = Outcome.OK
        self.target = ""
        self.tile_index = 0
        self.where = []
        self.see = []
        self.inventory = _starting_inventory()
        self.roads = []
        self.resources = []
        self.end_road = []
        self.messages = []
        self.alive = True
        self._steps = {
            Step.FAIM: self._faim,
            Step.MOVE_RD: self._move_rd,
            Step.PRENDRE_NOURRITURE: self._prendre_nourriture,
            Step.INVENTAIRE: self._inventaire,
            Step.MAJ: self._maj_inv,
            Step.WHAT: self._what,
            Step.VOIR: self._voir,
            Step.MAJ_VOIR: self._maj_voir,
            Step.WHERE: self._where,
            Step.MAKE_ROAD: self._make_road,
            Step.FOLLOW_ROAD: self._follow_road,
            Step.PREND_OBJECT: self._prend_object,
            Step.CHECK_GROUP: self._check_group,
            Step.INCANTATION: self._incantation,
            Step.MAJ_LVL: self._maj_lvl,
            Step.VIDE_CASE: self._vide_case,
            Step.POSE_OBJECT: self._pose_object,
            Step.STAND: self._stand,
        }

    # -- driving -----------------------------------------------------------

    def handle(self, outcome):
        """Run the step that follows the last one for ``outcome``."""
        row = _TRANSITIONS[self.last_step]
        if not 0 <= outcome < len(row):
            raise ValueError(f"no transition for {Outcome(outcome).name}")
        step = Step(row[outcome])
        self._steps[step]()
        return step

    def receive(self, line):
        """Record a line from the server and return the outcome it means."""
        self.answer = line
        if line == _DEATH:
            self.alive = False
            return Outcome.ERROR
        if line.startswith(_MESSAGE):
            self.messages.insert(0, line)
            return Outcome.NONE
        return Outcome.KO if line == "ko" else Outcome.OK

    def run(self, reader):
        """Play until the server declares death or the connection breaks."""
        self._send("avance\n")
        while self.alive:
            outcome = Outcome.NONE
            line = ""
            if self.silent:
                outcome = self.future
            else:
                line = reader.read_line()
                if reader.error:
                    break
                if line:
                    outcome = self.receive(line)
            self.answer = line
            print(line)
            if outcome is not Outcome.NONE and self.alive:
                self.handle(outcome)

    # -- steps -------------------------------------------------------------

    def _enter(self, step, silent):
        self.last_step = step
        self.silent = silent

    def _conclude(self, outcome):
        self.future = outcome
        return outcome

    def _faim(self):
        self._enter(Step.FAIM, True)
        hungry = self.inventory.get(_FOOD, 0) < _HUNGRY_BELOW
        return self._conclude(Outcome.OK if hungry else Outcome.KO)

    def _move_rd(self):
        self._enter(Step.MOVE_RD, False)
        roll = self.rng.randrange(16)
        self._send("droite\n" if roll == 0 else "gauche\n" if roll == 1 else "avance\n")
        return Outcome.OK

    def _prendre_nourriture(self):
        self._enter(Step.PRENDRE_NOURRITURE, False)
        self._send("prend nourriture\n")
        return Outcome.OK

    def _maj_inv(self):
        self._enter(Step.MAJ, True)
        if self.answer == "":
            return self._conclude(Outcome.KO)
        self.inventory.update(parse_inventory(self.answer))
        print(self.inventory.get(_FOOD, 0))
        return self._conclude(Outcome.OK)

    def _inventaire(self):
        self._enter(Step.INVENTAIRE, False)
        self._send("inventaire\n")
        return Outcome.OK

    def _voir(self):
        self._enter(Step.VOIR, False)
        self._send("voir\n")
        return Outcome.OK

    def _maj_voir(self):
        self._enter(Step.MAJ_VOIR, True)
        if self.answer == "":
            return self._conclude(Outcome.KO)
        self.see = parse_view(self.answer)
        return self._conclude(Outcome.START if self.group == 2 else Outcome.OK)

    def _where(self):
        self._enter(Step.WHERE, True)
        self.where = find_tiles(self.see, self.resources)
        return self._conclude(Outcome.OK if self.where else Outcome.KO)

    def _pick_target(self):
        cell = self.see[self.tile_index] if self.tile_index < len(self.see) else ""
        self.target = next((name for name in self.resources if name in cell), self.target)

    def _make_road(self):
        self._enter(Step.MAKE_ROAD, True)
        best = shortest_road(self.where)
        self.roads = [road for road in (shortest_road([i]) for i in self.where) if road]
        if best is not None:
            self.tile_index, road = best
            self.end_road = list(road)
        if self.end_road:
            return self._conclude(Outcome.OK)
        if self.where:
            self._pick_target()
            return self._conclude(Outcome.PREND)
        return self._conclude(Outcome.KO)

    def _follow_road(self):
        self._enter(Step.FOLLOW_ROAD, True)
        if self.end_road:
            self._send(self.end_road.pop(0))
        if not self.end_road:
            self._pick_target()
            return self._conclude(Outcome.PREND)
        return self._conclude(Outcome.OK)

    def _prend_object(self):
        self._enter(Step.PREND_OBJECT, False)
        self._send(f"prend {self.target}\n")
        if self.see and self.target and self.target in self.see[0]:
            self.see[0] = self.see[0].replace(self.target, "", 1)
        self.target = ""
        self.where = []
        self.roads = []
        return Outcome.OK

    def _what(self):
        self._enter(Step.WHAT, True)
        self.resources = missing_resources(self.inventory, self.level)
        if self.roads and self.where:
            return self._conclude(Outcome.PREND)
        if self.resources:
            return self._conclude(Outcome.OK)
        return self._conclude(Outcome.END if self.level == 2 else Outcome.KO)

    def _check_group(self):
        self._enter(Step.CHECK_GROUP, True)
        if self.level == 1:
            self.group = 2
            return self._conclude(Outcome.OK)
        return self._conclude(Outcome.KO)

    def _stand(self):
        self._enter(Step.STAND, False)
        return Outcome.END

    def _incantation(self):
        self._enter(Step.INCANTATION, False)
        self._send("incantation\n")
        return Outcome.OK

    def _maj_lvl(self):
        self._enter(Step.MAJ_LVL, True)
        self.future = Outcome.OK
        level = parse_level(self.answer)
        if level is not None:
            self.level = level
        return Outcome.OK

    def _vide_case(self):
        """Pick up the food lying on the current tile."""
        self._enter(Step.VIDE_CASE, True)
        while self.see and _FOOD in self.see[0]:
            self.see[0] = self.see[0].replace(_FOOD, "", 1)
            self._send(f"prend {_FOOD}\n")
        return self._conclude(Outcome.START)

    def _pose_object(self):
        self._enter(Step.POSE_OBJECT, True)
        for stone, needed in requirements(self.level).items():
            for _ in range(min(needed, max(self.inventory.get(stone, 0), 0))):
                self._send(f"pose {stone}\n")
                self.inventory[stone] -= 1
        return self._conclude(Outcome.START)