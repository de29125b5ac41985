"""Exploration state machine.

The controller only moves forward: from the current room to one of its
children. Commands come from any iterable of raw lines, so a scripted list
drives it exactly like a console does.
"""

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .errors import ExplorationOver
from .ledger import ClueLedger
from .mansion import Direction, Room, step


class Command(enum.Enum):
    LEFT = "e"
    RIGHT = "d"
    EXIT = "s"
    INVALID = ""


_DIRECTIONS = {Command.LEFT: Direction.LEFT, Command.RIGHT: Direction.RIGHT}


def parse_command(raw: str) -> Command:
    """Only the first character counts, case-insensitively."""
    letter = raw.strip("\r\n")[:1].lower()
    if not letter:
        return Command.INVALID
    try:
        return Command(letter)
    except ValueError:
        return Command.INVALID


class Outcome(enum.Enum):
    ENTERED = "entered"
    BLOCKED = "blocked"
    INVALID = "invalid"
    EXITED = "exited"
    LEFT_LEAF = "left_leaf"
    INPUT_EXHAUSTED = "input_exhausted"


@dataclass(frozen=True)
class StepResult:
    """What happened on one transition and where the controller stands."""

    outcome: Outcome
    room: Room
    clue: str | None = None
    collected: bool = False
    direction: Direction | None = None

    @property
    def ends_exploration(self) -> bool:
        return self.outcome in (
            Outcome.EXITED, Outcome.LEFT_LEAF, Outcome.INPUT_EXHAUSTED,
        )


class ExplorationController:
    """Walks the mansion from its root, feeding found clues into a ledger."""

    def __init__(self, root: Room, ledger: ClueLedger):
        self.ledger = ledger
        self.path: list[str] = []
        self.finished = False
        self.current = root
        self.arrival = self._enter(root)

    def _enter(self, room: Room, direction: Direction | None = None) -> StepResult:
        self.current = room
        self.path.append(room.name)
        collected = self.ledger.insert(room.clue)
        return StepResult(
            Outcome.ENTERED, room,
            clue=room.clue, collected=collected, direction=direction,
        )

    def _finish(self, outcome: Outcome) -> StepResult:
        self.finished = True
        return StepResult(outcome, self.current)

    @property
    def at_leaf(self) -> bool:
        return self.current.is_leaf

    def send(self, raw: str | Command) -> StepResult:
        """Apply one player command to the current state."""
        if self.finished:
            raise ExplorationOver("exploration has already ended")

        command = raw if isinstance(raw, Command) else parse_command(raw)

        # Any input at a dead end closes the walk.
        if self.at_leaf:
            if command is Command.EXIT:
                return self._finish(Outcome.EXITED)
            return self._finish(Outcome.LEFT_LEAF)

        if command is Command.EXIT:
            return self._finish(Outcome.EXITED)

        direction = _DIRECTIONS.get(command)
        if direction is None:
            return StepResult(Outcome.INVALID, self.current)

        child = step(self.current, direction)
        if child is None:
            return StepResult(Outcome.BLOCKED, self.current, direction=direction)
        return self._enter(child, direction)

    def end_of_input(self) -> StepResult:
        """No more commands: end as if the player had asked to leave."""
        if self.finished:
            raise ExplorationOver("exploration has already ended")
        return self._finish(Outcome.INPUT_EXHAUSTED)

    def run(self, commands: Iterable[str]) -> Iterator[StepResult]:
        """Yield the arrival at the root, then one result per command.

        Stops at the first result that ends exploration. Running out of
        commands first yields a final INPUT_EXHAUSTED result.
        """
        yield self.arrival
        for raw in commands:
            result = self.send(raw)
            yield result
            if result.ends_exploration:
                return
        yield self.end_of_input()
