"""Line-oriented console front end.

Reads commands from a text stream and writes the game text to another, so
tests can drive a whole session with io.StringIO.
"""

from collections.abc import Iterator
from typing import TextIO

from .engine.explorer import Outcome, StepResult
from .engine.mansion import Room
from .engine.verdict import Judgement, Verdict
from .session import InvestigationSession

INTRO = "Starting exploration (commands: e = left, d = right, s = leave)"
FAREWELL = "\nThe end. Thanks for playing Detective Quest!"

_OUTCOME_MESSAGES = {
    Outcome.INVALID: "Invalid command. Type 'e', 'd' or 's'.",
    Outcome.EXITED: "Exploration ended by the player.",
    Outcome.LEFT_LEAF: "Exploration ended.",
    Outcome.INPUT_EXHAUSTED: "No more input. Exploration ended.",
}

_VERDICT_MESSAGES = {
    Verdict.SUSTAINED: "Result: there is enough evidence. Accusation sustained!",
    Verdict.INSUFFICIENT: "Result: insufficient evidence. The accusation is weak.",
}


def _write(out: TextIO, text: str = "", end: str = "\n") -> None:
    out.write(text + end)
    out.flush()


def _exit_label(room: Room | None) -> str:
    return room.name if room is not None else "(blocked)"


def write_menu(out: TextIO, room: Room) -> None:
    """Show the choices available in the current room."""
    if room.is_leaf:
        _write(out, "This room has no paths (leaf). You can leave (s) or end the exploration.")
        _write(out, "Type 's' to leave or anything else to end the exploration: ", end="")
        return
    _write(out, "Choose a path:")
    _write(out, f"  (e) left -> {_exit_label(room.left)}")
    _write(out, f"  (d) right -> {_exit_label(room.right)}")
    _write(out, "  (s) leave the exploration")
    _write(out, "Option: ", end="")


def render_step(out: TextIO, result: StepResult) -> None:
    if result.outcome is Outcome.ENTERED:
        _write(out, f"\nYou entered: {result.room.name}")
        if result.clue:
            _write(out, f'Clue found: "{result.clue}"')
        else:
            _write(out, "No clue in this room.")
    elif result.outcome is Outcome.BLOCKED:
        _write(out, f"The path to the {result.direction.value} is unavailable.")
    else:
        _write(out, _OUTCOME_MESSAGES[result.outcome])


def render_clues(out: TextIO, clues: list[str]) -> None:
    _write(out, "\n== Collected clues ==")
    if not clues:
        _write(out, "(no clues collected)")
        return
    for clue in clues:
        _write(out, f" - {clue}")


def render_judgement(out: TextIO, judgement: Judgement) -> None:
    if judgement.verdict is Verdict.NO_SUSPECT:
        _write(out, "No suspect indicated. Closing the case.")
        return
    _write(out, f"\nClues pointing to '{judgement.accused}': {judgement.count}")
    _write(out, _VERDICT_MESSAGES[judgement.verdict])


def _commands(stdin: TextIO, out: TextIO, session: InvestigationSession) -> Iterator[str]:
    """Prompt for and read one command line at a time until EOF."""
    while True:
        write_menu(out, session.controller.current)
        line = stdin.readline()
        if not line:
            _write(out)
            return
        yield line


def play(session: InvestigationSession, stdin: TextIO, out: TextIO) -> Judgement | None:
    """Run exploration and the final accusation.

    Returns None when the input ends before an accusation is made.
    """
    _write(out, INTRO)
    for result in session.explore(_commands(stdin, out, session)):
        render_step(out, result)

    render_clues(out, session.collected_clues())

    example = session.case.suspects[0] if session.case.suspects else "Sr. Black"
    _write(out, f"\nName the suspect to accuse (e.g. '{example}'): ", end="")
    line = stdin.readline()
    if not line:
        _write(out, "\nNo answer given. Closing the case.")
        return None

    judgement = session.accuse(line)
    render_judgement(out, judgement)
    return judgement


def farewell(out: TextIO) -> None:
    _write(out, FAREWELL)
