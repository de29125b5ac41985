"""Session layer owning the structures of one investigation."""

from collections.abc import Iterable, Iterator

from .engine.case import Case
from .engine.explorer import ExplorationController, Outcome, StepResult
from .engine.ledger import ClueLedger
from .engine.mansion import Room, postorder
from .engine.suspects import SuspectIndex
from .engine.verdict import Judgement, judge
from .logging import get_logger

logger = get_logger(__name__)


class InvestigationSession:
    """Wraps the mansion, the clue ledger and the suspect index.

    All three belong to this session alone and are released together by
    close().
    """

    def __init__(self, case: Case, mansion: Room, ledger: ClueLedger, index: SuspectIndex):
        self.case = case
        self.mansion: Room | None = mansion
        self.ledger = ledger
        self.index = index
        self.controller = ExplorationController(mansion, ledger)
        self.closed = False

    @classmethod
    def start(cls, case: Case, max_clues: int | None = None) -> "InvestigationSession":
        """Build the mansion and the suspect index, then enter the root room."""
        unreachable = case.unreachable
        if unreachable:
            logger.warning("rooms_unreachable", rooms=unreachable)

        index = SuspectIndex.from_bindings(case.bindings)
        session = cls(case, case.build(), ClueLedger(max_entries=max_clues), index)
        logger.info(
            "session_started",
            rooms=len(case.rooms) - len(unreachable),
            bindings=len(index),
        )
        return session

    def __enter__(self) -> "InvestigationSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def path(self) -> list[str]:
        return self.controller.path

    def explore(self, commands: Iterable[str]) -> Iterator[StepResult]:
        """Drive the controller with commands, logging every transition."""
        for result in self.controller.run(commands):
            self._log_step(result)
            yield result

    def _log_step(self, result: StepResult) -> None:
        room = result.room.name
        match result.outcome:
            case Outcome.ENTERED:
                logger.debug("room_entered", room=room)
                if result.collected:
                    logger.info(
                        "clue_collected", room=room, clue=result.clue,
                        total=len(self.ledger),
                    )
            case Outcome.BLOCKED:
                logger.debug(
                    "movement_blocked", room=room, direction=result.direction.value,
                )
            case Outcome.INVALID:
                logger.debug("invalid_command", room=room)
            case _:
                logger.info(
                    "exploration_ended",
                    reason=result.outcome.value,
                    room=room,
                    visited=len(self.path),
                    clues=len(self.ledger),
                )

    def collected_clues(self) -> list[str]:
        return list(self.ledger.sorted())

    def accuse(self, raw_accusation: str) -> Judgement:
        judgement = judge(self.ledger, self.index, raw_accusation)
        logger.info(
            "accusation_judged",
            accused=judgement.accused,
            count=judgement.count,
            verdict=judgement.verdict.value,
        )
        return judgement

    def close(self) -> None:
        """Release the mansion, the ledger and the index."""
        if self.closed:
            return
        rooms = sum(1 for _ in postorder(self.mansion))
        self.mansion = None
        clues = self.ledger.release()
        bindings = self.index.release()
        self.closed = True
        logger.debug("session_closed", rooms=rooms, clues=clues, bindings=bindings)
