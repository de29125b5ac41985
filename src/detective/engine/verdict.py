"""Scoring an accusation against the collected clues."""

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from .ledger import ClueLedger
from .suspects import SuspectIndex

# Clues needed for an accusation to stand.
SUSTAIN_THRESHOLD = 2


class Verdict(enum.Enum):
    SUSTAINED = "sustained"
    INSUFFICIENT = "insufficient"
    NO_SUSPECT = "no_suspect"


@dataclass(frozen=True)
class Judgement:
    accused: str
    count: int
    verdict: Verdict


def count_matches(clues: Iterable[str], index: SuspectIndex, accused: str) -> int:
    """Count clues whose bound suspect is exactly ``accused``."""
    return sum(1 for clue in clues if index.lookup(clue) == accused)


def verify(ledger: ClueLedger, index: SuspectIndex, accused: str) -> int:
    """Walk the ledger in ascending order and count clues pointing at accused."""
    return count_matches(ledger.sorted(), index, accused)


def decide(count: int) -> Verdict:
    if count >= SUSTAIN_THRESHOLD:
        return Verdict.SUSTAINED
    return Verdict.INSUFFICIENT


def clean_accusation(raw: str) -> str:
    """Strip line endings only; other surrounding whitespace is kept."""
    return raw.strip("\r\n")


def judge(ledger: ClueLedger, index: SuspectIndex, raw_accusation: str) -> Judgement:
    """Turn the player's raw answer into a verdict.

    An empty answer is not an accusation: no count is taken.
    """
    accused = clean_accusation(raw_accusation)
    if not accused:
        return Judgement(accused="", count=0, verdict=Verdict.NO_SUSPECT)
    count = verify(ledger, index, accused)
    return Judgement(accused=accused, count=count, verdict=decide(count))
