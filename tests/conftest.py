"""Shared test fixtures for Detective Quest."""

import pytest

from detective.engine.case import Case
from detective.engine.ledger import ClueLedger
from detective.engine.loader import default_case_path, load_case
from detective.engine.mansion import Room
from detective.engine.suspects import SuspectIndex
from detective.logging import configure_logging
from detective.session import InvestigationSession


@pytest.fixture(autouse=True)
def _quiet_logs():
    configure_logging(log_level="CRITICAL")


@pytest.fixture
def case() -> Case:
    return load_case(default_case_path())


@pytest.fixture
def mansion(case: Case) -> Room:
    return case.build()


@pytest.fixture
def ledger() -> ClueLedger:
    return ClueLedger()


@pytest.fixture
def index(case: Case) -> SuspectIndex:
    return SuspectIndex.from_bindings(case.bindings)


@pytest.fixture
def session(case: Case):
    with InvestigationSession.start(case) as session:
        yield session
