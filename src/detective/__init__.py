"""Detective Quest: explore a mansion, collect clues, accuse a suspect."""

import sys

from .config import Config
from .console import farewell, play
from .engine.errors import AllocationError, CaseFileError, ConfigError
from .engine.loader import default_case_path, load_case
from .logging import configure_logging, get_logger
from .session import InvestigationSession

__all__ = ["main", "Config", "InvestigationSession"]


def main() -> None:
    """Entry point for the console game."""
    try:
        config = Config.from_env()
    except ConfigError as exc:
        configure_logging()
        get_logger(__name__).error("config_invalid", error=str(exc))
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    case_path = config.case_file or default_case_path()
    logger.info("application_starting", case_file=str(case_path))

    try:
        case = load_case(case_path)
    except (OSError, CaseFileError) as exc:
        logger.error("case_load_failed", case_file=str(case_path), error=str(exc))
        print(f"Could not load the case: {exc}", file=sys.stderr)
        return

    logger.info(
        "case_loaded",
        rooms=len(case.rooms),
        bindings=len(case.bindings),
        suspects=len(case.suspects),
    )

    try:
        with InvestigationSession.start(case, max_clues=config.max_clues) as session:
            play(session, sys.stdin, sys.stdout)
    except AllocationError as exc:
        logger.error("allocation_failed", structure=exc.structure, size=exc.size)
        print(f"\nThe investigation ran out of room: {exc}")

    farewell(sys.stdout)
