"""Configuration for Detective Quest."""

import os
from dataclasses import dataclass
from pathlib import Path

from .engine.errors import ConfigError


def _optional_count(name: str) -> int | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    try:
        count = int(value)
    except ValueError:
        raise ConfigError(f"{name} must be a whole number, got {value!r}") from None
    if count < 0:
        raise ConfigError(f"{name} must not be negative, got {count}")
    return count


@dataclass
class Config:
    """Application configuration."""

    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False
    case_file: Path | None = None
    max_clues: int | None = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        log_file = os.getenv("DETECTIVE_LOG_FILE")
        case_file = os.getenv("DETECTIVE_CASE_FILE")

        return cls(
            log_level=os.getenv("DETECTIVE_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("DETECTIVE_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
            case_file=Path(case_file) if case_file else None,
            max_clues=_optional_count("DETECTIVE_MAX_CLUES"),
        )
