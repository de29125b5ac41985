"""Exceptions raised by the investigation engine."""


class DetectiveError(Exception):
    """Base class for engine errors."""


class AllocationError(DetectiveError):
    """A structure could not make room for another entry."""

    def __init__(self, structure: str, size: int):
        super().__init__(f"{structure} cannot hold more than {size} entries")
        self.structure = structure
        self.size = size


class CaseFileError(DetectiveError):
    """The static case data is malformed."""

    def __init__(self, message: str, line: int | None = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class ExplorationOver(DetectiveError):
    """A command was sent after exploration had already ended."""


class ConfigError(DetectiveError):
    """An environment setting has a value the game cannot use."""
