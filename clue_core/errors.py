from __future__ import annotations


class BoardConfigError(Exception):
    """Base class for problems found while loading the legend or layout."""


class ConfigNotFoundError(BoardConfigError, FileNotFoundError):
    """A config file is missing or cannot be read."""


class ConfigFormatError(BoardConfigError, ValueError):
    """A config file was read but its contents are malformed."""

    def __init__(self, message: str, source: str = '', line: int = 0) -> None:
        self.source = source
        self.line = line
        where = ''
        if source and line:
            where = f"{source}:{line}: "
        elif line:
            where = f"line {line}: "
        elif source:
            where = f"{source}: "
        super().__init__(where + message)


class BoardStateError(RuntimeError):
    """The board was queried before initialize() or initialized twice."""
