# errors.py
# Exceptions and warnings raised by the FARS loaders, the summary table
# and the state map.

from __future__ import annotations


class FarsError(Exception):
    """Base exception for all FARS toolkit errors."""


class FileNotFound(FarsError, FileNotFoundError):
    """A yearly data file does not exist."""

    def __init__(self, path: str):
        self.path = str(path)
        super().__init__(f"file '{self.path}' does not exist")


class ParseError(FarsError, ValueError):
    """A data file could not be read as a table, or lacks required columns."""

    def __init__(self, message: str, *, path: str = ""):
        self.path = str(path)
        super().__init__(message)


class InvalidArgument(FarsError, ValueError):
    """A year or state code could not be coerced to an integer."""


class InvalidState(FarsError, ValueError):
    """The state code does not occur in the loaded year."""

    def __init__(self, state: int):
        self.state = state
        super().__init__(f"invalid STATE number: {state}")


class NoDataAvailable(FarsError):
    """None of the requested years could be loaded."""


class InvalidYearWarning(UserWarning):
    """A year was skipped while loading a batch."""
