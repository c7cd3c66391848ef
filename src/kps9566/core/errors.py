"""
Error taxonomy for the transcoder.

Only two things can go wrong: the mapping artifact cannot be turned into
a table, or a file cannot be read or written. Unmapped characters are not
errors; the decoder and encoder substitute placeholders instead.
"""

from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    """Failure categories callers can branch on."""
    INITIALIZATION = "initialization"
    IO = "io"


class Kps9566Error(Exception):
    """Base class for all transcoder failures."""

    kind: ErrorKind


class InitializationError(Kps9566Error):
    """The mapping artifact is missing or malformed."""

    kind = ErrorKind.INITIALIZATION

    def __init__(self, message: str, source: str | None = None, line: int | None = None):
        self.source = source
        self.line = line
        where = ""
        if source is not None:
            where = f"{source}:{line}: " if line is not None else f"{source}: "
        super().__init__(f"{where}{message}")


class CodecIOError(Kps9566Error):
    """A file could not be read or written."""

    kind = ErrorKind.IO

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)
