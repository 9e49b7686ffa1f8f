"""Errors raised by spewers.

A single exception type carries the failure kind, the destination path and
the original cause as attributes. Content source failures have no
instance: the ``OSError`` from the stream reaches the caller unwrapped, and
callers can retry extraction separately from handling a broken destination.
"""

from __future__ import annotations

from pathlib import Path

from extract_spewer.spewer.types import ErrorKind

__all__ = ["ErrorKind", "SpewerError", "classify_error"]


class SpewerError(Exception):
    """A destination-side failure while writing extracted output."""

    def __init__(self, kind: ErrorKind, path: Path, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.path = path

    @property
    def cause(self) -> BaseException | None:
        """The underlying error, as chained with ``raise ... from``."""
        return self.__cause__

    def __repr__(self) -> str:
        return f"SpewerError(kind={self.kind.name}, path={str(self.path)!r}, message={str(self)!r})"


def classify_error(exc: BaseException) -> ErrorKind | None:
    """Map an exception raised by ``Spewer.write`` to its error kind.

    Returns None for exceptions that are neither spewer errors nor I/O
    errors (programming errors, bad arguments).
    """
    if isinstance(exc, SpewerError):
        return exc.kind
    if isinstance(exc, OSError):
        return ErrorKind.SOURCE
    return None
