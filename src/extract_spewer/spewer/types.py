"""Shared types for the spewer package.

Defines OutputFormat and ErrorKind used by settings, the file spewer and
its callers.
"""

from enum import Enum


class OutputFormat(Enum):
    """Format of the extracted text handed to a spewer."""

    TEXT = "text"
    HTML = "html"

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        """Parse a format name case-insensitively (``"TEXT"``, ``"html"``)."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown output format: {value!r} "
                f"(expected one of: {', '.join(f.name for f in cls)})"
            ) from None


class ErrorKind(Enum):
    """Where a failure during a spewer write came from."""

    DIRECTORY = "directory"
    SINK = "sink"
    SOURCE = "source"
    SERIALIZATION = "serialization"
