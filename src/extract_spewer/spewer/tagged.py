"""Fault-tagging wrapper for a binary output sink.

When a copy from a content stream into a file fails, the ``OSError`` could
have come from either end. ``TaggedWriter`` remembers every error its
wrapped sink raised, so the caller can ask afterwards whether the error it
caught is one of them. The check is by object identity: two errors with
the same errno and message are still different failures.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import BinaryIO

logger = logging.getLogger(__name__)


class TaggedWriter:
    """Delegating binary writer that tags the errors raised by its sink."""

    def __init__(self, raw: BinaryIO) -> None:
        self._raw = raw
        self._raised: list[BaseException] = []

    def _tag(self, exc: OSError) -> None:
        self._raised.append(exc)
        logger.debug("Output sink raised %r", exc)

    def write(self, data: bytes) -> int:
        try:
            return self._raw.write(data)
        except OSError as exc:
            self._tag(exc)
            raise

    def flush(self) -> None:
        try:
            self._raw.flush()
        except OSError as exc:
            self._tag(exc)
            raise

    def close(self) -> None:
        try:
            self._raw.close()
        except OSError as exc:
            self._tag(exc)
            raise

    @property
    def closed(self) -> bool:
        return self._raw.closed

    def is_cause_of(self, exc: BaseException) -> bool:
        """Return True if *exc* was raised by this writer's sink."""
        return any(raised is exc for raised in self._raised)

    def __enter__(self) -> TaggedWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
