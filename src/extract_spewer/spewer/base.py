"""Abstract output sink for extracted documents.

A spewer receives, for each document, its source path, its metadata and a
text stream of its extracted content, and persists them somewhere. The
stream belongs to the caller: spewers read it to the end but never close
it.
"""

from __future__ import annotations

import codecs
import os
from abc import ABC, abstractmethod
from types import TracebackType
from typing import TextIO

from extract_spewer.spewer.metadata import Metadata

DEFAULT_OUTPUT_ENCODING = "utf-8"


class Spewer(ABC):
    """Writes extracted text and metadata for one document per call."""

    def __init__(
        self,
        *,
        output_metadata: bool = True,
        output_encoding: str = DEFAULT_OUTPUT_ENCODING,
    ) -> None:
        self.output_metadata = output_metadata
        self.output_encoding = output_encoding

    @property
    def output_encoding(self) -> str:
        return self._output_encoding

    @output_encoding.setter
    def output_encoding(self, value: str) -> None:
        try:
            self._output_encoding = codecs.lookup(value).name
        except LookupError as exc:
            raise ValueError(f"Unknown output encoding: {value!r}") from exc

    @abstractmethod
    def write(
        self,
        path: str | os.PathLike[str],
        metadata: Metadata,
        content: TextIO,
    ) -> None:
        """Persist one document's content and, if enabled, its metadata."""
        raise NotImplementedError

    def close(self) -> None:
        """Release any resources held by the spewer."""

    def __enter__(self) -> Spewer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
