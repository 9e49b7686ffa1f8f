"""Filesystem spewer: extracted text and JSON metadata under a mirrored tree.

For a source path ``P`` the content goes to ``<output>/<P>.<extension>``
and, when metadata output is enabled, the metadata goes to
``<output>/<P>.json``. Directories are created as needed.

Errors are classified so that callers can tell a broken destination from
a broken content source:

- ``SpewerError(DIRECTORY)``: the parent directory could not be made.
- ``SpewerError(SINK)``: the content file could not be opened or written.
- ``SpewerError(SERIALIZATION)``: the metadata file could not be written.
- plain ``OSError``: reading the content stream failed; re-raised as is.

Writes are not atomic. A failure part-way through the copy leaves a
partial content file behind, and a metadata failure does not remove the
content file.
"""

from __future__ import annotations

import codecs
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, TextIO

from extract_spewer.spewer.base import DEFAULT_OUTPUT_ENCODING, Spewer
from extract_spewer.spewer.errors import SpewerError
from extract_spewer.spewer.metadata import Metadata, write_metadata
from extract_spewer.spewer.paths import (
    content_path,
    metadata_path,
    normalize_extension,
    resolve_output_path,
)
from extract_spewer.spewer.tagged import TaggedWriter
from extract_spewer.spewer.types import ErrorKind, OutputFormat

if TYPE_CHECKING:
    from extract_spewer.config.settings import SpewerSettings

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_EXTENSION", "FileSpewer"]

DEFAULT_EXTENSION = "txt"
HTML_EXTENSION = "html"

# Characters read from the content stream per chunk.
COPY_BUFFER_SIZE = 4096


def _ensure_parent_dirs(path: Path) -> None:
    """Create the parent directories of *path*.

    Failing to create them is only an error if the parent is still not a
    directory afterwards; another writer may have created it meanwhile.
    """
    parent = path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        if not parent.is_dir():
            raise SpewerError(
                ErrorKind.DIRECTORY,
                path,
                f'Unable to make directories for file: "{path}".',
            ) from exc


def _copy(content: TextIO, sink: TaggedWriter, encoding: str) -> int:
    """Copy *content* to *sink* encoded as *encoding*; return characters copied."""
    # Unencodable characters are replaced rather than failing the copy.
    encoder = codecs.getincrementalencoder(encoding)(errors="replace")
    copied = 0
    while True:
        chunk = content.read(COPY_BUFFER_SIZE)
        if not chunk:
            break
        copied += len(chunk)
        sink.write(encoder.encode(chunk))
    sink.write(encoder.encode("", final=True))
    return copied


class FileSpewer(Spewer):
    """Writes text or HTML output and JSON metadata to the filesystem."""

    def __init__(
        self,
        output_directory: str | os.PathLike[str] = ".",
        *,
        output_extension: str | None = DEFAULT_EXTENSION,
        output_metadata: bool = True,
        output_encoding: str = DEFAULT_OUTPUT_ENCODING,
    ) -> None:
        super().__init__(
            output_metadata=output_metadata,
            output_encoding=output_encoding,
        )
        self._output_directory = Path(output_directory)
        self.output_extension = output_extension

    @classmethod
    def from_settings(cls, settings: SpewerSettings) -> FileSpewer:
        """Build a spewer from loaded settings.

        HTML output selects the ``html`` extension; an explicit
        ``output_extension`` setting overrides the format either way.
        """
        extension = DEFAULT_EXTENSION
        if settings.output_format is OutputFormat.HTML:
            extension = HTML_EXTENSION
        if settings.output_extension is not None:
            extension = settings.output_extension

        return cls(
            settings.output_directory,
            output_extension=extension,
            output_metadata=settings.output_metadata,
            output_encoding=settings.output_encoding,
        )

    @property
    def output_directory(self) -> Path:
        return self._output_directory

    @property
    def output_extension(self) -> str | None:
        return self._output_extension

    @output_extension.setter
    def output_extension(self, value: str | None) -> None:
        self._output_extension = normalize_extension(value)

    def _open_output(self, path: Path) -> BinaryIO:
        return open(path, "wb")

    def write(
        self,
        path: str | os.PathLike[str],
        metadata: Metadata,
        content: TextIO,
    ) -> None:
        """Write *content* and, if enabled, *metadata* for the document at *path*.

        Args:
            path: Source path of the document, absolute or relative.
            metadata: Ordered attribute names and values.
            content: Extracted text. Read to the end but not closed.

        Raises:
            SpewerError: On destination failures (see module docstring).
            OSError: Unwrapped, when reading *content* fails.
            ValueError: If *path* names no file below the output directory.
        """
        output_path = resolve_output_path(path, self._output_directory)
        contents_output_path = content_path(output_path, self._output_extension)

        logger.info('Outputting to file: "%s".', contents_output_path)

        _ensure_parent_dirs(contents_output_path)

        try:
            raw = self._open_output(contents_output_path)
        except OSError as exc:
            raise SpewerError(
                ErrorKind.SINK,
                contents_output_path,
                f'Unable to open output file: "{contents_output_path}".',
            ) from exc

        tagged = TaggedWriter(raw)
        try:
            with tagged:
                copied = _copy(content, tagged, self.output_encoding)
        except OSError as exc:
            if tagged.is_cause_of(exc):
                raise SpewerError(
                    ErrorKind.SINK,
                    contents_output_path,
                    f'Error writing output to file: "{contents_output_path}".',
                ) from exc
            raise

        logger.debug("Copied %d characters to %s", copied, contents_output_path)

        if self.output_metadata:
            write_metadata(metadata_path(output_path), metadata)

    def close(self) -> None:
        """Nothing to release; files are closed by each write."""
