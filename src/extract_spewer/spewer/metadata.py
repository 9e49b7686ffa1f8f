"""JSON metadata output for extracted documents.

Metadata is written as a single pretty-printed JSON object, one string
field per attribute in the mapping's iteration order, followed by a
trailing newline::

    {
      "title" : "Report",
      "author" : "J. Doe"
    }

Attributes with several values are flattened to their first value. This
is lossy; callers that need every value must join them before writing.

Public API:
    flatten_metadata(metadata)          -> dict[str, str]
    write_metadata(destination, metadata) -> None
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from extract_spewer.spewer.errors import SpewerError
from extract_spewer.spewer.types import ErrorKind

logger = logging.getLogger(__name__)

__all__ = ["Metadata", "flatten_metadata", "write_metadata"]

Metadata = Mapping[str, str | Sequence[str]]

# Field layout of the pretty printer the rest of the pipeline reads.
_INDENT = 2
_SEPARATORS = (",", " : ")
_EMPTY_OBJECT = "{ }"


def flatten_metadata(metadata: Metadata) -> dict[str, str]:
    """Reduce *metadata* to one string value per name, keeping order.

    Names without any value are omitted.
    """
    flat: dict[str, str] = {}
    for name, value in metadata.items():
        if isinstance(value, str):
            flat[name] = value
        elif isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            if value:
                flat[name] = str(value[0])
        elif value is not None:
            flat[name] = str(value)
    return flat


def _render(fields: dict[str, str]) -> str:
    if not fields:
        return _EMPTY_OBJECT + "\n"
    return json.dumps(fields, ensure_ascii=False, indent=_INDENT, separators=_SEPARATORS) + "\n"


def write_metadata(destination: Path, metadata: Metadata) -> None:
    """Serialize *metadata* to *destination* as UTF-8 JSON.

    Args:
        destination: Path of the ``.json`` file; overwritten if present.
        metadata: Ordered attribute names and values.

    Raises:
        SpewerError: With kind SERIALIZATION if the file cannot be opened
            or written.
    """
    logger.info('Outputting metadata to file: "%s".', destination)

    text = _render(flatten_metadata(metadata))

    try:
        # Lone surrogates (undecodable file names) become \uXXXX escapes.
        with open(destination, "w", encoding="utf-8", errors="backslashreplace", newline="\n") as f:
            f.write(text)
    except (OSError, UnicodeError) as exc:
        raise SpewerError(
            ErrorKind.SERIALIZATION,
            destination,
            f'Unable to output JSON to file: "{destination}".',
        ) from exc
