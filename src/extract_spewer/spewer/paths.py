"""Mapping of source document paths onto the output directory.

The output tree mirrors the source tree: ``/a/b/doc.pdf`` is written to
``<output>/a/b/doc.pdf.txt`` with its metadata in
``<output>/a/b/doc.pdf.json``. Absolute source paths lose their anchor
before the join, so they can never replace the output directory, and
``..`` segments are collapsed so they can never climb above it.

Public API:
    resolve_output_path(source_path, output_directory) -> Path
    content_path(output_path, extension)               -> Path
    metadata_path(output_path)                         -> Path
    normalize_extension(value)                         -> str | None
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath

METADATA_SUFFIX = "json"


def normalize_extension(value: str | None) -> str | None:
    """Return *value* stripped, or None when it is None, empty or blank."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _contain(parts: tuple[str, ...]) -> tuple[str, ...]:
    # Lexical collapse; a ".." with nothing left to pop is dropped.
    kept: list[str] = []
    for part in parts:
        if part == "..":
            if kept:
                kept.pop()
        else:
            kept.append(part)
    return tuple(kept)


def resolve_output_path(
    source_path: str | os.PathLike[str],
    output_directory: str | os.PathLike[str],
) -> Path:
    """Join *source_path* onto *output_directory*, staying inside it.

    Args:
        source_path: Path of the original document, absolute or relative.
        output_directory: Root of the output tree.

    Returns:
        The extension-less output path for the document.

    Raises:
        ValueError: If the source path names no file below the root
            (``/``, ``.``, ``a/..`` and the like).
    """
    source = PurePath(source_path)

    # Drop exactly the anchor ("/", or drive and root on Windows).
    parts = source.parts[1:] if source.anchor else source.parts
    if ".." in parts:
        parts = _contain(parts)

    if not parts:
        raise ValueError(f"Source path names no file: {os.fspath(source_path)!r}")

    return Path(output_directory).joinpath(*parts)


def content_path(output_path: Path, extension: str | None) -> Path:
    """Append ``.<extension>`` to *output_path*, or return it unchanged."""
    if extension is None:
        return output_path
    return output_path.with_name(f"{output_path.name}.{extension}")


def metadata_path(output_path: Path) -> Path:
    """Path of the JSON metadata sibling; independent of the content extension."""
    return output_path.with_name(f"{output_path.name}.{METADATA_SUFFIX}")
