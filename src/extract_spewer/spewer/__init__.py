"""Output sinks for extracted document text and metadata.

Public API:
    FileSpewer(output_directory, ...)  -- filesystem sink
    Spewer                             -- abstract sink contract
    SpewerError, ErrorKind, classify_error
    OutputFormat
"""

from extract_spewer.spewer.base import Spewer
from extract_spewer.spewer.errors import SpewerError, classify_error
from extract_spewer.spewer.file_spewer import DEFAULT_EXTENSION, FileSpewer
from extract_spewer.spewer.metadata import Metadata
from extract_spewer.spewer.types import ErrorKind, OutputFormat

__all__ = [
    "DEFAULT_EXTENSION",
    "ErrorKind",
    "FileSpewer",
    "Metadata",
    "OutputFormat",
    "Spewer",
    "SpewerError",
    "classify_error",
]
