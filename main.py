"""Extract spewer -- command-line entry point.

Re-spews already-extracted plain-text documents into the output tree:

    python main.py path/to/doc.txt [more paths ...]

Startup sequence:
    1. Load logging configuration (log directory, rotation, levels)
    2. Setup logging (must happen before any code that logs)
    3. Load spewer configuration (output directory, format, metadata toggle)
    4. Spew each document given on the command line

Destination failures and source read failures are logged separately; the
run continues with the next document and exits non-zero if any failed.
"""

import datetime
import logging
import sys
from pathlib import Path

from extract_spewer.config import LoggingSettings, SpewerSettings
from extract_spewer.logging import setup_logging
from extract_spewer.spewer import FileSpewer, SpewerError, classify_error

logger = logging.getLogger(__name__)


def _document_metadata(path: Path) -> dict[str, str]:
    stat = path.stat()
    modified = datetime.datetime.fromtimestamp(stat.st_mtime, datetime.UTC)
    return {
        "resourceName": path.name,
        "Content-Length": str(stat.st_size),
        "Last-Modified": modified.isoformat(),
    }


def _spew_document(spewer: FileSpewer, path: Path) -> bool:
    """Spew one document; return True on success."""
    try:
        metadata = _document_metadata(path)
        with open(path, encoding="utf-8", errors="replace") as content:
            spewer.write(path.resolve(), metadata, content)
    except SpewerError as exc:
        logger.error("Output failed for %s (%s): %s", path, exc.kind.value, exc)
        return False
    except OSError as exc:
        # Not attributable to the destination: the source could not be read.
        logger.error(
            "Source read failed for %s (%s): %s",
            path,
            classify_error(exc).value,
            exc,
        )
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Run the spewer over every path in *argv*."""
    paths = [Path(arg) for arg in (sys.argv[1:] if argv is None else argv)]

    # 1. Load logging config first -- needed for the log directory
    logging_settings = LoggingSettings()

    # 2. Setup logging BEFORE anything else logs
    setup_logging(logging_settings)

    # 3. Load spewer config
    settings = SpewerSettings()
    logger.info(
        "Config loaded -- spewer: output_directory=%s, output_format=%s, "
        "output_extension=%s, output_metadata=%s, output_encoding=%s",
        settings.output_directory,
        settings.output_format.name,
        settings.output_extension,
        settings.output_metadata,
        settings.output_encoding,
    )

    if not paths:
        logger.warning("No documents given, nothing to do")
        return 0

    # 4. Spew documents
    failed = 0
    with FileSpewer.from_settings(settings) as spewer:
        for path in paths:
            if not _spew_document(spewer, path):
                failed += 1

    logger.info(
        "Run complete: %d document(s) written, %d failed",
        len(paths) - failed,
        failed,
    )
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
