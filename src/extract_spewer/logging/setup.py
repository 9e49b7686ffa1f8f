"""Root logger configuration for spewer runs.

A run logs every destination it writes to, so the log doubles as a record
of what ended up where. Two handlers are installed on the root logger:

- a rotating JSON-lines file under ``LoggingSettings.log_dir``, one object
  per record with ``timestamp``, ``level``, ``component`` and ``message``;
- a plain-text console handler for whoever is watching the run.

Both levels come from ``LoggingSettings``. Modules log through
``logging.getLogger(__name__)`` and never touch handlers themselves.
"""

import logging
import logging.handlers
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter

from extract_spewer.config.settings import LoggingSettings

_JSON_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s"
_JSON_RENAMES = {"asctime": "timestamp", "levelname": "level", "name": "component"}
_CONSOLE_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"


def _json_file_handler(settings: LoggingSettings, log_path: Path) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=str(log_path),
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
        encoding="utf-8",
    )
    handler.setLevel(settings.file_level)
    handler.setFormatter(
        JsonFormatter(
            fmt=_JSON_FIELDS,
            rename_fields=_JSON_RENAMES,
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def _console_handler(settings: LoggingSettings) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(settings.console_level)
    handler.setFormatter(logging.Formatter(fmt=_CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    return handler


def setup_logging(settings: LoggingSettings | None = None) -> Path:
    """Install the JSON file and console handlers on the root logger.

    Replaces whatever handlers the root logger had, so calling it again
    (e.g. from tests) does not duplicate output.

    Args:
        settings: Logging configuration; loaded from YAML/env when omitted.

    Returns:
        Path of the JSON log file.
    """
    if settings is None:
        settings = LoggingSettings()

    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / settings.log_file_name

    root_logger = logging.getLogger()
    # The root passes everything; each handler applies its own level.
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    root_logger.addHandler(_json_file_handler(settings, log_path))
    root_logger.addHandler(_console_handler(settings))

    return log_path
