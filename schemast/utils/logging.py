"""
schemast Logging Utilities - Session Logging for Schema Edits

Overview:
---------
Centralised logging configuration for schemast.  Provides session-based file
logging with unique identifiers and short structured helpers for recording
schema edits (types scaffolded, fields appended or removed, files written).

Log Location:
-------------
- ``SchemastConfig.log_dir`` (default ~/.schemast/logs/)
- Each CLI run creates a timestamped log file with session ID

Log Levels:
-----------
- DEBUG: Every edit applied to a syntax tree, rendered files
- INFO: High-level command flow
- WARNING: Skipped work (e.g. a field already present during ``apply``)
- ERROR: Failed commands

Library modules only ever call ``get_logger``; nothing is written to disk
until the CLI calls ``setup_logging``.
"""

from __future__ import annotations

import logging
import sys
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

# ============================================================================
# Constants
# ============================================================================

ROOT_LOGGER = "schemast"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(session_id)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Detailed format for file logging (includes line numbers)
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(session_id)s | %(name)s:%(lineno)d | %(message)s"

_log_file_path: Optional[Path] = None
_session_id: Optional[str] = None


# ============================================================================
# Session ID Filter - Adds session_id to all log records
# ============================================================================

class SessionIdFilter(logging.Filter):
    """Add session_id to all log records."""

    def __init__(self, session_id: str):
        super().__init__()
        self.session_id = session_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = self.session_id  # type: ignore[attr-defined]
        return True


class SessionFormatter(logging.Formatter):
    """Formatter that adds session_id, defaulting to 'N/A' if not present."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "session_id"):
            record.session_id = _session_id or "N/A"  # type: ignore[attr-defined]
        return super().format(record)


# ============================================================================
# Setup Functions
# ============================================================================

def generate_session_id() -> str:
    """Generate a short unique session ID (6 characters)."""
    return uuid.uuid4().hex[:6]


def generate_log_filename(session_id: str) -> str:
    """Generate a timestamped log filename with session ID."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"schemast_{timestamp}_{session_id}.log"


def setup_logging(level: str, log_dir: Path, console_output: bool = False) -> Path:
    """
    Start a logging session: one new log file under *log_dir*, and stderr
    output as well when *console_output* is set.  Returns the log file path.
    """
    global _log_file_path, _session_id

    _session_id = generate_session_id()
    log_level = getattr(logging, level.upper(), logging.INFO)

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / generate_log_filename(_session_id)
    _log_file_path = log_file

    root = logging.getLogger(ROOT_LOGGER)
    for h in root.handlers[:]:
        root.removeHandler(h)
        h.close()
    for f in root.filters[:]:
        root.removeFilter(f)

    root.setLevel(log_level)
    root.addFilter(SessionIdFilter(_session_id))

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(SessionFormatter(FILE_LOG_FORMAT, LOG_DATE_FORMAT))
    root.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(SessionFormatter(LOG_FORMAT, LOG_DATE_FORMAT))
        root.addHandler(console_handler)

    root.propagate = False
    root.info(f"schemast session {_session_id} | level {level.upper()} | {log_file}")
    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Loggers always live under the ``schemast`` namespace so that
    :func:`setup_logging` configures them all at once.
    """
    if name.startswith(ROOT_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def get_current_log_file() -> Optional[Path]:
    """Return the path to the current log file, if logging is initialised."""
    return _log_file_path


def get_session_id() -> Optional[str]:
    """Return the current session ID, if logging is initialised."""
    return _session_id


# ============================================================================
# Logging Helper Functions - Structured Logging
# ============================================================================

def log_field_edit(
    logger: logging.Logger,
    action: str,
    type_name: str,
    field_name: str,
) -> None:
    """Log a single edit of a type's field list."""
    logger.debug(f"{action.upper()} field {field_name!r} | type {type_name}")


def log_type_scaffolded(
    logger: logging.Logger,
    type_name: str,
    filename: str,
) -> None:
    """Log a newly scaffolded schema type."""
    logger.debug(f"SCAFFOLD type {type_name} -> {filename}")


def log_unit_written(
    logger: logging.Logger,
    path: Path,
    source: str,
    truncate_at: int = 1000,
) -> None:
    """Log a rendered schema file (content truncated to keep logs readable)."""
    if len(source) > truncate_at:
        display = source[:truncate_at] + f"... [TRUNCATED, {len(source)} chars total]"
    else:
        display = source
    logger.info(f"WROTE {path}")
    logger.debug(f"SOURCE ({path.name}):\n{display}")
