"""
schemast Utilities Package - Cross-Cutting Helpers

Helpers shared by the CLI and the library modules: logging configuration and
identifier normalisation.  Nothing here imports the heavier CLI stack.
"""

from .logging import (
    setup_logging,
    get_logger,
    get_current_log_file,
    get_session_id,
    log_field_edit,
    log_type_scaffolded,
    log_unit_written,
)
from .naming import to_snake_case

__all__ = [
    "to_snake_case",
    # Logging utilities
    "setup_logging",
    "get_logger",
    "get_current_log_file",
    "get_session_id",
    "log_field_edit",
    "log_type_scaffolded",
    "log_unit_written",
]
