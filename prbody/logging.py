"""Logging from config and env.

Levels (inclusive):
- ERROR: run failures (rendered as ::error:: in a workflow)
- WARNING: non-critical issues and ERROR
- NOTICE: status lines worth an annotation (::notice::)
- INFO: service messages and everything above
- DEBUG: debugging and all levels above (::debug::)

Configure via env (LOGGING_LEVEL, LOGGING_FORMAT, LOGGING_WORKFLOW_COMMANDS).
"""

import logging
import sys

from prbody.config import LoggingConfig

NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")

# Supported levels only (DEBUG, INFO, NOTICE, WARNING, ERROR)
LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "NOTICE": NOTICE,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LEVEL = "INFO"
DEFAULT_FORMAT = "%(message)s"


def _resolve_level(level: str) -> int:
    """Map level name to logging constant.

    Falls back to INFO if unknown.
    """
    return LEVELS.get(level.upper().strip(), logging.INFO)


def escape_data(message: str) -> str:
    """Escape workflow command data so multi-line text stays one command."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    """Render records as GitHub workflow commands (``::notice::msg``).

    INFO records are printed as-is; the runner shows them as plain log
    lines.
    """

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if record.levelno >= logging.ERROR:
            command = "error"
        elif record.levelno >= logging.WARNING:
            command = "warning"
        elif record.levelno >= NOTICE:
            command = "notice"
        elif record.levelno >= logging.INFO:
            return text
        else:
            command = "debug"
        return f"::{command}::{escape_data(text)}"


class PrBodyLogging:
    """Configures root logger from LoggingConfig (env LOGGING_*)."""

    def __init__(self, config: LoggingConfig) -> None:
        """Store logging config (level, format, workflow commands)."""
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT
        self._workflow_commands = config.workflow_commands

    def setup(self) -> None:
        """Apply level and format to the root logger."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            stream=sys.stdout,
            force=True,
        )
        if self._workflow_commands:
            for handler in logging.root.handlers:
                handler.setFormatter(WorkflowCommandFormatter(self._format))
