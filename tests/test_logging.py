"""Tests for prbody.logging (PrBodyLogging, workflow command rendering)."""

import logging

import pytest

from prbody.config import LoggingConfig
from prbody.logging import (
    DEFAULT_FORMAT,
    DEFAULT_LEVEL,
    LEVELS,
    NOTICE,
    PrBodyLogging,
    WorkflowCommandFormatter,
    _resolve_level,
    escape_data,
)

pytestmark = pytest.mark.usefixtures("restore_root_logging")


def _record(level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord("prbody", level, __file__, 1, msg, None, None)


class TestConstants:
    """Module constants and level mapping."""

    def test_levels_include_notice(self) -> None:
        assert LEVELS["NOTICE"] == NOTICE == 25
        assert logging.getLevelName(NOTICE) == "NOTICE"

    def test_defaults(self) -> None:
        assert DEFAULT_LEVEL == "INFO"
        assert DEFAULT_FORMAT == "%(message)s"


class TestResolveLevel:
    def test_known_levels(self) -> None:
        assert _resolve_level("DEBUG") == logging.DEBUG
        assert _resolve_level("notice") == NOTICE
        assert _resolve_level("  ERROR ") == logging.ERROR

    def test_unknown_level_returns_info(self) -> None:
        assert _resolve_level("TRACE") == logging.INFO
        assert _resolve_level("") == logging.INFO


class TestWorkflowCommandFormatter:
    """Levels map to ::debug::, ::notice::, ::warning::, ::error::."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            (logging.DEBUG, "::debug::hello"),
            (logging.INFO, "hello"),
            (NOTICE, "::notice::hello"),
            (logging.WARNING, "::warning::hello"),
            (logging.ERROR, "::error::hello"),
            (logging.CRITICAL, "::error::hello"),
        ],
    )
    def test_level_commands(self, level: int, expected: str) -> None:
        assert WorkflowCommandFormatter("%(message)s").format(_record(level, "hello")) == expected

    def test_multiline_message_escaped(self) -> None:
        text = WorkflowCommandFormatter("%(message)s").format(_record(NOTICE, "new PR description: a\r\nb 100%"))
        assert text == "::notice::new PR description: a%0D%0Ab 100%25"

    def test_escape_data_percent_first(self) -> None:
        assert escape_data("%0A\n") == "%250A%0A"


class TestPrBodyLogging:
    def test_setup_sets_root_level_from_config(self) -> None:
        for level_name, expected_num in LEVELS.items():
            PrBodyLogging(LoggingConfig(level=level_name, format="%(message)s")).setup()
            assert logging.root.level == expected_num

    def test_setup_uses_workflow_formatter(self) -> None:
        PrBodyLogging(LoggingConfig(level="INFO", format="%(message)s", workflow_commands=True)).setup()
        assert isinstance(logging.root.handlers[0].formatter, WorkflowCommandFormatter)

    def test_setup_plain_formatter_when_disabled(self) -> None:
        custom = "%(levelname)s || %(message)s"
        PrBodyLogging(LoggingConfig(level="INFO", format=custom, workflow_commands=False)).setup()
        formatter = logging.root.handlers[0].formatter
        assert not isinstance(formatter, WorkflowCommandFormatter)
        assert formatter._fmt == custom

    def test_empty_format_uses_default(self) -> None:
        PrBodyLogging(LoggingConfig(level="INFO", format="")).setup()
        assert logging.root.handlers[0].formatter._fmt == DEFAULT_FORMAT

    def test_setup_writes_to_stdout(self, capsys) -> None:
        PrBodyLogging(LoggingConfig(level="INFO", format="%(message)s")).setup()
        logging.getLogger("prbody.test").log(NOTICE, "status")
        assert capsys.readouterr().out == "::notice::status\n"
