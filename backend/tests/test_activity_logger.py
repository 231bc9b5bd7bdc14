"""
Library API — Activity Logger Unit Tests
=========================================

What:  Tests for the ActivityLogger implementations and their factory.
How:   Console output is captured with io.StringIO / capsys; the stdlib
       variant is checked with caplog.
"""

import io
import logging
import re

import pytest

from library_api.services.activity_logger import (
    ConsoleActivityLogger,
    LoggingActivityLogger,
    RecordingActivityLogger,
    build_activity_logger,
)
from library_api.services.logger_base import ActivityLogger

LINE_PATTERN = re.compile(
    r"^\[ActivityLogger\] \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}: (?P<message>.*)$"
)


class TestConsoleActivityLogger:
    """Tests for the stdout line writer."""

    def test_writes_one_timestamped_line(self):
        stream = io.StringIO()
        ConsoleActivityLogger(stream=stream).log("GET all books")

        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        match = LINE_PATTERN.match(lines[0])
        assert match is not None
        assert match.group("message") == "GET all books"

    def test_one_line_per_call(self):
        stream = io.StringIO()
        activity = ConsoleActivityLogger(stream=stream)
        activity.log("GET book 1")
        activity.log("DELETE book 1")

        assert [LINE_PATTERN.match(l).group("message") for l in stream.getvalue().splitlines()] == [
            "GET book 1",
            "DELETE book 1",
        ]

    def test_defaults_to_stdout(self, capsys):
        ConsoleActivityLogger().log("POST book 3 'Dune'")
        out = capsys.readouterr().out
        assert out.startswith("[ActivityLogger] ")
        assert out.rstrip("\n").endswith(": POST book 3 'Dune'")


class TestLoggingActivityLogger:
    """Tests for the stdlib logging variant."""

    def test_logs_message_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="library_api.activity"):
            LoggingActivityLogger().log("GET all books")

        records = [r for r in caplog.records if r.name == "library_api.activity"]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert records[0].getMessage() == "GET all books"


class TestRecordingActivityLogger:
    """Tests for the in-memory test double."""

    def test_records_messages_in_order(self):
        activity = RecordingActivityLogger()
        activity.log("GET all books")
        activity.log("GET book 2")
        assert activity.messages == ["GET all books", "GET book 2"]

    def test_records_timestamps(self):
        activity = RecordingActivityLogger()
        activity.log("GET all books")
        timestamp, _ = activity.entries[0]
        assert timestamp is not None


class TestBuildActivityLogger:
    """Tests for the settings-driven factory."""

    def test_console(self):
        assert isinstance(build_activity_logger("console"), ConsoleActivityLogger)

    def test_logging(self):
        assert isinstance(build_activity_logger("logging"), LoggingActivityLogger)

    def test_all_variants_implement_the_contract(self):
        for kind in ("console", "logging"):
            assert isinstance(build_activity_logger(kind), ActivityLogger)
        assert isinstance(RecordingActivityLogger(), ActivityLogger)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError, match="Unknown activity logger"):
            build_activity_logger("syslog")
