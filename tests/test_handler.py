# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Tests for LoggifyHandler."""

import io
import logging
import re
import threading
from unittest.mock import MagicMock

import pytest

from loggify import (
    LoggerConfig,
    LoggifyHandler,
    Record,
    RemoteAppendError,
    Severity,
    SilentErrorReporter,
)


def make_remote() -> MagicMock:
    remote = MagicMock()
    remote.log_group_name = "group"
    remote.log_stream_name = "stream_1"
    return remote


def make_handler(stream: io.StringIO, **overrides) -> LoggifyHandler:
    settings = {"color_enabled": False, "time_format": "%H:%M:%S"}
    settings.update(overrides)
    reporter = settings.pop("error_reporter", None)
    return LoggifyHandler(LoggerConfig(**settings), stream=stream, error_reporter=reporter)


class TestLog:
    """Tests for the console write path."""

    def test_writes_one_line_per_record(self):
        stream = io.StringIO()
        handler = make_handler(stream)

        handler.log(Record(Severity.WARN, "app", "first"))
        handler.log(Record(Severity.ERROR, "app", "second"))

        lines = stream.getvalue().splitlines()
        assert len(lines) == 2
        assert lines[0].endswith("> Warn  > first")
        assert lines[1].endswith("> Error > second")

    def test_rejected_record_is_not_written(self):
        """Test that log() re-checks the filter policy."""
        stream = io.StringIO()
        handler = make_handler(stream, exclude=("quiet",))

        handler.log(Record(Severity.DEBUG, "app", "too low"))
        handler.log(Record(Severity.ERROR, "lib.quiet", "excluded"))

        assert stream.getvalue() == ""

    def test_defaults_to_stdout(self, capsys):
        """Test that output goes to standard output by default."""
        handler = LoggifyHandler(LoggerConfig(color_enabled=False))

        handler.log(Record(Severity.INFO, "app", "to stdout"))

        captured = capsys.readouterr()
        assert captured.out.endswith("> Info  > to stdout\n")
        assert captured.err == ""

    def test_colored_output(self):
        stream = io.StringIO()
        handler = make_handler(stream, color_enabled=True)

        handler.log(Record(Severity.INFO, "app", "bright"))

        assert "\x1b[" in stream.getvalue()
        assert "bright" in stream.getvalue()

    def test_flush_is_noop(self):
        handler = make_handler(io.StringIO())

        handler.flush()

    def test_concurrent_lines_are_not_interleaved(self):
        """Test that lines from many threads stay whole."""
        stream = io.StringIO()
        handler = make_handler(stream)

        def worker(n):
            for i in range(50):
                handler.log(Record(Severity.INFO, "app", f"thread {n} message {i}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        lines = stream.getvalue().splitlines()
        assert len(lines) == 400
        pattern = re.compile(r"^\[\d\d:\d\d:\d\d\] > Info  > thread \d message \d+$")
        assert all(pattern.match(line) for line in lines)


class TestStdlibIntegration:
    """Tests for the handler as a stdlib logging.Handler."""

    def test_filter_uses_policy(self):
        handler = make_handler(io.StringIO(), exclude=("skip",))
        kept = logging.makeLogRecord({"name": "app", "levelno": logging.INFO, "msg": "x"})
        dropped = logging.makeLogRecord({"name": "app.skip", "levelno": logging.INFO, "msg": "x"})

        assert handler.filter(kept)
        assert not handler.filter(dropped)

    def test_handle_through_logger(self):
        """Test records flowing from a stdlib logger to the stream."""
        stream = io.StringIO()
        handler = make_handler(stream, min_severity=Severity.DEBUG)
        log = logging.getLogger("loggify.tests.handler")
        log.propagate = False
        log.setLevel(logging.DEBUG)
        log.addHandler(handler)
        try:
            log.debug("value=%d", 42)
            log.critical("meltdown")
        finally:
            log.removeHandler(handler)

        lines = stream.getvalue().splitlines()
        assert lines[0].endswith("> Debug > value=42")
        assert lines[1].endswith("> Error > meltdown")

    def test_emit_routes_local_errors_to_handle_error(self, monkeypatch):
        """Test that a broken record goes to handleError instead of raising."""
        handler = make_handler(io.StringIO())
        handle_error = MagicMock()
        monkeypatch.setattr(handler, "handleError", handle_error)
        broken = logging.makeLogRecord({"name": "app", "levelno": logging.INFO, "msg": "%d", "args": ("x",)})

        handler.emit(broken)

        handle_error.assert_called_once_with(broken)

    def test_target_printed_once_per_record(self, capsys):
        """Test that a record logged through a stdlib logger echoes its target once."""
        handler = LoggifyHandler(LoggerConfig(debug_target_printing=True), stream=io.StringIO())
        log = logging.getLogger("loggify.tests.handler.target")
        log.propagate = False
        log.addHandler(handler)
        try:
            log.error("x")
        finally:
            log.removeHandler(handler)

        assert capsys.readouterr().err == "[loggify] target = 'loggify.tests.handler.target'\n"

    def test_slow_remote_does_not_block_other_threads(self):
        """Test that a console write completes while another thread waits on CloudWatch."""
        entered = threading.Event()
        release = threading.Event()
        remote = make_remote()

        def put_log(message):
            if message == "slow":
                entered.set()
                release.wait(5)

        remote.put_log.side_effect = put_log
        stream = io.StringIO()
        handler = make_handler(stream, remote=remote)
        slow = logging.makeLogRecord({"name": "app.a", "levelno": logging.INFO, "msg": "slow"})
        fast = logging.makeLogRecord({"name": "app.b", "levelno": logging.INFO, "msg": "fast"})

        done = threading.Event()
        worker = threading.Thread(target=handler.handle, args=(slow,))
        other = threading.Thread(target=lambda: (handler.handle(fast), done.set()))
        worker.start()
        try:
            assert entered.wait(5)
            other.start()

            assert done.wait(1)
            assert "> Info  > fast" in stream.getvalue()
        finally:
            release.set()
            worker.join()
            if other.is_alive():
                other.join()


class TestRemoteMirror:
    """Tests for forwarding to the remote sink."""

    def test_forwards_message_text_only(self):
        """Test that only the bare message reaches put_log."""
        remote = make_remote()
        stream = io.StringIO()
        handler = make_handler(stream, remote=remote)

        handler.log(Record(Severity.ERROR, "app", "mirrored"))

        remote.put_log.assert_called_once_with("mirrored")
        assert stream.getvalue().endswith("> Error > mirrored\n")

    def test_remote_receives_unescaped_message(self):
        """Test that line-break escaping applies to the console line only."""
        remote = make_remote()
        stream = io.StringIO()
        handler = make_handler(stream, remote=remote)

        handler.log(Record(Severity.INFO, "app", "a\nb"))

        remote.put_log.assert_called_once_with("a\nb")
        assert stream.getvalue().endswith("> Info  > a\\nb\n")

    def test_rejected_record_is_not_forwarded(self):
        remote = make_remote()
        handler = make_handler(io.StringIO(), remote=remote)

        handler.log(Record(Severity.TRACE, "app", "hidden"))

        remote.put_log.assert_not_called()

    def test_failure_is_reported_and_console_write_kept(self):
        """Test best-effort mirroring: report the error, keep logging."""
        remote = make_remote()
        remote.put_log.side_effect = RemoteAppendError("token conflict")
        reporter = SilentErrorReporter()
        stream = io.StringIO()
        handler = make_handler(stream, remote=remote, error_reporter=reporter)

        handler.log(Record(Severity.INFO, "app", "still printed"))
        handler.log(Record(Severity.INFO, "app", "again"))

        assert len(stream.getvalue().splitlines()) == 2
        errors = reporter.get_errors("RemoteAppendError")
        assert len(errors) == 2
        assert errors[0]["context"] == {"log_group": "group", "log_stream": "stream_1"}

    def test_failure_raises_when_configured(self):
        """Test legacy fatal behavior after the console write."""
        remote = make_remote()
        remote.put_log.side_effect = RemoteAppendError("token conflict")
        stream = io.StringIO()
        handler = make_handler(stream, remote=remote, raise_on_remote_error=True)

        with pytest.raises(RemoteAppendError):
            handler.log(Record(Severity.INFO, "app", "printed first"))

        assert "printed first" in stream.getvalue()

    def test_emit_propagates_configured_remote_failure(self):
        remote = make_remote()
        remote.put_log.side_effect = RemoteAppendError("boom")
        handler = make_handler(io.StringIO(), remote=remote, raise_on_remote_error=True)
        record = logging.makeLogRecord({"name": "app", "levelno": logging.INFO, "msg": "x"})

        with pytest.raises(RemoteAppendError):
            handler.emit(record)

    def test_default_reporter_writes_stderr(self, capsys):
        remote = make_remote()
        remote.put_log.side_effect = RemoteAppendError("unreachable")
        handler = LoggifyHandler(LoggerConfig(color_enabled=False, remote=remote))

        handler.log(Record(Severity.INFO, "app", "hello"))

        captured = capsys.readouterr()
        assert "hello" in captured.out
        assert "RemoteAppendError: unreachable" in captured.err

    def test_records_logged_while_forwarding_are_not_mirrored(self):
        """Test that the handler does not mirror its own thread's nested records."""
        remote = make_remote()
        stream = io.StringIO()
        handler = make_handler(stream, remote=remote)

        def nested_put(message):
            handler.log(Record(Severity.INFO, "botocore.endpoint", "sending request"))

        remote.put_log.side_effect = nested_put

        handler.log(Record(Severity.INFO, "app", "outer"))

        remote.put_log.assert_called_once_with("outer")
        assert len(stream.getvalue().splitlines()) == 2
