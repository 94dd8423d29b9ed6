"""Unit tests for utility modules."""

import io
import json
import sys
from datetime import datetime, timezone

import pytest

from core.health import (
    CheckResult,
    HealthChecker,
    Status,
    check_codec,
    check_event_loop,
    create_random_source_check,
)
from internal.logging import LogLevel, StructuredLogger
from utils import crash
from utils.ksuid import is_valid_ksuid
from utils.timestamp import (
    format_timestamp,
    from_unix_seconds,
    now_micros,
    now_seconds,
    to_unix_seconds,
)


class TestTimestamp:
    """Tests for timestamp utilities."""

    def test_format_timestamp_iso_format(self):
        """Timestamp is ISO 8601 format."""
        ts = format_timestamp()
        assert "T" in ts
        assert ts.endswith("Z")

    def test_format_timestamp_has_microseconds(self):
        """Timestamp includes microseconds."""
        ts = format_timestamp()
        decimal_part = ts.split(".")[1].split("Z")[0]
        assert len(decimal_part) == 6

    def test_format_fixed_value(self):
        assert format_timestamp(1_400_000_000 * 1_000_000) == "2014-05-13T16:53:20.000000Z"

    def test_now_values_reasonable(self):
        """Current time is after 2020-01-01."""
        assert now_micros() > 1577836800000000
        assert now_seconds() > 1577836800

    def test_to_unix_seconds(self):
        assert to_unix_seconds(12.7) == 12
        assert to_unix_seconds(datetime(1970, 1, 1, 0, 1)) == 60
        assert to_unix_seconds(datetime(1970, 1, 1, 0, 1, tzinfo=timezone.utc)) == 60

    def test_from_unix_seconds_is_utc(self):
        assert from_unix_seconds(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


class TestStructuredLogger:
    """Tests for structured logging."""

    def test_emits_json_line(self):
        stream = io.StringIO()
        logger = StructuredLogger(LogLevel.DEBUG, stream)
        logger.info("hello", count=3)
        record = json.loads(stream.getvalue())
        assert record["level"] == "INFO"
        assert record["msg"] == "hello"
        assert record["count"] == 3

    def test_filters_below_level(self):
        stream = io.StringIO()
        logger = StructuredLogger(LogLevel.WARN, stream)
        logger.info("dropped")
        assert stream.getvalue() == ""

    def test_child_adds_component(self):
        stream = io.StringIO()
        logger = StructuredLogger(LogLevel.INFO, stream).child("ksuid")
        logger.warn("careful", error=ValueError("boom"))
        record = json.loads(stream.getvalue())
        assert record["component"] == "ksuid"
        assert record["err"] == "boom"

    def test_error_code_is_logged(self):
        from core.errors import InvalidFormatError
        stream = io.StringIO()
        StructuredLogger(LogLevel.INFO, stream).info("rejected", error=InvalidFormatError("bad"))
        assert json.loads(stream.getvalue())["err_code"] == "invalid_format"

    def test_parse_level(self):
        assert LogLevel.parse("debug") == LogLevel.DEBUG
        assert LogLevel.parse("nonsense") == LogLevel.INFO


class TestHealth:
    """Tests for health checks."""

    @pytest.mark.asyncio
    async def test_builtin_checks_pass(self):
        assert (await check_event_loop()).status == Status.OK
        assert (await check_codec()).status == Status.OK
        assert (await create_random_source_check()()).status == Status.OK

    @pytest.mark.asyncio
    async def test_short_random_source_fails(self):
        result = await create_random_source_check(lambda n: b"\x00")()
        assert result.status == Status.FAIL

    @pytest.mark.asyncio
    async def test_critical_failure_fails_report(self):
        async def failing():
            raise RuntimeError("down")

        checker = HealthChecker()
        checker.register("ok", check_event_loop)
        checker.register("bad", failing, critical=True)
        report = await checker.check()
        assert report.status == Status.FAIL
        assert report.to_dict()["checks"][1]["msg"] == "down"

    @pytest.mark.asyncio
    async def test_non_critical_failure_degrades(self):
        async def failing():
            return CheckResult("bad", Status.FAIL)

        checker = HealthChecker()
        checker.register("bad", failing, critical=False)
        assert (await checker.check()).status == Status.DEGRADED


class TestCrashHandler:
    """Tests for crash handling utilities."""

    def test_configure_sets_path(self):
        """configure() sets crash log path."""
        original = crash._crash_log
        crash.configure("/tmp/test_crash.log")
        assert crash._crash_log == "/tmp/test_crash.log"
        crash.configure(original)

    def test_install_crash_handler(self):
        """install_crash_handler sets sys.excepthook."""
        original_hook = sys.excepthook
        crash.install_crash_handler()
        assert sys.excepthook == crash.log_crash
        sys.excepthook = original_hook

    def test_async_crash_written_with_ksuid(self, tmp_path):
        original = crash._crash_log
        crash.configure(str(tmp_path / "logs" / "crash.log"))
        try:
            record = crash.log_async_crash(RuntimeError("lost"), {"message": "task failed"})
        finally:
            crash.configure(original)

        assert is_valid_ksuid(record["id"])
        written = json.loads((tmp_path / "logs" / "crash.log").read_text())
        assert written["id"] == record["id"]
        assert written["type"] == "RuntimeError"
        assert written["msg"] == "lost"
