import json
from datetime import datetime, timedelta, timezone

from loggen.formatter import format_json, format_timestamp
from loggen.models import Level, LogRecord

NOW = datetime(2024, 1, 15, 10, 30, 0, 123456, tzinfo=timezone.utc)


class TestFormatTimestamp:
    def test_utc_uses_z_suffix(self):
        assert format_timestamp(NOW) == "2024-01-15T10:30:00Z"

    def test_offset_preserved(self):
        tz = timezone(timedelta(hours=2))
        dt = datetime(2024, 1, 15, 12, 30, 0, tzinfo=tz)
        assert format_timestamp(dt) == "2024-01-15T12:30:00+02:00"

    def test_naive_treated_as_utc(self):
        assert format_timestamp(datetime(2024, 1, 15, 10, 30)) == "2024-01-15T10:30:00Z"


class TestFormatJson:
    def test_required_fields_only(self):
        record = LogRecord(level=Level.INFO, service="svc", message="User logged in")
        line = format_json(record, NOW)
        assert json.loads(line) == {
            "timestamp": "2024-01-15T10:30:00Z",
            "level": "INFO",
            "service": "svc",
            "message": "User logged in",
        }

    def test_field_order(self, full_record):
        keys = list(json.loads(format_json(full_record, NOW)).keys())
        assert keys == [
            "timestamp", "level", "service", "message", "user_id", "endpoint",
            "response_time_ms", "status_code", "region", "component",
        ]

    def test_integers_stay_integers(self, full_record):
        entry = json.loads(format_json(full_record, NOW))
        assert entry["response_time_ms"] == 1200
        assert entry["status_code"] == 200

    def test_empty_and_zero_fields_omitted(self):
        record = LogRecord(
            level=Level.ERROR, service="svc", message="boom",
            user_id="", endpoint=None, response_time_ms=0, status_code=0,
            region="", component=None,
        )
        entry = json.loads(format_json(record, NOW))
        assert set(entry) == {"timestamp", "level", "service", "message"}

    def test_single_line_even_with_newlines_in_message(self):
        record = LogRecord(level=Level.DEBUG, service="svc", message="line one\nline two")
        line = format_json(record, NOW)
        assert "\n" not in line
        assert json.loads(line)["message"] == "line one\nline two"

    def test_plain_string_level_accepted(self):
        record = LogRecord(level="WARN", service="svc", message="m")
        assert json.loads(format_json(record, NOW))["level"] == "WARN"

    def test_default_timestamp_is_now(self):
        record = LogRecord(level=Level.INFO, service="svc", message="m")
        before = datetime.now(timezone.utc).replace(microsecond=0)
        entry = json.loads(format_json(record))
        stamped = datetime.strptime(entry["timestamp"], "%Y-%m-%dT%H:%M:%SZ").replace(tzinfo=timezone.utc)
        assert stamped >= before
