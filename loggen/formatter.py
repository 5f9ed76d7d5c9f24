"""Serializes log records to single-line JSON."""

import json
from datetime import datetime, timedelta, timezone

from loggen.models import LogRecord


def format_timestamp(dt: datetime) -> str:
    """RFC3339 at second precision; UTC is rendered with a ``Z`` suffix."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    if dt.utcoffset() == timedelta(0):
        return dt.strftime("%Y-%m-%dT%H:%M:%SZ")
    return dt.isoformat(timespec="seconds")


def format_json(record: LogRecord, now: datetime | None = None) -> str:
    """Return the record as one compact JSON line (without the trailing newline)."""
    if now is None:
        now = datetime.now(timezone.utc)
    return json.dumps(
        record.to_dict(format_timestamp(now)),
        separators=(",", ":"),
        ensure_ascii=False,
    )
