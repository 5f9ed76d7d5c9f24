"""Validates output lines against the record schema."""

import json

import jsonschema

RECORD_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "LogRecord line",
    "type": "object",
    "required": ["timestamp", "level", "service", "message"],
    "properties": {
        "timestamp": {
            "type": "string",
            "pattern": r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(Z|[+-]\d{2}:\d{2})$",
        },
        "level": {"enum": ["DEBUG", "INFO", "WARN", "ERROR"]},
        "service": {"type": "string", "minLength": 1},
        "message": {"type": "string"},
        "user_id": {"type": "string", "minLength": 1},
        "endpoint": {"type": "string", "minLength": 1},
        "response_time_ms": {"type": "integer", "not": {"const": 0}},
        "status_code": {"type": "integer", "not": {"const": 0}},
        "region": {"type": "string", "minLength": 1},
        "component": {"type": "string", "minLength": 1},
    },
    "additionalProperties": False,
}


class LineValidator:
    """Checks raw lines from a log file against RECORD_SCHEMA."""

    def __init__(self, schema: dict | None = None):
        self._validator = jsonschema.Draft202012Validator(schema or RECORD_SCHEMA)
        self._stats = {"total": 0, "valid": 0, "invalid": 0}

    def validate_line(self, line: str) -> tuple[bool, list[str]]:
        """Returns (is_valid, error messages)."""
        self._stats["total"] += 1
        try:
            entry = json.loads(line)
        except json.JSONDecodeError as e:
            self._stats["invalid"] += 1
            return False, [f"invalid JSON: {e.msg}"]

        errors = [error.message for error in self._validator.iter_errors(entry)]
        if errors:
            self._stats["invalid"] += 1
            return False, errors
        self._stats["valid"] += 1
        return True, []

    def get_stats(self) -> dict:
        return dict(self._stats)
