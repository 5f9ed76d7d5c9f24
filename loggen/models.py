"""Log record data model."""

from dataclasses import dataclass
from enum import Enum


class Level(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


OPTIONAL_FIELDS = (
    "user_id",
    "endpoint",
    "response_time_ms",
    "status_code",
    "region",
    "component",
)


@dataclass
class LogRecord:
    """One synthetic log entry.

    The timestamp is not part of the record: it is stamped when the record is
    serialized so that lines reflect actual emission order.
    """

    level: Level
    service: str
    message: str
    user_id: str | None = None
    endpoint: str | None = None
    response_time_ms: int | None = None
    status_code: int | None = None
    region: str | None = None
    component: str | None = None

    def to_dict(self, timestamp: str) -> dict:
        """Return the sparse mapping for serialization; unset optional fields are omitted."""
        data = {
            "timestamp": timestamp,
            "level": Level(self.level).value,
            "service": self.service,
            "message": self.message,
        }
        for name in OPTIONAL_FIELDS:
            value = getattr(self, name)
            # None, "" and 0 all count as unset
            if value:
                data[name] = value
        return data
