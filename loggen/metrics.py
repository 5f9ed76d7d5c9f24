"""Writer counters, logged at shutdown and optionally dumped to a JSON file."""

import json
import os
import tempfile
import time
from datetime import datetime, timezone

# Counters the writer maintains; always present in a snapshot, even at zero
WRITER_COUNTERS = ("records_written", "bytes_written", "rotations", "rotation_failures")


class Metrics:
    def __init__(self):
        self._counters = dict.fromkeys(WRITER_COUNTERS, 0)
        self._start_time = time.monotonic()

    def increment(self, name: str, amount: int = 1) -> None:
        self._counters[name] = self._counters.get(name, 0) + amount

    def get(self, name: str) -> int:
        return self._counters.get(name, 0)

    def snapshot(self) -> dict[str, int]:
        """Counter values only, writer counters first."""
        return dict(self._counters)

    def get_all(self) -> dict:
        return {
            "counters": self.snapshot(),
            "uptime_seconds": round(time.monotonic() - self._start_time, 1),
            "saved_at": datetime.now(timezone.utc).isoformat(),
        }

    def save(self, path: str) -> None:
        """Replace *path* with the current state; a partial file is never left behind."""
        directory = os.path.dirname(path) or "."
        os.makedirs(directory, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=directory, prefix=".metrics-")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(self.get_all(), f, indent=2)
            os.replace(tmp, path)
        except OSError:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
