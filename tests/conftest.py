import random

import pytest

from loggen.config import Config
from loggen.models import Level, LogRecord


class RecordingWriter:
    """Collects records instead of writing them."""

    def __init__(self):
        self.records = []

    def write(self, record):
        self.records.append(record)
        return None


@pytest.fixture
def recording_writer():
    return RecordingWriter()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def config(tmp_path):
    return Config(log_file=str(tmp_path / "app.log"), interval_min=0.0, interval_max=0.0)


@pytest.fixture
def full_record():
    return LogRecord(
        level=Level.WARN,
        service="checkout-api",
        message="Slow response detected",
        user_id="user-1001",
        endpoint="/api/orders",
        response_time_ms=1200,
        status_code=200,
        region="eu-west-1",
        component="database",
    )
