"""Synthetic log entry generator."""

import logging
import random

from loggen import pools
from loggen.config import Config
from loggen.models import Level, LogRecord

logger = logging.getLogger(__name__)


class LogGenerator:
    """Builds plausible API-request and component-health records and hands them to a writer."""

    def __init__(self, writer, config: Config, rng: random.Random | None = None):
        self._writer = writer
        self._config = config
        self._rng = rng or random.Random()
        self._levels = list(config.level_weights.keys())
        self._weights = list(config.level_weights.values())

    def _select_level(self) -> Level:
        """Weighted random outcome selection."""
        return Level(self._rng.choices(self._levels, weights=self._weights, k=1)[0])

    def _request_record(self) -> LogRecord:
        level = self._select_level()
        lo, hi = pools.RESPONSE_TIME_RANGES[level.value]
        if level is Level.ERROR:
            status = self._rng.choice(pools.SERVER_ERROR_STATUSES)
        elif level is Level.WARN:
            # Either rejected by the client-facing layer or merely slow
            if self._rng.random() < 0.5:
                status = self._rng.choice(pools.CLIENT_ERROR_STATUSES)
            else:
                status = 200
        else:
            status = self._rng.choice(pools.SUCCESS_STATUSES)

        return LogRecord(
            level=level,
            service=self._config.service_name,
            message=self._rng.choice(pools.REQUEST_MESSAGES[level.value]),
            user_id=self._rng.choice(pools.USER_POOL),
            endpoint=self._rng.choice(pools.ENDPOINT_POOL),
            response_time_ms=self._rng.randint(lo, hi),
            status_code=status,
            region=self._rng.choice(pools.REGION_POOL),
        )

    def _health_record(self) -> LogRecord:
        level = self._select_level()
        return LogRecord(
            level=level,
            service=self._config.service_name,
            message=pools.HEALTH_MESSAGES[level.value],
            region=self._rng.choice(pools.REGION_POOL),
            component=self._rng.choice(pools.COMPONENT_POOL),
        )

    def _debug_record(self) -> LogRecord:
        return LogRecord(
            level=Level.DEBUG,
            service=self._config.service_name,
            message=self._rng.choice(pools.DEBUG_MESSAGES),
            endpoint=self._rng.choice(pools.ENDPOINT_POOL),
        )

    def _fixed_records(self) -> list[LogRecord]:
        return [
            LogRecord(level=Level(level), service=self._config.service_name, message=message)
            for level, message in pools.FIXED_RECORDS
        ]

    def make_records(self) -> list[LogRecord]:
        """Return the records for one tick without writing them."""
        if self._config.mode == "fixed":
            return self._fixed_records()

        records = [self._request_record()]
        if self._rng.random() < self._config.health_probability:
            records.append(self._health_record())
        if self._rng.random() < self._config.debug_probability:
            records.append(self._debug_record())
        return records

    def tick(self) -> int:
        """Emit one tick's records to the writer. Returns the number written."""
        records = self.make_records()
        for record in records:
            self._writer.write(record)
        logger.debug("Tick emitted %d record(s)", len(records))
        return len(records)
