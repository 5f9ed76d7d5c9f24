"""Append-only JSON line writer with size-based numbered rotation.

The writer keeps no state between calls: every ``write`` re-reads the size of
the active file and renames ``<path>.k`` to ``<path>.k+1`` when it has reached
the threshold. The rotate+append sequence runs under an exclusive advisory
lock on ``<path>.lock`` unless locking is disabled.
"""

import fcntl
import logging
import os
from contextlib import contextmanager

from loggen.config import Config
from loggen.formatter import format_json
from loggen.metrics import Metrics
from loggen.models import LogRecord

logger = logging.getLogger(__name__)


class WriterError(Exception):
    pass


class FatalWriteError(WriterError):
    """The active log file could not be opened, locked or written."""


class RotatingFileWriter:
    def __init__(self, config: Config, metrics: Metrics | None = None):
        self._config = config
        self._path = config.log_file
        self._lock_path = self._path + ".lock"
        self.metrics = metrics if metrics is not None else Metrics()
        dir_path = os.path.dirname(self._path)
        if dir_path:
            try:
                os.makedirs(dir_path, exist_ok=True)
            except OSError as e:
                raise FatalWriteError(f"cannot create log directory {dir_path}: {e}") from e

    @property
    def path(self) -> str:
        return self._path

    def rotated_path(self, index: int) -> str:
        return f"{self._path}.{index}"

    def should_rotate(self) -> bool:
        try:
            size = os.path.getsize(self._path)
        except OSError:
            return False
        return size >= self._config.max_file_size_bytes

    def _move(self, src: str, dst: str) -> bool:
        try:
            os.replace(src, dst)
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            self.metrics.increment("rotation_failures")
            logger.warning("Rotation rename %s -> %s failed: %s", src, dst, e)
            return False

    def rotate(self) -> str | None:
        """Shift rotated files up one index and move the active file to ``<path>.1``.

        The file at index ``max_files`` is overwritten. With ``max_files <= 0``
        nothing is shifted and ``<path>.1`` is overwritten every time.
        Returns the new ``<path>.1`` or None if the active file was not moved.
        """
        for k in range(self._config.max_files - 1, 0, -1):
            self._move(self.rotated_path(k), self.rotated_path(k + 1))

        target = self.rotated_path(1)
        if not self._move(self._path, target):
            return None
        self.metrics.increment("rotations")
        logger.info("Rotated %s -> %s", self._path, target)
        return target

    def rotate_if_needed(self) -> str | None:
        if self.should_rotate():
            return self.rotate()
        return None

    @contextmanager
    def _locked(self):
        if not self._config.lock_enabled:
            yield
            return
        try:
            lock_file = open(self._lock_path, "a")
        except OSError as e:
            raise FatalWriteError(f"cannot open lock file {self._lock_path}: {e}") from e
        with lock_file:
            try:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
            except OSError as e:
                raise FatalWriteError(f"cannot lock {self._lock_path}: {e}") from e
            try:
                yield
            finally:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)

    def write(self, record: LogRecord) -> str | None:
        """Rotate if needed, then append the record as one line.

        Returns the rotated file path if rotation occurred.
        Raises FatalWriteError when the active file cannot be written.
        """
        with self._locked():
            rotated = self.rotate_if_needed()
            line = format_json(record) + "\n"
            try:
                with open(self._path, "a", encoding="utf-8") as f:
                    f.write(line)
            except OSError as e:
                raise FatalWriteError(f"cannot write to {self._path}: {e}") from e

        self.metrics.increment("records_written")
        self.metrics.increment("bytes_written", len(line.encode("utf-8")))
        return rotated
