"""Synthetic log generator: writes JSON log lines to a rotating file for a log shipper to tail."""

import logging
import random
import signal
import sys
import threading

from loggen.config import ConfigError, load_config
from loggen.generator import LogGenerator
from loggen.metrics import Metrics
from loggen.runner import run
from loggen.writer import FatalWriteError, RotatingFileWriter

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [loggen] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def _save_metrics(metrics: Metrics, path: str) -> None:
    """Write the metrics file; failure is logged and never changes the exit status."""
    try:
        metrics.save(path)
    except OSError as e:
        logger.error("Could not save metrics to %s: %s", path, e)


def main() -> int:
    try:
        config = load_config()
    except ConfigError as e:
        logger.critical("Invalid configuration: %s", e)
        return 2

    logging.getLogger().setLevel(config.log_level)
    logger.info("Starting synthetic log generator")
    logger.info(
        "Config: log_file=%s, max_size=%d bytes, max_files=%d, interval=%.1f-%.1fs, mode=%s, lock=%s",
        config.log_file, config.max_file_size_bytes, config.max_files,
        config.interval_min, config.interval_max, config.mode, config.lock_enabled,
    )

    stop_event = threading.Event()

    def _signal_handler(sig, _frame):
        logger.info("Shutdown signal received (signal %d), stopping...", sig)
        stop_event.set()

    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    metrics = Metrics()
    rng = random.Random()
    try:
        writer = RotatingFileWriter(config, metrics)
        generator = LogGenerator(writer, config, rng)
        run(generator, config, stop_event, rng)
    except FatalWriteError as e:
        logger.critical("Fatal write error, aborting: %s", e)
        return 1
    finally:
        logger.info("Counters: %s", metrics.snapshot())
        if config.metrics_file:
            _save_metrics(metrics, config.metrics_file)

    logger.info("Shut down cleanly.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
