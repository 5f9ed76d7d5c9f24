"""Cancellable periodic tick loop."""

import logging
import random
import threading

from loggen.config import Config

logger = logging.getLogger(__name__)


def next_interval(config: Config, rng: random.Random) -> float:
    """Fixed interval when the bounds are equal, otherwise uniform jitter between them."""
    if config.interval_min == config.interval_max:
        return config.interval_min
    return rng.uniform(config.interval_min, config.interval_max)


def run(generator, config: Config, stop_event: threading.Event,
        rng: random.Random | None = None, max_ticks: int | None = None) -> int:
    """Tick until *stop_event* is set (or *max_ticks* ticks ran). Returns records emitted.

    The wait between ticks is the only suspension point and returns early
    when the stop event is set.
    """
    rng = rng or random.Random()
    ticks = 0
    emitted = 0

    while not stop_event.is_set():
        emitted += generator.tick()
        ticks += 1
        if max_ticks is not None and ticks >= max_ticks:
            break
        stop_event.wait(next_interval(config, rng))

    logger.info("Tick loop stopped after %d tick(s), %d record(s)", ticks, emitted)
    return emitted
