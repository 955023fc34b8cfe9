"""Random pauses that make the bot's responses look human."""

import random
import time

_rng = random.Random()


def random_delay(min_ms=500, max_ms=3000):
    """Sleep for a random whole number of milliseconds in [min_ms, max_ms] and return it."""
    if min_ms > max_ms:
        min_ms, max_ms = max_ms, min_ms
    delay_ms = _rng.randint(min_ms, max_ms)
    time.sleep(delay_ms / 1000)
    return delay_ms