"""Random identifiers shaped like UUIDs."""

import random

_rng = random.Random()


def _word():
    return _rng.getrandbits(32)


def generate():
    """Return a random identifier of the form xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx."""
    return (
        f"{_word():08x}-{_word() & 0xFFFF:04x}-{_word() & 0xFFFF:04x}-"
        f"{_word() & 0xFFFF:04x}-{_word():012x}"
    )