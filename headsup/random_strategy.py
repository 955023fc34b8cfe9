"""A bot strategy that picks among the allowed actions at random."""

import random


class RandomStrategy:
    """Chooses a random legal action and amount."""

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()

    def choose_action(self, possible_actions, call_amount, min_raise, max_raise):
        """Return (action, amount) for a randomly chosen action.

        A raise picks an amount in [min_raise, max_raise]; a call uses
        call_amount; a fold uses 0.
        """
        actions = list(possible_actions)
        if not actions:
            raise ValueError("possible_actions must not be empty")
        action = self._rng.choice(actions)
        if action == "raise":
            if min_raise > max_raise:
                raise ValueError("min_raise cannot exceed max_raise")
            return action, self._rng.randint(min_raise, max_raise)
        if action == "call":
            return action, call_amount
        if action == "fold":
            return action, 0
        raise ValueError(f"unknown action: {action}")