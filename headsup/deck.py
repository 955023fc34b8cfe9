"""A shuffled 52-card deck."""

import random

from .card import Card, Rank, Suit


class Deck:
    """A standard deck, shuffled on creation, dealt from the top."""

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self._cards = [Card(rank, suit) for rank in Rank for suit in Suit]
        self._next = 0
        self.shuffle()

    def shuffle(self):
        """Shuffle all 52 cards and return every dealt card to the deck."""
        self._rng.shuffle(self._cards)
        self._next = 0

    def deal(self):
        """Take the next card; raises IndexError when the deck is empty."""
        if self._next >= len(self._cards):
            raise IndexError("No cards left in deck")
        card = self._cards[self._next]
        self._next += 1
        return card

    def __len__(self):
        return len(self._cards) - self._next