"""Playing cards: ranks, suits and their two-character notation."""

from dataclasses import dataclass
from enum import IntEnum

_RANK_CHARS = "23456789TJQKA"
_SUIT_CHARS = "cdhs"
NUM_SUITS = 4
NUM_CARDS = 52


class Rank(IntEnum):
    """Card rank, from two (lowest) to ace (highest)."""

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    @property
    def symbol(self):
        return _RANK_CHARS[self]


class Suit(IntEnum):
    """Card suit."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def symbol(self):
        return _SUIT_CHARS[self]


@dataclass(frozen=True)
class Card:
    """A single playing card; the default is the two of clubs."""

    rank: Rank = Rank.TWO
    suit: Suit = Suit.CLUBS

    def __post_init__(self):
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "suit", Suit(self.suit))

    @classmethod
    def from_string(cls, text):
        """Parse notation such as "As" or "Td"."""
        if len(text) != 2:
            raise ValueError("Card string must be 2 characters")
        if not all(" " <= ch <= "~" for ch in text):
            raise ValueError("Card string contains non-printable characters")
        rank_char, suit_char = text
        if rank_char not in _RANK_CHARS:
            raise ValueError("Invalid rank character")
        if suit_char not in _SUIT_CHARS:
            raise ValueError("Invalid suit character")
        return cls(Rank(_RANK_CHARS.index(rank_char)), Suit(_SUIT_CHARS.index(suit_char)))

    @classmethod
    def from_int(cls, value):
        """Build a card from its index 0-51 (rank * 4 + suit)."""
        if not 0 <= value < NUM_CARDS:
            raise ValueError("Card index must be between 0 and 51")
        rank, suit = divmod(value, NUM_SUITS)
        return cls(Rank(rank), Suit(suit))

    def to_int(self):
        """Return the card's index 0-51 (rank * 4 + suit)."""
        return int(self.rank) * NUM_SUITS + int(self.suit)

    def __str__(self):
        return self.rank.symbol + self.suit.symbol