"""Poker hand evaluation and comparison for five to seven cards."""

from collections import Counter
from enum import IntEnum
from itertools import combinations

_HAND_SIZE = 5
_MIN_CARDS = 5
_MAX_CARDS = 7
_ACE = 12
_TEN = 8
_TWO = 0
_FIVE = 3
_WHEEL = frozenset({_ACE, 0, 1, 2, 3})


class HandRank(IntEnum):
    """Category of a five-card poker hand, weakest first."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


def _values(cards):
    return [(int(card.rank), int(card.suit)) for card in cards]


def _is_straight(ranks):
    """Ranks must be sorted in descending order."""
    if len(ranks) < _HAND_SIZE:
        return False
    for start in range(len(ranks) - _HAND_SIZE + 1):
        window = ranks[start:start + _HAND_SIZE]
        if all(high == low + 1 for high, low in zip(window, window[1:])):
            return True
    return _WHEEL <= set(ranks)


def _is_flush(values):
    if len(values) < _HAND_SIZE:
        return False
    return any(count >= _HAND_SIZE for count in Counter(suit for _, suit in values).values())


def _evaluate_five(values):
    if len(values) != _HAND_SIZE:
        raise ValueError("Need exactly 5 cards for evaluation")
    ranks = sorted((rank for rank, _ in values), reverse=True)
    counts = Counter(ranks).values()

    flush = _is_flush(values)
    straight = _is_straight(ranks)

    if flush and straight:
        if ranks[0] == _ACE and ranks[4] == _TEN:
            return HandRank.ROYAL_FLUSH
        return HandRank.STRAIGHT_FLUSH
    if 4 in counts:
        return HandRank.FOUR_OF_A_KIND
    has_three = 3 in counts
    pairs = sum(1 for count in counts if count == 2)
    if has_three and pairs:
        return HandRank.FULL_HOUSE
    if flush:
        return HandRank.FLUSH
    if straight:
        return HandRank.STRAIGHT
    if has_three:
        return HandRank.THREE_OF_A_KIND
    if pairs == 2:
        return HandRank.TWO_PAIR
    if pairs == 1:
        return HandRank.ONE_PAIR
    return HandRank.HIGH_CARD


def _comparison_key(values, rank):
    ranks = sorted((r for r, _ in values), reverse=True)
    counts = Counter(ranks)

    def with_count(n):
        return sorted((r for r, c in counts.items() if c == n), reverse=True)

    def others(n):
        return sorted((r for r, c in counts.items() if c != n), reverse=True)

    if rank is HandRank.HIGH_CARD:
        return ranks
    if rank is HandRank.ONE_PAIR:
        return with_count(2)[:1] + others(2)
    if rank is HandRank.TWO_PAIR:
        pairs = with_count(2)
        kicker = others(2)
        return pairs[:2] + (kicker[:1] or [-1])
    if rank is HandRank.THREE_OF_A_KIND:
        return with_count(3)[:1] + others(3)
    if rank in (HandRank.STRAIGHT, HandRank.FLUSH, HandRank.STRAIGHT_FLUSH, HandRank.ROYAL_FLUSH):
        ace_low = (
            rank in (HandRank.STRAIGHT, HandRank.STRAIGHT_FLUSH)
            and len(ranks) == _HAND_SIZE
            and ranks[0] == _ACE
            and ranks[4] == _TWO
        )
        return [_FIVE] if ace_low else [ranks[0]]
    if rank is HandRank.FULL_HOUSE:
        return (with_count(3)[:1] or [-1]) + (with_count(2)[:1] or [-1])
    # Four of a kind
    return (with_count(4)[:1] or [-1]) + (others(4)[:1] or [-1])


def _best_five(values):
    if not _MIN_CARDS <= len(values) <= _MAX_CARDS:
        raise ValueError("Need 5-7 cards for evaluation")
    if len(values) == _HAND_SIZE:
        return _evaluate_five(values), list(values)

    best_rank = HandRank.HIGH_CARD
    best_combo = None
    for combo in combinations(values, _HAND_SIZE):
        combo = list(combo)
        rank = _evaluate_five(combo)
        if best_combo is None or rank > best_rank:
            if best_combo is None and rank == best_rank:
                best_combo = combo
                continue
            best_rank, best_combo = rank, combo
        elif rank == best_rank:
            if _comparison_key(combo, rank) > _comparison_key(best_combo, rank):
                best_combo = combo
    return best_rank, best_combo


def evaluate(cards):
    """Return the best HandRank obtainable from 5 to 7 cards."""
    cards = list(cards)
    if not _MIN_CARDS <= len(cards) <= _MAX_CARDS:
        raise ValueError("Hand evaluation requires 5-7 cards")
    values = _values(cards)
    return max(_evaluate_five(list(combo)) for combo in combinations(values, _HAND_SIZE))


def rank_to_string(rank):
    """Return the upper-case name of a hand rank, or "UNKNOWN"."""
    if isinstance(rank, HandRank):
        return rank.name
    return "UNKNOWN"


def compare(hand1, hand2):
    """Compare two hands of 5-7 cards.

    Positive when hand1 is stronger, negative when hand2 is, 0 on a tie.
    """
    rank1, combo1 = _best_five(_values(hand1))
    rank2, combo2 = _best_five(_values(hand2))
    if rank1 != rank2:
        return int(rank1) - int(rank2)
    for a, b in zip(_comparison_key(combo1, rank1), _comparison_key(combo2, rank2)):
        if a != b:
            return a - b
    return 0