"""Running a hand: dealing, actions, rounds and winners."""

import copy
import time

from . import ids
from . import pot as _pot
from .constants import BIG_BLIND
from .deck import Deck
from .hand_ranking import evaluate
from .models import ActionHistory, BettingRound

_HOLE_CARDS = 2
_FLOP_CARDS = 3
_STREET_CARDS = 1


def _resize(values, size, fill):
    del values[size:]
    values.extend([fill] * (size - len(values)))


def _index_of(players, player):
    return next((i for i, p in enumerate(players) if p is player), None)


def start_hand(hand, deck, dealer, small_blind, big_blind):
    """Begin a new hand between the blinds and deal their hole cards.

    The hand gets its own shuffled copy of the deck; the given deck is untouched.
    """
    hand.id = "hand_" + ids.generate()
    hand.table = None
    hand.players = [small_blind, big_blind]
    _resize(hand.player_bets, len(hand.players), 0)
    _resize(hand.folded, len(hand.players), False)
    hand.deck = copy.deepcopy(deck)
    hand.deck.shuffle()
    hand.community_cards = []
    hand.pot = 0
    hand.side_pots = []
    hand.current_betting_round = BettingRound.PREFLOP
    hand.current_player_to_act = small_blind
    hand.min_raise = BIG_BLIND
    hand.history = []
    hand.winners = []
    hand.completed_at = 0
    deal_hole_cards(hand, hand.deck)


def deal_hole_cards(hand, deck):
    """Give every player in the hand two fresh hole cards."""
    for player in hand.players:
        player.hole_cards = [deck.deal() for _ in range(_HOLE_CARDS)]


def deal_community_cards(hand, deck, count):
    """Add count cards from the deck to the board."""
    hand.community_cards.extend(deck.deal() for _ in range(count))


def _add_bet(hand, player, amount):
    player.stack -= amount
    hand.pot += amount
    index = _index_of(hand.players, player)
    if index is not None:
        hand.player_bets[index] += amount


def apply_action(hand, player, action, amount):
    """Apply "fold", "call" or "raise" for a player and record it.

    Raises ValueError when the action is not allowed. Returns the recorded entry.
    """
    if player is None:
        raise ValueError("no player given")

    if len(hand.folded) != len(hand.players):
        _resize(hand.folded, len(hand.players), False)
    if len(hand.player_bets) != len(hand.players):
        _resize(hand.player_bets, len(hand.players), 0)

    if action == "fold":
        index = _index_of(hand.players, player)
        if index is not None:
            hand.folded[index] = True
    elif action == "call":
        if amount > player.stack:
            raise ValueError("call exceeds player's stack")
        if amount < 0:
            raise ValueError("amount must not be negative")
        _add_bet(hand, player, amount)
    elif action == "raise":
        if amount < hand.min_raise:
            raise ValueError("raise is below the minimum raise")
        if amount > player.stack:
            raise ValueError("raise exceeds player's stack")
        if amount < 0:
            raise ValueError("amount must not be negative")
        _add_bet(hand, player, amount)
        hand.min_raise = amount
    else:
        raise ValueError(f"unknown action: {action}")

    entry = ActionHistory(player=player, action=action, amount=amount, timestamp=int(time.time()))
    hand.history.append(entry)

    if len(hand.players) == 2:
        first, second = hand.players
        hand.current_player_to_act = second if hand.current_player_to_act is first else first

    return entry


def advance_betting_round(hand):
    """Move to the next round and deal the flop, turn or river; False at showdown."""
    if not hand.advance_round():
        return False
    if hand.current_betting_round is BettingRound.FLOP:
        deal_community_cards(hand, hand.deck, _FLOP_CARDS)
    elif hand.current_betting_round in (BettingRound.TURN, BettingRound.RIVER):
        deal_community_cards(hand, hand.deck, _STREET_CARDS)
    return True


def _active_players(hand):
    return [
        player
        for i, player in enumerate(hand.players)
        if i >= len(hand.folded) or not hand.folded[i]
    ]


def is_hand_complete(hand):
    """True at showdown or when at most one player has not folded."""
    if hand.current_betting_round is BettingRound.SHOWDOWN:
        return True
    return len(_active_players(hand)) <= 1


def determine_winners(hand):
    """The last player standing, or the first player holding the best hand category."""
    active = _active_players(hand)
    if len(active) <= 1:
        return active
    return [
        max(
            active,
            key=lambda player: evaluate(list(player.hole_cards) + list(hand.community_cards)),
        )
    ]


def calculate_side_pots(hand):
    """Recompute the hand's side pots from the players' bets."""
    hand.side_pots = _pot.calculate_side_pots(hand.players, hand.player_bets)


def reset_hand(hand):
    """Clear the hand for reuse, with a fresh shuffled deck."""
    hand.id = ""
    hand.table = None
    hand.players = []
    hand.deck = Deck()
    hand.deck.shuffle()
    hand.community_cards = []
    hand.pot = 0
    hand.side_pots = []
    hand.player_bets = []
    hand.folded = []
    hand.current_betting_round = BettingRound.PREFLOP
    hand.current_player_to_act = None
    hand.min_raise = BIG_BLIND
    hand.history = []
    hand.winners = []
    hand.completed_at = 0