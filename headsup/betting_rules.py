"""Validation and application of betting actions."""

from dataclasses import dataclass, replace
from enum import Enum

from .constants import BIG_BLIND

FOLDED_BET = -1
"""Bet value that marks a folded player."""


class Action(Enum):
    FOLD = "fold"
    CALL = "call"
    RAISE = "raise"


@dataclass(frozen=True)
class BettingState:
    """Betting figures for the current round."""

    current_bet: int
    min_raise: int
    pot: int


def is_valid_action(action, amount, state, player_stack):
    """Return whether the action and amount are allowed in this state."""
    if action is Action.FOLD:
        return amount == 0
    if action is Action.CALL:
        return amount == state.current_bet and amount <= player_stack
    if action is Action.RAISE:
        return state.min_raise <= amount <= player_stack and amount > state.current_bet
    return False


def calculate_min_raise(current_bet, big_blind):
    """Smallest allowed raise: the big blind, or the current bet plus the big blind."""
    if current_bet == 0:
        return big_blind
    return current_bet + big_blind


def calculate_max_raise(player_stack):
    """Largest allowed raise: the player's whole stack, as a chip count."""
    return int(player_stack)


def apply_action(action, amount, state, player_stack):
    """Return the state that follows the action; the given state is left unchanged."""
    if action is Action.CALL:
        return replace(state, pot=state.pot + amount)
    if action is Action.RAISE:
        return BettingState(
            current_bet=amount,
            min_raise=calculate_min_raise(amount, BIG_BLIND),
            pot=state.pot + amount,
        )
    return state


def is_round_complete(has_acted, bets, current_bet):
    """True when everyone has acted and every bet matches the current bet or is folded."""
    has_acted = list(has_acted)
    bets = list(bets)
    if len(has_acted) != len(bets):
        return False
    if not all(has_acted):
        return False
    return all(bet in (current_bet, FOLDED_BET) for bet in bets)