"""Side-pot calculation and pot distribution."""

from .models import SidePot


def _check_aligned(players, bets):
    if len(players) != len(bets):
        raise ValueError("players and bets must have the same length")


def calculate_side_pots(players, bets):
    """Split contributions into layered pots, each with its eligible players.

    Each distinct bet level forms a pot funded by every player who bet at
    least that much; eligible players are listed in ascending bet order.
    """
    players = list(players)
    bets = list(bets)
    _check_aligned(players, bets)

    order = sorted(range(len(players)), key=lambda i: bets[i])
    side_pots = []
    previous_bet = 0
    for position, index in enumerate(order):
        current_bet = bets[index]
        if current_bet == previous_bet:
            continue
        contributors = order[position:]
        side_pots.append(
            SidePot(
                amount=(current_bet - previous_bet) * len(contributors),
                eligible_players=[players[i] for i in contributors],
            )
        )
        previous_bet = current_bet
    return side_pots


def get_eligible_players_for_pot(players, bets, pot_threshold):
    """Players whose bet reaches the threshold, in their original order."""
    players = list(players)
    bets = list(bets)
    _check_aligned(players, bets)
    return [player for player, bet in zip(players, bets) if bet >= pot_threshold]


def _split(amount, winners):
    share, remainder = divmod(amount, len(winners))
    for position, winner in enumerate(winners):
        award_pot(winner, share + (1 if position < remainder else 0))


def distribute_pot(hand, winners):
    """Share the main pot and every side pot among the winners.

    Odd chips go to the winners listed first. Side pots are shared only among
    the winners eligible for them; emptied side pots are removed.
    """
    winners = list(winners)
    if winners and hand.pot > 0:
        _split(hand.pot, winners)
        hand.pot = 0

    for side_pot in hand.side_pots:
        if side_pot.amount == 0:
            continue
        eligible = [w for w in winners if any(w is p for p in side_pot.eligible_players)]
        if not eligible:
            continue
        _split(side_pot.amount, eligible)
        side_pot.amount = 0

    hand.side_pots = [sp for sp in hand.side_pots if sp.amount != 0]


def award_pot(player, amount):
    """Add a positive amount to the player's stack; anything else is ignored."""
    if player is not None and amount > 0:
        player.stack += amount