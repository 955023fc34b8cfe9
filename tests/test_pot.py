import pytest

from headsup.models import Hand, Player, SidePot
from headsup.pot import (
    award_pot,
    calculate_side_pots,
    distribute_pot,
    get_eligible_players_for_pot,
)


def _players(count):
    return [Player(id=f"p{i}", stack=0) for i in range(count)]


def test_side_pots_total_matches_bets():
    players = _players(3)
    bets = [100, 50, 100]
    pots = calculate_side_pots(players, bets)
    assert sum(p.amount for p in pots) == sum(bets)
    assert len(pots) == 2


def test_side_pots_eligibility_layers():
    a, b, c = _players(3)
    pots = calculate_side_pots([a, b, c], [100, 50, 100])
    assert pots[0].eligible_players == [b, a, c]
    assert pots[1].eligible_players == [a, c]


def test_equal_bets_make_one_pot():
    players = _players(2)
    pots = calculate_side_pots(players, [40, 40])
    assert len(pots) == 1
    assert pots[0].amount == 80
    assert pots[0].eligible_players == players


def test_zero_bets_make_no_pots():
    assert calculate_side_pots(_players(2), [0, 0]) == []


def test_empty_players():
    assert calculate_side_pots([], []) == []


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        calculate_side_pots(_players(2), [10])
    with pytest.raises(ValueError):
        get_eligible_players_for_pot(_players(1), [10, 20], 5)


def test_eligible_players_for_pot():
    a, b, c = _players(3)
    assert get_eligible_players_for_pot([a, b, c], [10, 30, 20], 20) == [b, c]
    assert get_eligible_players_for_pot([a, b, c], [10, 30, 20], 31) == []


def test_award_pot_ignores_non_positive():
    player = Player(stack=10)
    award_pot(player, 0)
    award_pot(player, -5)
    award_pot(None, 5)
    assert player.stack == 10
    award_pot(player, 7)
    assert player.stack == 17


def test_distribute_main_pot_single_winner():
    a, b = _players(2)
    hand = Hand(players=[a, b], pot=50)
    distribute_pot(hand, [b])
    assert b.stack == 50
    assert a.stack == 0
    assert hand.pot == 0


def test_distribute_main_pot_odd_chip_to_first():
    a, b = _players(2)
    hand = Hand(players=[a, b], pot=11)
    distribute_pot(hand, [a, b])
    assert a.stack == b.stack + 1
    assert a.stack + b.stack == 11


def test_distribute_no_winners_keeps_pot():
    hand = Hand(pot=30)
    distribute_pot(hand, [])
    assert hand.pot == 30


def test_distribute_side_pots_to_eligible_winners():
    a, b = _players(2)
    hand = Hand(
        players=[a, b],
        pot=0,
        side_pots=[SidePot(amount=40, eligible_players=[a, b]), SidePot(amount=20, eligible_players=[b])],
    )
    distribute_pot(hand, [a, b])
    assert a.stack + b.stack == 60
    assert b.stack - a.stack == 20
    assert hand.side_pots == []


def test_side_pot_without_eligible_winner_stays():
    a, b = _players(2)
    kept = SidePot(amount=20, eligible_players=[b])
    hand = Hand(players=[a, b], side_pots=[kept])
    distribute_pot(hand, [a])
    assert hand.side_pots == [kept]
    assert a.stack == 0