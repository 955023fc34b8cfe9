# headsup

Building blocks for heads-up (two-player) Texas hold'em at 2/4 blinds. The
package also includes a small bot that connects over WebSocket and plays by
choosing at random among the actions the server offers.

## Modules

- `headsup.card`: `Rank`, `Suit` and `Card`. `Card.from_string("As")` parses
  the two-character notation and `str(card)` prints it. `Card.from_int` and
  `Card.to_int` convert to and from an index 0-51 (rank * 4 + suit).
- `headsup.deck`: `Deck`, a 52-card deck that is shuffled when it is created.
  It takes an optional `random.Random`. It provides `shuffle()`, `deal()` and
  `len()`. `deal()` raises `IndexError` once the deck is empty.
- `headsup.hand_ranking`: `HandRank`, `evaluate(cards)` and `compare(hand1, hand2)`.
  `evaluate` returns the best category obtainable from 5 to 7 cards.
  `compare` returns a positive number, a negative number or 0, and uses kickers
  to break ties within the same category.
- `headsup.betting_rules`: `Action`, `BettingState`, `is_valid_action`,
  `calculate_min_raise`, `calculate_max_raise`, `apply_action` (which returns
  a new state) and `is_round_complete`. `FOLDED_BET` (-1) marks a folded player.
- `headsup.models`: `Player`, `Table`, `Hand`, `SidePot`, `ActionHistory`,
  `ConnectionStatus`, `TableState` and `BettingRound`.
- `headsup.pot`: `calculate_side_pots`, `get_eligible_players_for_pot`,
  `distribute_pot` and `award_pot`. When a pot does not split evenly, the odd
  chips go to the winners listed first.
- `headsup.game`: drives a `Hand`. `start_hand`, `deal_hole_cards`,
  `deal_community_cards`, `apply_action` (raises `ValueError` on an invalid
  action), `advance_betting_round` (deals the flop, turn and river),
  `is_hand_complete`, `determine_winners`, `calculate_side_pots` and
  `reset_hand`. `determine_winners` returns the last player who has not
  folded. If several remain, it returns the first player holding the best
  hand category, without looking at kickers.
- `headsup.serialization`: JSON helpers for cards, card lists, hand ranks and
  `WelcomeMessage`. Use `serialize(obj)` and `deserialize(text, kind)`, where
  `kind` is `Card`, `HandRank`, `WelcomeMessage` or `list`.
- `headsup.stack_management`: `should_top_up`, `top_up_amount` and `top_up`.
  A stack below 5 big blinds (20 chips) should be topped up, and the target
  is 100 big blinds (400 chips).
- `headsup.random_strategy`: `RandomStrategy.choose_action` returns an
  `(action, amount)` pair.
- `headsup.delay`: `random_delay(min_ms=500, max_ms=3000)` sleeps for a random
  number of milliseconds and returns that number.
- `headsup.constants`: blinds, stack sizes, timeouts and seat numbers.
- `headsup.log`: minimal levelled logging to standard output.
- `headsup.ids`: random identifiers in UUID form.
- `headsup.client`: `Client`, `ProtocolError` and `main`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from headsup.card import Card
from headsup.hand_ranking import evaluate, compare, rank_to_string

royal = [Card.from_string(s) for s in ("As", "Ks", "Qs", "Js", "Ts")]
print(rank_to_string(evaluate(royal)))   # ROYAL_FLUSH

pair_of_aces = [Card.from_string(s) for s in ("Ah", "Ad", "9c", "7s", "2d")]
pair_of_kings = [Card.from_string(s) for s in ("Kh", "Kd", "9c", "7s", "2d")]
print(compare(pair_of_aces, pair_of_kings) > 0)   # True
```

## Running the bot

```
headsup-bot <host> <port> [name]
```

The bot connects to `ws://<host>:<port>/`. It expects a `welcome` message
that carries its `player_id`. It then sends `join` with the given name
(`Bot` if none is given) and waits for a `join_ack` with its seat. After
that it handles messages from the server:

- `action_request`: the bot pauses for a random time, picks one of the offered
  actions and replies with an `action` message.
- `hand_completed`: the bot reads its own stack from `updated_stacks`. If the
  stack is below the top-up threshold, it sends `top_up`.
- `top_up_ack`: the bot records its new stack.
- `error`: the bot stops. It also stops when a message is malformed.

## What this package does not do

There is no poker server here. The game modules hold the table and hand
logic, but nothing in the package accepts connections or deals hands to
remote players. The bot needs a server running elsewhere to connect to.