"""Data models for players, tables and hands."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from .constants import BIG_BLIND, SEAT_1, SEAT_2
from .deck import Deck

TARGET_STACK = 400
"""Stack a player is topped up to: 100 big blinds at 2/4 blinds."""

TOP_UP_THRESHOLD = 20
"""Stack below which a player may top up: 5 big blinds at 2/4 blinds."""

_MAX_COMMUNITY_CARDS = 5
_PLAYERS_PER_HAND = 2


class ConnectionStatus(Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    RECONNECTING = "reconnecting"


class TableState(Enum):
    WAITING_FOR_PLAYERS = "waiting_for_players"
    HAND_IN_PROGRESS = "hand_in_progress"
    HAND_COMPLETE = "hand_complete"


class BettingRound(IntEnum):
    PREFLOP = 0
    FLOP = 1
    TURN = 2
    RIVER = 3
    SHOWDOWN = 4


@dataclass(eq=False)
class Player:
    """A seated player; compared by identity."""

    id: str = ""
    name: str = ""
    stack: int = 0
    seat: int = SEAT_1
    hole_cards: list = field(default_factory=list)
    connection_status: ConnectionStatus = ConnectionStatus.CONNECTED
    last_action_timestamp: int = 0
    disconnected_at: int | None = None
    is_sitting_out: bool = False

    def is_valid(self):
        """Non-negative stack, a known seat and either no or two hole cards."""
        return (
            self.stack >= 0
            and self.seat in (SEAT_1, SEAT_2)
            and len(self.hole_cards) in (0, 2)
        )

    def can_act(self):
        """True when connected and not sitting out."""
        return self.connection_status is ConnectionStatus.CONNECTED and not self.is_sitting_out

    def needs_top_up(self):
        """True when the stack is below the top-up threshold."""
        return self.stack < TOP_UP_THRESHOLD

    def top_up(self):
        """Raise the stack to the target if it is below the threshold."""
        if self.needs_top_up():
            self.stack = TARGET_STACK


@dataclass(eq=False)
class SidePot:
    """Chips that only some players can win."""

    amount: int = 0
    eligible_players: list = field(default_factory=list)


@dataclass(eq=False)
class Table:
    """A heads-up table with two seats."""

    id: str = ""
    seat_1: Player | None = None
    seat_2: Player | None = None
    current_hand: "Hand | None" = None
    pot: int = 0
    side_pots: list = field(default_factory=list)
    community_cards: list = field(default_factory=list)
    dealer_button_position: int = 0
    state: TableState = TableState.WAITING_FOR_PLAYERS

    def is_valid(self):
        """Both seats filled, at most five community cards and a button of 0 or 1."""
        return (
            self.seat_1 is not None
            and self.seat_2 is not None
            and len(self.community_cards) <= _MAX_COMMUNITY_CARDS
            and self.dealer_button_position in (0, 1)
        )

    def is_ready_for_hand(self):
        """True when waiting for players and both seats are filled."""
        return (
            self.state is TableState.WAITING_FOR_PLAYERS
            and self.seat_1 is not None
            and self.seat_2 is not None
        )


@dataclass
class ActionHistory:
    """One recorded action in a hand."""

    player: Player
    action: str
    amount: int
    timestamp: int


@dataclass(eq=False)
class Hand:
    """The state of one hand of poker."""

    id: str = ""
    table: Table | None = None
    players: list = field(default_factory=list)
    deck: Deck = field(default_factory=Deck)
    community_cards: list = field(default_factory=list)
    pot: int = 0
    side_pots: list = field(default_factory=list)
    player_bets: list = field(default_factory=list)
    folded: list = field(default_factory=list)
    current_betting_round: BettingRound = BettingRound.PREFLOP
    current_player_to_act: Player | None = None
    min_raise: int = BIG_BLIND
    history: list = field(default_factory=list)
    winners: list = field(default_factory=list)
    completed_at: int = 0

    def is_valid(self):
        """Two players, at most five community cards and a minimum raise of a big blind."""
        return (
            len(self.players) == _PLAYERS_PER_HAND
            and len(self.community_cards) <= _MAX_COMMUNITY_CARDS
            and self.min_raise >= BIG_BLIND
        )

    def is_betting_round_complete(self):
        """Bets are not tracked per round here, so a round is never reported complete."""
        return False

    def advance_round(self):
        """Move to the next betting round; False once at showdown."""
        if self.current_betting_round is BettingRound.SHOWDOWN:
            return False
        self.current_betting_round = BettingRound(self.current_betting_round + 1)
        return True