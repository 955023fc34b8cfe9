"""Game-wide constants: blinds, stacks, timeouts and seat numbers."""

SMALL_BLIND = 2
BIG_BLIND = 4
STARTING_STACK = 400
DEFAULT_MIN_RAISE = 4
ACTION_TIMEOUT_MS = 30000
PING_INTERVAL_MS = 30000
PONG_TIMEOUT_MS = 10000
DEFAULT_DEALER_POSITION = 0
SEAT_1 = 0
SEAT_2 = 1

MAX_STACK = 10000
MAX_BET = 10000
MAX_ACTION_TIMEOUT_MS = 300000
MIN_ACTION_TIMEOUT_MS = 1000