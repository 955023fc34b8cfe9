"""Stack top-up rules for the bot."""

BIG_BLIND = 4
TOP_UP_THRESHOLD_BB = 5
TARGET_STACK_BB = 100

_THRESHOLD = TOP_UP_THRESHOLD_BB * BIG_BLIND
_TARGET = TARGET_STACK_BB * BIG_BLIND


def should_top_up(current_stack):
    """True when the stack is below the top-up threshold."""
    return current_stack < _THRESHOLD


def top_up_amount(current_stack):
    """Chips needed to reach the target stack, or 0 if already there."""
    return max(_TARGET - current_stack, 0)


def top_up(current_stack):
    """Return the stack raised to the target if it is below it."""
    return max(current_stack, _TARGET)