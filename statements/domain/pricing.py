"""Per-performance pricing rules.

All amounts are integer cents.
"""

from statements.domain.errors import UnknownPlayTypeError
from statements.domain.models import Performance, Play, PlayType
from statements.domain.value_objects import Money

TRAGEDY_BASE = 40000
TRAGEDY_AUDIENCE_THRESHOLD = 30
TRAGEDY_PER_EXTRA_SEAT = 1000

COMEDY_BASE = 30000
COMEDY_AUDIENCE_THRESHOLD = 20
COMEDY_LARGE_AUDIENCE_BONUS = 10000
COMEDY_PER_EXTRA_SEAT = 500
COMEDY_PER_SEAT = 300

CREDIT_AUDIENCE_THRESHOLD = 30
COMEDY_CREDIT_DIVISOR = 5


def amount_for(play: Play, performance: Performance) -> Money:
    """Return what a single performance costs.

    Raises:
        UnknownPlayTypeError: If the play's genre has no pricing rule.
    """
    play_type = play.play_type
    audience = performance.audience

    if play_type is PlayType.TRAGEDY:
        amount = TRAGEDY_BASE
        if audience > TRAGEDY_AUDIENCE_THRESHOLD:
            amount += TRAGEDY_PER_EXTRA_SEAT * (audience - TRAGEDY_AUDIENCE_THRESHOLD)
    elif play_type is PlayType.COMEDY:
        amount = COMEDY_BASE
        if audience > COMEDY_AUDIENCE_THRESHOLD:
            amount += COMEDY_LARGE_AUDIENCE_BONUS + COMEDY_PER_EXTRA_SEAT * (
                audience - COMEDY_AUDIENCE_THRESHOLD
            )
        amount += COMEDY_PER_SEAT * audience
    else:
        raise UnknownPlayTypeError(play_type.value)

    return Money(cents=amount)


def volume_credits_for(play: Play, performance: Performance) -> int:
    """Return the volume credits earned by a single performance.

    Raises:
        UnknownPlayTypeError: If the play's genre is not recognized.
    """
    credits = max(performance.audience - CREDIT_AUDIENCE_THRESHOLD, 0)
    if play.play_type is PlayType.COMEDY:
        credits += performance.audience // COMEDY_CREDIT_DIVISOR
    return credits
