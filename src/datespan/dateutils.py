# dateutils.py
import logging

from .temporal import TimePoint, signed_span
from .validation import NamedArgument, check_args_not_none

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


def _abs_span(start_inclusive: TimePoint, end_exclusive: TimePoint):
    check_args_not_none(
        (
            NamedArgument("startInclusive", start_inclusive),
            NamedArgument("endExclusive", end_exclusive),
        )
    )
    return abs(signed_span(start_inclusive, end_exclusive))


def full_days_between(start_inclusive: TimePoint, end_exclusive: TimePoint) -> int:
    """
    Count full days (86400 seconds) between two time points.

    The result never depends on argument order and is never negative.
    If the points have different representations, `end_exclusive` is first
    projected onto the representation of `start_inclusive` (a datetime onto a
    date keeps only its date, see temporal.project).

    Raises:
      InvalidArgumentError  - at least one argument is None
      DateComputationError  - the points cannot be differenced
      OverflowError         - the span does not fit into a timedelta
    """
    span = _abs_span(start_inclusive, end_exclusive)
    # a non-negative timedelta keeps whole days in .days, the rest in seconds/microseconds
    days = span.days
    logger.debug("full days between %r and %r: %d", start_inclusive, end_exclusive, days)
    return days


def full_weeks_between(start_inclusive: TimePoint, end_exclusive: TimePoint) -> int:
    """
    Count full weeks between two time points: full days // 7.
    Same argument rules and errors as full_days_between.
    """
    days = _abs_span(start_inclusive, end_exclusive).days
    return days // DAYS_PER_WEEK
