# temporal.py
"""
Representation handling for time points.

A time point is a datetime.date, datetime.datetime or datetime.time value.
When two points of different representations are differenced, the second one
is first projected onto the representation of the first one:

  start \\ end       date        naive dt      aware dt         time
  date              as is       .date()       .date()          error
  naive datetime    midnight    as is         tzinfo dropped   error
  aware datetime    error       error         as is            error
  naive time        error       .time()       .time()          as is, offset dropped
  aware time        error       error         .timetz()        aware only

An aware start never accepts a point without an offset: there is no zone to
place it in.
"""
import datetime
import logging
from typing import Optional, Union

from .errors import DateComputationError

logger = logging.getLogger(__name__)

TimePoint = Union[datetime.date, datetime.datetime, datetime.time]

# times are differenced on a single day, far enough from date.min for any offset
_REFERENCE_DAY = datetime.date(2000, 1, 1)


# ----------------------------------------------------------------
# Representation names
# ----------------------------------------------------------------
def _is_aware(value) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def _kind(value) -> Optional[str]:
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime.datetime):
        return "aware datetime" if _is_aware(value) else "naive datetime"
    if isinstance(value, datetime.date):
        return "date"
    if isinstance(value, datetime.time):
        return "aware time" if _is_aware(value) else "naive time"
    return None


def describe(value) -> str:
    """Human-readable name of the value's representation."""
    return _kind(value) or type(value).__name__


def _unsupported(value, like) -> DateComputationError:
    return DateComputationError(
        f"Unable to obtain {describe(like)} from {describe(value)}: {value!r}"
    )


# ----------------------------------------------------------------
# Projection
# ----------------------------------------------------------------
def project(value, like) -> TimePoint:
    """
    Return `value` expressed in the representation of `like`.
    Raises DateComputationError when there is no such projection.
    """
    target = _kind(like)
    source = _kind(value)
    if target is None or source is None:
        raise DateComputationError(
            f"Unsupported time point types: {type(like).__name__}, {type(value).__name__}"
        )
    if source == target:
        return value

    if target == "date":
        if source.endswith("datetime"):
            return value.date()
    elif target == "naive datetime":
        if source == "date":
            return datetime.datetime.combine(value, datetime.time())
        if source == "aware datetime":
            return value.replace(tzinfo=None)
    elif target == "naive time":
        if source.endswith("datetime"):
            return value.time()
        if source == "aware time":
            return value.replace(tzinfo=None)
    elif target == "aware time":
        if source == "aware datetime":
            # fixed offset of that instant, a named zone has no offset without a date
            return value.astimezone(datetime.timezone(value.utcoffset())).timetz()

    raise _unsupported(value, like)


def _on_timeline(value):
    """
    Aware values become UTC instants, naive ones lose any offset-less tzinfo.
    Times are placed on the reference day first.
    """
    if isinstance(value, datetime.time):
        if not _is_aware(value):
            value = value.replace(tzinfo=None)
        value = datetime.datetime.combine(_REFERENCE_DAY, value)
    if isinstance(value, datetime.datetime):
        if _is_aware(value):
            return value.astimezone(datetime.timezone.utc)
        return value.replace(tzinfo=None)
    return value


def signed_span(start: TimePoint, end: TimePoint) -> datetime.timedelta:
    """
    Signed span `end - start`, with `end` projected onto `start`'s representation.
    OverflowError from timedelta arithmetic is not caught.
    """
    projected = project(end, start)
    if projected is not end:
        logger.debug("projected %s %r onto %s", describe(end), end, describe(start))

    start = _on_timeline(start)
    projected = _on_timeline(projected)

    try:
        return projected - start
    except TypeError as e:
        raise DateComputationError(
            f"Unable to subtract {describe(start)} from {describe(projected)}: {e}"
        ) from e
