# config.py
import datetime

from .temporal import TimePoint

# Fixed end point of the demonstration run
DEFAULT_END = datetime.datetime(2021, 7, 14, 0, 0)


def parse_time_point(text: str) -> TimePoint:
    """
    Parse an ISO-8601 time point for the demo:
      2021-07-14                 -> date
      2021-07-14T10:30           -> naive datetime
      2021-07-14T10:30+03:00     -> aware datetime
    Raises ValueError on anything else.
    """
    text = text.strip()
    if len(text) == 10:
        return datetime.date.fromisoformat(text)
    return datetime.datetime.fromisoformat(text)


def resolve_demo_points(start=None, end=None, now=None):
    """
    Return (start, end) for the demo, filling in what was not given:
    start defaults to `now` (current local time), end to DEFAULT_END.
    """
    if start is None:
        start = now or datetime.datetime.now()
    if end is None:
        end = DEFAULT_END
    return start, end
