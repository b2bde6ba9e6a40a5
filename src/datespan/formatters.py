# formatters.py
from typing import List

from .temporal import TimePoint, describe


def fmt_point(value: TimePoint) -> str:
    """ISO form of a time point, seconds dropped when they are zero."""
    if hasattr(value, "second") and value.second == 0 and value.microsecond == 0:
        return value.isoformat(timespec="minutes")
    return value.isoformat()


def summary_lines(
    start: TimePoint,
    end: TimePoint,
    days: int,
    weeks: int,
    *,
    verbose: bool = False,
    label_width: int = 12,
) -> List[str]:
    """
    Plain-text result lines for the demo:
      Start:      2021-11-01T00:00
      End:        2022-05-01T00:00
      Full days:  181
      Full weeks: 25
    """
    rows = [("Start:", start), ("End:", end)]
    lines = []
    for label, point in rows:
        line = f"{label:<{label_width}}{fmt_point(point)}"
        if verbose:
            line += f"  ({describe(point)})"
        lines.append(line)
    lines.append(f"{'Full days:':<{label_width}}{days}")
    lines.append(f"{'Full weeks:':<{label_width}}{weeks}")
    return lines


def print_summary(
    start: TimePoint,
    end: TimePoint,
    days: int,
    weeks: int,
    *,
    verbose: bool = False,
    label_width: int = 12,
) -> None:
    for line in summary_lines(start, end, days, weeks, verbose=verbose, label_width=label_width):
        print(line)
