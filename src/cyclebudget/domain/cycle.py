"""Cycle window calculation.

A cycle is a run of whole calendar months ending with the month of "now".
Month shifts use ``relativedelta`` so they follow the calendar (Mar 31 minus
one month is Feb 28/29) rather than counting days.
"""

import logging
from datetime import datetime

from dateutil.relativedelta import relativedelta

from cyclebudget.domain.constants import DEFAULT_CYCLE_MONTHS, DEFAULT_TREND_CYCLES
from cyclebudget.domain.entities import CycleWindow

logger = logging.getLogger(__name__)


def normalize_cycle_months(cycle_months) -> int:
    """Return a usable cycle length.

    Anything that is not a positive whole number is a configuration error;
    it is clamped to the default of one month and logged.
    """
    try:
        months = int(cycle_months)
    except (TypeError, ValueError):
        months = 0
    else:
        if months != cycle_months and not isinstance(cycle_months, str):
            months = 0

    if months <= 0:
        logger.warning(
            "Invalid cycle length %r, falling back to %d month(s)",
            cycle_months,
            DEFAULT_CYCLE_MONTHS,
        )
        return DEFAULT_CYCLE_MONTHS
    return months


def start_of_month(moment: datetime) -> datetime:
    """Truncate a timestamp to midnight on the first day of its month."""
    return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def current_cycle_start(now: datetime, cycle_months) -> datetime:
    """Get the inclusive lower bound of the cycle containing ``now``.

    The current cycle has no upper bound.
    """
    months = normalize_cycle_months(cycle_months)
    return start_of_month(now) - relativedelta(months=months - 1)


def format_cycle_label(start_date: datetime, end_date: datetime) -> str:
    """Build a short label spanning a window's months, e.g. 'Jul 2024-Aug'."""
    if (start_date.year, start_date.month) == (end_date.year, end_date.month):
        return start_date.strftime("%b %Y")
    return f"{start_date.strftime('%b %Y')}-{end_date.strftime('%b')}"


def historical_cycles(
    now: datetime, cycle_months, count: int = DEFAULT_TREND_CYCLES
) -> list[CycleWindow]:
    """Get the current cycle and the cycles before it, oldest first.

    Args:
        now: Reference time
        cycle_months: Cycle length in months
        count: Number of windows including the current one

    Returns:
        List of CycleWindow, ordered oldest to newest with "Current" last
    """
    months = normalize_cycle_months(cycle_months)
    month_start = start_of_month(now)

    windows = []
    for i in range(max(count, 0)):
        end_date = now - relativedelta(months=i * months)
        start_date = month_start - relativedelta(months=(i + 1) * months - 1)
        label = "Current" if i == 0 else format_cycle_label(start_date, end_date)
        windows.append(
            CycleWindow(
                label=label,
                start_date=start_date,
                end_date=end_date,
                is_current=i == 0,
            )
        )

    windows.reverse()
    return windows
