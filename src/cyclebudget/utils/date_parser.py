"""Date parsing utilities."""

from datetime import date, datetime, time, timedelta
from dateutil import parser as date_parser
from dateutil import tz
from dateutil.relativedelta import relativedelta


def parse_reference_time(value: str | None, now: datetime | None = None) -> datetime:
    """Parse a reference ("as of") time for cycle calculations.

    Supports:
    - "now" or an empty value: the current local time
    - "today", "yesterday": end of that day
    - "last month", "last year": end of the same day one month/year back
    - Absolute dates/times: "2024-01-15", "2024-01-15T10:30", "January 15, 2024"

    Bare dates resolve to the last moment of the day so that everything
    recorded on that day falls inside the reference cycle. Naive results
    take the zone of ``now``, which defaults to the local zone with its
    daylight saving rules.

    Args:
        value: Reference time string
        now: Current time override, mainly for tests

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the string cannot be parsed
    """
    if now is None:
        now = datetime.now(tz.tzlocal())
    text = (value or "").strip().lower()

    if text in ("", "now"):
        return now

    relative_days = {"today": 0, "yesterday": 1}
    if text in relative_days:
        return _end_of_day(now.date() - timedelta(days=relative_days[text]), now)

    if text == "last month":
        return _end_of_day(now.date() - relativedelta(months=1), now)
    if text == "last year":
        return _end_of_day(now.date() - relativedelta(years=1), now)

    try:
        parsed = date_parser.parse(text)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{value}': {e}")

    if parsed.time() == time(0) and not _mentions_time(text):
        parsed = datetime.combine(parsed.date(), time.max, tzinfo=parsed.tzinfo)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=now.tzinfo)
    return parsed


def _end_of_day(day: date, now: datetime) -> datetime:
    return datetime.combine(day, time.max, tzinfo=now.tzinfo)


def _mentions_time(text: str) -> bool:
    return ":" in text
