"""Calendar helpers for epoch-millisecond timestamps.

Workouts and body logs carry their date as epoch milliseconds. Day boundaries
are taken in an explicit timezone so results do not depend on the host clock.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

MS_PER_DAY = 86_400_000

# Range key -> days back from the start of today
_ROLLING_RANGES: dict[str, int] = {
    "last_2_weeks": 14,
    "month": 30,
    "3_months": 90,
    "6_months": 180,
    "year": 365,
}
DEFAULT_RANGE = "month"
RANGE_KEYS: tuple[str, ...] = ("this_week", "last_week", *_ROLLING_RANGES, "all")


def _zone(tz: ZoneInfo | str | None) -> ZoneInfo:
    if tz is None:
        return ZoneInfo("UTC")
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def to_datetime(ms: float, tz: ZoneInfo | str | None = None) -> datetime:
    return datetime.fromtimestamp(ms / 1000, tz=_zone(tz))


def to_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def local_date(ms: float, tz: ZoneInfo | str | None = None) -> date:
    """Calendar date of a timestamp in the given timezone."""
    return to_datetime(ms, tz).date()


def start_of_day(ms: float, tz: ZoneInfo | str | None = None) -> int:
    """Epoch ms of local midnight on the timestamp's calendar day."""
    zone = _zone(tz)
    day = local_date(ms, zone)
    return to_ms(datetime(day.year, day.month, day.day, tzinfo=zone))


def iso_date(ms: float) -> str:
    """UTC calendar date (YYYY-MM-DD) of a timestamp."""
    return datetime.fromtimestamp(ms / 1000, tz=UTC).date().isoformat()


def range_filter(
    range_key: str,
    now_ms: float,
    tz: ZoneInfo | str | None = None,
) -> tuple[int, int]:
    """Inclusive (start_ms, end_ms) window for a dashboard time range.

    Weeks start on Monday. Unknown keys behave like "month".
    """
    zone = _zone(tz)
    end = int(now_ms)
    today_start = start_of_day(now_ms, zone)
    today = local_date(now_ms, zone)
    monday = today - timedelta(days=today.weekday())
    this_monday = to_ms(datetime(monday.year, monday.month, monday.day, tzinfo=zone))

    if range_key == "this_week":
        return this_monday, end
    if range_key == "last_week":
        prev = monday - timedelta(days=7)
        last_monday = to_ms(datetime(prev.year, prev.month, prev.day, tzinfo=zone))
        return last_monday, this_monday - 1
    if range_key == "all":
        return 0, end

    days_back = _ROLLING_RANGES.get(range_key, _ROLLING_RANGES[DEFAULT_RANGE])
    return today_start - days_back * MS_PER_DAY, end
