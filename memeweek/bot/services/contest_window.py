"""Weekly contest window resolution."""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, tzinfo

import pytz

from memeweek.bot.services.models import TimeWindow

logger = logging.getLogger(__name__)

FRIDAY = 4
CONTEST_TIMEZONE = "America/Bogota"
CONTEST_ANCHOR_TIME = time(12, 0)
CONTEST_LENGTH = timedelta(days=7)


def _localize(tz: tzinfo, day: date, at: time) -> datetime:
    naive = datetime.combine(day, at)
    if hasattr(tz, "localize"):
        return tz.localize(naive)
    return naive.replace(tzinfo=tz)


def resolve_contest_window(
    now: datetime,
    tz: tzinfo | str = CONTEST_TIMEZONE,
    anchor_weekday: int = FRIDAY,
    anchor_time: time = CONTEST_ANCHOR_TIME,
) -> TimeWindow:
    """Resolve the most recent contest week that has started by ``now``.

    The week starts at ``anchor_time`` on ``anchor_weekday`` local time.
    An instant exactly on the boundary belongs to the new week, which
    makes that window empty until time moves on.

    Args:
        now: Current instant; must be timezone-aware
        tz: Contest timezone, as a tzinfo or a tz database name
        anchor_weekday: Weekday the contest starts (Monday=0)
        anchor_time: Local wall-clock time the contest starts

    Returns:
        TimeWindow from the week's start to ``min(now, start + 7 days)``
    """
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")
    if isinstance(tz, str):
        tz = pytz.timezone(tz)

    local_now = now.astimezone(tz)
    days_since_anchor = (local_now.weekday() - anchor_weekday) % 7
    anchor_day = local_now.date() - timedelta(days=days_since_anchor)
    start = _localize(tz, anchor_day, anchor_time)

    # Same weekday but before the anchor time: the week began seven days ago
    if local_now < start:
        anchor_day -= CONTEST_LENGTH
        start = _localize(tz, anchor_day, anchor_time)

    natural_end = start + CONTEST_LENGTH
    if hasattr(tz, "normalize"):
        natural_end = tz.normalize(natural_end)
    end = min(local_now, natural_end)

    logger.debug(f"Resolved contest window {start.isoformat()} -> {end.isoformat()}")
    return TimeWindow(start=start, end=end)
