"""Calendar ranges for the day, week, month and year filters."""

import calendar
from datetime import MAXYEAR, MINYEAR, date, timedelta

from burger_tracker.domain.stats import DateRange, TimeFilter
from burger_tracker.services.localization import SPANISH, Localization

DECEMBER = 12
SUNDAY = 6
DAYS_IN_WEEK = 7


def resolve_range(
    time_filter: TimeFilter, anchor: date, localization: Localization = SPANISH
) -> DateRange:
    """Return the inclusive range of the filter unit containing the anchor."""
    if time_filter == TimeFilter.DAY:
        return DateRange(
            start=anchor, end=anchor, label=localization.format_day(anchor)
        )
    if time_filter == TimeFilter.WEEK:
        start = _shift(anchor, -anchor.weekday())
        end = _shift(anchor, SUNDAY - anchor.weekday())
        return DateRange(
            start=start, end=end, label=localization.format_week(start, end)
        )
    if time_filter == TimeFilter.MONTH:
        last_day = calendar.monthrange(anchor.year, anchor.month)[1]
        return DateRange(
            start=anchor.replace(day=1),
            end=anchor.replace(day=last_day),
            label=localization.format_month(anchor),
        )
    return DateRange(
        start=date(anchor.year, 1, 1),
        end=date(anchor.year, DECEMBER, 31),
        label=localization.format_year(anchor),
    )


def step_anchor(time_filter: TimeFilter, anchor: date, direction: int) -> date:
    """Move the anchor one filter unit backwards (-1) or forwards (+1).

    Month and year steps keep the day of month, clamped to the length of the
    target month. Steps past the supported calendar stop at date.min or date.max.
    """
    if direction not in {-1, 1}:
        raise ValueError(f"direction must be -1 or 1, got {direction}")
    if time_filter == TimeFilter.DAY:
        return _shift(anchor, direction)
    if time_filter == TimeFilter.WEEK:
        return _shift(anchor, DAYS_IN_WEEK * direction)
    if time_filter == TimeFilter.MONTH:
        return _add_months(anchor, direction)
    return _add_months(anchor, direction * DECEMBER)


def _add_months(anchor: date, months: int) -> date:
    index = anchor.year * DECEMBER + (anchor.month - 1) + months
    year, month = divmod(index, DECEMBER)
    if year > MAXYEAR:
        return date.max
    if year < MINYEAR:
        return date.min
    month += 1
    day = min(anchor.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _shift(day: date, days: int) -> date:
    try:
        return day + timedelta(days=days)
    except OverflowError:
        return date.max if days > 0 else date.min
