"""Day classification against a year's holiday data."""

from datetime import date, datetime

from cnholiday.models import HolidayInfo, YearData

SATURDAY = 5
SUNDAY = 6


def civil_date(target: date) -> date:
    """Drop the time of day, keeping the caller's own calendar date."""
    if isinstance(target, datetime):
        return target.date()
    return target


def classify(target: date, data: YearData) -> HolidayInfo:
    """
    Classify a date. The first matching rule wins:

    1. Listed in ``workdays``: adjusted workday, even on a weekend or a
       listed holiday. ``in_lieu_days`` is not consulted.
    2. Listed in ``holidays``: holiday, in lieu if also in ``in_lieu_days``.
    3. Saturday or Sunday: weekend rest day without a name.
    4. Anything else: ordinary workday.
    """
    day = civil_date(target)
    key = day.isoformat()

    name = data.workdays.get(key)
    if name is not None:
        return HolidayInfo(date=day, is_workday=True, is_adjusted_workday=True, holiday_name=name)

    name = data.holidays.get(key)
    if name is not None:
        return HolidayInfo(
            date=day,
            is_holiday=True,
            is_in_lieu_day=key in data.in_lieu_days,
            holiday_name=name,
        )

    if day.weekday() in (SATURDAY, SUNDAY):
        return HolidayInfo(date=day, is_holiday=True, is_weekend=True)

    return HolidayInfo(date=day, is_workday=True)
