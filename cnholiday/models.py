"""Data models for year data and day classification."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _freeze(mapping: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class YearData:
    """
    Holiday schedule for one calendar year.

    All three mappings are keyed by ``YYYY-MM-DD`` and valued by the
    occasion name:

    - holidays: statutory rest days
    - workdays: normally rest days shifted to working days (调休)
    - in_lieu_days: extra rest days granted in lieu (补休), a subset of holidays
    """

    holidays: Mapping[str, str] = field(default_factory=dict)
    workdays: Mapping[str, str] = field(default_factory=dict)
    in_lieu_days: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "holidays", _freeze(self.holidays))
        object.__setattr__(self, "workdays", _freeze(self.workdays))
        object.__setattr__(self, "in_lieu_days", _freeze(self.in_lieu_days))


class DayType(str, Enum):
    """Primary state of a classified day."""

    WORKDAY = "workday"
    ADJUSTED_WORKDAY = "adjusted_workday"
    HOLIDAY = "holiday"
    WEEKEND = "weekend"


@dataclass(frozen=True)
class HolidayInfo:
    """Classification of a single civil date."""

    date: date
    is_workday: bool = False
    is_holiday: bool = False
    is_weekend: bool = False
    is_adjusted_workday: bool = False
    is_in_lieu_day: bool = False
    holiday_name: str = ""

    @property
    def weekday(self) -> int:
        """Weekday of the date (0=Monday, 6=Sunday)."""
        return self.date.weekday()

    @property
    def weekday_name(self) -> str:
        return WEEKDAY_NAMES[self.weekday]

    @property
    def day_type(self) -> DayType:
        """Primary state of the day."""
        if self.is_adjusted_workday:
            return DayType.ADJUSTED_WORKDAY
        if self.is_weekend:
            return DayType.WEEKEND
        if self.is_holiday:
            return DayType.HOLIDAY
        return DayType.WORKDAY

    def __str__(self) -> str:
        day = self.date.isoformat()
        if self.is_adjusted_workday:
            return f"{day} (adjusted workday - {self.holiday_name})"
        if self.is_in_lieu_day:
            return f"{day} (in lieu - {self.holiday_name})"
        if self.is_holiday:
            if self.is_weekend:
                return f"{day} (weekend)"
            return f"{day} (holiday - {self.holiday_name})"
        return f"{day} (workday)"
