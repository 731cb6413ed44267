"""Chinese public holiday and workday checker."""

from cnholiday.checker import Checker, new_checker
from cnholiday.classifier import classify
from cnholiday.config import Config
from cnholiday.errors import (
    AggregateLoadError,
    CnHolidayError,
    ConfigurationGapError,
    DecodeError,
    ReadError,
    SourceFailure,
    SourceFileNotFoundError,
    TransportError,
)
from cnholiday.models import DayType, HolidayInfo, YearData

__all__ = [
    "AggregateLoadError",
    "Checker",
    "CnHolidayError",
    "Config",
    "ConfigurationGapError",
    "DayType",
    "DecodeError",
    "HolidayInfo",
    "ReadError",
    "SourceFailure",
    "SourceFileNotFoundError",
    "TransportError",
    "YearData",
    "classify",
    "new_checker",
]
