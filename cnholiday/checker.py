"""Holiday checker: loads year data on demand and classifies dates."""

from collections.abc import Iterator
from datetime import date, timedelta
from pathlib import Path

import requests

from cnholiday.cache import YearCache
from cnholiday.classifier import civil_date, classify
from cnholiday.config import DEFAULT_REMOTE_BASE_URL, Config
from cnholiday.locking import RWLock
from cnholiday.models import HolidayInfo, YearData
from cnholiday.sources import resolve_year


class Checker:
    """
    Answer holiday and workday questions for mainland China.

    Year data is loaded on first use from the remote endpoint, then the local
    data directory, then the data bundled with the package. One reader/writer
    lock guards both the year cache and the configuration, so a checker can
    be shared between threads. Configuration changes apply to loads started
    afterwards.
    """

    def __init__(
        self, config: Config | None = None, session: requests.Session | None = None
    ) -> None:
        self._lock = RWLock()
        self._config = (config or Config()).replace()
        self._session = session
        self._cache = YearCache(self._resolve, self._lock)

    @property
    def config(self) -> Config:
        """A copy of the current configuration."""
        with self._lock.read():
            return self._config.replace()

    def set_local_data_dir(self, local_data_dir: Path | str | None) -> None:
        with self._lock.write():
            self._config.local_data_dir = Path(local_data_dir) if local_data_dir else None

    def set_disable_remote(self, disable_remote: bool) -> None:
        with self._lock.write():
            self._config.disable_remote = disable_remote

    def set_remote_base_url(self, remote_base_url: str) -> None:
        with self._lock.write():
            self._config.remote_base_url = remote_base_url or DEFAULT_REMOTE_BASE_URL

    def set_timeout(self, timeout: float | None) -> None:
        with self._lock.write():
            self._config.timeout = timeout

    def _resolve(self, year: int) -> YearData:
        data, _source = resolve_year(year, self.config, self._session)
        return data

    def load_year(self, year: int) -> None:
        """Load a year through the source cascade, replacing any cached entry."""
        self._cache.load(year)

    def load_year_from_bytes(self, year: int, raw: bytes) -> None:
        """Install a year from a JSON document, bypassing every source."""
        self._cache.load_from_bytes(year, raw)

    def is_year_loaded(self, year: int) -> bool:
        return self._cache.is_loaded(year)

    def loaded_years(self) -> list[int]:
        return self._cache.loaded_years()

    def clear_year(self, year: int) -> None:
        self._cache.clear(year)

    def clear_all(self) -> None:
        self._cache.clear_all()

    def get_info(self, target: date) -> HolidayInfo:
        """
        Full classification of a date.

        This is the authoritative answer; ``is_holiday`` and ``is_workday``
        are derived from it.
        """
        day = civil_date(target)
        return classify(day, self._cache.ensure(day.year))

    def is_holiday(self, target: date) -> tuple[bool, str]:
        """Whether the date is a rest day, and its holiday name ("" if none)."""
        info = self.get_info(target)
        return info.is_holiday, info.holiday_name

    def is_workday(self, target: date) -> bool:
        """
        Negation of ``is_holiday``.

        Adjusted and ordinary workdays both return True; use ``get_info`` to
        tell them apart.
        """
        holiday, _name = self.is_holiday(target)
        return not holiday

    def iter_days(self, start: date, end: date) -> Iterator[HolidayInfo]:
        """Classify every date from start to end, inclusive."""
        day = civil_date(start)
        last = civil_date(end)
        while day <= last:
            yield self.get_info(day)
            day += timedelta(days=1)

    def count_workdays(self, start: date, end: date) -> int:
        """Number of workdays from start to end, inclusive."""
        return sum(1 for info in self.iter_days(start, end) if info.is_workday)


def new_checker(
    local_data_dir: Path | str | None = None,
    disable_remote: bool = False,
    remote_base_url: str = DEFAULT_REMOTE_BASE_URL,
    timeout: float | None = None,
    session: requests.Session | None = None,
) -> Checker:
    """Create a checker from keyword options."""
    config = Config(
        local_data_dir=Path(local_data_dir) if local_data_dir else None,
        disable_remote=disable_remote,
        remote_base_url=remote_base_url,
        timeout=timeout,
    )
    return Checker(config, session)
