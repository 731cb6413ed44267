"""Per-year cache of holiday data."""

import logging
from collections.abc import Callable

from cnholiday.locking import RWLock
from cnholiday.models import YearData
from cnholiday.sources import decode_year_data

logger = logging.getLogger(__name__)


class YearCache:
    """
    Thread-safe mapping of year -> YearData with load-on-miss.

    Lookups hold the shared side of ``lock``; installing or removing entries
    holds the exclusive side. The lock is never held while ``loader`` runs, so
    concurrent misses for one year may load it more than once. Each install
    replaces the entry with one complete record.
    """

    def __init__(self, loader: Callable[[int], YearData], lock: RWLock | None = None) -> None:
        self._loader = loader
        self.lock = lock or RWLock()
        self._years: dict[int, YearData] = {}

    def get(self, year: int) -> YearData | None:
        with self.lock.read():
            return self._years.get(year)

    def is_loaded(self, year: int) -> bool:
        with self.lock.read():
            return year in self._years

    def loaded_years(self) -> list[int]:
        with self.lock.read():
            return sorted(self._years)

    def ensure(self, year: int) -> YearData:
        """Return the data for a year, loading it first if absent."""
        data = self.get(year)
        if data is not None:
            return data
        return self.load(year)

    def load(self, year: int) -> YearData:
        """Run the loader and install its result, replacing any entry."""
        data = self._loader(year)
        self.store(year, data)
        return data

    def load_from_bytes(self, year: int, raw: bytes) -> YearData:
        """Decode a year document and install it without consulting any source."""
        data = decode_year_data(raw)
        self.store(year, data)
        logger.info("Loaded holiday data for %d from bytes", year)
        return data

    def store(self, year: int, data: YearData) -> None:
        with self.lock.write():
            self._years[year] = data

    def clear(self, year: int) -> None:
        with self.lock.write():
            self._years.pop(year, None)

    def clear_all(self) -> None:
        with self.lock.write():
            self._years.clear()
