"""Custom exceptions."""

from dataclasses import dataclass
from pathlib import Path


class CnHolidayError(Exception):
    """Base exception for cnholiday."""


class TransportError(CnHolidayError):
    """Raised when the remote fetch fails or returns a non-200 status."""

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        msg = f"request to {url} failed: {reason}"
        super().__init__(msg)


class SourceFileNotFoundError(CnHolidayError, FileNotFoundError):
    """Raised when a local or bundled year file does not exist."""

    def __init__(self, path: Path | str) -> None:
        self.path = str(path)
        msg = f"file not found: {self.path}"
        super().__init__(msg)


class ReadError(CnHolidayError):
    """Raised when a local year file exists but cannot be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        msg = f"could not read {self.path}: {reason}"
        super().__init__(msg)


class DecodeError(CnHolidayError, ValueError):
    """Raised when bytes do not decode into a year data document."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        msg = f"invalid holiday data: {reason}"
        super().__init__(msg)


@dataclass(frozen=True)
class SourceFailure:
    """One failed attempt of the load cascade."""

    source: str
    error: CnHolidayError

    def __str__(self) -> str:
        return f"{self.source}: {self.error}"


class AggregateLoadError(CnHolidayError):
    """Raised when every attempted data source failed for a year."""

    def __init__(self, year: int, failures: list[SourceFailure]) -> None:
        self.year = year
        self.failures: tuple[SourceFailure, ...] = tuple(failures)
        reasons = "; ".join(str(failure) for failure in self.failures)
        msg = f"could not load holiday data for {year}: {reasons}"
        super().__init__(msg)

    @property
    def sources(self) -> list[str]:
        """Names of the attempted sources, in attempt order."""
        return [failure.source for failure in self.failures]

    def errors_by_source(self) -> dict[str, CnHolidayError]:
        """Map each attempted source to the error it produced."""
        return {failure.source: failure.error for failure in self.failures}


class ConfigurationGapError(CnHolidayError):
    """Raised when no data source was eligible to attempt a load."""

    def __init__(self, year: int) -> None:
        self.year = year
        msg = f"could not load holiday data for {year}: no data source configured"
        super().__init__(msg)
