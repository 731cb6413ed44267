"""Year data sources and the remote -> local -> embedded load cascade."""

import json
import logging
from collections.abc import Callable
from datetime import date
from importlib import resources

import requests

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
from cnholiday.models import YearData

logger = logging.getLogger(__name__)

REMOTE = "remote"
LOCAL = "local"
EMBEDDED = "embedded"

# JSON field name -> YearData attribute
FIELDS = {
    "holidays": "holidays",
    "workdays": "workdays",
    "inLieuDays": "in_lieu_days",
}

Loader = Callable[[int], YearData]


def year_filename(year: int) -> str:
    return f"{year}.json"


def decode_year_data(raw: bytes) -> YearData:
    """
    Decode a year document into YearData.

    Missing fields decode as empty mappings and unknown fields are ignored.
    Every key must be a ``YYYY-MM-DD`` date and every value a string.
    """
    try:
        document = json.loads(raw)
    except (ValueError, RecursionError) as err:
        raise DecodeError(str(err)) from err

    if not isinstance(document, dict):
        msg = f"expected a JSON object, got {type(document).__name__}"
        raise DecodeError(msg)

    mappings: dict[str, dict[str, str]] = {}
    for json_name, attribute in FIELDS.items():
        section = document.get(json_name)
        if section is None:
            mappings[attribute] = {}
            continue
        if not isinstance(section, dict):
            msg = f"{json_name!r} must be an object, got {type(section).__name__}"
            raise DecodeError(msg)
        for key, label in section.items():
            _check_entry(json_name, key, label)
        mappings[attribute] = section

    return YearData(**mappings)


def _check_entry(json_name: str, key: str, label: object) -> None:
    try:
        canonical = date.fromisoformat(key).isoformat()
    except ValueError:
        canonical = None
    if canonical != key:
        msg = f"{json_name!r} has invalid date key {key!r}"
        raise DecodeError(msg)
    if not isinstance(label, str):
        msg = f"{json_name!r} label for {key} must be a string"
        raise DecodeError(msg)


def load_remote(year: int, config: Config, session: requests.Session | None = None) -> YearData:
    """Fetch ``{remote_base_url}/{year}.json`` and decode it."""
    url = f"{config.remote_base_url.rstrip('/')}/{year_filename(year)}"
    http = session or requests
    try:
        response = http.get(url, timeout=config.timeout)
    except requests.RequestException as err:
        raise TransportError(url, str(err)) from err

    if response.status_code != requests.codes.ok:
        raise TransportError(url, f"HTTP {response.status_code}", response.status_code)
    return decode_year_data(response.content)


def load_local(year: int, config: Config) -> YearData:
    """Read ``{year}.json`` from the configured local data directory."""
    if config.local_data_dir is None:
        msg = "local data directory is not configured"
        raise ValueError(msg)

    path = config.local_data_dir / year_filename(year)
    try:
        raw = path.read_bytes()
    except FileNotFoundError as err:
        raise SourceFileNotFoundError(path) from err
    except OSError as err:
        raise ReadError(path, err.strerror or str(err)) from err
    return decode_year_data(raw)


def load_embedded(year: int) -> YearData:
    """Read ``{year}.json`` from the data bundled with the package."""
    resource = resources.files("cnholiday") / "data" / year_filename(year)
    try:
        raw = resource.read_bytes()
    except FileNotFoundError as err:
        raise SourceFileNotFoundError(f"cnholiday/data/{year_filename(year)}") from err
    return decode_year_data(raw)


def embedded_years() -> list[int]:
    """Years covered by the bundled data."""
    data_dir = resources.files("cnholiday") / "data"
    years = []
    for entry in data_dir.iterdir():
        stem, _, suffix = entry.name.partition(".")
        if suffix == "json" and stem.isdigit():
            years.append(int(stem))
    return sorted(years)


def eligible_sources(
    config: Config, session: requests.Session | None = None
) -> list[tuple[str, Loader]]:
    """Ordered (name, loader) strategies allowed by the configuration."""
    sources: list[tuple[str, Loader]] = []
    if not config.disable_remote:
        sources.append((REMOTE, lambda year: load_remote(year, config, session)))
    if config.local_data_dir is not None:
        sources.append((LOCAL, lambda year: load_local(year, config)))
    sources.append((EMBEDDED, load_embedded))
    return sources


def resolve_year(
    year: int, config: Config, session: requests.Session | None = None
) -> tuple[YearData, str]:
    """
    Load a year from the first source that succeeds.

    Sources are tried once each, in order: remote (unless disabled), local
    (if a directory is configured), then the embedded fallback.

    Returns:
        The decoded data and the name of the source that produced it.

    Raises:
        AggregateLoadError: every attempted source failed.
        ConfigurationGapError: no source was attempted.
    """
    failures: list[SourceFailure] = []
    for name, loader in eligible_sources(config, session):
        logger.debug("Loading %d from %s", year, name)
        try:
            data = loader(year)
        except CnHolidayError as err:
            logger.warning("Loading %d from %s failed: %s", year, name, err)
            failures.append(SourceFailure(name, err))
            continue
        logger.info("Loaded holiday data for %d from %s", year, name)
        return data, name

    if not failures:
        raise ConfigurationGapError(year)
    raise AggregateLoadError(year, failures)
