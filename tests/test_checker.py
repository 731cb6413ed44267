"""Tests for the checker."""

import json
from datetime import date
from unittest.mock import MagicMock

import pytest
import requests

from cnholiday.checker import Checker, new_checker
from cnholiday.config import DEFAULT_REMOTE_BASE_URL, Config
from cnholiday.errors import AggregateLoadError, DecodeError


def test_new_checker_defaults():
    """Test the default configuration."""
    checker = new_checker()
    config = checker.config
    assert config.remote_base_url == DEFAULT_REMOTE_BASE_URL
    assert config.disable_remote is False
    assert config.local_data_dir is None
    assert checker.loaded_years() == []


def test_new_checker_with_options(tmp_path):
    """Test building a checker from keyword options."""
    checker = new_checker(
        local_data_dir=tmp_path, disable_remote=True, remote_base_url="https://custom.cdn.com"
    )
    config = checker.config
    assert config.local_data_dir == tmp_path
    assert config.disable_remote is True
    assert config.remote_base_url == "https://custom.cdn.com"


def test_empty_base_url_uses_default():
    """Test that an empty base URL falls back to the default endpoint."""
    assert Checker(Config(remote_base_url="")).config.remote_base_url == DEFAULT_REMOTE_BASE_URL


def test_config_property_is_a_copy():
    """Test that mutating the returned config does not affect the checker."""
    checker = Checker()
    checker.config.disable_remote = True
    assert checker.config.disable_remote is False


def test_checker_copies_given_config():
    """Test that the caller's config object is not shared."""
    config = Config()
    checker = Checker(config)
    checker.set_disable_remote(True)
    assert config.disable_remote is False


@pytest.mark.parametrize(
    ("day", "expected", "name"),
    [
        (date(2026, 1, 1), True, "元旦"),
        (date(2026, 10, 1), True, "国庆节"),
        (date(2026, 1, 4), False, "元旦"),
        (date(2026, 1, 3), True, ""),
        (date(2026, 1, 5), False, ""),
    ],
)
def test_is_holiday(loaded_checker, day, expected, name):
    """Test holiday answers and names."""
    assert loaded_checker.is_holiday(day) == (expected, name)


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2026, 1, 1), False),
        (date(2026, 1, 4), True),
        (date(2026, 1, 5), True),
        (date(2026, 1, 3), False),
    ],
)
def test_is_workday(loaded_checker, day, expected):
    """Test workday answers."""
    assert loaded_checker.is_workday(day) is expected


def test_is_workday_negates_is_holiday(loaded_checker):
    """Test is_workday against is_holiday for a whole month."""
    for info in loaded_checker.iter_days(date(2026, 1, 1), date(2026, 1, 31)):
        holiday, _ = loaded_checker.is_holiday(info.date)
        assert loaded_checker.is_workday(info.date) is (not holiday)


def test_get_info(loaded_checker):
    """Test full classification results."""
    info = loaded_checker.get_info(date(2026, 1, 1))
    assert info.is_holiday and info.holiday_name == "元旦"

    info = loaded_checker.get_info(date(2026, 1, 2))
    assert info.is_in_lieu_day

    info = loaded_checker.get_info(date(2026, 1, 4))
    assert info.is_adjusted_workday and info.is_workday
    assert info.weekday == 6

    info = loaded_checker.get_info(date(2026, 1, 3))
    assert info.is_weekend and info.is_holiday
    assert info.date == date(2026, 1, 3)


def test_load_year_from_bytes_failure_keeps_previous(loaded_checker):
    """Test that bad bytes leave the loaded year intact."""
    with pytest.raises(DecodeError):
        loaded_checker.load_year_from_bytes(2026, b"{invalid json}")
    assert loaded_checker.is_holiday(date(2026, 10, 1)) == (True, "国庆节")


def test_load_year_from_bytes_failure_for_new_year(offline_checker):
    """Test that bad bytes do not mark a year as loaded."""
    with pytest.raises(DecodeError):
        offline_checker.load_year_from_bytes(2027, b"{invalid json}")
    assert not offline_checker.is_year_loaded(2027)


def test_load_year_from_local(tmp_path):
    """Test loading from a local directory with remote disabled."""
    document = {"holidays": {"2030-01-01": "元旦"}, "workdays": {}, "inLieuDays": {}}
    (tmp_path / "2030.json").write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
    checker = new_checker(local_data_dir=tmp_path, disable_remote=True)

    checker.load_year(2030)

    assert checker.is_year_loaded(2030)
    assert checker.is_holiday(date(2030, 1, 1)) == (True, "元旦")


def test_lazy_load_from_embedded(offline_checker):
    """Test that a query loads the bundled year on demand."""
    assert not offline_checker.is_year_loaded(2026)
    assert offline_checker.is_holiday(date(2026, 10, 1)) == (True, "国庆节")
    assert offline_checker.is_year_loaded(2026)


def test_unbundled_year_offline(offline_checker):
    """Test the error for a year no source can provide."""
    with pytest.raises(AggregateLoadError) as exc_info:
        offline_checker.load_year(1999)
    assert exc_info.value.year == 1999
    assert "1999" in str(exc_info.value)

    with pytest.raises(AggregateLoadError):
        offline_checker.is_holiday(date(1999, 10, 1))
    with pytest.raises(AggregateLoadError):
        offline_checker.get_info(date(1999, 10, 1))
    assert not offline_checker.is_year_loaded(1999)


def test_clear_year_triggers_fresh_load(tmp_path):
    """Test that a cleared year is loaded again on the next query."""
    checker = new_checker(local_data_dir=tmp_path, disable_remote=True)
    path = tmp_path / "2030.json"
    path.write_text('{"holidays": {"2030-01-01": "A"}}', encoding="utf-8")
    assert checker.is_holiday(date(2030, 1, 1)) == (True, "A")

    path.write_text('{"holidays": {"2030-01-01": "B"}}', encoding="utf-8")
    assert checker.is_holiday(date(2030, 1, 1)) == (True, "A")

    checker.clear_year(2030)
    assert not checker.is_year_loaded(2030)
    assert checker.is_holiday(date(2030, 1, 1)) == (True, "B")


def test_clear_all(loaded_checker):
    """Test clearing every cached year."""
    loaded_checker.load_year(2025)
    assert loaded_checker.loaded_years() == [2025, 2026]
    loaded_checker.clear_all()
    assert loaded_checker.loaded_years() == []


def test_config_change_applies_to_new_loads(tmp_path):
    """Test that setters affect loads started afterwards."""
    checker = new_checker(disable_remote=True)
    with pytest.raises(AggregateLoadError):
        checker.load_year(2030)

    (tmp_path / "2030.json").write_text('{"holidays": {"2030-01-01": "元旦"}}', encoding="utf-8")
    checker.set_local_data_dir(tmp_path)
    checker.load_year(2030)
    assert checker.is_year_loaded(2030)

    checker.set_local_data_dir(None)
    assert checker.config.local_data_dir is None


def test_remote_load_uses_session_and_base_url():
    """Test the remote request made by a checker."""
    response = MagicMock()
    response.status_code = 200
    response.content = '{"holidays": {"2030-01-01": "元旦"}}'.encode()
    session = MagicMock(spec=requests.Session)
    session.get.return_value = response

    checker = Checker(Config(), session)
    checker.set_remote_base_url("https://mirror.example.com/years")
    checker.set_timeout(3.0)

    assert checker.is_holiday(date(2030, 1, 1)) == (True, "元旦")
    session.get.assert_called_once_with("https://mirror.example.com/years/2030.json", timeout=3.0)


def test_load_year_replaces_cached_entry(loaded_checker):
    """Test that an explicit load runs the cascade even when cached."""
    loaded_checker.load_year(2026)
    # bundled data replaces the sample
    assert loaded_checker.is_holiday(date(2026, 2, 17)) == (True, "春节")


def test_count_workdays_bundled_october(offline_checker):
    """Test counting workdays across the October 2026 break."""
    # 22 weekdays, 5 of them holidays (Oct 1, 2, 5, 6, 7), plus make-up Saturday Oct 10
    assert offline_checker.count_workdays(date(2026, 10, 1), date(2026, 10, 31)) == 18


def test_iter_days_spans_years(offline_checker):
    """Test that a range crossing a year boundary loads both years."""
    days = list(offline_checker.iter_days(date(2025, 12, 31), date(2026, 1, 1)))
    assert [info.date for info in days] == [date(2025, 12, 31), date(2026, 1, 1)]
    assert days[1].holiday_name == "元旦"
    assert offline_checker.loaded_years() == [2025, 2026]


def test_empty_local_data_dir_in_config():
    """Test that an empty directory in Config does not enable the local source."""
    assert Checker(Config(local_data_dir="")).config.local_data_dir is None
