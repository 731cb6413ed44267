"""Shared fixtures."""

import json

import pytest

from cnholiday.checker import Checker
from cnholiday.config import Config

SAMPLE_2026 = {
    "holidays": {
        "2026-01-01": "元旦",
        "2026-01-02": "元旦",
        "2026-10-01": "国庆节",
    },
    "workdays": {
        "2026-01-04": "元旦",
    },
    "inLieuDays": {
        "2026-01-02": "元旦",
    },
}


@pytest.fixture
def sample_bytes() -> bytes:
    """A small 2026 year document."""
    return json.dumps(SAMPLE_2026, ensure_ascii=False).encode()


@pytest.fixture
def offline_checker() -> Checker:
    """A checker that never touches the network."""
    return Checker(Config(disable_remote=True))


@pytest.fixture
def loaded_checker(offline_checker, sample_bytes) -> Checker:
    """An offline checker with the sample 2026 data installed."""
    offline_checker.load_year_from_bytes(2026, sample_bytes)
    return offline_checker
