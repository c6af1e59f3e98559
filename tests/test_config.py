"""Settings tests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from campusplay import config


@pytest.fixture(autouse=True)
def _clear_cache():
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("WEBSITE_COMMISSION_RATE", raising=False)
    monkeypatch.delenv("COMMISSION_RATE", raising=False)
    settings = config.get_settings()
    assert settings.commission_rate == 0.10
    assert settings.security_deposit_rate == 0.05
    assert settings.unverified_withdrawal_limit == 5000
    assert settings.practice_points_base == 100


def test_settings_are_cached() -> None:
    assert config.get_settings() is config.get_settings()


def test_out_of_range_commission_rejected(monkeypatch) -> None:
    monkeypatch.setenv("WEBSITE_COMMISSION_RATE", "1.5")
    with pytest.raises(ValidationError):
        config.get_settings()
