import pytest

from config import validators
from config.settings import settings
from parking.exceptions import ConfigError


def test_default_configuration_is_valid():
    validators.validate_slot_config()
    validators.validate_pricing()
    validators.validate_logging()


def test_duplicate_slot_name_across_types(monkeypatch):
    monkeypatch.setattr(settings, "PARKING_SLOTS_GAS", "A,B")
    monkeypatch.setattr(settings, "PARKING_SLOTS_ELECTRIC", "B")
    with pytest.raises(ConfigError, match="'B'"):
        validators.validate_slot_config()


def test_duplicate_slot_name_within_type(monkeypatch):
    monkeypatch.setattr(settings, "PARKING_SLOTS_GAS", "A,A")
    with pytest.raises(ConfigError):
        validators.validate_slot_config()


def test_no_slots(monkeypatch):
    for name in ("PARKING_SLOTS_GAS", "PARKING_SLOTS_ELECTRIC", "PARKING_SLOTS_HI_ELECTRIC"):
        monkeypatch.setattr(settings, name, "")
    with pytest.raises(ConfigError, match="At least one"):
        validators.validate_slot_config()


def test_unknown_pricing_mode(monkeypatch):
    monkeypatch.setattr(settings, "PRICING_MODE", "surge")
    with pytest.raises(ConfigError, match="PRICING_MODE"):
        validators.validate_pricing()


def test_negative_rate(monkeypatch):
    monkeypatch.setattr(settings, "HOURLY_RATE_ELECTRIC", -1.0)
    with pytest.raises(ConfigError, match="ELECTRIC hourly"):
        validators.validate_pricing()


def test_bad_log_level(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "chatty")
    with pytest.raises(ConfigError, match="LOG_LEVEL"):
        validators.validate_logging()
