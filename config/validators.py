"""Configuration validators."""

from parking.core.pricing import PRICING_MODES
from parking.exceptions import ConfigError

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def validate_slot_config() -> None:
    """Raise ConfigError if slot names are duplicated or no slot is configured."""
    from config.settings import settings
    seen: dict[str, str] = {}
    for engine_type, names in settings.parking_slots().items():
        for name in names:
            if name in seen:
                raise ConfigError(
                    f"Slot {name!r} configured for both {seen[name]} and {engine_type}"
                )
            seen[name] = engine_type
    if not seen:
        raise ConfigError("At least one PARKING_SLOTS_* entry is required")


def validate_pricing() -> None:
    """Raise ConfigError if the pricing mode is unknown or a rate is negative."""
    from config.settings import settings
    if settings.PRICING_MODE not in PRICING_MODES:
        raise ConfigError(
            f"PRICING_MODE must be one of {PRICING_MODES}, got {settings.PRICING_MODE!r}"
        )
    rates = {**settings.base_rates(), **{
        f"{k} hourly": v for k, v in settings.hourly_rates().items()
    }}
    for name, rate in rates.items():
        if rate < 0:
            raise ConfigError(f"Rate for {name} must not be negative, got {rate}")


def validate_logging() -> None:
    """Raise ConfigError if LOG_LEVEL is not a standard level name."""
    from config.settings import settings
    if settings.LOG_LEVEL.upper() not in _LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
