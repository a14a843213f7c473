"""Configuration template - copy values into .env or export them.

The values below are example overrides for a larger lot, not the defaults.
Defaults live in config/settings.py: slots A/B/C, flat pricing, API on
127.0.0.1:8080, INFO logging.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # === Slots ===
    # Comma-separated slot names. Gas cars may use any slot type; electric
    # cars only their own.
    PARKING_SLOTS_GAS: str = "A1,A2,A3"
    PARKING_SLOTS_ELECTRIC: str = "E1,E2"
    PARKING_SLOTS_HI_ELECTRIC: str = "H1"

    # === Pricing ===
    # "flat": PRICE_* per stay.
    # "hourly": PRICE_* + HOURLY_RATE_* for every whole hour parked.
    PRICING_MODE: str = "hourly"
    PRICE_GAS: float = 20.0
    PRICE_ELECTRIC: float = 10.0
    PRICE_HI_ELECTRIC: float = 5.0
    HOURLY_RATE_GAS: float = 5.0
    HOURLY_RATE_ELECTRIC: float = 10.0
    HOURLY_RATE_HI_ELECTRIC: float = 15.0

    # === API ===
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8080

    # === Logging ===
    LOG_LEVEL: str = "DEBUG"

    model_config = {"env_file": ".env"}
