"""Runtime configuration, read from the environment and ``.env``."""

from pydantic_settings import BaseSettings


def _split_names(raw: str) -> list[str]:
    return [name.strip() for name in raw.split(",") if name.strip()]


class Settings(BaseSettings):
    # === Slots (comma-separated names per engine type) ===
    PARKING_SLOTS_GAS: str = "A"
    PARKING_SLOTS_ELECTRIC: str = "B"
    PARKING_SLOTS_HI_ELECTRIC: str = "C"

    # === Pricing ===
    PRICING_MODE: str = "flat"  # flat | hourly
    PRICE_GAS: float = 20.0  # flat fee, or base fee in hourly mode
    PRICE_ELECTRIC: float = 10.0
    PRICE_HI_ELECTRIC: float = 5.0
    HOURLY_RATE_GAS: float = 5.0  # added per whole hour parked (hourly mode)
    HOURLY_RATE_ELECTRIC: float = 10.0
    HOURLY_RATE_HI_ELECTRIC: float = 15.0

    # === API ===
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8080

    # === Logging ===
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env"}

    def parking_slots(self) -> dict[str, list[str]]:
        """Slot names keyed by engine type name."""
        return {
            "GAS": _split_names(self.PARKING_SLOTS_GAS),
            "ELECTRIC": _split_names(self.PARKING_SLOTS_ELECTRIC),
            "HI_ELECTRIC": _split_names(self.PARKING_SLOTS_HI_ELECTRIC),
        }

    def base_rates(self) -> dict[str, float]:
        return {
            "GAS": self.PRICE_GAS,
            "ELECTRIC": self.PRICE_ELECTRIC,
            "HI_ELECTRIC": self.PRICE_HI_ELECTRIC,
        }

    def hourly_rates(self) -> dict[str, float]:
        return {
            "GAS": self.HOURLY_RATE_GAS,
            "ELECTRIC": self.HOURLY_RATE_ELECTRIC,
            "HI_ELECTRIC": self.HOURLY_RATE_HI_ELECTRIC,
        }


settings = Settings()
