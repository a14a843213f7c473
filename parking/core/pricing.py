# parking/core/pricing.py
"""Pricing policies: callables mapping a ticket to the amount owed.

``Parking`` treats pricing as opaque. Any ``Callable[[Ticket], float]`` works;
the classes below cover the flat and per-hour tariffs used by the bundled
configuration.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime

from parking.core.models import EngineType, Ticket, utc_now
from parking.exceptions import ConfigError

PricingPolicy = Callable[[Ticket], float]

DEFAULT_RATES: dict[EngineType, float] = {
    EngineType.GAS: 20.0,
    EngineType.ELECTRIC: 10.0,
    EngineType.HI_ELECTRIC: 5.0,
}

PRICING_MODES = ("flat", "hourly")


class FlatRatePricing:
    """Fixed fee per requested engine type, independent of duration."""

    def __init__(self, rates: Mapping[EngineType, float] = DEFAULT_RATES) -> None:
        self._rates = dict(rates)

    def __call__(self, ticket: Ticket) -> float:
        return self._rates.get(ticket.engine_type, 0.0)


class HourlyPricing:
    """Base fee plus a rate for every whole hour since the ticket was issued.

    The fee is recomputed against ``clock`` on each call, so the amount owed
    for one ticket grows while the car stays parked.
    """

    def __init__(
        self,
        base_rates: Mapping[EngineType, float],
        hourly_rates: Mapping[EngineType, float],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._base = dict(base_rates)
        self._hourly = dict(hourly_rates)
        self._clock = clock

    def __call__(self, ticket: Ticket) -> float:
        elapsed = self._clock() - ticket.issued_at
        hours = max(0, int(elapsed.total_seconds() // 3600))
        base = self._base.get(ticket.engine_type, 0.0)
        return base + hours * self._hourly.get(ticket.engine_type, 0.0)


def build_pricing(
    mode: str,
    base_rates: Mapping[EngineType, float] = DEFAULT_RATES,
    hourly_rates: Mapping[EngineType, float] | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> PricingPolicy:
    """Return the pricing policy named by ``mode`` ("flat" or "hourly")."""
    if mode == "flat":
        return FlatRatePricing(base_rates)
    if mode == "hourly":
        return HourlyPricing(base_rates, hourly_rates or {}, clock=clock)
    raise ConfigError(f"Unknown pricing mode {mode!r}, expected one of {PRICING_MODES}")
