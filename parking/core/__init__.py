"""Slot allocation and ticket lifecycle for the parking service."""

from parking.core.models import EngineType, Slot, Ticket
from parking.core.parking import Parking
from parking.core.pool import SlotPool
from parking.core.pricing import FlatRatePricing, HourlyPricing, PricingPolicy, build_pricing
from parking.core.registry import TicketRegistry

__all__ = [
    "EngineType",
    "FlatRatePricing",
    "HourlyPricing",
    "Parking",
    "PricingPolicy",
    "Slot",
    "SlotPool",
    "Ticket",
    "TicketRegistry",
    "build_pricing",
]
