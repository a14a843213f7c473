# parking/core/parking.py
"""Paid parking: slot allocation, ticket lifecycle and payment-gated exit.

A car enters with an engine type and receives a ``Ticket`` naming the slot it
was given. Gas cars may fall back to charger slots (ELECTRIC, then
HI_ELECTRIC); electric cars only take their own slot type. The amount owed is
computed by an injected pricing policy, and a car may leave only when its
payment covers that amount.

The slot pool and ticket registry form one shared resource guarded by a single
lock, so no two callers get the same slot and no reader sees a slot taken from
the pool without its ticket in the registry (or the reverse).
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

import structlog

from parking.core.models import EngineType, Slot, Ticket, utc_now
from parking.core.pool import SlotPool
from parking.core.pricing import PricingPolicy, build_pricing
from parking.core.registry import TicketRegistry
from parking.exceptions import InsufficientPaymentError, UnknownTicketError

if TYPE_CHECKING:
    from config.settings import Settings

logger = structlog.get_logger()

TicketId = UUID | str


def _coerce_id(ticket_id: TicketId) -> Optional[UUID]:
    """Accept a UUID or its string form; anything unparsable is no ticket."""
    if isinstance(ticket_id, UUID):
        return ticket_id
    try:
        return UUID(str(ticket_id))
    except ValueError:
        return None


class Parking:
    """Allocator for a fixed set of typed parking slots.

    Parameters
    ----------
    pricing:
        Callable returning the amount owed for a ticket. May depend on the
        current time; must not block.
    slots:
        Slot names per engine type. Names should be unique but this is not
        enforced here (see ``config.validators.validate_slot_config``).
    clock:
        Source of ticket issue and release timestamps.
    """

    def __init__(
        self,
        pricing: PricingPolicy,
        slots: Mapping[EngineType, Sequence[str]],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._pricing = pricing
        self._clock = clock
        self._pool = SlotPool(slots)
        self._tickets = TicketRegistry()
        self._lock = threading.Lock()

        logger.info(
            "parking_initialized",
            capacity={t.value: self._pool.capacity(t) for t in EngineType},
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        clock: Callable[[], datetime] = utc_now,
    ) -> Parking:
        """Build a parking from slot names and tariffs in ``settings``."""
        slots = {
            EngineType(name): names
            for name, names in settings.parking_slots().items()
        }
        pricing = build_pricing(
            settings.PRICING_MODE,
            base_rates={EngineType(k): v for k, v in settings.base_rates().items()},
            hourly_rates={EngineType(k): v for k, v in settings.hourly_rates().items()},
            clock=clock,
        )
        return cls(pricing, slots, clock=clock)

    # ------------------------------------------------------------------
    # Entry
    # ------------------------------------------------------------------

    def enter(self, engine_type: EngineType) -> Optional[Ticket]:
        """Assign a compatible slot and issue a ticket for it.

        Slot types are probed in ``engine_type.compatible_types()`` order. The
        ticket keeps the requested engine type even when the slot is of
        another type.

        Returns:
            The new ticket, or None if no compatible slot is free.
        """
        with self._lock:
            slot = self._assign(engine_type)
            if slot is None:
                logger.info("allocation_unavailable", engine_type=engine_type.value)
                return None
            ticket = Ticket.issue(engine_type, slot, self._clock())
            self._tickets.add(ticket)

        logger.info(
            "ticket_issued",
            ticket_id=str(ticket.id),
            engine_type=engine_type.value,
            slot=slot.name,
            slot_type=slot.engine_type.value,
        )
        return ticket

    def _assign(self, engine_type: EngineType) -> Optional[Slot]:
        for candidate in engine_type.compatible_types():
            slot = self._pool.try_assign(candidate)
            if slot is not None:
                return slot
        return None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_ticket(self, ticket_id: TicketId) -> Optional[Ticket]:
        """Return the active ticket with this id, if any."""
        key = _coerce_id(ticket_id)
        if key is None:
            return None
        with self._lock:
            return self._tickets.get(key)

    def get_tickets(self) -> list[Ticket]:
        """Active tickets sorted by issue time."""
        with self._lock:
            return self._tickets.sorted_by_issue_time()

    def check_owed(self, ticket_id: TicketId) -> float:
        """Amount currently owed for a ticket, or 0.0 if it is not active."""
        key = _coerce_id(ticket_id)
        if key is None:
            return 0.0
        with self._lock:
            ticket = self._tickets.get(key)
            if ticket is None:
                return 0.0
            return self._pricing(ticket)

    def free_slots(self) -> dict[EngineType, list[Slot]]:
        """Snapshot of free slots per engine type, in assignment order."""
        with self._lock:
            return self._pool.free_slots()

    # ------------------------------------------------------------------
    # Exit
    # ------------------------------------------------------------------

    def leave(self, ticket_id: TicketId, payment: float) -> datetime:
        """Pay for a ticket and free its slot.

        Args:
            ticket_id: Id of an active ticket.
            payment: Amount offered; must be at least the amount owed.

        Returns:
            Time of departure.

        Raises:
            UnknownTicketError: The ticket is not active (never issued or
                already released).
            InsufficientPaymentError: ``payment`` is below the amount owed
                or is NaN. The ticket stays active and the slot stays
                assigned.
        """
        key = _coerce_id(ticket_id)
        with self._lock:
            ticket = self._tickets.get(key) if key is not None else None
            if ticket is None:
                raise UnknownTicketError(ticket_id)

            owed = self._pricing(ticket)
            # NaN compares false both ways and must never cover a fee.
            if not payment >= owed:
                logger.info(
                    "payment_rejected",
                    ticket_id=str(ticket.id),
                    supplied=payment,
                    required=owed,
                )
                raise InsufficientPaymentError(payment, owed)

            self._pool.release(ticket.slot)
            self._tickets.remove(ticket.id)
            left_at = self._clock()

        logger.info(
            "ticket_released",
            ticket_id=str(ticket.id),
            slot=ticket.slot.name,
            paid=payment,
            owed=owed,
        )
        return left_at
