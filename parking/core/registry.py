# parking/core/registry.py
"""Active tickets keyed by id."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from parking.core.models import Ticket


class TicketRegistry:
    """Insertion-ordered map of ticket id to ticket.

    Not synchronised; ``Parking`` holds the lock.
    """

    def __init__(self) -> None:
        self._tickets: dict[UUID, Ticket] = {}

    def __len__(self) -> int:
        return len(self._tickets)

    def __contains__(self, ticket_id: object) -> bool:
        return ticket_id in self._tickets

    def add(self, ticket: Ticket) -> None:
        """Store ``ticket`` under its id."""
        self._tickets[ticket.id] = ticket

    def get(self, ticket_id: UUID) -> Optional[Ticket]:
        return self._tickets.get(ticket_id)

    def remove(self, ticket_id: UUID) -> Optional[Ticket]:
        """Drop and return the ticket, or None if it is not active."""
        return self._tickets.pop(ticket_id, None)

    def sorted_by_issue_time(self) -> list[Ticket]:
        """Tickets by ``issued_at`` ascending; equal timestamps keep insertion order."""
        return sorted(self._tickets.values(), key=lambda t: t.issued_at)
