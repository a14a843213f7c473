# parking/core/models.py
"""Value types shared by the slot pool, the ticket registry and the allocator."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import Any


def utc_now() -> datetime:
    return datetime.now(UTC)


class EngineType(Enum):
    """Engine categories served by the parking, in fallback order.

    GAS         gasoline, can park in any slot
    ELECTRIC    20kW charger slot only
    HI_ELECTRIC 50kW charger slot only
    """

    GAS = "GAS"
    ELECTRIC = "ELECTRIC"
    HI_ELECTRIC = "HI_ELECTRIC"

    @property
    def rank(self) -> int:
        """Position in declaration order (GAS < ELECTRIC < HI_ELECTRIC)."""
        return _RANKS[self]

    def compatible_types(self) -> tuple[EngineType, ...]:
        """Slot types that may serve a car of this type, own type first."""
        return _COMPATIBLE.get(self, (self,))

    @property
    def is_flexible(self) -> bool:
        return len(self.compatible_types()) > 1


_RANKS = {t: i for i, t in enumerate(EngineType)}

# Only gas cars may take a charger slot; chargers are never downgraded.
_COMPATIBLE: dict[EngineType, tuple[EngineType, ...]] = {
    EngineType.GAS: (EngineType.GAS, EngineType.ELECTRIC, EngineType.HI_ELECTRIC),
}


@dataclass(frozen=True, slots=True)
class Slot:
    """A named parking place and the engine type it was built for."""

    name: str
    engine_type: EngineType

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "engine_type": self.engine_type.value}


@dataclass(frozen=True, slots=True)
class Ticket:
    """Receipt for a live allocation.

    ``engine_type`` records what the car asked for, which differs from
    ``slot.engine_type`` when a gas car was sent to a charger slot.
    """

    id: uuid.UUID
    engine_type: EngineType
    issued_at: datetime
    slot: Slot

    @classmethod
    def issue(cls, engine_type: EngineType, slot: Slot, issued_at: datetime) -> Ticket:
        """Mint a ticket with a fresh random id."""
        return cls(
            id=uuid.uuid4(),
            engine_type=engine_type,
            issued_at=issued_at,
            slot=slot,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": str(self.id),
            "engine_type": self.engine_type.value,
            "issued_at": self.issued_at.isoformat(),
            "slot": self.slot.to_dict(),
        }
