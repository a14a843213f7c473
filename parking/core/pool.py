# parking/core/pool.py
"""Free-slot lists per engine type.

Slots are handed out oldest-free-first (FIFO). The pool does no locking of its
own; ``Parking`` serialises every call under the lock that also guards the
ticket registry.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping, Sequence
from typing import Optional

from parking.core.models import EngineType, Slot


class SlotPool:
    """Per-engine-type FIFO queues of free slots."""

    def __init__(self, slots: Mapping[EngineType, Sequence[str]]) -> None:
        self._free: dict[EngineType, deque[Slot]] = {}
        self._capacity: dict[EngineType, int] = {}
        for engine_type in sorted(slots, key=lambda t: t.rank):
            names = slots[engine_type]
            self._free[engine_type] = deque(Slot(name, engine_type) for name in names)
            self._capacity[engine_type] = len(names)

    def try_assign(self, engine_type: EngineType) -> Optional[Slot]:
        """Take the oldest free slot of exactly ``engine_type``.

        Unconfigured types get an empty queue on first use and yield None.
        """
        free = self._free.setdefault(engine_type, deque())
        self._capacity.setdefault(engine_type, 0)
        if not free:
            return None
        return free.popleft()

    def release(self, slot: Slot) -> None:
        """Return ``slot`` to the queue of its own engine type.

        Callers release each slot at most once.
        """
        self._free.setdefault(slot.engine_type, deque()).append(slot)

    def available(self, engine_type: EngineType) -> int:
        return len(self._free.get(engine_type, ()))

    def capacity(self, engine_type: EngineType) -> int:
        return self._capacity.get(engine_type, 0)

    def free_slots(self) -> dict[EngineType, list[Slot]]:
        """Snapshot of the free queues, in engine type order then FIFO order."""
        return {
            engine_type: list(self._free[engine_type])
            for engine_type in sorted(self._free, key=lambda t: t.rank)
        }
