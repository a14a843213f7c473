"""FastAPI endpoints for entering, inspecting and leaving the parking.

One ``Parking`` instance backs the app. ``create_app`` takes it explicitly so
tests can inject their own; the module-level ``app`` is built from settings
for ``uvicorn parking.api.parking_api:app``.
"""

from __future__ import annotations

from uuid import UUID

import structlog
from fastapi import FastAPI, HTTPException, Query

from config.settings import settings
from parking.core import EngineType, Parking
from parking.exceptions import ParkingError

logger = structlog.get_logger()


def create_app(parking: Parking) -> FastAPI:
    """Build the API around ``parking``."""
    app = FastAPI(title="Parking API", version="1.0.0")
    app.state.parking = parking

    @app.get("/health")
    def health() -> dict[str, bool]:
        return {"ok": True}

    @app.post("/parking/ticket")
    def create_ticket(
        engine: EngineType = Query(description="Engine type of the entering car."),
    ) -> dict:
        """Issue a ticket, or 503 when no compatible slot is free."""
        ticket = parking.enter(engine)
        if ticket is None:
            raise HTTPException(status_code=503, detail=f"No free slot for {engine.value}")
        return ticket.to_dict()

    @app.get("/parking/ticket")
    def list_tickets() -> list[dict]:
        """All outstanding tickets, oldest first."""
        return [t.to_dict() for t in parking.get_tickets()]

    @app.get("/parking/ticket/{ticket_id}")
    def get_ticket(ticket_id: UUID) -> dict:
        ticket = parking.get_ticket(ticket_id)
        if ticket is None:
            raise HTTPException(status_code=404, detail=f"Unknown ticket {ticket_id}")
        return ticket.to_dict()

    @app.get("/parking/ticket/{ticket_id}/owed")
    def get_owed(ticket_id: UUID) -> float:
        """Amount owed right now; 0.0 for tickets that are not outstanding."""
        return parking.check_owed(ticket_id)

    @app.delete("/parking/ticket/{ticket_id}")
    def repay_ticket(
        ticket_id: UUID,
        payment: float = Query(description="Amount paid for the ticket."),
    ) -> dict[str, str]:
        """Pay and leave. 400 when the ticket is unknown or underpaid."""
        try:
            left_at = parking.leave(ticket_id, payment)
        except ParkingError as exc:
            logger.warning("leave_rejected", ticket_id=str(ticket_id), reason=str(exc))
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return {"left_at": left_at.isoformat()}

    @app.get("/parking/slots")
    def free_slots() -> dict[str, list[str]]:
        """Free slot names per engine type, in the order they will be assigned."""
        return {
            engine_type.value: [slot.name for slot in slots]
            for engine_type, slots in parking.free_slots().items()
        }

    return app


app = create_app(Parking.from_settings(settings))
