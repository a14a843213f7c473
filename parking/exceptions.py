"""Custom exceptions for the parking service."""

from uuid import UUID


class ParkingError(Exception):
    """Base exception for all parking errors."""


class UnknownTicketError(ParkingError):
    """Ticket was never issued or has already been released."""

    def __init__(self, ticket_id: UUID | str) -> None:
        self.ticket_id = ticket_id
        super().__init__(f"Unknown ticket {ticket_id}")


class InsufficientPaymentError(ParkingError):
    """Payment does not cover the amount owed for the ticket."""

    def __init__(self, supplied: float, required: float) -> None:
        self.supplied = supplied
        self.required = required
        super().__init__(f"Insufficient payment: {supplied}, required: {required}")


class ConfigError(ParkingError):
    """Missing or invalid configuration."""
