"""Reasons a purchase is rejected before anything is charged or reserved."""

from __future__ import annotations

from enum import Enum


class PurchaseRejection(Enum):
    INVALID_ACCOUNT_ID = "Invalid account ID"
    INVALID_TICKET_TYPE = "Invalid ticket type"
    ADULT_TICKET_REQUIRED = "Child and Infant tickets cannot be purchased without purchasing an Adult ticket"
    TOO_MANY_TICKETS = "A maximum of 20 tickets can be purchased at a time"
    NO_TICKET_SELECTED = "No ticket selected"


class InvalidPurchaseException(Exception):
    """Raised when a purchase request breaks a business rule."""

    def __init__(self, reason: PurchaseRejection) -> None:
        super().__init__(reason.value)
        self.reason = reason

    @property
    def message(self) -> str:
        return self.reason.value
