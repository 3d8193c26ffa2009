from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple


class TicketType(Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @classmethod
    def parse(cls, value: str | None) -> Optional[TicketType]:
        """Unknown or empty names map to None and are rejected later as an invalid ticket type."""
        if not isinstance(value, str) or not value.strip():
            return None
        try:
            return cls[value.strip().upper()]
        except KeyError:
            return None


@dataclass(frozen=True, slots=True)
class TicketTypeRequest:
    ticket_type: Optional[TicketType]
    no_of_tickets: int


@dataclass(frozen=True, slots=True)
class TicketPurchaseRequest:
    """
    One purchase: an account plus the requested quantities per ticket type.

    Entries keep their order and are not merged; two ADULT entries are two
    separate lines that add up.
    """

    account_id: int
    ticket_type_requests: Tuple[TicketTypeRequest, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "ticket_type_requests", tuple(self.ticket_type_requests))

    @classmethod
    def of(cls, account_id: int, *ticket_type_requests: TicketTypeRequest) -> TicketPurchaseRequest:
        return cls(account_id=account_id, ticket_type_requests=ticket_type_requests)

    @classmethod
    def from_counts(cls, account_id: int, counts: Iterable[Tuple[str | None, int]]) -> TicketPurchaseRequest:
        return cls(
            account_id=account_id,
            ticket_type_requests=tuple(TicketTypeRequest(TicketType.parse(name), qty) for name, qty in counts),
        )
