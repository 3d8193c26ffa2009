from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from ticket_service.models import TicketType, TicketTypeRequest

MAX_TICKETS_PER_PURCHASE = 20

TICKET_PRICES: Mapping[TicketType, int] = MappingProxyType(
    {
        TicketType.ADULT: 20,
        TicketType.CHILD: 10,
        TicketType.INFANT: 0,
    }
)

# Infants sit on an adult's lap.
SEATED_TICKET_TYPES = frozenset({TicketType.ADULT, TicketType.CHILD})


def ticket_price(ticket_type: TicketType) -> int:
    return TICKET_PRICES[ticket_type]


def price_per_ticket_type(requests: Iterable[TicketTypeRequest]) -> Dict[TicketType, int]:
    """Subtotal per ticket type; repeated entries of one type are summed, not overwritten."""
    subtotals: Dict[TicketType, int] = {}
    for req in requests:
        line = ticket_price(req.ticket_type) * req.no_of_tickets
        subtotals[req.ticket_type] = subtotals.get(req.ticket_type, 0) + line
    return subtotals


def total_amount_to_pay(requests: Iterable[TicketTypeRequest]) -> int:
    return sum(price_per_ticket_type(requests).values())


def number_of_seats(requests: Iterable[TicketTypeRequest]) -> int:
    return sum(req.no_of_tickets for req in requests if req.ticket_type in SEATED_TICKET_TYPES)


def number_of_tickets(requests: Iterable[TicketTypeRequest]) -> int:
    return sum(req.no_of_tickets for req in requests)
