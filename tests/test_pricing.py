"""Tests for price and seat calculations."""
import pytest

from ticket_service.models import TicketPurchaseRequest, TicketType, TicketTypeRequest
from ticket_service.pricing import (
    TICKET_PRICES,
    number_of_seats,
    number_of_tickets,
    price_per_ticket_type,
    ticket_price,
    total_amount_to_pay,
)


@pytest.mark.parametrize(
    "ticket_type, price",
    [(TicketType.ADULT, 20), (TicketType.CHILD, 10), (TicketType.INFANT, 0)],
)
def test_ticket_price(ticket_type, price):
    assert ticket_price(ticket_type) == price


def test_every_ticket_type_has_a_price():
    assert set(TICKET_PRICES) == set(TicketType)


def test_price_table_is_read_only():
    with pytest.raises(TypeError):
        TICKET_PRICES[TicketType.INFANT] = 5  # type: ignore[index]


def test_price_per_ticket_type_sums_repeated_entries():
    requests = [
        TicketTypeRequest(TicketType.ADULT, 2),
        TicketTypeRequest(TicketType.CHILD, 1),
        TicketTypeRequest(TicketType.ADULT, 1),
    ]
    assert price_per_ticket_type(requests) == {TicketType.ADULT: 60, TicketType.CHILD: 10}


def test_totals_for_mixed_request():
    req = TicketPurchaseRequest.of(
        1,
        TicketTypeRequest(TicketType.ADULT, 3),
        TicketTypeRequest(TicketType.CHILD, 2),
        TicketTypeRequest(TicketType.INFANT, 2),
    )
    requests = req.ticket_type_requests

    assert total_amount_to_pay(requests) == 80
    assert number_of_seats(requests) == 5
    assert number_of_tickets(requests) == 7
    # same input, same answer
    assert total_amount_to_pay(requests) == 80


def test_infant_only_has_no_cost_and_no_seat():
    requests = [TicketTypeRequest(TicketType.INFANT, 3)]
    assert total_amount_to_pay(requests) == 0
    assert number_of_seats(requests) == 0
    assert number_of_tickets(requests) == 3


def test_empty_requests():
    assert total_amount_to_pay([]) == 0
    assert number_of_seats([]) == 0
    assert number_of_tickets([]) == 0
