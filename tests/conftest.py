"""Pytest fixtures for the ticket purchase processor (in-memory ledger)."""

import pytest

from ticket_service.processor import TicketPurchaseProcessor
from ticket_service.services import InMemorySeatReservationService, InMemoryTicketPaymentService
from ticket_service.store import Store


class RecordingServices:
    """Payment and reservation double that records calls in the order they happen."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, int, int]] = []

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        self.calls.append(("make_payment", account_id, total_amount_to_pay))

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        self.calls.append(("reserve_seat", account_id, total_seats_to_allocate))


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def processor(store) -> TicketPurchaseProcessor:
    return TicketPurchaseProcessor(InMemoryTicketPaymentService(store), InMemorySeatReservationService(store))


@pytest.fixture
def recorder() -> RecordingServices:
    return RecordingServices()


@pytest.fixture
def recording_processor(recorder) -> TicketPurchaseProcessor:
    return TicketPurchaseProcessor(recorder, recorder)
