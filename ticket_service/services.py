from __future__ import annotations

from abc import ABC, abstractmethod

from ticket_service.store import Store


class TicketPaymentService(ABC):
    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None: ...


class SeatReservationService(ABC):
    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None: ...


class InMemoryTicketPaymentService(TicketPaymentService):
    def __init__(self, store: Store):
        self.store = store

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        if account_id < 1:
            raise ValueError(f"Account {account_id} cannot be charged")
        self.store.charged[account_id] = self.store.charged.get(account_id, 0) + total_amount_to_pay
        self.store.log(
            f"[account={account_id}] charged amount={total_amount_to_pay} (total={self.store.charged[account_id]})"
        )


class InMemorySeatReservationService(SeatReservationService):
    def __init__(self, store: Store):
        self.store = store

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        if account_id < 1:
            raise ValueError(f"Account {account_id} cannot reserve seats")
        self.store.reserved_seats[account_id] = self.store.reserved_seats.get(account_id, 0) + total_seats_to_allocate
        self.store.log(
            f"[account={account_id}] seats reserved={total_seats_to_allocate} "
            f"(total={self.store.reserved_seats[account_id]})"
        )
