from __future__ import annotations

import logging
from typing import Optional, Sequence

from ticket_service.errors import InvalidPurchaseException, PurchaseRejection
from ticket_service.models import TicketPurchaseRequest, TicketType, TicketTypeRequest
from ticket_service.pricing import (
    MAX_TICKETS_PER_PURCHASE,
    number_of_seats,
    number_of_tickets,
    total_amount_to_pay,
)
from ticket_service.services import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class TicketPurchaseProcessor:
    def __init__(self, payment_service: TicketPaymentService, seat_reservation_service: SeatReservationService):
        self.payment_service = payment_service
        self.seat_reservation_service = seat_reservation_service

    def purchase_tickets(self, req: Optional[TicketPurchaseRequest]) -> None:
        """
        Validate the request, then charge the account and reserve its seats.

        A missing request or one with no entries is a no-op. Validation
        failures raise InvalidPurchaseException before either service is
        called; errors from the services themselves are not caught.
        """
        if req is None or not req.ticket_type_requests:
            return

        try:
            self._validate_request(req)
        except InvalidPurchaseException as e:
            logger.warning("[account=%s] purchase rejected: %s", req.account_id, e)
            raise

        requests = req.ticket_type_requests
        amount = total_amount_to_pay(requests)
        seats = number_of_seats(requests)
        logger.info("[account=%s] purchase accepted: amount=%s seats=%s", req.account_id, amount, seats)

        self.payment_service.make_payment(req.account_id, amount)
        self.seat_reservation_service.reserve_seat(req.account_id, seats)

    def _validate_request(self, req: TicketPurchaseRequest) -> None:
        # Order matters: the first failing check is the one reported.
        if req.account_id < 1:
            raise InvalidPurchaseException(PurchaseRejection.INVALID_ACCOUNT_ID)

        requests = req.ticket_type_requests
        if any(not isinstance(r.ticket_type, TicketType) for r in requests):
            raise InvalidPurchaseException(PurchaseRejection.INVALID_TICKET_TYPE)
        if not _contains_adult(requests):
            raise InvalidPurchaseException(PurchaseRejection.ADULT_TICKET_REQUIRED)

        ticket_count = number_of_tickets(requests)
        if ticket_count > MAX_TICKETS_PER_PURCHASE:
            raise InvalidPurchaseException(PurchaseRejection.TOO_MANY_TICKETS)
        if ticket_count < 1:
            raise InvalidPurchaseException(PurchaseRejection.NO_TICKET_SELECTED)


def _contains_adult(requests: Sequence[TicketTypeRequest]) -> bool:
    return any(r.ticket_type is TicketType.ADULT for r in requests)
