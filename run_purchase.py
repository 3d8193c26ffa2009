from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Tuple

from ticket_service.errors import InvalidPurchaseException
from ticket_service.models import TicketPurchaseRequest
from ticket_service.processor import TicketPurchaseProcessor
from ticket_service.services import InMemorySeatReservationService, InMemoryTicketPaymentService
from ticket_service.store import Store


def parse_ticket(value: str) -> Tuple[str, int]:
    name, sep, qty = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected TYPE=QTY, got {value!r}")
    try:
        return name, int(qty)
    except ValueError:
        raise argparse.ArgumentTypeError(f"quantity must be an integer, got {qty!r}") from None


def build_request(args: argparse.Namespace) -> TicketPurchaseRequest:
    counts: List[Tuple[str, int]] = []
    for name, qty in (("ADULT", args.adult), ("CHILD", args.child), ("INFANT", args.infant)):
        if qty:
            counts.append((name, qty))
    counts.extend(args.ticket)
    return TicketPurchaseRequest.from_counts(args.account_id, counts)


def main(argv: List[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    p = argparse.ArgumentParser(description="Run one ticket purchase and print the ledger.")
    p.add_argument("--account-id", type=int, default=1)
    p.add_argument("--adult", type=int, default=0)
    p.add_argument("--child", type=int, default=0)
    p.add_argument("--infant", type=int, default=0)
    p.add_argument(
        "--ticket",
        type=parse_ticket,
        action="append",
        default=[],
        metavar="TYPE=QTY",
        help="Extra ticket line, may repeat (e.g. --ticket ADULT=2)",
    )
    args = p.parse_args(argv)

    store = Store()
    processor = TicketPurchaseProcessor(
        InMemoryTicketPaymentService(store),
        InMemorySeatReservationService(store),
    )

    try:
        processor.purchase_tickets(build_request(args))
    except InvalidPurchaseException as e:
        print(f"purchase rejected: {e}", file=sys.stderr)
        return 1

    print("\n=== RESULT ===")
    print("charged:", store.charged)
    print("reserved seats:", store.reserved_seats)
    return 0


if __name__ == "__main__":
    sys.exit(main())
