from __future__ import annotations

import logging
from typing import Dict, List

logger = logging.getLogger(__name__)


class Store:
    """
    In-memory ledger behind the in-memory payment and seat reservation services.

    Holds only running totals per account:
    - how much has been charged
    - how many seats have been reserved

    plus the list of log lines (for the demo and tests). Purchases themselves
    are not recorded.
    """

    def __init__(self) -> None:
        self.charged: Dict[int, int] = {}
        self.reserved_seats: Dict[int, int] = {}

        self.logs: List[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    def account_logs(self, account_id: int) -> List[str]:
        return [line for line in self.logs if f"[account={account_id}]" in line]
