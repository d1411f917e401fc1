from typing import Dict, Iterable
import logging

from .exceptions import InvalidBillError

logger = logging.getLogger(__name__)

TICKET_PRICE = 25
ACCEPTED_BILLS = (25, 50, 100)

def sell_tickets(queue: Iterable[int]) -> bool:
    """
    Check whether a seller with an empty cashbox can serve the whole queue.

    Each customer buys one ticket for 25 and pays with a 25, 50 or 100 bill.
    Change for a 100 is given as 50 + 25 when possible, otherwise 3 x 25.
    Unknown bills are rejected with an error instead of being skipped.

    Args:
        queue: Bills in the order customers pay

    Returns:
        True if every customer gets their change, False otherwise

    Raises:
        InvalidBillError: If a bill is not 25, 50 or 100
    """
    cashbox: Dict[int, int] = {25: 0, 50: 0}

    for position, bill in enumerate(queue):
        if bill not in ACCEPTED_BILLS:
            raise InvalidBillError(f"Unsupported bill {bill!r} at position {position}")

        if bill == 25:
            cashbox[25] += 1
        elif bill == 50:
            if cashbox[25] == 0:
                logger.debug(f"No change for 50 at position {position}")
                return False
            cashbox[25] -= 1
            cashbox[50] += 1
        elif cashbox[50] > 0 and cashbox[25] > 0:
            cashbox[50] -= 1
            cashbox[25] -= 1
        elif cashbox[25] >= 3:
            cashbox[25] -= 3
        else:
            logger.debug(f"No change for 100 at position {position}")
            return False

    return True
