"""
Transaction Deduplication
Same line item detected twice: amounts within a cent AND same description prefix
"""
import logging
from typing import List, Sequence

from .constants import DUPLICATE_AMOUNT_TOLERANCE, DUPLICATE_PREFIX_LENGTH
from .models import TransactionRecord

logger = logging.getLogger(__name__)


def is_duplicate(
    a: TransactionRecord,
    b: TransactionRecord,
    tolerance: float = DUPLICATE_AMOUNT_TOLERANCE,
    prefix_length: int = DUPLICATE_PREFIX_LENGTH,
) -> bool:
    # Rounded to the cent so 450.01 vs 450.00 float noise doesn't read as < 0.01
    difference = round(abs(a.amount - b.amount), 2)
    return (
        difference < tolerance
        and a.description[:prefix_length] == b.description[:prefix_length]
    )


def remove_duplicates(records: Sequence[TransactionRecord]) -> List[TransactionRecord]:
    """
    Keep the first occurrence of each line item, preserving order.

    Each record is compared against every earlier record. Documents are a
    few hundred lines, so the quadratic scan is fine.
    """
    unique = [
        record
        for index, record in enumerate(records)
        if not any(is_duplicate(earlier, record) for earlier in records[:index])
    ]

    removed = len(records) - len(unique)
    if removed:
        logger.debug(f"Removed {removed} duplicate transactions")

    return unique
