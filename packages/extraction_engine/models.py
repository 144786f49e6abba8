"""Data structures produced by the extraction engine."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .constants import Category, Direction


@dataclass(frozen=True)
class CandidateAmount:
    """A monetary value found on a line, with the span that produced it."""

    value: float
    span: Tuple[int, int]
    text: str = ""


@dataclass(frozen=True)
class TransactionRecord:
    """Standardized transaction extracted from one document line."""

    direction: Direction
    amount: float
    description: str
    category: Category = Category.OTHER
    date: Optional[str] = None  # verbatim, not normalized
    merchant: Optional[str] = None  # advisory only

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the dictionary shape consumed by the dashboard."""
        return {
            "type": self.direction.value,
            "amount": self.amount,
            "description": self.description,
            "category": self.category.value,
            "date": self.date,
            "merchant": self.merchant,
        }
