"""
SpendLens Extraction Engine

Heuristic transaction extraction from OCR'd financial documents.
"""

__version__ = "0.1.0"

from .constants import Category, Direction
from .models import CandidateAmount, TransactionRecord
from .extractor import (
    TransactionExtractor,
    extract_transactions,
    extract_transactions_frame,
)

__all__ = [
    "Category",
    "Direction",
    "CandidateAmount",
    "TransactionRecord",
    "TransactionExtractor",
    "extract_transactions",
    "extract_transactions_frame",
]
