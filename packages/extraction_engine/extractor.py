"""
Transaction Extractor - turns OCR'd document text into transaction records.

Pipeline per line: line filter -> amount locator -> direction, category,
merchant and date annotation -> record. A line yields at most one record.
After all lines, near-duplicates are removed with source order preserved.

The extractor holds only immutable configuration, so one instance can be
shared across threads and documents.
"""

import logging
from typing import List, Optional, Union

import pandas as pd

from .amount_locator import AmountLocator
from .category_tagger import CategoryTagger
from .constants import DESCRIPTION_MAX_LENGTH, ELLIPSIS
from .deduplication import remove_duplicates
from .direction import DirectionClassifier
from .line_classifier import LineClassifier
from .merchant_extractor import MerchantExtractor
from .models import TransactionRecord

logger = logging.getLogger(__name__)

RECORD_COLUMNS = ["type", "amount", "description", "category", "date", "merchant"]

DocumentText = Union[str, bytes, None]


def truncate_description(line: str, limit: int = DESCRIPTION_MAX_LENGTH) -> str:
    """Trim the line and cap it at `limit` characters, ellipsis included."""
    description = line.strip()
    if len(description) > limit:
        description = description[: limit - len(ELLIPSIS)] + ELLIPSIS
    return description


def split_lines(text: DocumentText) -> List[str]:
    """Split raw document text into non-blank lines.

    Bytes are decoded as UTF-8 with replacement characters so broken OCR
    output never raises.
    """
    if not text:
        return []
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")

    lines = []
    for line in text.split("\n"):
        line = line.rstrip("\r")
        if line.strip():
            lines.append(line)
    return lines


class TransactionExtractor:
    """
    Heuristic extraction engine for statements, receipts, bills and invoices.

    Every stage is injectable so vocabularies and patterns can be swapped
    without touching the pipeline.
    """

    def __init__(
        self,
        line_classifier: Optional[LineClassifier] = None,
        amount_locator: Optional[AmountLocator] = None,
        direction_classifier: Optional[DirectionClassifier] = None,
        category_tagger: Optional[CategoryTagger] = None,
        merchant_extractor: Optional[MerchantExtractor] = None,
    ):
        self.line_classifier = line_classifier or LineClassifier()
        self.amount_locator = amount_locator or AmountLocator()
        self.direction_classifier = direction_classifier or DirectionClassifier()
        self.category_tagger = category_tagger or CategoryTagger()
        self.merchant_extractor = merchant_extractor or MerchantExtractor()

    def extract_line(self, line: str) -> Optional[TransactionRecord]:
        """Build a record from one line, or None if it isn't a transaction."""
        verdict = self.line_classifier.classify(line)
        if not verdict.keep:
            logger.debug(f"Skipping line ({verdict.reason}): {line!r}")
            return None

        candidate = self.amount_locator.locate(line)
        if candidate is None:
            return None

        annotations = self.merchant_extractor.extract(line)

        return TransactionRecord(
            direction=self.direction_classifier.classify(line),
            amount=candidate.value,
            description=truncate_description(line),
            category=self.category_tagger.tag(line),
            date=annotations.date,
            merchant=annotations.merchant,
        )

    def extract(self, text: DocumentText) -> List[TransactionRecord]:
        """
        Extract transactions from raw document text.

        Args:
            text: Newline-delimited text from an OCR or document parser.

        Returns:
            Records in source line order, duplicates removed. Empty when
            nothing looks like a transaction.
        """
        lines = split_lines(text)

        candidates = []
        for line in lines:
            record = self.extract_line(line)
            if record is not None:
                candidates.append(record)

        records = remove_duplicates(candidates)

        logger.info(
            f"Scanned {len(lines)} lines, found {len(candidates)} candidates, "
            f"kept {len(records)} transactions"
        )
        return records

    def extract_frame(self, text: DocumentText) -> pd.DataFrame:
        """Extract and return as a DataFrame with the record columns."""
        records = self.extract(text)
        return pd.DataFrame(
            [record.to_dict() for record in records], columns=RECORD_COLUMNS
        )


_default_extractor = TransactionExtractor()


def extract_transactions(text: DocumentText) -> List[TransactionRecord]:
    """
    Convenience function to extract transactions with the default engine.

    Args:
        text: Raw document text (str, UTF-8 bytes, or None)

    Returns:
        Ordered list of TransactionRecord, possibly empty
    """
    return _default_extractor.extract(text)


def extract_transactions_frame(text: DocumentText) -> pd.DataFrame:
    """Same as extract_transactions, as a DataFrame."""
    return _default_extractor.extract_frame(text)
