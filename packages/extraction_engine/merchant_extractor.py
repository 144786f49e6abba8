import re
from dataclasses import dataclass
from typing import Optional

from .constants import CURRENCY_MARKERS

# A capitalized word; currency and Dr/Cr markers never start or extend a name
_NAME_WORD = r"(?!(?:Rs|INR|Dr|Cr)\b)[A-Z][A-Za-z&'\-]*"

# "paid to Zomato Ltd", "purchase at Big Bazaar", "@ Starbucks"
MERCHANT_PATTERN = re.compile(
    r"(?:(?<![A-Za-z])(?i:at|from|to)\s+|@\s*)"
    rf"({_NAME_WORD}(?:[ \t]+{_NAME_WORD})*)"
)

MONTHS = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*"

# Tried in order, first match wins. Values are kept verbatim.
DATE_PATTERNS = [
    re.compile(r"(?<![0-9])([0-9]{1,2}[-/][0-9]{1,2}[-/][0-9]{2,4})(?![0-9])"),  # 15/03/2024, 1-4-24
    re.compile(r"(?<![0-9])([0-9]{4}[-/][0-9]{1,2}[-/][0-9]{1,2})(?![0-9])"),  # 2024/03/15
    re.compile(rf"(?<![0-9])([0-9]{{1,2}}\s+{MONTHS}\s+[0-9]{{2,4}})(?![0-9])", re.IGNORECASE),  # 5 Mar 2024
]


@dataclass(frozen=True)
class MerchantAndDate:
    merchant: Optional[str] = None
    date: Optional[str] = None


class MerchantExtractor:
    """Best-effort counterparty and date extraction from a statement line."""

    def __init__(self, min_fallback_length: int = 4):
        self.min_fallback_length = min_fallback_length

    def extract(self, line: str) -> MerchantAndDate:
        if not line:
            return MerchantAndDate()
        return MerchantAndDate(
            merchant=self.extract_merchant(line), date=self.extract_date(line)
        )

    def extract_merchant(self, line: str) -> Optional[str]:
        if not line:
            return None

        # Strategy 1: preposition followed by a capitalized name (high precision)
        match = MERCHANT_PATTERN.search(line)
        if match:
            name = match.group(1).strip()
            if name:
                return name

        # Strategy 2: first capitalized token that isn't a currency marker.
        # May pick an incidental proper noun.
        for token in line.split():
            if len(token) < self.min_fallback_length:
                continue
            if not re.match(r"[A-Z]", token):
                continue
            if any(marker in token for marker in CURRENCY_MARKERS):
                continue
            return token

        return None

    def extract_date(self, line: str) -> Optional[str]:
        if not line:
            return None

        for pattern in DATE_PATTERNS:
            match = pattern.search(line)
            if match:
                return match.group(1)

        return None


_default_extractor = MerchantExtractor()


def extract_merchant_and_date(line: str) -> MerchantAndDate:
    return _default_extractor.extract(line)
