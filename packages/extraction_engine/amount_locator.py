"""
Amount Locator - finds the monetary value of a statement line.

Patterns are tried in priority order. The first pattern that yields a
plausible amount wins and later patterns are never consulted, so a bare
number (page totals, reference codes) is only used when nothing more
specific is present on the line.
"""

import re
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from .constants import MAX_PLAUSIBLE_AMOUNT
from .models import CandidateAmount

logger = logging.getLogger(__name__)

# Integer part with optional thousands groups, then 0 or 2 decimals
NUMBER = r"([0-9]+(?:,[0-9]{3})*(?:\.[0-9]{2})?)"
CURRENCY = r"(?:Rs\.?|INR|₹)"


def parse_amount(raw: str) -> Optional[float]:
    """Parse a matched number, stripping thousands separators."""
    try:
        return round(float(raw.replace(",", "")), 2)
    except ValueError:
        return None


def is_plausible(value: Optional[float]) -> bool:
    return value is not None and 0 < value < MAX_PLAUSIBLE_AMOUNT


@dataclass(frozen=True)
class AmountPattern:
    """One matcher in the fallback chain."""

    name: str
    regex: "re.Pattern[str]"

    def candidates(self, line: str) -> Iterator[CandidateAmount]:
        """Yield plausible amounts in the order they appear on the line."""
        for match in self.regex.finditer(line):
            value = parse_amount(match.group(1))
            if not is_plausible(value):
                continue
            yield CandidateAmount(value=value, span=match.span(1), text=match.group(1))

    def locate(self, line: str) -> Optional[CandidateAmount]:
        return next(self.candidates(line), None)


def _pattern(name: str, expr: str) -> AmountPattern:
    return AmountPattern(name, re.compile(expr, re.IGNORECASE))


DEFAULT_PATTERNS = (
    _pattern("currency_prefix", CURRENCY + r"\s*" + NUMBER),
    _pattern("currency_suffix", NUMBER + r"\s*" + CURRENCY),
    _pattern("total_label", r"Total[:\s]+" + CURRENCY + r"?\s*" + NUMBER),
    _pattern("amount_label", r"Amount[:\s]+" + CURRENCY + r"?\s*" + NUMBER),
    _pattern("dr_cr_marker", r"(?<!\S)" + NUMBER + r"\s*(?:Dr|Cr|Debit|Credit)"),
    _pattern("bare_number", r"(?<!\S)" + NUMBER + r"(?!\S)"),
)


class AmountLocator:
    """Applies the ordered pattern chain to a single line."""

    def __init__(self, patterns: Iterable[AmountPattern] = DEFAULT_PATTERNS):
        self.patterns: Sequence[AmountPattern] = tuple(patterns)

    def locate(self, line: str) -> Optional[CandidateAmount]:
        """Return the first plausible amount from the highest-priority pattern."""
        if not line:
            return None

        for pattern in self.patterns:
            candidate = pattern.locate(line)
            if candidate is not None:
                logger.debug(f"Amount {candidate.value} matched by {pattern.name}")
                return candidate

        return None
