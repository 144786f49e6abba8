import re
from typing import Iterable

from .constants import CREDIT_KEYWORDS, Direction

# "Cr" / "cr." as its own token, not inside words like "crore" or "across"
_CR_TOKEN = re.compile(r"\bcr\b")


class DirectionClassifier:
    """Keyword-presence rule: DEBIT unless the line reads like money coming in.

    There is no negation handling. A line mentioning both "debit" and
    "credit" is classified CREDIT.
    """

    def __init__(self, credit_keywords: Iterable[str] = CREDIT_KEYWORDS):
        self.credit_keywords = tuple(keyword.lower() for keyword in credit_keywords)

    def classify(self, line: str) -> Direction:
        line_lower = line.lower()

        if any(keyword in line_lower for keyword in self.credit_keywords):
            return Direction.CREDIT
        if _CR_TOKEN.search(line_lower):
            return Direction.CREDIT

        return Direction.DEBIT


_default_classifier = DirectionClassifier()


def classify_direction(line: str) -> Direction:
    return _default_classifier.classify(line)
