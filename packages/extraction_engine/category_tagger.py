from typing import Mapping, Optional, Sequence

from .constants import CATEGORY_KEYWORDS, Category


class CategoryTagger:
    def __init__(self, rules: Mapping[Category, Sequence[str]] = CATEGORY_KEYWORDS):
        # Category -> lowercase keyword fragments, in priority order
        self.rules = rules

    def match(self, text: str) -> Optional[Category]:
        """
        Check if text contains any known keyword fragment.
        Returns the first matching category in priority order, else None.
        """
        if not text:
            return None

        text_lower = text.lower()

        # Plain substring check, "swiggy" also hits "swiggyinstamart".
        # Dict iteration is insertion-ordered, which is the priority order.
        for category, keywords in self.rules.items():
            if any(keyword in text_lower for keyword in keywords):
                return category

        return None

    def tag(self, text: str) -> Category:
        """Single label for a line; falls back to Other."""
        return self.match(text) or Category.OTHER
