"""Vocabularies and limits for transaction extraction.

Everything here is read-only data loaded once at import time. Keyword
fragments are lowercase and matched as substrings against the lowercased
line, so extending or localizing a vocabulary never touches control flow.
"""

from enum import Enum
from types import MappingProxyType


class Category(str, Enum):
    """Closed set of categories a transaction can be tagged with."""

    FOOD = "Food"
    TRANSPORT = "Transport"
    SHOPPING = "Shopping"
    ENTERTAINMENT = "Entertainment"
    BILLS = "Bills"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    OTHER = "Other"


class Direction(str, Enum):
    """Whether a transaction adds to (CREDIT) or takes from (DEBIT) the balance."""

    CREDIT = "CREDIT"
    DEBIT = "DEBIT"


# Lines shorter than this are OCR fragments, not transaction rows
MIN_LINE_LENGTH = 10

# Document scaffolding: headers, balance summaries, pagination
STRUCTURAL_MARKERS = (
    "statement",
    "opening balance",
    "closing balance",
    "account number",
    "page",
)

# Amounts must fall strictly inside (0, MAX_PLAUSIBLE_AMOUNT)
MAX_PLAUSIBLE_AMOUNT = 10_000_000

DESCRIPTION_MAX_LENGTH = 100
ELLIPSIS = "..."

# Two records are the same line item if amounts differ by less than this
# and their descriptions share the same prefix
DUPLICATE_AMOUNT_TOLERANCE = 0.01
DUPLICATE_PREFIX_LENGTH = 50

CREDIT_KEYWORDS = (
    "credit",
    "salary",
    "received",
    "refund",
    "deposit",
    "income",
)

CURRENCY_MARKERS = ("Rs", "INR", "₹")

# Iteration order is the tagging priority: first category with a hit wins.
CATEGORY_KEYWORDS = MappingProxyType(
    {
        Category.FOOD: (
            "restaurant",
            "food",
            "swiggy",
            "zomato",
            "pizza",
            "burger",
            "cafe",
            "lunch",
            "dinner",
            "breakfast",
            "meal",
            "dominos",
            "mcdonald",
            "kfc",
            "subway",
            "starbucks",
            "dunkin",
        ),
        Category.TRANSPORT: (
            "uber",
            "ola",
            "taxi",
            "metro",
            "bus",
            "redbus",
            "petrol",
            "fuel",
            "parking",
            "transport",
            "rapido",
            "auto",
            "rickshaw",
            "train",
            "flight",
            "airline",
            "irctc",
        ),
        Category.SHOPPING: (
            "amazon",
            "flipkart",
            "myntra",
            "shopping",
            "mall",
            "store",
            "purchase",
            "ajio",
            "meesho",
            "nykaa",
            "supermarket",
            "grocery",
        ),
        Category.ENTERTAINMENT: (
            "movie",
            "netflix",
            "prime",
            "spotify",
            "hotstar",
            "cinema",
            "theatre",
            "pvr",
            "inox",
            "disney",
            "youtube",
            "game",
        ),
        Category.BILLS: (
            "electricity",
            "water",
            "gas",
            "internet",
            "broadband",
            "mobile",
            "bill",
            "utility",
            "recharge",
            "airtel",
            "jio",
            "vi",
            "vodafone",
            "bsnl",
        ),
        Category.HEALTHCARE: (
            "hospital",
            "pharmacy",
            "medicine",
            "doctor",
            "clinic",
            "medical",
            "apollo",
            "medplus",
            "health",
            "pharma",
        ),
        Category.EDUCATION: (
            "school",
            "college",
            "course",
            "book",
            "education",
            "tuition",
            "udemy",
            "coursera",
            "university",
            "fees",
        ),
    }
)
