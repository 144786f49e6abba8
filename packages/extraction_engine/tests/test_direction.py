import pytest
from packages.extraction_engine import Direction
from packages.extraction_engine.direction import classify_direction


@pytest.mark.parametrize(
    "line",
    [
        "Salary credited INR 55000 on 01-04-2024",
        "Refund from Amazon Rs. 499.00",
        "Cash deposit at branch 5000",
        "Payment received from Rahul 1200",
        "Interest income 312.45",
        "UPI transfer 300.00 Cr",
        "NEFT Cr. 15,000.00",
    ],
)
def test_credit_lines(line):
    assert classify_direction(line) == Direction.CREDIT


@pytest.mark.parametrize(
    "line",
    [
        "15/03/2024 Swiggy order Rs. 450.00 Dr",
        "Uber ride Rs. 180.00",
        "Netflix subscription 649.00",
        # "cr" inside a word is not a credit marker
        "Microwave across town Rs. 8,999.00",
    ],
)
def test_debit_lines(line):
    assert classify_direction(line) == Direction.DEBIT


def test_conflicting_keywords_resolve_to_credit():
    # Column header leaking into a row: no negation handling
    assert classify_direction("Debit Credit 500.00") == Direction.CREDIT
