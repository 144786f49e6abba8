import pytest
from packages.extraction_engine.line_classifier import LineClassifier


@pytest.fixture
def classifier():
    return LineClassifier()


def test_length_boundary(classifier):
    # 9 characters is always discarded, even when it carries an amount
    assert classifier.classify("Rs. 100.0").keep is False
    # 10 characters is eligible
    assert classifier.classify("Rs. 100.00").keep is True


def test_rejects_structural_markers(classifier):
    assert classifier.classify("Opening Balance: Rs. 10000.00").keep is False
    assert classifier.classify("CLOSING BALANCE 45,000.00").keep is False
    assert classifier.classify("Account Number: 1234567890123").keep is False
    assert classifier.classify("Statement period 01/03/2024 - 31/03/2024").keep is False
    assert classifier.classify("Page 2 of 5 continued").keep is False


def test_reports_rejection_reason(classifier):
    assert classifier.classify("short").reason == "too_short"
    assert classifier.classify("Opening Balance: Rs. 10000.00").reason == "opening balance"


def test_keeps_transaction_rows(classifier):
    verdict = classifier.classify("15/03/2024 Swiggy order Rs. 450.00 Dr")
    assert verdict.keep is True
    assert verdict.reason == ""


def test_custom_markers():
    classifier = LineClassifier(markers=["Brought Forward"])
    assert classifier.classify("Brought forward 1,200.00").keep is False
    # default markers no longer apply
    assert classifier.classify("Page total Rs. 1,200.00").keep is True
