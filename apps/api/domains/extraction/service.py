"""Extraction service — business logic between the HTTP layer and the engine.

The engine never raises on bad input; this layer turns its output into the
dashboard response and enforces the upload constraints.
"""

from pathlib import Path

from apps.api.core.errors import BadRequestError, PayloadTooLargeError
from apps.api.domains.extraction.schemas import ExtractResponse, TransactionOut
from packages.extraction_engine import extract_transactions

ALLOWED_EXTENSIONS = (".txt", ".text", ".csv")

NO_TRANSACTIONS_MESSAGE = (
    "No transactions detected in the document. Please ensure the document "
    "contains clear transaction information with amounts."
)


def success_message(count: int) -> str:
    return f"Successfully extracted {count} transaction(s)"


def check_size(size: int, max_bytes: int) -> None:
    if size > max_bytes:
        raise PayloadTooLargeError(f"Document too large (max {max_bytes} bytes)")


def check_filename(filename: str) -> None:
    if Path(filename).suffix.lower() not in ALLOWED_EXTENSIONS:
        raise BadRequestError(
            f"Unsupported file type. Accepted: {', '.join(ALLOWED_EXTENSIONS)}"
        )


def decode_document(contents: bytes) -> str:
    """Decode uploaded text. Invalid UTF-8 becomes U+FFFD, never an error."""
    return contents.decode("utf-8-sig", errors="replace")


def build_response(text: str, preview_chars: int) -> ExtractResponse:
    """Run the engine and shape the dashboard response.

    When nothing is found the start of the input is echoed back so the
    user can see what the OCR step actually produced.
    """
    records = extract_transactions(text)
    transactions = [TransactionOut(**record.to_dict()) for record in records]

    if not transactions:
        return ExtractResponse(
            transactions=[],
            count=0,
            message=NO_TRANSACTIONS_MESSAGE,
            extracted_text=text[:preview_chars],
        )

    return ExtractResponse(
        transactions=transactions,
        count=len(transactions),
        message=success_message(len(transactions)),
    )
