"""Pydantic schemas for the extraction domain."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class ExtractTextRequest(BaseModel):
    """Raw text from an OCR or document-parsing step."""

    text: str = Field(default="", description="Newline-delimited document text")


class TransactionOut(BaseModel):
    """One extracted transaction. Labels are defaults the caller may override."""

    type: Literal["CREDIT", "DEBIT"]
    amount: float = Field(..., gt=0)
    description: str
    category: str = "Other"
    date: Optional[str] = None
    merchant: Optional[str] = None


class ExtractResponse(BaseModel):
    """Response from text or file extraction."""

    transactions: list[TransactionOut]
    count: int
    message: str
    extracted_text: Optional[str] = Field(
        default=None,
        description="Start of the input, only when nothing was detected",
    )
