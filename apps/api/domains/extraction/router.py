"""Extraction router — turn OCR'd document text into transactions.

Text acquisition (OCR, PDF parsing) happens upstream; these endpoints take
its output either as a JSON string or as an uploaded text file.
"""

import structlog
from fastapi import APIRouter, Depends, File, UploadFile

from apps.api.core.config import Settings, get_settings
from apps.api.domains.extraction.schemas import ExtractResponse, ExtractTextRequest
from apps.api.domains.extraction.service import (
    build_response,
    check_filename,
    check_size,
    decode_document,
)

router = APIRouter(prefix="/extract", tags=["extraction"])
logger = structlog.get_logger()


@router.post("/text", response_model=ExtractResponse)
async def extract_from_text(
    request: ExtractTextRequest,
    settings: Settings = Depends(get_settings),
):
    """Extract transactions from a block of document text."""
    check_size(len(request.text.encode("utf-8", errors="replace")), settings.MAX_UPLOAD_BYTES)

    response = build_response(request.text, settings.TEXT_PREVIEW_CHARS)
    logger.info("extract_complete", source="text", count=response.count)
    return response


@router.post("/file", response_model=ExtractResponse)
async def extract_from_file(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_settings),
):
    """Extract transactions from an uploaded plain-text file.

    Undecodable bytes are replaced rather than rejected; OCR output is
    often partially garbled.
    """
    filename = file.filename or ""
    check_filename(filename)

    contents = await file.read()
    check_size(len(contents), settings.MAX_UPLOAD_BYTES)

    response = build_response(decode_document(contents), settings.TEXT_PREVIEW_CHARS)
    logger.info("extract_complete", source="file", filename=filename, count=response.count)
    return response
