"""Health check router — liveness + readiness."""

import structlog
from fastapi import APIRouter

from packages.extraction_engine import __version__ as engine_version
from packages.extraction_engine import extract_transactions

router = APIRouter(tags=["health"])
logger = structlog.get_logger()

# One known row; readiness fails if the engine stops recognizing it
SMOKE_LINE = "15/03/2024 Swiggy order Rs. 450.00 Dr"


@router.get("/health")
async def health_liveness():
    """Liveness probe — returns 200 if the API process is running."""
    return {"status": "healthy", "service": "api"}


@router.get("/health/ready")
async def health_readiness():
    """Readiness probe — runs the engine on a canned statement row."""
    status = {
        "status": "healthy",
        "services": {"api": "up", "extraction_engine": "up"},
        "engine_version": engine_version,
    }

    records = extract_transactions(SMOKE_LINE)
    if len(records) != 1 or records[0].amount != 450.00:
        status["services"]["extraction_engine"] = "down"
        status["status"] = "degraded"
        logger.warning("engine_smoke_failed", records=len(records))

    return status
