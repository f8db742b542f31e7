# app/api/v1/routes/health.py
from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter(tags=["Health"])

@router.get("/healthcheck")
async def health_check():
    """Liveness probe, always public"""
    return {
        "date": datetime.now(timezone.utc).isoformat(),
        "status": "ok",
    }
