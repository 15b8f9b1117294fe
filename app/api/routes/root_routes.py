# app/api/routes/root_routes.py
from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.config import settings
from app.models.root_models import HealthResponse

router = APIRouter(tags=["Root"])

@router.get("/")
async def read_root():
    """Service info and the endpoints it exposes."""
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "endpoints": {
            "health": "GET /health",
            "readings": "GET /api/readings",
            "reading": "GET /api/readings/{id}",
            "create_reading": "POST /api/readings",
        },
    }

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness probe. Does not touch the database."""
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc))
