# app/api/routes/reading_routes.py
import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.security import limiter
from app.data.database import get_db
from app.models.reading_models import ReadingCreate, ReadingResponse
from app.services.database.reading_database_services import (
    create_reading,
    get_all_readings,
    get_reading_by_id,
)

logger = logging.getLogger(__name__)

router = APIRouter()

def database_unavailable(e: Exception) -> HTTPException:
    logger.error(f"Database error: {e}")
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Database unavailable")

@router.get("", response_model=List[ReadingResponse])
async def list_readings(db: AsyncSession = Depends(get_db)):
    """List all readings, oldest first."""
    try:
        return await get_all_readings(db)
    except (SQLAlchemyError, OSError) as e:
        raise database_unavailable(e)

@router.get("/{reading_id}", response_model=ReadingResponse)
async def get_reading(reading_id: str, db: AsyncSession = Depends(get_db)):
    """Fetch a single reading. Unknown and malformed ids are both reported as not found."""
    try:
        parsed_id = uuid.UUID(reading_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reading not found")

    try:
        reading = await get_reading_by_id(db, parsed_id)
    except (SQLAlchemyError, OSError) as e:
        raise database_unavailable(e)

    if not reading:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reading not found")
    return reading

@router.post("", response_model=ReadingResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.CREATE_READING_RATE_LIMIT)
async def add_reading(
    request: Request,
    response: Response,
    reading_data: ReadingCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a reading and return it with its generated id and timestamp."""
    try:
        reading = await create_reading(
            db,
            question=reading_data.question,
            cards=reading_data.cards,
            interpretation=reading_data.interpretation,
            user_id=reading_data.user_id,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (SQLAlchemyError, OSError) as e:
        raise database_unavailable(e)

    response.headers["Location"] = f"/api/readings/{reading.id}"
    return reading
