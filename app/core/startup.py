# app/core/startup.py
import logging

from fastapi import FastAPI

from app.core.config import settings
from app.data.database import AsyncSessionLocal
from app.data.tarot import load_tarot_data
from app.services.database.reading_database_services import seed_sample_readings

logger = logging.getLogger(__name__)

async def startup_event(app: FastAPI):
    """
    Initialize resources on application startup.
    """
    try:
        load_tarot_data(settings.TAROT_DATA_PATH)

        if settings.SEED_SAMPLE_READINGS:
            async with AsyncSessionLocal() as db:
                inserted = await seed_sample_readings(db)
            logger.info(f"Sample data check complete ({inserted} readings inserted)")

        logger.info(f"Starting {settings.API_TITLE} {settings.API_VERSION}")

    except Exception as e:
        logger.error(f"Failed to startup: {e}")
        raise
