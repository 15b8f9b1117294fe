# app/services/database/reading_database_services.py
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sqlalchemy import exists, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.database_models.reading import Reading
from app.models.database_models.user import User

logger = logging.getLogger(__name__)

SAMPLE_USERNAME = "sample-reader"

SAMPLE_READINGS = [
    (
        "What does the future hold for my career?",
        ["The Fool", "The Magician", "The High Priestess"],
        "The Fool suggests new beginnings and taking a leap of faith in your career. The Magician indicates you have all the tools and skills necessary for success. The High Priestess advises trusting your intuition when making important career decisions.",
        timedelta(days=2),
    ),
    (
        "Should I pursue this new relationship?",
        ["The Lovers", "Two of Cups", "The Sun"],
        "The Lovers card strongly indicates a meaningful connection. The Two of Cups reinforces partnership and mutual attraction. The Sun brings joy and positivity, suggesting this relationship has great potential for happiness.",
        timedelta(days=1),
    ),
    (
        "How can I improve my financial situation?",
        ["Nine of Pentacles", "The Emperor", "Three of Wands"],
        "The Nine of Pentacles suggests financial independence is within reach through self-discipline. The Emperor advises taking control and creating structure in your financial planning. The Three of Wands indicates your long-term investments and planning will pay off.",
        timedelta(0),
    ),
]


async def get_all_readings(db: AsyncSession) -> List[Reading]:
    result = await db.execute(select(Reading).order_by(Reading.created_at.asc(), Reading.id.asc()))
    return result.scalars().all()


async def get_reading_by_id(db: AsyncSession, reading_id: uuid.UUID) -> Optional[Reading]:
    result = await db.execute(select(Reading).filter(Reading.id == reading_id))
    return result.scalars().first()


async def user_exists(db: AsyncSession, user_id: uuid.UUID) -> bool:
    result = await db.execute(select(exists().where(User.id == user_id)))
    return bool(result.scalar())


async def create_reading(
    db: AsyncSession,
    question: str,
    cards: List[str],
    interpretation: str,
    user_id: uuid.UUID,
    created_at: Optional[datetime] = None,
) -> Reading:
    """Validate and persist a new reading. Raises ValueError for invalid input."""
    if not question or not question.strip():
        raise ValueError("question must not be empty")
    if not interpretation or not interpretation.strip():
        raise ValueError("interpretation must not be empty")
    if not cards or any(not card or not card.strip() for card in cards):
        raise ValueError("cards must be a non-empty list of card labels")

    try:
        if not await user_exists(db, user_id):
            raise ValueError(f"Unknown user: {user_id}")

        reading = Reading(
            id=uuid.uuid4(),
            question=question,
            cards=list(cards),
            interpretation=interpretation,
            created_at=created_at or datetime.now(timezone.utc),
            user_id=user_id,
        )
        db.add(reading)
        await db.commit()
        await db.refresh(reading)
        logger.info(f"Created reading {reading.id} for user {user_id}")
        return reading

    except SQLAlchemyError:
        await db.rollback()
        raise


async def get_or_create_sample_user(db: AsyncSession) -> User:
    result = await db.execute(select(User).filter(User.username == SAMPLE_USERNAME))
    user = result.scalars().first()
    if user:
        return user

    user = User(id=uuid.uuid4(), username=SAMPLE_USERNAME)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


async def seed_sample_readings(db: AsyncSession) -> int:
    """
    Insert the sample readings when the readings table is empty. Returns the number inserted.
    """
    result = await db.execute(select(func.count()).select_from(Reading))
    if result.scalar():
        return 0

    try:
        user = await get_or_create_sample_user(db)
        now = datetime.now(timezone.utc)
        for question, cards, interpretation, age in SAMPLE_READINGS:
            await create_reading(db, question, cards, interpretation, user.id, created_at=now - age)
    except SQLAlchemyError:
        await db.rollback()
        raise

    logger.info(f"Seeded {len(SAMPLE_READINGS)} sample readings")
    return len(SAMPLE_READINGS)
