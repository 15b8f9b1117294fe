# app/models/reading_models.py
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator


class ReadingCreate(BaseModel):
    question: str
    cards: List[str]
    interpretation: str
    user_id: UUID

    @field_validator("question", "interpretation")
    @classmethod
    def not_blank(cls, value: str, info) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"{info.field_name} must not be empty")
        return value

    @field_validator("cards")
    @classmethod
    def cards_not_empty(cls, cards: List[str]) -> List[str]:
        cards = [card.strip() for card in cards]
        if not cards:
            raise ValueError("cards must contain at least one card")
        if any(not card for card in cards):
            raise ValueError("card labels must not be empty")
        return cards


class ReadingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    question: str
    cards: List[str]
    interpretation: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    user_id: UUID
