# app/models/diary_models.py
import uuid
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


class DiaryEntry(BaseModel):
    """
    One diary record. Serialized with the camelCase keys used in local storage.
    """
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    date: datetime = Field(default_factory=_now)
    card_ids: List[int] = Field(default_factory=list, alias="cardIds")
    question: str = ""
    interpretation: str = ""

    def to_storage(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class DiaryCollection(BaseModel):
    entries: List[DiaryEntry] = Field(default_factory=list)
