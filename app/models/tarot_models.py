from pydantic import BaseModel
from typing import Optional

class TarotCard(BaseModel):
    id: int
    name: str
    number: int
    arcana: str  # "major" or "minor"
    suit: Optional[str] = None
