# app/models/database_models/reading.py
import uuid

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Text, Uuid
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.data.database import Base


class Reading(Base):
    __tablename__ = "readings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    question = Column(Text, nullable=False)
    # Postgres text[]; plain JSON list on SQLite
    cards = Column(ARRAY(Text).with_variant(JSON(), "sqlite"), nullable=False)
    interpretation = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)

    user = relationship("User", back_populates="readings")
