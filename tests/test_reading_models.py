"""Tests for app.models.reading_models."""

import uuid

import pytest
from pydantic import ValidationError

from app.models.reading_models import ReadingCreate


class TestReadingCreate:
    def test_valid(self):
        user_id = uuid.uuid4()
        reading = ReadingCreate(question="Q?", cards=["The Star"], interpretation="Hope", user_id=str(user_id))
        assert reading.user_id == user_id

    @pytest.mark.parametrize("field", ["question", "interpretation"])
    def test_blank_text_rejected(self, field):
        data = {"question": "Q?", "cards": ["The Star"], "interpretation": "Hope", "user_id": str(uuid.uuid4())}
        data[field] = " \n"
        with pytest.raises(ValidationError, match=f"{field} must not be empty"):
            ReadingCreate(**data)

    def test_bad_user_id_rejected(self):
        with pytest.raises(ValidationError):
            ReadingCreate(question="Q?", cards=["The Star"], interpretation="Hope", user_id="nobody")
