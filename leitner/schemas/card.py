"""
Card and word schemas.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_aware(v: Optional[datetime]) -> Optional[datetime]:
    # Naive timestamps are UTC
    if v is not None and v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v


class Word(BaseModel):
    """Learning content carried by a card. The scheduler never reads it."""
    word: str = Field(..., description="Word or phrase being learned")
    language_code: str = Field(..., description="Language code of the word (e.g., 'en')")
    meaning: str = Field(..., description="Meaning or translation")
    example_sentence: Optional[str] = Field(None, description="Optional example sentence")

    class Config:
        json_schema_extra = {
            "example": {
                "word": "huis",
                "language_code": "nl",
                "meaning": "house",
                "example_sentence": "Het huis is groot."
            }
        }


class Card(BaseModel):
    """
    A single flashcard and its review bookkeeping.

    The id is frozen once the card exists. Reviews produce a new Card value
    through reviewed() rather than mutating the caller's instance.
    """
    id: UUID = Field(default_factory=uuid4, frozen=True)
    word: Word
    last_reviewed: datetime = Field(default_factory=_utcnow)
    next_review_date: Optional[datetime] = None

    @field_validator("last_reviewed", "next_review_date")
    @classmethod
    def ensure_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _as_aware(v)

    @model_validator(mode="after")
    def default_next_review_date(self) -> "Card":
        # A new card enters the first box, which has a one day interval
        if self.next_review_date is None:
            self.next_review_date = self.last_reviewed + timedelta(days=1)
        return self

    def reviewed(self, at: datetime, interval_days: int) -> "Card":
        """Return a copy stamped as reviewed at `at` and scheduled `interval_days` later."""
        at = _as_aware(at)
        last_reviewed = max(self.last_reviewed, at)
        return self.model_copy(update={
            "last_reviewed": last_reviewed,
            "next_review_date": at + timedelta(days=interval_days),
        })
