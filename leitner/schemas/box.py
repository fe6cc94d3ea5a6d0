"""
Box schema.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime, date, timedelta, timezone
from uuid import UUID

from leitner.core.clock import start_of_day
from leitner.schemas.card import Card


class Box(BaseModel):
    """An ordered bucket of cards sharing one review interval."""
    cards: List[Card] = Field(default_factory=list)
    review_interval: int = Field(..., gt=0, frozen=True, description="Days before the box is due again")
    last_reviewed_date: Optional[datetime] = Field(None, description="When the box was last reviewed; None means never")

    @field_validator("last_reviewed_date")
    @classmethod
    def ensure_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    def due_date(self, tz_name: Optional[str] = None) -> Optional[date]:
        """Calendar day the box becomes due, or None if it was never reviewed."""
        if self.last_reviewed_date is None:
            return None
        return start_of_day(self.last_reviewed_date, tz_name) + timedelta(days=self.review_interval)

    def is_due(self, today: date, tz_name: Optional[str] = None) -> bool:
        due = self.due_date(tz_name)
        return due is None or due <= today

    def index_of(self, card_id: UUID) -> Optional[int]:
        for index, card in enumerate(self.cards):
            if card.id == card_id:
                return index
        return None
