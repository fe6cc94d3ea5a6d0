"""
Persisted box state models.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime
from typing import Optional, List
from datetime import datetime


class BoxRecord(SQLModel, table=True):
    """Box table - one row per box position of the stored system."""
    __tablename__ = "leitner_box"

    position: int = Field(primary_key=True)  # 0 = first box
    review_interval: int  # Days
    last_reviewed_date: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    # Relationships
    cards: List["CardRecord"] = Relationship(back_populates="box")


class CardRecord(SQLModel, table=True):
    """Card table - a card, its word payload and the box slot it occupies."""
    __tablename__ = "leitner_card"

    id: Optional[int] = Field(default=None, primary_key=True)
    card_id: str = Field(index=True)  # UUID string, not unique when duplicates are tolerated
    box_position: int = Field(foreign_key="leitner_box.position", index=True)
    slot: int  # Order within the box

    # Word payload
    word: str
    language_code: str
    meaning: str
    example_sentence: Optional[str] = None

    last_reviewed: datetime = Field(sa_type=DateTime(timezone=True))
    next_review_date: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    # Relationships
    box: Optional[BoxRecord] = Relationship(back_populates="cards")
