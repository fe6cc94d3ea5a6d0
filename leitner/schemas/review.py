"""
Review API schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from uuid import UUID

from leitner.schemas.card import Card, Word


class AddCardRequest(BaseModel):
    """Request to add a card to the first box."""
    id: Optional[UUID] = Field(None, description="Card id; generated when omitted")
    word: Word = Field(..., description="Learning content of the card")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "2A8DDD36-50D3-458A-A2BF-B0A1E36C1759",
                "word": {
                    "word": "huis",
                    "language_code": "nl",
                    "meaning": "house"
                }
            }
        }


class ReviewRequest(BaseModel):
    """Review outcome for a single card."""
    correct: bool = Field(..., description="Whether the card was answered correctly")


class CardPlacementResponse(BaseModel):
    """A card and the box it now sits in."""
    card: Card
    box_index: int = Field(..., description="Index of the box holding the card (0 = first box)")


class BoxResponse(BaseModel):
    """A single box of the system."""
    index: int
    review_interval: int = Field(..., description="Review interval in days")
    last_reviewed_date: Optional[datetime] = None
    cards: List[Card]


class BoxesResponse(BaseModel):
    """All boxes of the system in order."""
    boxes: List[BoxResponse]


class DueCardsResponse(BaseModel):
    """Cards due for the next review session."""
    cards: List[Card]
    count: int
