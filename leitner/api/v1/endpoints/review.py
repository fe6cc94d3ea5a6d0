"""
Review endpoints - add cards, record review outcomes, build review sessions.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session
from typing import Optional
from uuid import UUID
import logging

from leitner.core.clock import Clock, get_clock
from leitner.core.config import settings
from leitner.core.database import get_session
from leitner.core.exceptions import CardNotFoundError
from leitner.schemas.card import Card
from leitner.schemas.review import (
    AddCardRequest,
    ReviewRequest,
    CardPlacementResponse,
    BoxResponse,
    BoxesResponse,
    DueCardsResponse
)
from leitner.services.box_store import load_system, save_system

logger = logging.getLogger(__name__)

router = APIRouter(tags=["review"])


@router.get("/boxes", response_model=BoxesResponse)
async def get_boxes(
    session: Session = Depends(get_session),
    clock: Clock = Depends(get_clock)
):
    """
    Get every box with its interval, last review date and cards.
    """
    system = load_system(session, clock=clock, strict=True)
    return BoxesResponse(
        boxes=[
            BoxResponse(
                index=index,
                review_interval=box.review_interval,
                last_reviewed_date=box.last_reviewed_date,
                cards=box.cards
            )
            for index, box in enumerate(system.boxes)
        ]
    )


@router.post("/cards", response_model=CardPlacementResponse, status_code=status.HTTP_201_CREATED)
async def add_card(
    request: AddCardRequest,
    session: Session = Depends(get_session),
    clock: Clock = Depends(get_clock)
):
    """
    Add a card to the first box.

    Args:
        request: Word payload and optional card id

    Returns:
        The stored card and its box index (always 0)
    """
    system = load_system(session, clock=clock, strict=True)

    card_fields = {"word": request.word, "last_reviewed": clock.now()}
    if request.id is not None:
        card_fields["id"] = request.id

    card = system.add_card(Card(**card_fields))
    save_system(session, system)

    logger.info(f"Added card {card.id} ({card.word.word})")
    return CardPlacementResponse(card=card, box_index=0)


@router.post("/cards/{card_id}/review", response_model=CardPlacementResponse)
async def review_card(
    card_id: UUID,
    request: ReviewRequest,
    session: Session = Depends(get_session),
    clock: Clock = Depends(get_clock)
):
    """
    Record a review outcome and move the card.

    Args:
        card_id: Card to review
        request: Review outcome

    Returns:
        The updated card and the box it moved to
    """
    system = load_system(session, clock=clock, strict=True)

    found = system.find_card(card_id)
    if found is None:
        raise CardNotFoundError(card_id)

    updated = system.update_card(found[1], correct=request.correct)
    save_system(session, system)

    return CardPlacementResponse(card=updated, box_index=system.box_index_of(card_id))


@router.get("/review/due", response_model=DueCardsResponse)
async def get_due_cards(
    limit: Optional[int] = Query(None, ge=0, description="Maximum cards to return"),
    session: Session = Depends(get_session),
    clock: Clock = Depends(get_clock)
):
    """
    Get cards due for the next review session.

    Args:
        limit: Maximum cards to return (defaults to the configured due limit)

    Returns:
        Due cards in box order
    """
    system = load_system(session, clock=clock, strict=True)
    cards = system.due_for_review(limit if limit is not None else settings.due_limit)
    return DueCardsResponse(cards=cards, count=len(cards))
