"""
Box store service - snapshots a LeitnerSystem to the database and restores it.

The store only talks to the system through its public `boxes` and
`load_boxes`, so any other backend can do the same.
"""
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional
from uuid import UUID

from sqlmodel import Session, select

from leitner.core.clock import Clock
from leitner.models.box_state import BoxRecord, CardRecord
from leitner.schemas.box import Box
from leitner.schemas.card import Card, Word
from leitner.services.leitner_system import LeitnerSystem

logger = logging.getLogger(__name__)


def _to_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Store timestamps as aware UTC; naive values are taken to be UTC already."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _card_to_record(card: Card, box_position: int, slot: int) -> CardRecord:
    return CardRecord(
        card_id=str(card.id),
        box_position=box_position,
        slot=slot,
        word=card.word.word,
        language_code=card.word.language_code,
        meaning=card.word.meaning,
        example_sentence=card.word.example_sentence,
        last_reviewed=_to_utc(card.last_reviewed),
        next_review_date=_to_utc(card.next_review_date),
    )


def _record_to_card(record: CardRecord) -> Card:
    return Card(
        id=UUID(record.card_id),
        word=Word(
            word=record.word,
            language_code=record.language_code,
            meaning=record.meaning,
            example_sentence=record.example_sentence,
        ),
        last_reviewed=record.last_reviewed,
        next_review_date=record.next_review_date,
    )


def save_system(session: Session, system: LeitnerSystem) -> int:
    """
    Replace the stored box state with the system's current boxes.

    Args:
        session: Database session
        system: System to snapshot

    Returns:
        Number of cards written
    """
    # Cards first, they reference boxes via foreign key
    for card_record in session.exec(select(CardRecord)).all():
        session.delete(card_record)
    session.flush()
    for box_record in session.exec(select(BoxRecord)).all():
        session.delete(box_record)
    session.flush()

    card_count = 0
    for position, box in enumerate(system.boxes):
        session.add(BoxRecord(
            position=position,
            review_interval=box.review_interval,
            last_reviewed_date=_to_utc(box.last_reviewed_date),
        ))
        for slot, card in enumerate(box.cards):
            session.add(_card_to_record(card, position, slot))
            card_count += 1

    try:
        session.commit()
    except Exception as e:
        session.rollback()
        logger.error(f"Error saving box state: {str(e)}")
        raise

    logger.info(f"Saved {len(system.boxes)} box(es) with {card_count} card(s)")
    return card_count


def load_system(
    session: Session,
    box_count: Optional[int] = None,
    clock: Optional[Clock] = None,
    strict: Optional[bool] = None
) -> LeitnerSystem:
    """
    Build a LeitnerSystem from the stored box state.

    When nothing is stored yet a fresh system with `box_count` boxes is
    returned. Otherwise the stored boxes replace the fresh ones wholesale,
    so the stored topology wins over `box_count`.

    Args:
        session: Database session
        box_count: Box count for a fresh system
        clock: Time source handed to the system
        strict: Strict mode handed to the system

    Returns:
        The restored (or new) system
    """
    system = LeitnerSystem(box_count=box_count, clock=clock, strict=strict)

    box_records = session.exec(
        select(BoxRecord).order_by(BoxRecord.position)  # type: ignore
    ).all()

    if not box_records:
        logger.info("No stored box state, starting a fresh system")
        return system

    card_records = session.exec(
        select(CardRecord).order_by(CardRecord.box_position, CardRecord.slot)  # type: ignore
    ).all()

    cards_by_box: Dict[int, List[Card]] = {}
    for record in card_records:
        cards_by_box.setdefault(record.box_position, []).append(_record_to_card(record))

    system.load_boxes([
        Box(
            cards=cards_by_box.get(record.position, []),
            review_interval=record.review_interval,
            last_reviewed_date=record.last_reviewed_date,
        )
        for record in box_records
    ])
    return system
