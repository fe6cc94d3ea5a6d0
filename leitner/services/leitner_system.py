"""
Leitner system service.

Owns an ordered sequence of boxes and moves cards between them on review
outcomes. Box 0 holds new and failed cards; the last box holds the most
mastered ones.

A LeitnerSystem has no internal locking. Callers sharing one instance across
threads must serialize access themselves.
"""
import logging
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from leitner.core.clock import Clock
from leitner.core.config import settings
from leitner.core.exceptions import CardNotFoundError, DuplicateCardError
from leitner.schemas.box import Box
from leitner.schemas.card import Card
from leitner.services.intervals import clamp_box_count, generate_review_intervals

logger = logging.getLogger(__name__)


class LeitnerSystem:
    """
    Leitner spaced-repetition scheduler.

    Args:
        box_count: Number of boxes (values below 2 are clamped to 2)
        clock: Time source for review stamps and due checks
        strict: Raise on duplicate adds and unknown card ids instead of
            tolerating them. Defaults to settings.strict.
    """

    def __init__(
        self,
        box_count: Optional[int] = None,
        clock: Optional[Clock] = None,
        strict: Optional[bool] = None
    ):
        if box_count is None:
            box_count = settings.default_box_count
        self.clock = clock or Clock()
        self.strict = settings.strict if strict is None else strict
        # Boxes count as reviewed at construction, so box 0 is first due tomorrow
        created = self.clock.now()
        self._boxes: List[Box] = [
            Box(review_interval=interval, last_reviewed_date=created)
            for interval in generate_review_intervals(clamp_box_count(box_count))
        ]

    @property
    def boxes(self) -> Tuple[Box, ...]:
        return tuple(self._boxes)

    @property
    def box_count(self) -> int:
        return len(self._boxes)

    @property
    def intervals(self) -> List[int]:
        return [box.review_interval for box in self._boxes]

    def find_card(self, card_id: UUID) -> Optional[Tuple[int, Card]]:
        """Return (box_index, card) for the first box holding card_id, or None."""
        for box_index, box in enumerate(self._boxes):
            card_index = box.index_of(card_id)
            if card_index is not None:
                return box_index, box.cards[card_index]
        return None

    def box_index_of(self, card_id: UUID) -> Optional[int]:
        found = self.find_card(card_id)
        return found[0] if found else None

    def add_card(self, card: Card) -> Card:
        """
        Place a card in the first box.

        Duplicate ids are tolerated unless the system is strict, in which case
        DuplicateCardError is raised and no box changes.
        """
        existing_index = self.box_index_of(card.id)
        if existing_index is not None:
            if self.strict:
                raise DuplicateCardError(card.id, existing_index)
            logger.warning(f"Card {card.id} added again while already in box {existing_index}")

        self._boxes[0].cards.append(card)
        logger.debug(f"Added card {card.id} to box 0")
        return card

    def update_card(self, card: Card, correct: bool) -> Optional[Card]:
        """
        Record a review outcome and move the card.

        A correct answer advances the card one box (staying put in the last
        box); an incorrect answer sends it back to box 0. The card is stamped
        as reviewed now and scheduled by the target box's interval. The box it
        left and the box it entered are both marked as reviewed now.

        Args:
            card: Card to move, matched by id
            correct: Whether the card was answered correctly

        Returns:
            The updated card, or None if no box holds the id (non-strict)

        Raises:
            CardNotFoundError: If the id is in no box and the system is strict
        """
        for box_index, box in enumerate(self._boxes):
            card_index = box.index_of(card.id)
            if card_index is None:
                continue

            current = box.cards.pop(card_index)

            if correct:
                target_index = min(box_index + 1, len(self._boxes) - 1)
            else:
                target_index = 0

            now = self.clock.now()
            target = self._boxes[target_index]
            updated = current.reviewed(now, target.review_interval)
            target.cards.append(updated)
            # The moved card waits out the target box's full interval
            box.last_reviewed_date = now
            target.last_reviewed_date = now

            logger.info(
                f"Card {card.id} answered {'correctly' if correct else 'incorrectly'}: "
                f"box {box_index} -> box {target_index}"
            )
            return updated

        if self.strict:
            raise CardNotFoundError(card.id)
        logger.warning(f"Card {card.id} is not in any box, ignoring review")
        return None

    def due_for_review(self, limit: Optional[int] = None) -> List[Card]:
        """
        Get cards due for review.

        Due-ness is decided per box: a box whose due day is today or earlier
        contributes all of its cards. Results keep box order, then insertion
        order within a box.

        Args:
            limit: Maximum cards to return (defaults to settings.due_limit)

        Returns:
            Up to `limit` due cards
        """
        if limit is None:
            limit = settings.due_limit
        if limit <= 0:
            return []

        today = self.clock.today()
        due: List[Card] = []
        for box in self._boxes:
            if not box.is_due(today, self.clock.tz_name):
                continue
            due.extend(box.cards)
            if len(due) >= limit:
                break

        return due[:limit]

    def load_boxes(self, boxes: Sequence[Box]) -> None:
        """
        Replace every box at once, e.g. when restoring persisted state.

        The boxes are taken as given; matching the expected count and
        intervals is the caller's job.
        """
        self._boxes = list(boxes)
        logger.info(
            f"Loaded {len(self._boxes)} box(es) holding "
            f"{sum(len(box.cards) for box in self._boxes)} card(s)"
        )
