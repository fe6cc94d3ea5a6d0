"""
Custom exceptions for the scheduler.
"""


class LeitnerException(Exception):
    """Base exception for all scheduler exceptions."""
    pass


class NotFoundError(LeitnerException):
    """Raised when a requested resource is not found."""
    pass


class ConflictError(LeitnerException):
    """Raised when there's a conflict (e.g., duplicate entry)."""
    pass


class CardNotFoundError(NotFoundError):
    """Raised in strict mode when a reviewed card is in no box."""

    def __init__(self, card_id):
        self.card_id = card_id
        super().__init__(f"Card with id {card_id} not found")


class DuplicateCardError(ConflictError):
    """Raised in strict mode when a card id is already in the system."""

    def __init__(self, card_id, box_index: int):
        self.card_id = card_id
        self.box_index = box_index
        super().__init__(f"Card with id {card_id} already exists in box {box_index}")
