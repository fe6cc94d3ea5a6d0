"""
Leitner spaced-repetition scheduler.
"""
from leitner.schemas.card import Word, Card
from leitner.schemas.box import Box
from leitner.services.intervals import generate_review_intervals
from leitner.services.leitner_system import LeitnerSystem

__all__ = [
    'Word',
    'Card',
    'Box',
    'generate_review_intervals',
    'LeitnerSystem',
]
