"""
Models package - imports all table models so SQLModel registers them.
"""
from leitner.models.box_state import BoxRecord, CardRecord

__all__ = [
    'BoxRecord',
    'CardRecord',
]
