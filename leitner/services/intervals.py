"""
Review interval generation for Leitner boxes.
"""
from typing import List


# Leitner box review intervals in days
# Box 0 = 1 day, Box 1 = 3 days, Box 2 = 7 days, Box 3 = 14 days, Box 4 = 30 days, Box 5 = 60 days
BASE_INTERVALS = [1, 3, 7, 14, 30, 60]
MIN_BOXES = 2


def clamp_box_count(box_count: int) -> int:
    """Boxes below MIN_BOXES are not a Leitner system; clamp instead of rejecting."""
    return max(MIN_BOXES, box_count)


def generate_review_intervals(box_count: int) -> List[int]:
    """
    Generate one review interval (in days) per box.

    The first boxes take their interval from BASE_INTERVALS. Past the end of
    the table each box doubles the interval of the box before it.

    Example with box_count=7: [1, 3, 7, 14, 30, 60, 120]

    Args:
        box_count: Requested number of boxes (clamped to at least 2)

    Returns:
        Strictly increasing list of intervals, one per box
    """
    box_count = clamp_box_count(box_count)

    intervals: List[int] = []
    for index in range(box_count):
        if index < len(BASE_INTERVALS):
            intervals.append(BASE_INTERVALS[index])
        else:
            intervals.append(intervals[index - 1] * 2)

    return intervals
