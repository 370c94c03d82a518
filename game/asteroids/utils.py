"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
from typing import Tuple


def overlaps(a, b) -> bool:
    """Strict AABB test between two centered squares (touching edges do not count)"""
    # y grows downwards, so "above" means a smaller bottom than b's top
    a_right_of_b = a.left >= b.right
    a_left_of_b = a.right <= b.left
    a_above_b = a.bottom <= b.top
    a_below_b = a.top >= b.bottom
    return not (a_right_of_b or a_left_of_b or a_above_b or a_below_b)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points"""
    return math.hypot(x1 - x2, y1 - y2)


def unit_vector(degrees: float) -> Tuple[float, float]:
    """Unit direction vector for an angle given in degrees"""
    rad = math.radians(degrees)
    return math.cos(rad), math.sin(rad)


def format_time(ms: float) -> str:
    """Format a millisecond count as MM:SS:mmm"""
    ms = int(ms)
    millis = ms % 1000
    sec = (ms // 1000) % 60
    minutes = ms // 60000
    return f"{minutes:02d}:{sec:02d}:{millis:03d}"


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x

