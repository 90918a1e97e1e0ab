"""
Distance helpers for hand landmarks.
"""

import math

from .landmarks import Landmark


def distance(a: Landmark, b: Landmark) -> float:
    """
    Euclidean distance between two landmarks in 3D.

    A landmark without depth carries z == 0, so a pair of 2D points
    reduces to the planar distance. Distinct points always yield a
    positive distance.
    """
    return math.hypot(b.x - a.x, b.y - a.y, b.z - a.z)


def distance_2d(a: Landmark, b: Landmark) -> float:
    """Euclidean distance between two landmarks in the image plane, ignoring z."""
    return math.hypot(b.x - a.x, b.y - a.y)
