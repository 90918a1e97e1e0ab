"""
Shared fixtures: synthetic hands with controllable finger states.
"""

import math

import pytest

from hand_gesture_classifier.core.landmarks import Hand, Landmark


WRIST_POINT = (0.5, 0.9)

# Direction (degrees, image space with y pointing down) of each finger ray from the wrist
FINGER_ANGLES = {
    "thumb": -150.0,
    "index": -105.0,
    "middle": -90.0,
    "ring": -75.0,
    "pinky": -60.0,
}

# First landmark index of each finger (thumb starts at CMC)
FINGER_BASE = {"thumb": 1, "index": 5, "middle": 9, "ring": 13, "pinky": 17}

# Distances from the wrist of mcp, pip, dip, tip
EXTENDED = (0.15, 0.20, 0.25, 0.30)
CURLED = (0.15, 0.20, 0.16, 0.12)

# Distances from the wrist of cmc, mcp, ip, tip
THUMB_EXTENDED = (0.04, 0.07, 0.10, 0.15)
THUMB_CURLED = (0.04, 0.07, 0.10, 0.09)


def _point(angle_deg, dist, z=0.0):
    rad = math.radians(angle_deg)
    return (WRIST_POINT[0] + dist * math.cos(rad), WRIST_POINT[1] + dist * math.sin(rad), z)


def build_points(thumb=False, index=False, middle=False, ring=False, pinky=False, distances=None):
    """
    Build 21 (x, y, z) points with each finger laid out on a straight ray.

    ``distances`` overrides the joint distances of individual fingers, e.g.
    {"index": (0.15, 0.20, 0.25, 0.30)}.
    """
    states = {"thumb": thumb, "index": index, "middle": middle, "ring": ring, "pinky": pinky}
    distances = distances or {}

    points = [None] * 21
    points[0] = (WRIST_POINT[0], WRIST_POINT[1], 0.0)
    for finger, extended in states.items():
        if finger in distances:
            joints = distances[finger]
        elif finger == "thumb":
            joints = THUMB_EXTENDED if extended else THUMB_CURLED
        else:
            joints = EXTENDED if extended else CURLED
        for offset, dist in enumerate(joints):
            points[FINGER_BASE[finger] + offset] = _point(FINGER_ANGLES[finger], dist)
    return points


@pytest.fixture
def points_factory():
    return build_points


@pytest.fixture
def hand_factory():
    def make(handedness="unknown", **kwargs):
        return Hand.from_landmarks(build_points(**kwargs), handedness=handedness)
    return make


@pytest.fixture
def index_up_hand(hand_factory):
    return hand_factory(index=True)


@pytest.fixture
def flat_hand():
    """All 21 landmarks at the same point."""
    return Hand(tuple(Landmark(0.5, 0.5, 0.0) for _ in range(21)))
