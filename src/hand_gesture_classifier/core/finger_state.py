"""
Per-finger extension state derived from hand landmarks.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, Tuple

from .exceptions import ConfigurationError
from .geometry import distance, distance_2d
from .landmarks import (
    Hand, WRIST, THUMB_IP, THUMB_TIP,
    INDEX_MCP, INDEX_PIP, INDEX_TIP,
    MIDDLE_MCP, MIDDLE_PIP, MIDDLE_TIP,
    RING_MCP, RING_PIP, RING_TIP,
    PINKY_MCP, PINKY_PIP, PINKY_TIP,
)


DEFAULT_PIP_MARGIN = 1.10
DEFAULT_MCP_MARGIN = 1.30
DEFAULT_THUMB_MARGIN = 1.05


class Finger(str, Enum):
    THUMB = "thumb"
    INDEX = "index"
    MIDDLE = "middle"
    RING = "ring"
    PINKY = "pinky"


# (tip, pip, mcp) for the four non-thumb fingers
FINGER_JOINTS: Dict[Finger, Tuple[int, int, int]] = {
    Finger.INDEX: (INDEX_TIP, INDEX_PIP, INDEX_MCP),
    Finger.MIDDLE: (MIDDLE_TIP, MIDDLE_PIP, MIDDLE_MCP),
    Finger.RING: (RING_TIP, RING_PIP, RING_MCP),
    Finger.PINKY: (PINKY_TIP, PINKY_PIP, PINKY_MCP),
}


@dataclass(frozen=True)
class FingerState:
    """Extended (True) or curled (False) flag for each finger of one hand."""
    thumb: bool
    index: bool
    middle: bool
    ring: bool
    pinky: bool

    def __getitem__(self, finger: Finger) -> bool:
        return getattr(self, Finger(finger).value)

    @property
    def extended_count(self) -> int:
        return sum(self.as_dict().values())

    def as_dict(self) -> Dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __str__(self) -> str:
        return " ".join(f"{name}={'up' if up else 'down'}" for name, up in self.as_dict().items())


def check_margin(name: str, value: float) -> float:
    """
    Validate an extension margin.

    Raises:
        ConfigurationError: If the margin is not a number greater than 1.0
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if not value > 1.0:
        raise ConfigurationError(f"{name} must be greater than 1.0, got {value}")
    return value


def is_finger_extended(
    hand: Hand,
    tip: int,
    pip: int,
    mcp: int,
    pip_margin: float = DEFAULT_PIP_MARGIN,
    mcp_margin: float = DEFAULT_MCP_MARGIN
) -> bool:
    """
    Check whether a non-thumb finger is extended.

    An extended finger's tip lies farther from the wrist than both its PIP and
    MCP joints, by at least the given margins. The margins absorb landmark
    jitter and reject partially curled fingers.

    Args:
        hand: Hand to inspect
        tip: Landmark index of the fingertip
        pip: Landmark index of the PIP joint
        mcp: Landmark index of the MCP joint
        pip_margin: Required ratio of tip distance over PIP distance
        mcp_margin: Required ratio of tip distance over MCP distance

    Returns:
        True if the finger is extended
    """
    wrist = hand[WRIST]
    tip_to_wrist = distance(hand[tip], wrist)
    pip_to_wrist = distance(hand[pip], wrist)
    mcp_to_wrist = distance(hand[mcp], wrist)

    return tip_to_wrist > pip_to_wrist * pip_margin and tip_to_wrist > mcp_to_wrist * mcp_margin


def is_thumb_extended(
    hand: Hand,
    thumb_margin: float = DEFAULT_THUMB_MARGIN,
    use_depth: bool = True
) -> bool:
    """
    Check whether the thumb is extended.

    The thumb has one joint fewer than the other fingers and moves across the
    palm, so it only compares the tip against the IP joint with a looser margin.

    Args:
        hand: Hand to inspect
        thumb_margin: Required ratio of tip distance over IP distance
        use_depth: Measure in 3D; when False only x/y are used

    Returns:
        True if the thumb is extended
    """
    measure = distance if use_depth else distance_2d
    wrist = hand[WRIST]
    return measure(hand[THUMB_TIP], wrist) > measure(hand[THUMB_IP], wrist) * thumb_margin


class FingerStateEvaluator:
    """Computes a FingerState for a hand using configurable margins."""

    def __init__(
        self,
        pip_margin: float = DEFAULT_PIP_MARGIN,
        mcp_margin: float = DEFAULT_MCP_MARGIN,
        thumb_margin: float = DEFAULT_THUMB_MARGIN,
        thumb_use_depth: bool = True
    ):
        self.pip_margin = check_margin("pip_margin", pip_margin)
        self.mcp_margin = check_margin("mcp_margin", mcp_margin)
        self.thumb_margin = check_margin("thumb_margin", thumb_margin)
        if not isinstance(thumb_use_depth, bool):
            raise ConfigurationError(f"thumb_use_depth must be a boolean, got {thumb_use_depth!r}")
        self.thumb_use_depth = thumb_use_depth

    def is_extended(self, hand: Hand, finger: Finger) -> bool:
        finger = Finger(finger)
        if finger is Finger.THUMB:
            return is_thumb_extended(hand, self.thumb_margin, self.thumb_use_depth)
        tip, pip, mcp = FINGER_JOINTS[finger]
        return is_finger_extended(hand, tip, pip, mcp, self.pip_margin, self.mcp_margin)

    def evaluate(self, hand: Hand) -> FingerState:
        return FingerState(**{f.value: self.is_extended(hand, f) for f in Finger})
