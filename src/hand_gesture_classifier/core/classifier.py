"""
Rule-based hand gesture classifier.
"""

from typing import Any, Optional

from .finger_state import (
    DEFAULT_MCP_MARGIN, DEFAULT_PIP_MARGIN, DEFAULT_THUMB_MARGIN,
    FingerState, FingerStateEvaluator,
)
from .gestures import GestureLabel, GestureTable
from .landmarks import Hand


class GestureClassifier:
    """
    Classifies one hand per call into a gesture label.

    The classifier is stateless: the label depends only on the landmarks of
    the hand passed in, so the same hand always yields the same gesture.
    """

    def __init__(
        self,
        pip_margin: float = DEFAULT_PIP_MARGIN,
        mcp_margin: float = DEFAULT_MCP_MARGIN,
        thumb_margin: float = DEFAULT_THUMB_MARGIN,
        thumb_use_depth: bool = True,
        gesture_table: Optional[GestureTable] = None
    ):
        """
        Initialize the gesture classifier.

        Args:
            pip_margin: Tip-over-PIP distance ratio for an extended finger
            mcp_margin: Tip-over-MCP distance ratio for an extended finger
            thumb_margin: Tip-over-IP distance ratio for an extended thumb
            thumb_use_depth: Measure the thumb in 3D (False for x/y only)
            gesture_table: Ordered gesture rules; defaults to the built-in table
        """
        self.evaluator = FingerStateEvaluator(
            pip_margin=pip_margin,
            mcp_margin=mcp_margin,
            thumb_margin=thumb_margin,
            thumb_use_depth=thumb_use_depth
        )
        self.gesture_table = gesture_table if gesture_table is not None else GestureTable()

    @classmethod
    def from_config(cls, config) -> "GestureClassifier":
        """Build a classifier from a ClassifierConfig."""
        return cls(
            pip_margin=config.pip_margin,
            mcp_margin=config.mcp_margin,
            thumb_margin=config.thumb_margin,
            thumb_use_depth=config.thumb_use_depth,
            gesture_table=GestureTable.from_config(config.gesture_priority, config.custom_gestures)
        )

    def finger_states(self, hand: Any) -> FingerState:
        """Extended/curled flags for a Hand or raw 21-point sequence."""
        return self.evaluator.evaluate(Hand.from_landmarks(hand))

    def classify_state(self, state: FingerState) -> GestureLabel:
        return self.gesture_table.match(state)

    def classify(self, hand: Any) -> GestureLabel:
        """
        Classify a hand.

        Args:
            hand: Hand, or raw landmark points accepted by Hand.from_landmarks

        Returns:
            Gesture label of the first matching rule, or Gesture.UNKNOWN

        Raises:
            InvalidInputError: If the input is not 21 well-formed landmarks
        """
        return self.classify_state(self.finger_states(hand))
