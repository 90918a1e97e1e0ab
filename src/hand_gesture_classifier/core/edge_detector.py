"""
Rising-edge detection over per-frame gesture labels.
"""

from typing import Any, Optional

from .gestures import GestureLabel, to_label


class GestureEdgeDetector:
    """
    Emits an event when the label switches to a target gesture.

    Only the previous frame's label is retained. ``None`` stands for a frame
    with no hand and counts as "not the target", so lowering and raising a
    pointing finger, or removing and showing the hand, both produce one edge.
    """

    def __init__(self, target: Any, name: Optional[str] = None):
        """
        Initialize the edge detector.

        Args:
            target: Gesture to watch for
            name: Identifier reported in frame events; defaults to the target label
        """
        self.target: GestureLabel = to_label(target)
        self.name = name or str(self.target)
        self.previous: Optional[GestureLabel] = None
        self.count = 0

    def update(self, label: Optional[GestureLabel]) -> bool:
        """
        Feed the label of the next frame.

        Args:
            label: Gesture of the current frame, or None when no hand was seen

        Returns:
            True if this frame is a rising edge into the target gesture
        """
        rising = label == self.target and self.previous != self.target
        self.previous = label
        if rising:
            self.count += 1
        return rising

    @property
    def active(self) -> bool:
        return self.previous == self.target

    def reset(self) -> None:
        self.previous = None
        self.count = 0

    def __repr__(self) -> str:
        return f"GestureEdgeDetector(target={self.target}, count={self.count})"
