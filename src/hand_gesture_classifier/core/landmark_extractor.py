"""
Hand landmark extraction using MediaPipe.
"""

import time
from typing import Any, List, Optional

import cv2
import numpy as np
import mediapipe as mp

from .landmarks import Hand


def hands_from_results(results: Any, timestamp: Optional[float] = None) -> List[Hand]:
    """
    Convert a MediaPipe Hands result into Hand objects.

    Args:
        results: Object returned by ``mp.solutions.hands.Hands.process``
        timestamp: Frame timestamp in seconds

    Returns:
        List of hands in detection order; empty if no hand was detected

    Raises:
        InvalidInputError: If a detected hand does not carry 21 valid landmarks
    """
    if not getattr(results, "multi_hand_landmarks", None):
        return []

    timestamp = time.time() if timestamp is None else timestamp
    handedness_list = getattr(results, "multi_handedness", None) or []

    hands = []
    for idx, hand_landmarks in enumerate(results.multi_hand_landmarks):
        handedness = "unknown"
        confidence = 0.0

        if idx < len(handedness_list):
            classification = handedness_list[idx].classification[0]
            handedness = classification.label
            confidence = classification.score

        hands.append(Hand.from_landmarks(
            hand_landmarks,
            handedness=handedness,
            confidence=confidence,
            timestamp=timestamp
        ))

    return hands


class HandLandmarkExtractor:
    """Bridge from images to Hand objects using MediaPipe Hands."""

    def __init__(
        self,
        mode: str = "video",
        max_num_hands: int = 1,
        min_detection_confidence: float = 0.7,
        min_tracking_confidence: float = 0.5
    ):
        """
        Initialize the hand landmark extractor.

        Args:
            mode: MediaPipe mode ("image" or "video")
            max_num_hands: Maximum number of hands to detect
            min_detection_confidence: Minimum confidence for hand detection
            min_tracking_confidence: Minimum confidence for hand tracking
        """
        self.mode = mode
        self.max_num_hands = max_num_hands
        self.min_detection_confidence = min_detection_confidence
        self.min_tracking_confidence = min_tracking_confidence

        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=(mode == "image"),
            max_num_hands=max_num_hands,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence
        )

    @classmethod
    def from_config(cls, config) -> "HandLandmarkExtractor":
        """Build an extractor from the ``mediapipe`` config section."""
        return cls(
            mode=config.get("mode", "video"),
            max_num_hands=config.get("max_num_hands", 1),
            min_detection_confidence=config.get("min_detection_confidence", 0.7),
            min_tracking_confidence=config.get("min_tracking_confidence", 0.5)
        )

    def extract_hands(self, image: np.ndarray, timestamp: Optional[float] = None) -> List[Hand]:
        """
        Detect hands in an image.

        Args:
            image: Input image (BGR format)
            timestamp: Frame timestamp in seconds

        Returns:
            List of Hand objects; empty if no hand was detected
        """
        rgb_image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        results = self.hands.process(rgb_image)
        return hands_from_results(results, timestamp)

    def close(self) -> None:
        """Close the MediaPipe hands solution."""
        if hasattr(self, 'hands'):
            self.hands.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
