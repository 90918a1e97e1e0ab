"""
Core modules for hand gesture classification.
"""

from .exceptions import GestureClassifierError, InvalidInputError, ConfigurationError
from .landmarks import Landmark, Hand, NUM_LANDMARKS
from .geometry import distance, distance_2d
from .finger_state import Finger, FingerState, FingerStateEvaluator, is_finger_extended, is_thumb_extended
from .gestures import Gesture, GestureRule, GestureTable, DEFAULT_GESTURE_RULES
from .classifier import GestureClassifier
from .edge_detector import GestureEdgeDetector
from .frame_processor import FrameProcessor, FrameResult, FrameStats, FrameStatus
# Note: HandLandmarkExtractor is not imported here to keep MediaPipe/OpenCV optional at package level
# Import it directly when needed: from .landmark_extractor import HandLandmarkExtractor

__all__ = [
    "GestureClassifierError",
    "InvalidInputError",
    "ConfigurationError",
    "Landmark",
    "Hand",
    "NUM_LANDMARKS",
    "distance",
    "distance_2d",
    "Finger",
    "FingerState",
    "FingerStateEvaluator",
    "is_finger_extended",
    "is_thumb_extended",
    "Gesture",
    "GestureRule",
    "GestureTable",
    "DEFAULT_GESTURE_RULES",
    "GestureClassifier",
    "GestureEdgeDetector",
    "FrameProcessor",
    "FrameResult",
    "FrameStats",
    "FrameStatus",
]
