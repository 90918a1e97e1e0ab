"""
Hand Gesture Classifier

Rule-based hand gesture classification from MediaPipe hand landmarks:
per-finger extension flags, an ordered gesture priority table, and
per-frame processing with rising-edge detection.
"""

__version__ = "1.0.0"
__author__ = "Farshad Nozad Heravi"
__email__ = "f.n.heravi@gmail.com"

from .core import (
    Landmark,
    Hand,
    Finger,
    FingerState,
    Gesture,
    GestureRule,
    GestureTable,
    GestureClassifier,
    GestureEdgeDetector,
    FrameProcessor,
    FrameResult,
    FrameStatus,
    GestureClassifierError,
    InvalidInputError,
    ConfigurationError,
)
# Note: MediaPipe-dependent imports kept out of the package level
# Import them directly when needed:
# from .core.landmark_extractor import HandLandmarkExtractor
from .utils import ConfigManager, ClassifierConfig, Logger

__all__ = [
    "Landmark",
    "Hand",
    "Finger",
    "FingerState",
    "Gesture",
    "GestureRule",
    "GestureTable",
    "GestureClassifier",
    "GestureEdgeDetector",
    "FrameProcessor",
    "FrameResult",
    "FrameStatus",
    "GestureClassifierError",
    "InvalidInputError",
    "ConfigurationError",
    "ConfigManager",
    "ClassifierConfig",
    "Logger",
]
