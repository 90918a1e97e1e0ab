"""
Per-frame gesture processing on top of the stateless classifier.
"""

import time
from collections import Counter
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .classifier import GestureClassifier
from .edge_detector import GestureEdgeDetector
from .exceptions import InvalidInputError
from .finger_state import FingerState
from .gestures import GestureLabel
from .landmarks import Hand
from ..utils.logger import Logger


class FrameStatus(str, Enum):
    CLASSIFIED = "classified"
    NO_HAND = "no_hand"
    INVALID = "invalid"


@dataclass
class FrameResult:
    """Outcome of processing one frame."""
    frame_index: int
    status: FrameStatus
    gesture: Optional[GestureLabel] = None
    finger_states: Optional[FingerState] = None
    hand: Optional[Hand] = None
    events: List[str] = field(default_factory=list)
    error: Optional[str] = None
    timestamp: float = 0.0

    @property
    def has_hand(self) -> bool:
        return self.status is FrameStatus.CLASSIFIED


@dataclass
class FrameStats:
    """Running counters over processed frames."""
    total_frames: int = 0
    classified_frames: int = 0
    no_hand_frames: int = 0
    invalid_frames: int = 0
    gesture_counts: Counter = field(default_factory=Counter)

    def record(self, result: FrameResult) -> None:
        self.total_frames += 1
        if result.status is FrameStatus.CLASSIFIED:
            self.classified_frames += 1
            self.gesture_counts[str(result.gesture)] += 1
        elif result.status is FrameStatus.NO_HAND:
            self.no_hand_frames += 1
        else:
            self.invalid_frames += 1

    def as_dict(self) -> Dict[str, Any]:
        return {
            "total_frames": self.total_frames,
            "classified_frames": self.classified_frames,
            "no_hand_frames": self.no_hand_frames,
            "invalid_frames": self.invalid_frames,
            "gesture_counts": dict(self.gesture_counts),
        }


class FrameProcessor:
    """
    Runs the classifier once per delivered frame.

    The processor picks the hand of interest, turns an empty detection into an
    explicit NO_HAND result, and contains invalid input at the frame boundary:
    a malformed hand is logged and skipped without touching edge-detector state.
    """

    def __init__(
        self,
        classifier: Optional[GestureClassifier] = None,
        edge_detectors: Iterable[GestureEdgeDetector] = (),
        preferred_handedness: Optional[str] = None,
        logger: Optional[Logger] = None
    ):
        """
        Initialize the frame processor.

        Args:
            classifier: Gesture classifier; a default one is created when omitted
            edge_detectors: Rising-edge detectors updated on every valid frame
            preferred_handedness: Only classify hands with this handedness ("Left"/"Right");
                the first detected hand is used when None
            logger: Logger instance
        """
        self.classifier = classifier or GestureClassifier()
        self.edge_detectors = list(edge_detectors)
        self.preferred_handedness = preferred_handedness
        self.logger = logger or Logger("frame_processor", file_output=False)

        self.stats = FrameStats()
        self.frame_index = 0

    @classmethod
    def from_config(
        cls,
        classifier_config,
        processing: Optional[Dict[str, Any]] = None,
        logger: Optional[Logger] = None
    ) -> "FrameProcessor":
        """
        Build a processor from a ClassifierConfig and the ``processing`` config section.
        """
        processing = processing or {}
        edge_targets = processing.get("edge_targets") or []
        return cls(
            classifier=GestureClassifier.from_config(classifier_config),
            edge_detectors=[GestureEdgeDetector(target) for target in edge_targets],
            preferred_handedness=processing.get("preferred_handedness"),
            logger=logger
        )

    def process(self, hands: Optional[Sequence[Any]], timestamp: Optional[float] = None) -> FrameResult:
        """
        Process the hands detected in one frame.

        Args:
            hands: Hands reported by the landmark detector for this frame. Each
                entry is a Hand or a raw 21-point sequence. None or empty means
                no hand was detected.
            timestamp: Frame timestamp in seconds; defaults to the current time

        Returns:
            FrameResult for this frame
        """
        frame_index = self.frame_index
        self.frame_index += 1
        timestamp = time.time() if timestamp is None else timestamp

        try:
            result = self._process(hands, frame_index, timestamp)
        except InvalidInputError as e:
            self.logger.warning(f"Skipping frame {frame_index}: {e}")
            result = FrameResult(
                frame_index=frame_index,
                status=FrameStatus.INVALID,
                error=str(e),
                timestamp=timestamp
            )

        self.stats.record(result)
        return result

    def _process(self, hands: Optional[Sequence[Any]], frame_index: int, timestamp: float) -> FrameResult:
        raw = self._select_hand(hands)

        if raw is None:
            result = FrameResult(frame_index=frame_index, status=FrameStatus.NO_HAND, timestamp=timestamp)
            result.events = self._update_edges(None)
            return result

        hand = Hand.from_landmarks(raw, timestamp=timestamp)
        if hand.timestamp != timestamp:
            # Hands from the detector carry their own capture time; the frame's wins
            hand = replace(hand, timestamp=timestamp)
        finger_states = self.classifier.finger_states(hand)
        gesture = self.classifier.classify_state(finger_states)
        self.logger.debug(f"Frame {frame_index}: {gesture} ({finger_states})")

        result = FrameResult(
            frame_index=frame_index,
            status=FrameStatus.CLASSIFIED,
            gesture=gesture,
            finger_states=finger_states,
            hand=hand,
            timestamp=timestamp
        )
        result.events = self._update_edges(gesture)
        return result

    def _select_hand(self, hands: Optional[Sequence[Any]]) -> Optional[Any]:
        if hands is None or len(hands) == 0:
            return None
        if self.preferred_handedness is None:
            return hands[0]

        wanted = self.preferred_handedness.lower()
        for hand in hands:
            if getattr(hand, "handedness", "").lower() == wanted:
                return hand
        return None

    def _update_edges(self, gesture: Optional[GestureLabel]) -> List[str]:
        events = []
        for detector in self.edge_detectors:
            if detector.update(gesture):
                events.append(detector.name)
                self.logger.info(f"{detector.name} detected (count={detector.count})")
        return events

    def get_frame_stats(self) -> FrameStats:
        return self.stats

    def log_stats(self) -> None:
        self.logger.log_frame_stats(self.stats.as_dict())

    def reset(self) -> None:
        """Reset statistics and edge detectors."""
        self.stats = FrameStats()
        self.frame_index = 0
        for detector in self.edge_detectors:
            detector.reset()
