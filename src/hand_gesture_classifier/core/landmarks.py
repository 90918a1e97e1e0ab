"""
Hand landmark data model.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Sequence, Tuple

import numpy as np

from .exceptions import InvalidInputError


NUM_LANDMARKS = 21

# MediaPipe hand landmark indices
WRIST = 0
THUMB_CMC, THUMB_MCP, THUMB_IP, THUMB_TIP = 1, 2, 3, 4
INDEX_MCP, INDEX_PIP, INDEX_DIP, INDEX_TIP = 5, 6, 7, 8
MIDDLE_MCP, MIDDLE_PIP, MIDDLE_DIP, MIDDLE_TIP = 9, 10, 11, 12
RING_MCP, RING_PIP, RING_DIP, RING_TIP = 13, 14, 15, 16
PINKY_MCP, PINKY_PIP, PINKY_DIP, PINKY_TIP = 17, 18, 19, 20


def _coerce(value: Any, axis: str, position: int) -> float:
    """Convert a single coordinate to a finite float."""
    if isinstance(value, bool):
        raise InvalidInputError(f"Landmark {position}: {axis} must be numeric, got bool")
    try:
        coord = float(value)
    except OverflowError:
        raise InvalidInputError(f"Landmark {position}: {axis} is out of range") from None
    except (TypeError, ValueError):
        raise InvalidInputError(
            f"Landmark {position}: {axis} must be numeric, got {type(value).__name__}"
        ) from None
    if not math.isfinite(coord):
        raise InvalidInputError(f"Landmark {position}: {axis} is not finite ({coord})")
    return coord


@dataclass(frozen=True)
class Landmark:
    """A single detected point on a hand in normalized image space."""
    x: float
    y: float
    z: float = 0.0

    @classmethod
    def from_any(cls, obj: Any, position: int = 0) -> "Landmark":
        """
        Build a landmark from a tuple, mapping or landmark-like object.

        Accepted inputs are an existing Landmark, an (x, y) or (x, y, z)
        sequence or array row, a mapping with "x"/"y" and optional "z" keys, or any object
        exposing x/y attributes (e.g. a MediaPipe NormalizedLandmark).
        A missing z is treated as 0.

        Args:
            obj: Raw landmark
            position: Index of the landmark in its hand, used in error messages

        Returns:
            Landmark instance

        Raises:
            InvalidInputError: If x or y is missing or any coordinate is invalid
        """
        if isinstance(obj, Landmark):
            return obj

        if isinstance(obj, Mapping):
            if "x" not in obj or "y" not in obj:
                raise InvalidInputError(f"Landmark {position}: missing x/y fields")
            raw = (obj["x"], obj["y"], obj.get("z"))
        elif isinstance(obj, (Sequence, np.ndarray)) and not isinstance(obj, (str, bytes)):
            if len(obj) not in (2, 3):
                raise InvalidInputError(
                    f"Landmark {position}: expected 2 or 3 coordinates, got {len(obj)}"
                )
            raw = (obj[0], obj[1], obj[2] if len(obj) == 3 else None)
        elif hasattr(obj, "x") and hasattr(obj, "y"):
            raw = (obj.x, obj.y, getattr(obj, "z", None))
        else:
            raise InvalidInputError(
                f"Landmark {position}: unsupported type {type(obj).__name__}"
            )

        x = _coerce(raw[0], "x", position)
        y = _coerce(raw[1], "y", position)
        z = 0.0 if raw[2] is None else _coerce(raw[2], "z", position)
        return cls(x, y, z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Hand:
    """
    One detected hand: exactly 21 landmarks in MediaPipe index order.

    Hands are produced fresh every frame; no identity persists across frames.
    """
    landmarks: Tuple[Landmark, ...]
    handedness: str = "unknown"
    confidence: float = 0.0
    timestamp: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "landmarks", tuple(self.landmarks))
        if len(self.landmarks) != NUM_LANDMARKS:
            raise InvalidInputError(
                f"Hand must have exactly {NUM_LANDMARKS} landmarks, got {len(self.landmarks)}"
            )
        for i, landmark in enumerate(self.landmarks):
            if not isinstance(landmark, Landmark):
                raise InvalidInputError(
                    f"Landmark {i}: expected Landmark, got {type(landmark).__name__}"
                )

    @classmethod
    def from_landmarks(
        cls,
        points: Any,
        handedness: str = "unknown",
        confidence: float = 0.0,
        timestamp: float = 0.0
    ) -> "Hand":
        """
        Validate raw points and build a Hand.

        Args:
            points: Sequence of 21 landmark-like values (see Landmark.from_any),
                or a MediaPipe NormalizedLandmarkList
            handedness: "Left", "Right" or "unknown"
            confidence: Detector confidence for this hand
            timestamp: Frame timestamp in seconds

        Returns:
            Hand instance

        Raises:
            InvalidInputError: If the input is not exactly 21 well-formed landmarks
        """
        if isinstance(points, Hand):
            return points
        if points is None:
            raise InvalidInputError("Hand landmarks are missing")

        # MediaPipe wraps its points in a NormalizedLandmarkList
        points = getattr(points, "landmark", points)

        try:
            points = list(points)
        except TypeError:
            raise InvalidInputError(
                f"Hand landmarks must be a sequence, got {type(points).__name__}"
            ) from None

        if len(points) != NUM_LANDMARKS:
            raise InvalidInputError(
                f"Hand must have exactly {NUM_LANDMARKS} landmarks, got {len(points)}"
            )

        landmarks = tuple(Landmark.from_any(p, i) for i, p in enumerate(points))
        return cls(landmarks, handedness=handedness, confidence=confidence, timestamp=timestamp)

    def __len__(self) -> int:
        return len(self.landmarks)

    def __getitem__(self, index: int) -> Landmark:
        return self.landmarks[index]

    def __iter__(self) -> Iterator[Landmark]:
        return iter(self.landmarks)

    @property
    def wrist(self) -> Landmark:
        return self.landmarks[WRIST]
