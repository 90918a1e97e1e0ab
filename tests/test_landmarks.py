import dataclasses
import math
from types import SimpleNamespace

import numpy as np
import pytest

from hand_gesture_classifier.core.exceptions import InvalidInputError
from hand_gesture_classifier.core.landmarks import Hand, Landmark, NUM_LANDMARKS, WRIST


class TestLandmark:

    def test_from_tuple_without_depth(self):
        lm = Landmark.from_any((0.1, 0.2))
        assert lm == Landmark(0.1, 0.2, 0.0)

    def test_from_tuple_with_depth(self):
        assert Landmark.from_any((0.1, 0.2, -0.05)).z == -0.05

    def test_from_mapping(self):
        assert Landmark.from_any({"x": 0.3, "y": 0.4}) == Landmark(0.3, 0.4, 0.0)

    def test_from_mapping_with_null_depth(self):
        assert Landmark.from_any({"x": 0.3, "y": 0.4, "z": None}).z == 0.0

    def test_from_attribute_object(self):
        obj = SimpleNamespace(x=0.25, y=0.75, z=0.01)
        assert Landmark.from_any(obj) == Landmark(0.25, 0.75, 0.01)

    def test_from_numpy_row(self):
        lm = Landmark.from_any(np.array([0.1, 0.2, 0.3]))
        assert lm == Landmark(0.1, 0.2, 0.3)
        assert isinstance(lm.x, float)

    def test_missing_y_in_mapping(self):
        with pytest.raises(InvalidInputError, match="missing x/y"):
            Landmark.from_any({"x": 0.3})

    def test_missing_y_attribute(self):
        with pytest.raises(InvalidInputError):
            Landmark.from_any(SimpleNamespace(x=0.3))

    def test_wrong_length_sequence(self):
        with pytest.raises(InvalidInputError):
            Landmark.from_any((0.1,))

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), "abc", None, True])
    def test_invalid_coordinate(self, bad):
        with pytest.raises(InvalidInputError):
            Landmark.from_any((bad, 0.5, 0.0))

    def test_integer_too_large_for_float(self):
        with pytest.raises(InvalidInputError, match="out of range"):
            Landmark.from_any((10 ** 400, 0.5, 0.0))

    def test_non_finite_depth(self):
        with pytest.raises(InvalidInputError):
            Landmark.from_any((0.5, 0.5, math.nan))

    def test_error_reports_position(self):
        with pytest.raises(InvalidInputError, match="Landmark 7"):
            Landmark.from_any({"x": 1.0}, position=7)

    def test_immutable(self):
        lm = Landmark(0.1, 0.2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            lm.x = 0.5


class TestHand:

    def test_from_landmarks(self, points_factory):
        hand = Hand.from_landmarks(points_factory(index=True), handedness="Right", confidence=0.9)
        assert len(hand) == NUM_LANDMARKS
        assert hand.handedness == "Right"
        assert hand.confidence == 0.9
        assert hand.wrist == hand[WRIST]

    @pytest.mark.parametrize("count", [0, 20, 22])
    def test_wrong_landmark_count(self, count):
        with pytest.raises(InvalidInputError, match="exactly 21"):
            Hand.from_landmarks([(0.5, 0.5, 0.0)] * count)

    def test_none_is_invalid(self):
        with pytest.raises(InvalidInputError):
            Hand.from_landmarks(None)

    def test_not_a_sequence(self):
        with pytest.raises(InvalidInputError):
            Hand.from_landmarks(42)

    def test_malformed_landmark(self, points_factory):
        points = points_factory()
        points[12] = {"x": 0.5}
        with pytest.raises(InvalidInputError, match="Landmark 12"):
            Hand.from_landmarks(points)

    def test_oversized_coordinate(self, points_factory):
        points = points_factory()
        points[8] = (10 ** 400, 0.1, 0.0)
        with pytest.raises(InvalidInputError, match="Landmark 8"):
            Hand.from_landmarks(points)

    def test_from_numpy_array(self):
        hand = Hand.from_landmarks(np.full((21, 3), 0.5))
        assert hand[20] == Landmark(0.5, 0.5, 0.5)

    def test_from_mediapipe_landmark_list(self):
        landmark_list = SimpleNamespace(
            landmark=[SimpleNamespace(x=0.01 * i, y=0.5, z=0.0) for i in range(21)]
        )
        hand = Hand.from_landmarks(landmark_list)
        assert hand[3].x == pytest.approx(0.03)

    def test_hand_passthrough(self, index_up_hand):
        assert Hand.from_landmarks(index_up_hand) is index_up_hand

    def test_direct_construction_validates(self):
        with pytest.raises(InvalidInputError):
            Hand(tuple(Landmark(0.5, 0.5) for _ in range(20)))

    def test_direct_construction_rejects_raw_points(self):
        with pytest.raises(InvalidInputError):
            Hand(tuple((0.5, 0.5, 0.0) for _ in range(21)))

    def test_iteration_order(self, points_factory):
        points = points_factory()
        hand = Hand.from_landmarks(points)
        assert [lm.as_tuple() for lm in hand] == [tuple(p) for p in points]
