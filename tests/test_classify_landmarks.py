import json
import logging

import pytest

from hand_gesture_classifier.core.frame_processor import FrameStatus
from hand_gesture_classifier.scripts.classify_landmarks import classify_landmarks, load_frames, main


@pytest.fixture
def recording(tmp_path, points_factory):
    index_up = [list(p) for p in points_factory(index=True)]
    fist = [list(p) for p in points_factory()]
    frames = [
        [index_up],
        {"timestamp": 0.1, "hands": [{"handedness": "Right", "landmarks": index_up}]},
        [fist],
        [],
        [index_up[:20]],
        {"timestamp": 0.5, "hands": [index_up]},
    ]
    path = tmp_path / "recording.json"
    path.write_text(json.dumps(frames))
    return path


def test_load_frames(recording):
    frames = load_frames(str(recording))
    assert len(frames) == 6
    assert frames[1]["timestamp"] == 0.1
    assert frames[3]["hands"] == []


def test_classify_landmarks(recording):
    output = classify_landmarks(str(recording))
    statuses = [r.status for r in output["results"]]

    assert statuses == [
        FrameStatus.CLASSIFIED, FrameStatus.CLASSIFIED, FrameStatus.CLASSIFIED,
        FrameStatus.NO_HAND, FrameStatus.INVALID, FrameStatus.CLASSIFIED,
    ]
    assert output["results"][1].hand.handedness == "Right"
    # Frames 0 and 5 start INDEX_UP runs
    assert output["edges"] == {"INDEX_UP": 2}
    assert output["stats"]["gesture_counts"] == {"INDEX_UP": 3, "FIST": 1}


def test_target_override(recording):
    output = classify_landmarks(str(recording), targets=["FIST"])
    assert output["edges"] == {"FIST": 1}


def test_main_json(recording, capsys):
    assert main([str(recording), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [r["status"] for r in data["results"]][3:5] == ["no_hand", "invalid"]
    assert data["results"][0]["fingers"]["index"] is True
    assert data["edges"] == {"INDEX_UP": 2}


def test_main_text(recording, capsys):
    assert main([str(recording)]) == 0
    out = capsys.readouterr().out
    assert "INDEX_UP" in out
    assert "no hand" in out
    assert "invalid" in out
    assert "Rising edges for INDEX_UP: 2" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1
    assert "not found" in capsys.readouterr().out


def test_logs_configuration(recording, caplog):
    with caplog.at_level(logging.INFO, logger="classify_landmarks"):
        classify_landmarks(str(recording), quiet=True)
    loaded = [r for r in caplog.records if r.getMessage().startswith("Configuration loaded")]
    assert "pip_margin=1.1" in loaded[0].getMessage()
    assert loaded[0].config["processing"]["edge_targets"] == ["INDEX_UP"]
