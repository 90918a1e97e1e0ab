#!/usr/bin/env python3
"""
Classify gestures from recorded hand landmarks.

The input is a JSON file holding a list of frames. Each frame is either a list
of hands or an object {"timestamp": ..., "hands": [...]}; each hand is a list
of 21 [x, y, z] points or an object {"handedness": ..., "landmarks": [...]}.
"""

import sys
import json
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from omegaconf import OmegaConf

from hand_gesture_classifier.core.exceptions import InvalidInputError
from hand_gesture_classifier.core.frame_processor import FrameProcessor, FrameResult, FrameStatus
from hand_gesture_classifier.core.landmarks import Hand
from hand_gesture_classifier.utils.config import ConfigManager
from hand_gesture_classifier.utils.logger import Logger


def load_frames(path: str) -> List[Dict[str, Any]]:
    """
    Load recorded frames from a JSON file.

    Returns:
        List of {"timestamp": float or None, "hands": list} entries
    """
    with open(path, 'r') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("frames", [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of frames in {path}")

    frames = []
    for entry in data:
        if isinstance(entry, dict):
            frames.append({"timestamp": entry.get("timestamp"), "hands": entry.get("hands") or []})
        else:
            frames.append({"timestamp": None, "hands": entry or []})
    return frames


def parse_hand(entry: Any) -> Any:
    """
    Convert one recorded hand into a Hand.

    Malformed hands are returned as-is so the frame processor reports them
    as invalid frames.
    """
    if isinstance(entry, dict) and "landmarks" in entry:
        try:
            return Hand.from_landmarks(
                entry["landmarks"],
                handedness=entry.get("handedness", "unknown"),
                confidence=entry.get("confidence", 0.0)
            )
        except InvalidInputError:
            return entry["landmarks"]
    return entry


def format_result(result: FrameResult) -> str:
    if result.status is FrameStatus.NO_HAND:
        text = "no hand"
    elif result.status is FrameStatus.INVALID:
        text = f"invalid ({result.error})"
    else:
        text = f"{result.gesture}  [{result.finger_states}]"
    if result.events:
        text += f"  -> {', '.join(result.events)}"
    return f"frame {result.frame_index:5d}: {text}"


def result_to_dict(result: FrameResult) -> Dict[str, Any]:
    return {
        "frame": result.frame_index,
        "status": result.status.value,
        "gesture": None if result.gesture is None else str(result.gesture),
        "fingers": None if result.finger_states is None else result.finger_states.as_dict(),
        "events": result.events,
        "error": result.error,
    }


def classify_landmarks(
    input_path: str,
    config_path: Optional[str] = None,
    targets: Optional[List[str]] = None,
    verbose: bool = False,
    quiet: bool = False
) -> Dict[str, Any]:
    """
    Run recorded frames through the frame processor.

    Args:
        input_path: JSON file with recorded frames
        config_path: YAML configuration; the packaged default when None
        targets: Gestures whose rising edges are counted; overrides the config
        verbose: Enable debug logging
        quiet: Disable console logging

    Returns:
        Dictionary with per-frame results, frame statistics and edge counts
    """
    config_manager = ConfigManager()
    config = config_manager.load_config(config_path or "classifier")

    logging_config = dict(config.get("logging", {}))
    if verbose:
        logging_config["level"] = "DEBUG"
    if quiet:
        logging_config["console_output"] = False
    logger = Logger.from_config("classify_landmarks", logging_config)
    logger.log_config(OmegaConf.to_container(config, resolve=True))

    processing = dict(config.get("processing", {}))
    if targets:
        processing["edge_targets"] = targets

    processor = FrameProcessor.from_config(
        config_manager.get_classifier_config(config),
        processing,
        logger=logger
    )

    frames = load_frames(input_path)
    logger.info(f"Loaded {len(frames)} frames from {input_path}")

    results = []
    for frame in frames:
        hands = [parse_hand(hand) for hand in frame["hands"]]
        results.append(processor.process(hands, timestamp=frame["timestamp"]))

    processor.log_stats()

    return {
        "results": results,
        "stats": processor.get_frame_stats().as_dict(),
        "edges": {detector.name: detector.count for detector in processor.edge_detectors},
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for landmark classification."""
    parser = argparse.ArgumentParser(description="Classify hand gestures from recorded landmarks")
    parser.add_argument(
        "input",
        type=str,
        help="JSON file with recorded frames"
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--target",
        action="append",
        help="Gesture whose rising edges are counted (repeatable)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    if not Path(args.input).exists():
        print(f"Error: Input file not found: {args.input}")
        return 1

    try:
        output = classify_landmarks(
            input_path=args.input,
            config_path=args.config,
            targets=args.target,
            verbose=args.verbose,
            quiet=args.json
        )
    except Exception as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        print(json.dumps({
            "results": [result_to_dict(r) for r in output["results"]],
            "stats": output["stats"],
            "edges": output["edges"],
        }, indent=2))
        return 0

    for result in output["results"]:
        print(format_result(result))

    stats = output["stats"]
    print(f"\nFrames: {stats['total_frames']} "
          f"(classified {stats['classified_frames']}, "
          f"no hand {stats['no_hand_frames']}, "
          f"invalid {stats['invalid_frames']})")
    for name, count in sorted(stats["gesture_counts"].items()):
        print(f"  {name}: {count}")
    for name, count in output["edges"].items():
        print(f"Rising edges for {name}: {count}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
