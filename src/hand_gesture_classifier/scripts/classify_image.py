#!/usr/bin/env python3
"""
Single image gesture classification.
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

import cv2
from omegaconf import OmegaConf

from hand_gesture_classifier.core.classifier import GestureClassifier
from hand_gesture_classifier.core.landmark_extractor import HandLandmarkExtractor
from hand_gesture_classifier.utils.config import ConfigManager
from hand_gesture_classifier.utils.logger import Logger


def classify_image(image_path: str, config_path: Optional[str] = None, verbose: bool = False) -> dict:
    """
    Detect hands in a single image and classify each of them.

    Args:
        image_path: Path to input image
        config_path: Path to configuration file; the packaged default when None
        verbose: Enable debug logging

    Returns:
        Dictionary with one entry per detected hand
    """
    config_manager = ConfigManager()
    config = config_manager.load_config(config_path or "classifier")

    logging_config = dict(config.get("logging", {}))
    if verbose:
        logging_config["level"] = "DEBUG"
    logger = Logger.from_config("classify_image", logging_config)
    logger.log_config(OmegaConf.to_container(config, resolve=True))

    classifier = GestureClassifier.from_config(config_manager.get_classifier_config(config))

    image = cv2.imread(image_path)
    if image is None:
        logger.error(f"Could not load image: {image_path}")
        return {"error": "Could not load image"}

    logger.info(f"Image loaded: {image.shape}")

    # Single images have no tracking context
    mediapipe_config = dict(config.get("mediapipe", {}))
    mediapipe_config["mode"] = "image"

    with HandLandmarkExtractor.from_config(mediapipe_config) as extractor:
        hands = extractor.extract_hands(image)

    results = {
        "image_path": image_path,
        "image_shape": image.shape,
        "hands": []
    }

    if not hands:
        logger.info("No hand detected in image")
        return results

    for hand in hands:
        finger_states = classifier.finger_states(hand)
        gesture = classifier.classify_state(finger_states)
        logger.info(f"{hand.handedness} hand: {gesture} ({finger_states})")
        results["hands"].append({
            "handedness": hand.handedness,
            "confidence": float(hand.confidence),
            "gesture": str(gesture),
            "fingers": finger_states.as_dict()
        })

    return results


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for image classification."""
    parser = argparse.ArgumentParser(description="Classify the hand gesture in a single image")
    parser.add_argument(
        "--image",
        type=str,
        required=True,
        help="Path to input image"
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    if not Path(args.image).exists():
        print(f"Error: Image file not found: {args.image}")
        return 1

    try:
        results = classify_image(args.image, config_path=args.config, verbose=args.verbose)

        if "error" in results:
            print(f"Error: {results['error']}")
            return 1

        print(f"\nImage: {results['image_path']}")
        print(f"Shape: {results['image_shape']}")

        if not results["hands"]:
            print("No hand detected")
        for hand in results["hands"]:
            fingers = ", ".join(name for name, up in hand["fingers"].items() if up) or "none"
            print(f"{hand['handedness']} hand ({hand['confidence']:.2f}): {hand['gesture']}")
            print(f"  Extended fingers: {fingers}")

        return 0

    except Exception as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
