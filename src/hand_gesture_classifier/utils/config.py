"""
Configuration management utilities.
"""

import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional
from omegaconf import DictConfig, OmegaConf

from ..core.exceptions import ConfigurationError
from ..core.finger_state import DEFAULT_MCP_MARGIN, DEFAULT_PIP_MARGIN, DEFAULT_THUMB_MARGIN, check_margin
from ..core.gestures import DEFAULT_GESTURE_RULES, Gesture, GestureTable


PACKAGE_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


@dataclass
class ClassifierConfig:
    """Validated classifier settings."""
    pip_margin: float = DEFAULT_PIP_MARGIN
    mcp_margin: float = DEFAULT_MCP_MARGIN
    thumb_margin: float = DEFAULT_THUMB_MARGIN
    thumb_use_depth: bool = True
    gesture_priority: List[str] = field(
        default_factory=lambda: [str(rule.label) for rule in DEFAULT_GESTURE_RULES]
    )
    custom_gestures: List[Dict[str, Any]] = field(default_factory=list)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Check margins and gesture table settings.

        Raises:
            ConfigurationError: If a margin is not a number greater than 1.0,
                or the gesture table cannot be built
        """
        for name in ("pip_margin", "mcp_margin", "thumb_margin"):
            check_margin(name, getattr(self, name))

        if not isinstance(self.thumb_use_depth, bool):
            raise ConfigurationError(f"thumb_use_depth must be a boolean, got {self.thumb_use_depth!r}")

        GestureTable.from_config(self.gesture_priority, self.custom_gestures)

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "ClassifierConfig":
        """
        Build from the ``classifier`` config section.

        Missing keys fall back to the defaults.
        """
        if config is None:
            return cls()
        if isinstance(config, DictConfig):
            config = OmegaConf.to_container(config, resolve=True)

        unknown = set(config) - {
            "pip_margin", "mcp_margin", "thumb_margin",
            "thumb_use_depth", "gesture_priority", "custom_gestures",
        }
        if unknown:
            raise ConfigurationError(f"Unknown classifier settings: {sorted(unknown)}")

        return cls(**config)


class ConfigManager:
    """Manages configuration loading and validation."""

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_dir: Directory containing configuration files; defaults to
                the configs shipped with the package
        """
        self.config_dir = Path(config_dir) if config_dir else PACKAGE_CONFIG_DIR
        self._configs = {}

    def load_config(self, config_name: str) -> DictConfig:
        """
        Load a configuration file.

        Args:
            config_name: Name of the configuration file (without .yaml extension),
                or a path to a YAML file

        Returns:
            Configuration merged over the defaults

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            yaml.YAMLError: If configuration file is invalid
        """
        candidate = Path(config_name)
        if candidate.suffix in (".yaml", ".yml"):
            config_path = candidate
            config_name = candidate.stem
        else:
            config_path = self.config_dir / f"{config_name}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in {config_path}: {e}")

        # Use OmegaConf for merging over defaults
        config = OmegaConf.merge(OmegaConf.create(self.get_default_config()), OmegaConf.create(config))
        self._configs[config_name] = config

        return config

    def get_config(self, config_name: str) -> DictConfig:
        """
        Get a previously loaded configuration.

        Raises:
            KeyError: If configuration hasn't been loaded
        """
        if config_name not in self._configs:
            raise KeyError(f"Configuration '{config_name}' not loaded. Call load_config() first.")

        return self._configs[config_name]

    def save_config(self, config: Dict[str, Any], config_name: str) -> None:
        """
        Save a configuration to file.

        Args:
            config: Configuration dictionary
            config_name: Name for the configuration file
        """
        if isinstance(config, DictConfig):
            config = OmegaConf.to_container(config, resolve=True)

        self.config_dir.mkdir(parents=True, exist_ok=True)
        config_path = self.config_dir / f"{config_name}.yaml"

        with open(config_path, 'w') as f:
            yaml.dump(config, f, default_flow_style=False, indent=2, sort_keys=False)

    def merge_configs(self, base_config: str, override_config: str) -> DictConfig:
        """
        Merge two loaded configurations with override taking precedence.
        """
        base = self.get_config(base_config)
        override = self.get_config(override_config)

        return OmegaConf.merge(base, override)

    def get_classifier_config(self, config: DictConfig) -> ClassifierConfig:
        """Validate and return the classifier section of a loaded configuration."""
        return ClassifierConfig.from_config(config.get("classifier"))

    def get_default_config(self) -> Dict[str, Any]:
        """Default configuration, mirrored by config/classifier.yaml."""
        return {
            "classifier": {
                "pip_margin": DEFAULT_PIP_MARGIN,
                "mcp_margin": DEFAULT_MCP_MARGIN,
                "thumb_margin": DEFAULT_THUMB_MARGIN,
                "thumb_use_depth": True,
                "gesture_priority": [str(rule.label) for rule in DEFAULT_GESTURE_RULES],
                "custom_gestures": []
            },
            "processing": {
                "preferred_handedness": None,
                "edge_targets": [Gesture.INDEX_UP.value]
            },
            "mediapipe": {
                "mode": "video",
                "max_num_hands": 1,
                "min_detection_confidence": 0.7,
                "min_tracking_confidence": 0.5
            },
            "logging": {
                "level": "INFO",
                "log_dir": "logs",
                "console_output": True,
                "file_output": False,
                "json_output": False
            }
        }
