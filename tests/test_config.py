import pytest
import yaml
from omegaconf import OmegaConf

from hand_gesture_classifier.core.exceptions import ConfigurationError
from hand_gesture_classifier.utils.config import ClassifierConfig, ConfigManager, PACKAGE_CONFIG_DIR


class TestClassifierConfig:

    def test_defaults(self):
        config = ClassifierConfig()
        assert config.pip_margin == 1.10
        assert config.mcp_margin == 1.30
        assert config.thumb_margin == 1.05
        assert config.thumb_use_depth is True
        assert config.gesture_priority == ["INDEX_UP", "MIDDLE_ONLY", "PEACE", "THUMBS_UP", "OPEN_HAND", "FIST"]

    @pytest.mark.parametrize("name", ["pip_margin", "mcp_margin", "thumb_margin"])
    @pytest.mark.parametrize("value", [1.0, 0.9, 0, -1.2])
    def test_margin_must_exceed_one(self, name, value):
        with pytest.raises(ConfigurationError, match=name):
            ClassifierConfig(**{name: value})

    @pytest.mark.parametrize("value", ["1.2", None, True])
    def test_margin_must_be_numeric(self, value):
        with pytest.raises(ConfigurationError):
            ClassifierConfig(pip_margin=value)

    def test_thumb_use_depth_must_be_bool(self):
        with pytest.raises(ConfigurationError):
            ClassifierConfig(thumb_use_depth="yes")

    def test_bad_priority(self):
        with pytest.raises(ConfigurationError):
            ClassifierConfig(gesture_priority=["FIST", "FIST"])

    def test_from_dict_config(self):
        section = OmegaConf.create({"pip_margin": 1.2, "gesture_priority": ["FIST"]})
        config = ClassifierConfig.from_config(section)
        assert config.pip_margin == 1.2
        assert config.mcp_margin == 1.30
        assert config.gesture_priority == ["FIST"]

    def test_from_none(self):
        assert ClassifierConfig.from_config(None) == ClassifierConfig()

    def test_unknown_setting(self):
        with pytest.raises(ConfigurationError, match="Unknown"):
            ClassifierConfig.from_config({"pip_margn": 1.2})


class TestConfigManager:

    def test_packaged_config_matches_defaults(self):
        manager = ConfigManager()
        config = manager.load_config("classifier")
        assert OmegaConf.to_container(config) == manager.get_default_config()

    def test_packaged_config_dir(self):
        assert (PACKAGE_CONFIG_DIR / "classifier.yaml").exists()

    def test_load_by_path_merges_defaults(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.safe_dump({"classifier": {"thumb_margin": 1.2}, "processing": {"edge_targets": ["FIST"]}}))

        manager = ConfigManager()
        config = manager.load_config(str(path))
        assert config.classifier.thumb_margin == 1.2
        assert config.classifier.pip_margin == 1.10
        assert list(config.processing.edge_targets) == ["FIST"]
        assert manager.get_config("custom") is config

    def test_get_classifier_config(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text(yaml.safe_dump({"classifier": {"custom_gestures": [
            {"name": "ROCK", "fingers": {"index": True, "pinky": True}, "before": "OPEN_HAND"}
        ]}}))

        manager = ConfigManager()
        classifier_config = manager.get_classifier_config(manager.load_config(str(path)))
        assert classifier_config.custom_gestures[0]["name"] == "ROCK"

    def test_invalid_margin_in_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("classifier:\n  mcp_margin: 0.8\n")

        manager = ConfigManager()
        with pytest.raises(ConfigurationError):
            manager.get_classifier_config(manager.load_config(str(path)))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigManager(str(tmp_path)).load_config("nope")

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / "broken.yaml").write_text("classifier: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            ConfigManager(str(tmp_path)).load_config("broken")

    def test_get_config_not_loaded(self):
        with pytest.raises(KeyError):
            ConfigManager().get_config("never")

    def test_save_and_merge(self, tmp_path):
        manager = ConfigManager(str(tmp_path))
        manager.save_config(manager.get_default_config(), "base")
        manager.save_config({"classifier": {"pip_margin": 1.5}}, "override")

        manager.load_config("base")
        manager.load_config("override")
        merged = manager.merge_configs("base", "override")
        assert merged.classifier.pip_margin == 1.5
        assert merged.classifier.mcp_margin == 1.30
