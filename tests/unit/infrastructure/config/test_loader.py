# tests/unit/infrastructure/config/test_loader.py

"""Test configuration loading and management"""

# Standard library imports
from json import dumps
from os import unlink
from tempfile import NamedTemporaryFile

# Third party imports
from pydantic import ValidationError
import pytest

# Local imports
from pandoc_filter.infrastructure.config import AppConfig
from pandoc_filter.infrastructure.config import ConfigLoader
from pandoc_filter.infrastructure.config import LoggingConfig
from pandoc_filter.infrastructure.config import OutputConfig
from pandoc_filter.infrastructure.config import get_config


def _write_config(content: str) -> str:
    with NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
        f.write(content)
        return f.name


class TestConfigModels:
    """Test the pydantic configuration models"""

    def test_defaults(self):
        config = AppConfig()
        assert config.logging.debug is False
        assert config.logging.log_level == "WARNING"
        assert config.logging.log_file is None
        assert config.output == OutputConfig(ensure_ascii=False, indent=None, sort_keys=False)

    def test_log_level_normalized(self):
        assert LoggingConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(log_level="LOUD")

    def test_effective_level(self):
        assert LoggingConfig(log_level="ERROR").effective_level == "ERROR"
        assert LoggingConfig(debug=True, log_level="ERROR").effective_level == "DEBUG"

    def test_negative_indent_rejected(self):
        with pytest.raises(ValidationError):
            OutputConfig(indent=-1)

    def test_to_dict(self):
        assert AppConfig().to_dict()["output"] == {
            "ensure_ascii": False,
            "indent": None,
            "sort_keys": False,
        }


class TestConfigLoader:
    """Test the ConfigLoader class"""

    def test_default_config_values(self, tmp_path, monkeypatch):
        """Without a config file every section has its defaults"""
        monkeypatch.chdir(tmp_path)
        config = ConfigLoader()

        assert config.logging == LoggingConfig()
        assert config.output == OutputConfig()

    def test_custom_config_file(self):
        """Test loading from custom JSON configuration file"""
        config_path = _write_config(
            dumps({"logging": {"log_level": "info"}, "output": {"indent": 2, "sort_keys": True}})
        )

        try:
            config = ConfigLoader(config_path)

            assert config.logging.log_level == "INFO"
            assert config.output.indent == 2
            assert config.output.sort_keys is True

            # Unspecified values fall back to defaults
            assert config.output.ensure_ascii is False
            assert config.config["logging"]["debug"] is False
        finally:
            unlink(config_path)

    def test_default_file_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "pandoc_filter.json").write_text(dumps({"output": {"ensure_ascii": True}}))
        monkeypatch.chdir(tmp_path)

        assert ConfigLoader().output.ensure_ascii is True

    def test_missing_file_uses_defaults(self, tmp_path, caplog):
        config = ConfigLoader(str(tmp_path / "absent.json"))

        assert config.output == OutputConfig()
        assert "not found" in caplog.text

    @pytest.mark.parametrize(
        "content", ["{not json", dumps({"output": {"indent": -3}}), dumps({"output": []})]
    )
    def test_invalid_file_uses_defaults(self, content, caplog):
        config_path = _write_config(content)

        try:
            config = ConfigLoader(config_path)

            assert config.output == OutputConfig()
            assert "Failed to load config" in caplog.text
        finally:
            unlink(config_path)


class TestGetConfig:
    """Test the cached default loader"""

    def test_default_is_cached(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert get_config() is get_config()

    def test_explicit_path_not_cached(self):
        config_path = _write_config(dumps({"output": {"indent": 4}}))

        try:
            config = get_config(config_path)

            assert config.output.indent == 4
            assert get_config(config_path) is not config
        finally:
            unlink(config_path)
