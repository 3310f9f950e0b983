"""Unit tests for configuration management."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from messagearray.config import (
    LogLevel,
    MessageArrayConfig,
    RenderConfig,
    create_default_config,
    find_config_file,
    load_config,
)


class TestMessageArrayConfig:
    """Test configuration models."""

    def test_defaults(self):
        config = create_default_config()
        assert config.store.fail_on_error_add is False
        assert config.render.show_msg_ids is False
        assert config.render.h2 is None
        assert config.site.lang == "en"
        assert config.site.catalog is None
        assert config.logging.level == LogLevel.WARN

    def test_config_from_dict(self):
        """Test camelCase aliases."""
        config = MessageArrayConfig(**{
            "render": {"prefix": "form", "showMsgIds": True, "divAtts": {"role": "alert"}},
            "site": {"catalog": "messages.json", "lang": "es"},
            "store": {"failOnErrorAdd": True},
            "logging": {"level": "debug"},
        })
        assert config.render.prefix == "form"
        assert config.render.show_msg_ids is True
        assert config.render.div_atts == {"role": "alert"}
        assert config.site.lang == "es"
        assert config.store.fail_on_error_add is True
        assert config.logging.level == LogLevel.DEBUG

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValueError):
            MessageArrayConfig(unknown_section={})

    def test_empty_lang_rejected(self):
        with pytest.raises(ValueError):
            MessageArrayConfig(site={"lang": " "})

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            MessageArrayConfig(logging={"level": "trace"})


class TestRenderConfig:
    """Test conversion to render options."""

    def test_to_options_defaults(self):
        assert RenderConfig().to_options() == {"show_msg_ids": False, "div_atts": {}, "ul_atts": {}}

    def test_to_options_full(self):
        options = RenderConfig(prefix="p", h2=False, ul_atts={"class": "x"}).to_options()
        assert options["prefix"] == "p"
        assert options["h2"] is False
        assert options["ul_atts"] == {"class": "x"}


class TestLogLevel:

    def test_to_logging_level(self):
        assert LogLevel.WARN.to_logging_level() == "WARNING"
        assert LogLevel.DEBUG.to_logging_level() == "DEBUG"


class TestConfigFileOperations:
    """Test configuration file loading and discovery."""

    def test_load_config_with_file(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".messagearray.json"
            config_file.write_text(json.dumps({"site": {"lang": "es"}}), encoding="utf-8")

            config = load_config(config_file)
            assert config.site.lang == "es"

    def test_load_config_file_not_found(self):
        with TemporaryDirectory() as temp_dir:
            config = load_config(Path(temp_dir) / "nonexistent.json")
            assert config == create_default_config()

    def test_load_config_invalid_json(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".messagearray.json"
            config_file.write_text("{invalid", encoding="utf-8")

            with pytest.raises(ValueError, match="Invalid JSON"):
                load_config(config_file)

    def test_load_config_invalid_content(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".messagearray.json"
            config_file.write_text(json.dumps({"bogus": 1}), encoding="utf-8")

            with pytest.raises(ValueError, match="Failed to load config"):
                load_config(config_file)

    def test_load_config_not_an_object(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".messagearray.json"
            config_file.write_text("[]", encoding="utf-8")

            with pytest.raises(ValueError, match="must contain a JSON object"):
                load_config(config_file)

    def test_load_config_unreadable_path(self):
        """Test that a path that cannot be read is reported as a config error."""
        with TemporaryDirectory() as temp_dir:
            with pytest.raises(ValueError, match="Failed to load config"):
                load_config(Path(temp_dir))

    def test_find_config_file_in_parent(self):
        with TemporaryDirectory() as temp_dir:
            root = Path(temp_dir).resolve()
            config_file = root / ".messagearray.json"
            config_file.write_text("{}", encoding="utf-8")
            nested = root / "a" / "b"
            nested.mkdir(parents=True)

            assert find_config_file(nested) == config_file

    def test_load_config_searches_cwd(self, tmp_path, monkeypatch):
        (tmp_path / ".messagearray.json").write_text(json.dumps({"render": {"prefix": "cwd"}}), encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert load_config().render.prefix == "cwd"
