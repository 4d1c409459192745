"""Tests for config loading, layering and the global singleton."""

import json

import pytest

from grapher.config import (
    GrapherConfig,
    OutputConfig,
    RenderConfig,
    configure,
    get_config,
    parse_bool,
    reset_config,
    unescape,
    validate_pad_char,
    validate_pad_length,
)


class TestDefaults:
    def test_defaults(self):
        config = GrapherConfig()
        assert config.render == RenderConfig(12, "=", False)
        assert config.output == OutputConfig("", None)

    def test_load_without_file_or_env(self):
        assert GrapherConfig.load() == GrapherConfig()


class TestValidation:
    """Tests for the validation helpers."""

    @pytest.mark.parametrize("value", [0, -1, True, 1.5, "12"])
    def test_bad_pad_length(self, value):
        with pytest.raises(ValueError):
            validate_pad_length(value)

    def test_good_pad_length(self):
        assert validate_pad_length(1) == 1

    @pytest.mark.parametrize("value", ["", "ab", 1, None])
    def test_bad_pad_char(self, value):
        with pytest.raises(ValueError):
            validate_pad_char(value)

    @pytest.mark.parametrize("text", ["1", "true", "YES", " on "])
    def test_true_values(self, text):
        assert parse_bool(text) is True

    @pytest.mark.parametrize("text", ["0", "false", "No", "off"])
    def test_false_values(self, text):
        assert parse_bool(text) is False

    def test_bad_bool(self):
        with pytest.raises(ValueError):
            parse_bool("maybe")

    def test_render_config_validate(self):
        with pytest.raises(ValueError):
            RenderConfig(pad_length=0).validate()

    def test_render_config_copy_is_independent(self):
        base = RenderConfig()
        copy = base.copy()
        copy.pad_length = 3
        assert base.pad_length == 12


class TestFileLayer:
    """Tests for ~/.config/grapher/config.json handling."""

    def test_save_and_load(self, isolated_config):
        config = GrapherConfig(
            render=RenderConfig(pad_length=8, pad_char="."),
            output=OutputConfig(delimiter="\n", header="Table {n}"),
        )
        config.save()
        assert isolated_config.exists()
        assert GrapherConfig.load() == config

    def test_partial_file(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(json.dumps({"render": {"pad_char": "*"}}))
        config = GrapherConfig.load()
        assert config.render.pad_char == "*"
        assert config.render.pad_length == 12

    def test_invalid_values_skipped(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(
            json.dumps({"render": {"pad_length": 0, "pad_char": "ab"}})
        )
        assert GrapherConfig.load().render == RenderConfig()

    def test_corrupt_file_ignored(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("{not json")
        assert GrapherConfig.load() == GrapherConfig()

    def test_non_object_file_ignored(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("[1, 2]")
        assert GrapherConfig.load() == GrapherConfig()

    def test_to_dict(self):
        assert GrapherConfig().to_dict() == {
            "render": {"pad_length": 12, "pad_char": "=", "unpadded_keys": False},
            "output": {"delimiter": "", "header": None},
        }


class TestEnvLayer:
    """Tests for GRAPHER_* environment overrides."""

    def test_env_overrides_file(self, isolated_config, monkeypatch):
        GrapherConfig(render=RenderConfig(pad_length=8)).save()
        monkeypatch.setenv("GRAPHER_PAD_LENGTH", "20")
        monkeypatch.setenv("GRAPHER_PAD_CHAR", "#")
        monkeypatch.setenv("GRAPHER_UNPADDED_KEYS", "yes")
        config = GrapherConfig.load()
        assert config.render == RenderConfig(20, "#", True)

    def test_output_env(self, monkeypatch):
        monkeypatch.setenv("GRAPHER_DELIMITER", "\\n---\\n")
        monkeypatch.setenv("GRAPHER_HEADER", "Table {n}")
        config = GrapherConfig.load()
        assert config.output.delimiter == "\n---\n"
        assert config.output.header == "Table {n}"

    def test_invalid_env_ignored(self, monkeypatch):
        monkeypatch.setenv("GRAPHER_PAD_LENGTH", "abc")
        monkeypatch.setenv("GRAPHER_PAD_CHAR", "too long")
        monkeypatch.setenv("GRAPHER_UNPADDED_KEYS", "perhaps")
        assert GrapherConfig.load().render == RenderConfig()


class TestSingleton:
    def test_get_config_caches(self):
        assert get_config() is get_config()

    def test_configure_and_reset(self):
        custom = GrapherConfig(render=RenderConfig(pad_length=4))
        configure(custom)
        assert get_config() is custom
        reset_config()
        assert get_config() is not custom
        assert get_config().render.pad_length == 12


class TestUnescape:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("\\n", "\n"),
            ("\\t|", "\t|"),
            ("plain", "plain"),
            ("", ""),
        ],
    )
    def test_unescape(self, text, expected):
        assert unescape(text) == expected

    @pytest.mark.parametrize("text", ["abc\\", "\\x4", "\\N{nope}"])
    def test_bad_escape_raises_value_error(self, text):
        with pytest.raises(ValueError, match="Invalid escape"):
            unescape(text)


class TestInvalidDelimiterEnv:
    def test_bad_escape_warns_and_keeps_default(self, monkeypatch, caplog):
        monkeypatch.setenv("GRAPHER_DELIMITER", "\\x4")
        with caplog.at_level("WARNING", logger="grapher"):
            config = GrapherConfig.load()

        assert config.output.delimiter == ""
        assert any("GRAPHER_DELIMITER" in r.getMessage() for r in caplog.records)
