"""Tests for configuration loading and the call-scoped provider."""

import json
import logging
import threading

import pytest

from config.context import config_scope, current_config
from config.loader import load_config_file, load_configuration, parse_overrides
from config.settings import MergeConfiguration
from errors import ConfigurationError
from processor.context import ProcessingContext


class TestMergeConfiguration:
    """Validation of configuration values."""

    def test_defaults(self):
        """Defaults: UTF-8, minimize on, no context root."""
        config = MergeConfiguration()
        assert config.encoding == "UTF-8"
        assert config.minimize is True
        assert config.context_root is None

    def test_unknown_encoding(self):
        """Encodings unknown to codecs are rejected."""
        with pytest.raises(ConfigurationError):
            MergeConfiguration(encoding="no-such-codec")

    @pytest.mark.parametrize("values", [
        {"encoding": 8},
        {"base_dir": 3},
        {"log_level": None},
        {"context_root": ["www"]},
        {"log_file": 1.5},
    ])
    def test_non_string_values_rejected(self, values):
        """Values of the wrong type raise ConfigurationError, not TypeError."""
        with pytest.raises(ConfigurationError):
            MergeConfiguration.from_mapping(values)

    def test_numeric_encoding_override(self):
        """A numeric --set value for the encoding is a configuration error."""
        with pytest.raises(ConfigurationError):
            load_configuration(None, ["encoding=8"], environ={})

    def test_unknown_keys_ignored(self, caplog):
        """Unknown keys are logged and do not reach the configuration."""
        with caplog.at_level(logging.WARNING):
            config = MergeConfiguration.from_mapping({"encoding": "latin-1", "gzip": True})
        assert config.encoding == "latin-1"
        assert not hasattr(config, "gzip")
        assert "gzip" in caplog.text

    def test_minimize_must_be_bool(self):
        """A non-boolean minimize flag is rejected."""
        with pytest.raises(ConfigurationError):
            MergeConfiguration.from_mapping({"minimize": "sometimes"})

    def test_with_overrides_ignores_none(self):
        """None overrides keep the current value."""
        config = MergeConfiguration().with_overrides(encoding=None, minimize=False)
        assert config.encoding == "UTF-8"
        assert config.minimize is False


class TestLoader:
    """YAML/JSON files, environment and KEY=VALUE overrides."""

    def test_yaml_section(self, tmp_path):
        """The assetmerge section of a YAML file is returned."""
        path = tmp_path / "merge.yml"
        path.write_text("assetmerge:\n  encoding: latin-1\n  minimize: false\n", encoding="utf-8")
        assert load_config_file(str(path)) == {"encoding": "latin-1", "minimize": False}

    def test_json_without_section(self, tmp_path):
        """A JSON file without the section is read whole."""
        path = tmp_path / "merge.json"
        path.write_text(json.dumps({"base_dir": "web"}), encoding="utf-8")
        assert load_config_file(str(path)) == {"base_dir": "web"}

    def test_missing_file(self, tmp_path):
        """A missing file is a configuration error."""
        with pytest.raises(ConfigurationError):
            load_config_file(str(tmp_path / "nope.yml"))

    def test_bad_extension(self, tmp_path):
        """Only YAML and JSON files are accepted."""
        with pytest.raises(ConfigurationError):
            load_config_file(str(tmp_path / "merge.ini"))

    def test_invalid_yaml(self, tmp_path):
        """Unparseable YAML is a configuration error."""
        path = tmp_path / "merge.yaml"
        path.write_text("assetmerge: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config_file(str(path))

    def test_non_mapping(self, tmp_path):
        """The document must be a mapping."""
        path = tmp_path / "merge.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config_file(str(path))

    def test_parse_overrides(self):
        """KEY=VALUE pairs are split and coerced."""
        assert parse_overrides(["minimize=false", "encoding=latin-1", "x=3"]) == {
            "minimize": False, "encoding": "latin-1", "x": 3,
        }
        with pytest.raises(ConfigurationError):
            parse_overrides(["novalue"])
        with pytest.raises(ConfigurationError):
            parse_overrides(["=1"])

    def test_precedence(self, tmp_path):
        """Environment beats the file, --set beats both."""
        path = tmp_path / "merge.yml"
        path.write_text("encoding: ascii\nbase_dir: web\n", encoding="utf-8")
        config = load_configuration(
            str(path),
            overrides=["base_dir=site"],
            environ={"ASSETMERGE_ENCODING": "latin-1", "ASSETMERGE_LOG_LEVEL": "debug"},
        )
        assert config.encoding == "latin-1"
        assert config.base_dir == "site"
        assert config.log_level == "DEBUG"


class TestConfigScope:
    """The current configuration is call-scoped."""

    def test_scope_restores_previous(self):
        """Leaving a scope restores the previous configuration."""
        assert current_config().encoding == "UTF-8"
        with config_scope(MergeConfiguration(encoding="latin-1")):
            assert current_config().encoding == "latin-1"
            assert ProcessingContext.create().encoding == "latin-1"
        assert current_config().encoding == "UTF-8"

    def test_threads_see_their_own_config(self):
        """Concurrent scopes on different threads do not interfere."""
        seen = {}
        barrier = threading.Barrier(2)

        def worker(name, encoding):
            with config_scope(MergeConfiguration(encoding=encoding)):
                barrier.wait()
                seen[name] = current_config().encoding

        threads = [
            threading.Thread(target=worker, args=("a", "latin-1")),
            threading.Thread(target=worker, args=("b", "ascii")),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert seen == {"a": "latin-1", "b": "ascii"}
