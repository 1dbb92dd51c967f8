"""Tests for analyzer config loading and validation."""

from pathlib import Path

import pytest
import yaml

from log_analyzer.config import AnalyzerConfig, load_config


def _write(tmp_path, data) -> Path:
    path = tmp_path / "log-analyzer.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


class TestAnalyzerConfig:
    def test_defaults(self):
        config = load_config()
        assert config == AnalyzerConfig()
        assert config.output_dir is None
        assert config.indent == 2
        assert config.save is True
        assert config.strict is False

    def test_default_output_names(self):
        config = AnalyzerConfig()
        assert config.output_name("laravel") == "laravel_log_output.json"
        assert config.output_name("apache") == "apache_log_output.json"
        assert config.output_name("access") == "access_log_output.json"

    def test_output_name_override(self):
        config = AnalyzerConfig(output_names={"access": "requests.json"})
        assert config.output_name("access") == "requests.json"
        assert config.output_name("laravel") == "laravel_log_output.json"

    def test_unknown_format_rejected(self):
        with pytest.raises(ValueError, match="Unknown log format"):
            AnalyzerConfig(output_names={"nginx": "x.json"})

    def test_negative_indent_rejected(self):
        with pytest.raises(ValueError, match="indent"):
            AnalyzerConfig(indent=-1)


class TestLoadConfig:
    def test_full_config(self, tmp_path):
        path = _write(tmp_path, {
            "analyzer": {
                "output_dir": "out",
                "indent": 4,
                "save": False,
                "strict": True,
                "output_names": {"apache": "errors.json"},
            }
        })
        config = load_config(path)
        assert config.output_dir == tmp_path / "out"
        assert config.indent == 4
        assert config.save is False
        assert config.strict is True
        assert config.output_name("apache") == "errors.json"

    def test_absolute_output_dir(self, tmp_path):
        target = tmp_path / "abs"
        config = load_config(_write(tmp_path, {"analyzer": {"output_dir": str(target)}}))
        assert config.output_dir == target

    def test_empty_section_gives_defaults(self, tmp_path):
        config = load_config(_write(tmp_path, {"analyzer": None}))
        assert config == AnalyzerConfig()

    def test_missing_analyzer_key(self, tmp_path):
        with pytest.raises(ValueError, match="analyzer"):
            load_config(_write(tmp_path, {"other": "stuff"}))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValueError, match="analyzer"):
            load_config(path)

    def test_non_bool_save(self, tmp_path):
        with pytest.raises(ValueError, match="save"):
            load_config(_write(tmp_path, {"analyzer": {"save": "yes please"}}))

    def test_output_names_must_be_mapping(self, tmp_path):
        with pytest.raises(ValueError, match="output_names"):
            load_config(_write(tmp_path, {"analyzer": {"output_names": ["a.json"]}}))

    def test_section_must_be_mapping(self, tmp_path):
        with pytest.raises(ValueError, match="mapping"):
            load_config(_write(tmp_path, {"analyzer": ["a"]}))

    @pytest.mark.parametrize("indent", [None, "4", 2.5, True])
    def test_indent_must_be_integer(self, tmp_path, indent):
        with pytest.raises(ValueError, match="indent"):
            load_config(_write(tmp_path, {"analyzer": {"indent": indent}}))

    def test_output_dir_must_be_path(self, tmp_path):
        with pytest.raises(ValueError, match="output_dir"):
            load_config(_write(tmp_path, {"analyzer": {"output_dir": ["out"]}}))

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_config(tmp_path / "missing.yaml")
