"""Tests for pipeline configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from laosegmenter.config import Config, GrammarConfig, InputConfig, OutputConfig


def test_config_defaults():
    """Test configuration defaults."""
    config = Config()

    assert config.input_file is None
    assert config.input.format == "jsonl"
    assert config.input.text_fields == ["text", "content"]
    assert config.input.id_field == "file_id"
    assert config.grammar.rule_set == "extended"
    assert config.output.output_dir == Path("data/checked_output")
    assert config.output.save_full_files is True
    assert config.output.save_single_lines is False
    assert config.output.include_spaces is True
    assert config.output.errors_only is False
    assert config.workers == 1


def test_input_file_converted_to_path():
    config = Config(input_file="data/input.jsonl")
    assert config.input_file == Path("data/input.jsonl")


def test_invalid_workers():
    with pytest.raises(ValidationError):
        Config(workers=0)


def test_invalid_rule_set():
    with pytest.raises(ValidationError):
        GrammarConfig(rule_set="strict")


def test_invalid_format():
    with pytest.raises(ValidationError):
        InputConfig(format="csv")


def test_empty_text_fields():
    with pytest.raises(ValidationError):
        InputConfig(text_fields=[])


def test_yaml_round_trip(tmp_path):
    """Test saving and loading config from YAML."""
    config = Config(
        input_file=tmp_path / "input.txt",
        input=InputConfig(format="txt", text_fields=["body"]),
        grammar=GrammarConfig(rule_set="basic"),
        output=OutputConfig(output_dir=tmp_path / "out", errors_only=True),
        workers=3,
    )
    path = tmp_path / "config.yaml"
    config.to_yaml(path)

    loaded = Config.from_yaml(path)
    assert loaded == config


def test_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert Config.from_yaml(path) == Config()


def test_yaml_config_loading():
    """Test loading the example config shipped with the project."""
    config_path = Path(__file__).parent.parent / "config.yaml"

    if config_path.exists():
        config = Config.from_yaml(config_path)
        assert isinstance(config, Config)
        assert config.grammar.rule_set == "extended"
