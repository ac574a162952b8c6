from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from strsim.config import ConfigError, Mode, StrsimConfig, build_config, load_config_file, resolve_config
from strsim.utils.io import read_yaml


def test_defaults() -> None:
    config = build_config()
    assert config == StrsimConfig(delimiter="\t", threshold=0.9, reference=None, codepoints=False)
    assert config.mode is Mode.SPLIT


def test_config_is_immutable() -> None:
    config = build_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.threshold = 0.1  # type: ignore[misc]


def test_threshold_strings_are_parsed() -> None:
    assert build_config(threshold="0.75").threshold == 0.75
    assert build_config(threshold=-2).threshold == -2.0


@pytest.mark.parametrize("value", ["abc", "", None, True, [0.5]])
def test_threshold_must_be_a_float(value) -> None:
    with pytest.raises(ConfigError, match="not a float"):
        build_config(threshold=value)


def test_empty_delimiter_rejected() -> None:
    with pytest.raises(ConfigError, match="delimiter must be one character"):
        build_config(delimiter="")


def test_long_delimiter_rejected() -> None:
    with pytest.raises(ConfigError, match="too long - must be one character"):
        build_config(delimiter="::")


def test_non_byte_delimiter_needs_codepoints() -> None:
    with pytest.raises(ConfigError, match="not a single byte"):
        build_config(delimiter="§")
    assert build_config(delimiter="§", codepoints=True).delimiter == "§"


def test_reference_selects_reference_mode() -> None:
    assert build_config(reference="Donald Knuth").mode is Mode.REFERENCE
    assert build_config(reference="").mode is Mode.REFERENCE


def test_reference_must_be_string() -> None:
    with pytest.raises(ConfigError, match="reference must be a string"):
        build_config(reference=42)


def test_load_config_file(tmp_path: Path) -> None:
    path = tmp_path / "strsim.yaml"
    path.write_text("delimiter: ','\nthreshold: 0.7\nreference: Donald Knuth\n", encoding="utf-8")
    assert load_config_file(path) == {"delimiter": ",", "threshold": 0.7, "reference": "Donald Knuth"}


def test_empty_config_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config_file(path) == {}


def test_config_file_unknown_keys(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("threshold: 0.5\ncolour: red\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="unknown config keys.*colour"):
        load_config_file(path)


def test_config_file_must_be_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 0.5\n- 0.6\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="must contain a mapping"):
        load_config_file(path)


def test_config_file_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("threshold: [0.5\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config_file(path)


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="config file not found"):
        load_config_file(tmp_path / "missing.yaml")


def test_overrides_win_over_file(tmp_path: Path) -> None:
    path = tmp_path / "strsim.yaml"
    path.write_text("delimiter: ','\nthreshold: 0.7\ncodepoints: true\n", encoding="utf-8")
    config = resolve_config({"threshold": 0.4, "delimiter": None, "codepoints": None}, path)
    assert config.threshold == 0.4
    assert config.delimiter == ","
    assert config.codepoints is True


def test_resolve_without_file_uses_defaults() -> None:
    assert resolve_config({"threshold": None}) == build_config()


@pytest.mark.parametrize("value", ["false", "true", 1, 0, None])
def test_codepoints_must_be_boolean(value) -> None:
    with pytest.raises(ConfigError, match="codepoints must be a boolean"):
        build_config(codepoints=value)


def test_quoted_codepoints_in_config_file_rejected(tmp_path: Path) -> None:
    path = tmp_path / "strsim.yaml"
    path.write_text('codepoints: "false"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="codepoints must be a boolean, got 'false'"):
        resolve_config({}, path)


def test_read_yaml_passes_missing_file_through(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_yaml(tmp_path / "missing.yaml")
