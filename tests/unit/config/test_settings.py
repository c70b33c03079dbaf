import textwrap
from datetime import date
from pathlib import Path

import pytest

from loginsights.config.settings import ConfigError, DashboardConfig, load_config


def _write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "loginsights.yaml"
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_defaults_without_file():
    config = load_config(None)
    assert config.default_time_range == 7
    assert config.epoch == date(2023, 1, 1)
    assert config.decode_errors == "compat"
    assert config.log_level is None


def test_directory_without_config_falls_back_to_defaults(tmp_path):
    assert load_config(tmp_path) == DashboardConfig()


def test_loads_yaml_from_directory(tmp_path):
    _write_config(
        tmp_path,
        """
        default_time_range: 90
        epoch: 2024-06-01
        csv_delimiter: ";"
        decode_errors: SOFT
        log_level: info
        """,
    )

    config = load_config(tmp_path)
    assert config.default_time_range == 90
    assert config.epoch == date(2024, 6, 1)
    assert config.csv_delimiter == ";"
    assert config.decode_errors == "soft"
    assert config.log_level == "INFO"


def test_empty_yaml_is_defaults(tmp_path):
    path = _write_config(tmp_path, "")
    assert load_config(path) == DashboardConfig()


@pytest.mark.parametrize(
    "content, match",
    [
        ("default_time_range: 14\n", "default_time_range"),
        ("decode_errors: ignore\n", "decode_errors"),
        ("log_level: LOUD\n", "log_level"),
        ("csv_delimiter: '::'\n", "csv_delimiter"),
        ("encoding: utf-9\n", "encoding"),
    ],
)
def test_invalid_values_raise_config_error(tmp_path, content, match):
    path = _write_config(tmp_path, content)
    with pytest.raises(ConfigError, match=match):
        load_config(path)


def test_non_mapping_yaml_raises_config_error(tmp_path):
    path = _write_config(tmp_path, "- 7\n- 30\n")
    with pytest.raises(ConfigError, match="must be a mapping of settings, got list"):
        load_config(path)


def test_missing_explicit_file_raises_config_error(tmp_path):
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "nope.yaml")


def test_invalid_yaml_raises_config_error(tmp_path):
    path = _write_config(tmp_path, "default_time_range: [7\n")
    with pytest.raises(ConfigError, match="is not valid YAML"):
        load_config(path)
