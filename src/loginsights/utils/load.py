from pathlib import Path
from typing import Any

import yaml


def load_yaml(p: Path, *, require_mapping: bool = True) -> Any:
    """Read a loginsights YAML document; an empty file reads as ``{}``."""
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"Config file not found: {p}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Config file {p} is not valid YAML: {e}") from e

    if data is None:
        return {}
    if require_mapping and not isinstance(data, dict):
        raise TypeError(
            f"Config file {p} must be a mapping of settings, got {type(data).__name__}")
    return data
