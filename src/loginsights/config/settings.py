from __future__ import annotations

from datetime import date
import codecs
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from loginsights.config.options import (
    DEFAULT_TIME_RANGE,
    TIME_RANGES,
    VALID_LOG_LEVELS,
)
from loginsights.errors import LogInsightsError
from loginsights.utils.load import load_yaml

CONFIG_FILENAME = "loginsights.yaml"
SYNTHETIC_EPOCH = date(2023, 1, 1)


class ConfigError(LogInsightsError):
    pass


class DashboardConfig(BaseModel):
    """Runtime settings for the ingestion core and the dashboard store."""

    default_time_range: int = Field(
        default=DEFAULT_TIME_RANGE,
        description="Initial range in days (7, 30 or 90).",
    )
    epoch: date = Field(
        default=SYNTHETIC_EPOCH,
        description="First day of every synthetic series.",
    )
    encoding: str = Field(default="utf-8", description="Text encoding of uploaded files.")
    csv_delimiter: str = Field(default=",", min_length=1, max_length=1)
    decode_errors: Literal["compat", "soft"] = Field(
        default="compat",
        description=(
            "compat: CSV failures keep the previous series and raise, JSON failures yield "
            "an empty series. soft: both formats yield an empty series with a notice."
        ),
    )
    log_level: Optional[str] = Field(default=None, description="DEFAULT LOG LEVEL")

    @field_validator("default_time_range")
    @classmethod
    def _check_range(cls, value: int) -> int:
        if value not in TIME_RANGES:
            raise ValueError(
                f"default_time_range must be one of {', '.join(map(str, TIME_RANGES))}, got {value!r}"
            )
        return value

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown text encoding: {value!r}") from exc
        return value

    @field_validator("decode_errors", mode="before")
    @classmethod
    def _normalize_policy(cls, value):
        if value is None:
            return "compat"
        return str(value).strip().lower()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if value is None:
            return None
        text = str(value).strip().upper()
        if not text:
            return None
        if text not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {value!r}"
            )
        return text


def load_config(path: Path | str | None = None) -> DashboardConfig:
    """Load settings from YAML, or return defaults when no file is given.

    A directory argument is searched for ``loginsights.yaml``; a missing
    file in that directory falls back to defaults.
    """
    if path is None:
        return DashboardConfig()
    p = Path(path)
    if p.is_dir():
        p = p / CONFIG_FILENAME
        if not p.exists():
            return DashboardConfig()
    try:
        data = load_yaml(p)
    except (FileNotFoundError, ValueError, TypeError) as exc:
        raise ConfigError(str(exc)) from exc
    try:
        return DashboardConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {p}: {exc}") from exc
