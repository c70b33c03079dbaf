from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class TimeSeriesRecord:
    """Canonical daily bucket consumed by every chart."""

    timestamp: str
    error_count: int = 0
    warning_count: int = 0
    info_count: int = 0
    response_time: float = 0.0
    user_count: int = 0

    def __post_init__(self) -> None:
        if not self.timestamp:
            raise ValueError("timestamp must be non-empty")
        for name in ("error_count", "warning_count", "info_count", "user_count", "response_time"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    def to_dict(self) -> Dict[str, Any]:
        """Return the chart payload using the dashboard's wire keys."""
        return {
            "timestamp": self.timestamp,
            "errorCount": self.error_count,
            "warningCount": self.warning_count,
            "infoCount": self.info_count,
            "responseTime": self.response_time,
            "userCount": self.user_count,
        }


# Wire key -> attribute name, in chart column order.
FIELD_MAP: Dict[str, str] = {
    "timestamp": "timestamp",
    "errorCount": "error_count",
    "warningCount": "warning_count",
    "infoCount": "info_count",
    "responseTime": "response_time",
    "userCount": "user_count",
}

Series = list[TimeSeriesRecord]
