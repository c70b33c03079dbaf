from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional
import logging
import math

from loginsights.domain.record import Series, TimeSeriesRecord
from loginsights.sources.models.parser import DataParser

logger = logging.getLogger(__name__)

COUNT_FIELDS = {
    "errorCount": "error_count",
    "warningCount": "warning_count",
    "infoCount": "info_count",
    "userCount": "user_count",
}


def _canonical_timestamp(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text).isoformat()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        # Unrecognized but non-empty: charted as a category label.
        return text


def _coerce_real(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        num = float(value)
    else:
        text = str(value).strip()
        if not text:
            return 0.0
        try:
            num = float(text)
        except ValueError:
            return 0.0
    if not math.isfinite(num) or num <= 0:
        return 0.0
    return num


def _coerce_count(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value if value >= 0 else 0
    if isinstance(value, str):
        try:
            num = int(value.strip())
        except ValueError:
            pass
        else:
            return num if num >= 0 else 0
    return int(_coerce_real(value))


class MetricsRowParser(DataParser[TimeSeriesRecord]):
    """Map a decoded row onto the canonical record shape.

    Rows without a usable ``timestamp`` are dropped. Every numeric field
    falls back to 0 when missing, non-numeric or negative. Unknown keys are
    ignored.
    """

    def __init__(self, *, time_field: str = "timestamp"):
        self.time_field = time_field

    def parse(self, raw: Mapping[str, Any]) -> Optional[TimeSeriesRecord]:
        timestamp = _canonical_timestamp(raw.get(self.time_field))
        if timestamp is None:
            return None
        counts = {attr: _coerce_count(raw.get(key)) for key, attr in COUNT_FIELDS.items()}
        return TimeSeriesRecord(
            timestamp=timestamp,
            response_time=_coerce_real(raw.get("responseTime")),
            **counts,
        )


@dataclass
class NormalizeResult:
    records: Series = field(default_factory=list)
    dropped: int = 0


def normalize_rows(
    rows: Iterable[Mapping[str, Any]],
    parser: Optional[MetricsRowParser] = None,
) -> NormalizeResult:
    parser = parser or MetricsRowParser()
    result = NormalizeResult()
    for idx, raw in enumerate(rows):
        record = parser.parse(raw)
        if record is None:
            logger.debug("Dropping row %d: missing %s", idx, parser.time_field)
            result.dropped += 1
            continue
        result.records.append(record)
    if result.dropped:
        logger.info(
            "Normalized %d rows, dropped %d without a timestamp",
            len(result.records),
            result.dropped,
        )
    return result
