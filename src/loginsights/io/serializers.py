from __future__ import annotations

from typing import Any, Dict, Iterable, List
import csv
import io
import json

from loginsights.domain.record import FIELD_MAP, TimeSeriesRecord


def series_to_dicts(series: Iterable[TimeSeriesRecord]) -> List[Dict[str, Any]]:
    """Chart payload: one camelCase mapping per record."""
    return [rec.to_dict() for rec in series]


def series_to_json(series: Iterable[TimeSeriesRecord], *, indent: int | None = 2) -> str:
    return json.dumps(series_to_dicts(series), indent=indent)


def series_to_jsonl(series: Iterable[TimeSeriesRecord]) -> str:
    return "".join(json.dumps(rec.to_dict()) + "\n" for rec in series)


def series_to_csv(series: Iterable[TimeSeriesRecord]) -> str:
    buf = io.StringIO(newline="")
    writer = csv.DictWriter(buf, fieldnames=list(FIELD_MAP), lineterminator="\n")
    writer.writeheader()
    for rec in series:
        writer.writerow(rec.to_dict())
    return buf.getvalue()
