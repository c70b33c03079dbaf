from __future__ import annotations

from typing import Optional, TextIO
import sys

from loginsights.domain.record import Series
from loginsights.io.serializers import series_to_csv, series_to_json, series_to_jsonl
from loginsights.cli.visuals.table import make_console, series_table


def emit_series(series: Series, fmt: str, *, title: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout
    if fmt == "table":
        make_console(out).print(series_table(series, title=title))
    elif fmt == "json":
        out.write(series_to_json(series) + "\n")
    elif fmt == "jsonl":
        out.write(series_to_jsonl(series))
    elif fmt == "csv":
        out.write(series_to_csv(series))
    else:
        raise ValueError(f"unsupported output format: {fmt}")
