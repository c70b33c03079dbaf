from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from loginsights.domain.record import FIELD_MAP, TimeSeriesRecord
from loginsights.domain.reference import SEVERITY_BREAKDOWN, TOP_ERRORS


def series_table(series: Iterable[TimeSeriesRecord], *, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    for key in FIELD_MAP:
        if key == "timestamp":
            table.add_column(key, no_wrap=True, min_width=10)
        else:
            table.add_column(key, justify="right")
    for rec in series:
        table.add_row(
            rec.timestamp,
            str(rec.error_count),
            str(rec.warning_count),
            str(rec.info_count),
            f"{rec.response_time:.2f}",
            str(rec.user_count),
        )
    return table


def severity_table() -> Table:
    table = Table(title="Severity breakdown")
    table.add_column("severity")
    table.add_column("events", justify="right")
    for name, value in SEVERITY_BREAKDOWN.items():
        table.add_row(name, str(value))
    return table


def top_errors_table() -> Table:
    table = Table(title="Top errors")
    table.add_column("error")
    table.add_column("count", justify="right")
    for entry in TOP_ERRORS:
        table.add_row(entry.name, str(entry.count))
    return table


def make_console(file=None) -> Console:
    return Console(file=file, markup=False, highlight=False)
