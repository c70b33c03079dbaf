from __future__ import annotations

from loginsights.cli.output import emit_series
from loginsights.cli.utils import error_exit
from loginsights.config.settings import DashboardConfig
from loginsights.sources.synthetic.metrics import generate_series


def handle(*, days: int, fmt: str, config: DashboardConfig) -> None:
    try:
        series = generate_series(days, epoch=config.epoch)
    except ValueError as exc:
        error_exit(str(exc))
        return
    emit_series(series, fmt, title=f"Synthetic series ({days} days)")
