from __future__ import annotations

from pathlib import Path
import asyncio
import logging

from loginsights.cli.output import emit_series
from loginsights.cli.utils import error_exit
from loginsights.config.options import ACCEPTED_EXTENSIONS
from loginsights.config.settings import DashboardConfig
from loginsights.dashboard.store import DashboardStore
from loginsights.sources.decoders import DecodeError

logger = logging.getLogger(__name__)


def handle(*, path: str, fmt: str, config: DashboardConfig) -> None:
    src = Path(path)
    if not src.is_file():
        error_exit(f"Upload not found: {path}")
        return
    if src.suffix.lower() not in ACCEPTED_EXTENSIONS:
        # Advisory only; content sniffing decides the format.
        logger.warning("Unexpected extension %r; detecting format from content", src.suffix)

    store = DashboardStore(config)
    try:
        result = asyncio.run(store.upload_file(src))
    except DecodeError as exc:
        error_exit(f"Could not ingest {path}: {exc}", code=1)
        return
    if store.notice:
        logger.warning("%s", store.notice)
    if result is not None:
        logger.info(
            "%s: format=%s records=%d dropped=%d",
            src.name,
            result.format,
            len(result.records),
            result.dropped,
        )
    emit_series(store.active_series, fmt, title=src.name)
