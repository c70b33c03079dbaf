from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging

from loginsights.domain.record import Series
from loginsights.pipeline.normalize import normalize_rows
from loginsights.sources.decoders import DecodeError, decoder_for
from loginsights.sources.detect import detect_format

logger = logging.getLogger(__name__)


@dataclass
class IngestResult:
    """Outcome of running one upload through detect, decode and normalize.

    ``records`` holds what survived normalization of the decoded rows, which
    is partial when ``error`` is set.
    """

    format: str
    records: Series
    decoded: int
    dropped: int
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def ingest_text(text: str, *, delimiter: str = ",") -> IngestResult:
    fmt = detect_format(text)
    decoded = decoder_for(fmt, delimiter=delimiter).decode(text)
    normalized = normalize_rows(decoded.rows)
    logger.info(
        "Ingested %s upload: rows=%d records=%d dropped=%d",
        fmt,
        len(decoded.rows),
        len(normalized.records),
        normalized.dropped,
    )
    return IngestResult(
        format=fmt,
        records=normalized.records,
        decoded=len(decoded.rows),
        dropped=normalized.dropped,
        error=decoded.error,
    )
