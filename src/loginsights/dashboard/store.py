from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union
import logging
import random

from loginsights.config.options import TIME_RANGES
from loginsights.config.settings import DashboardConfig
from loginsights.domain.record import Series
from loginsights.errors import LogInsightsError
from loginsights.io.readers import read_upload
from loginsights.pipeline.ingest import IngestResult, ingest_text
from loginsights.sources.decoders import DecodeError
from loginsights.sources.synthetic.metrics import generate_series

logger = logging.getLogger(__name__)


class InvalidTimeRange(LogInsightsError, ValueError):
    pass


@dataclass(frozen=True)
class SyntheticSource:
    range: int
    series: Series = field(repr=False)


@dataclass(frozen=True)
class UploadedSource:
    format: str
    series: Series = field(repr=False)
    dropped: int = 0


DataSource = Union[SyntheticSource, UploadedSource]


class DashboardStore:
    """Owns the active time range and the single dataset shown by the charts.

    Range changes regenerate synthetic data and replace any upload; uploads
    replace the dataset and leave ``time_range`` untouched. Every transition
    swaps ``source`` in one assignment.
    """

    def __init__(
        self,
        config: Optional[DashboardConfig] = None,
        *,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or DashboardConfig()
        self._rng = rng
        self._upload_seq = 0
        self.notice: Optional[str] = None
        self.time_range: int = self.config.default_time_range
        self.source: DataSource = self._synthetic(self.time_range)

    @property
    def active_series(self) -> Series:
        return list(self.source.series)

    @property
    def is_synthetic(self) -> bool:
        return isinstance(self.source, SyntheticSource)

    def _synthetic(self, days: int) -> SyntheticSource:
        return SyntheticSource(
            range=days,
            series=generate_series(days, epoch=self.config.epoch, rng=self._rng),
        )

    def set_time_range(self, days: int) -> None:
        if type(days) is not int or days not in TIME_RANGES:
            raise InvalidTimeRange(
                f"time range must be one of {', '.join(map(str, TIME_RANGES))}, got {days!r}"
            )
        source = self._synthetic(days)
        # Supersedes any upload still being read.
        self._upload_seq += 1
        self.time_range = days
        self.source = source
        self.notice = None
        logger.info("Time range set to %d days; showing synthetic data", days)

    def upload_text(self, raw_text: str) -> IngestResult:
        """Run an upload through the ingestion chain and apply it.

        Raises DecodeError for CSV structural failures under the ``compat``
        policy; the current dataset is kept in that case. Any upload still
        being read by ``upload_file`` is superseded.
        """
        self._upload_seq += 1
        return self._apply(raw_text)

    def _apply(self, raw_text: str) -> IngestResult:
        result = ingest_text(raw_text, delimiter=self.config.csv_delimiter)
        if result.error is not None:
            if result.format == "csv" and self.config.decode_errors == "compat":
                self.notice = f"Upload rejected: {result.error}"
                logger.error("%s", self.notice)
                raise result.error
            self.notice = f"Upload could not be read, showing no data: {result.error}"
            logger.warning("%s", self.notice)
            self.source = UploadedSource(format=result.format, series=[])
            return result

        self.source = UploadedSource(
            format=result.format,
            series=result.records,
            dropped=result.dropped,
        )
        self.notice = None
        if result.dropped:
            self.notice = f"{result.dropped} rows without a timestamp were skipped"
        return result

    async def upload_file(self, path: Union[Path, str]) -> Optional[IngestResult]:
        """Read a file and apply it unless a newer action started meanwhile.

        Returns None when the read was superseded and its content discarded.
        """
        self._upload_seq += 1
        seq = self._upload_seq
        try:
            text = await read_upload(path, self.config.encoding)
        except DecodeError as exc:
            if seq != self._upload_seq:
                logger.info("Discarding stale upload %s (superseded)", path)
                return None
            self.notice = f"Upload rejected: {exc}"
            logger.error("%s", self.notice)
            raise
        if seq != self._upload_seq:
            logger.info("Discarding stale upload %s (superseded)", path)
            return None
        return self._apply(text)
