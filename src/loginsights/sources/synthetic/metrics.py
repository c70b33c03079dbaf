from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator, Optional
import logging
import random

from loginsights.config.settings import SYNTHETIC_EPOCH
from loginsights.domain.record import Series, TimeSeriesRecord
from loginsights.sources.models.generator import DataGenerator

logger = logging.getLogger(__name__)

# Exclusive upper bounds for each randomized field.
ERROR_MAX = 100
WARNING_MAX = 200
INFO_MAX = 1000
RESPONSE_TIME_MAX = 500.0
USER_MAX = 10000


class DailyMetricsGenerator(DataGenerator):
    """Placeholder daily log metrics, one record per day from a fixed epoch.

    Timestamps are deterministic; the counts are drawn from ``rng`` which is
    unseeded unless one is passed in.
    """

    def __init__(
        self,
        days: int,
        *,
        epoch: date = SYNTHETIC_EPOCH,
        rng: Optional[random.Random] = None,
    ):
        if isinstance(days, bool) or not isinstance(days, int) or days <= 0:
            raise ValueError(f"days must be a positive integer, got {days!r}")
        self.days = days
        self.epoch = epoch
        self.rng = rng or random.Random()

    def generate(self) -> Iterator[TimeSeriesRecord]:
        rng = self.rng
        for i in range(self.days):
            yield TimeSeriesRecord(
                timestamp=(self.epoch + timedelta(days=i)).isoformat(),
                error_count=rng.randrange(ERROR_MAX),
                warning_count=rng.randrange(WARNING_MAX),
                info_count=rng.randrange(INFO_MAX),
                response_time=rng.random() * RESPONSE_TIME_MAX,
                user_count=rng.randrange(USER_MAX),
            )

    def count(self) -> Optional[int]:
        return self.days


def generate_series(
    days: int,
    *,
    epoch: date = SYNTHETIC_EPOCH,
    rng: Optional[random.Random] = None,
) -> Series:
    series = list(DailyMetricsGenerator(days, epoch=epoch, rng=rng))
    logger.debug("Generated synthetic series: days=%d epoch=%s", days, epoch)
    return series
