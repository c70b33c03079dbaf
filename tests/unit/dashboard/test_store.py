from __future__ import annotations

import pytest

from loginsights.config.settings import DashboardConfig
from loginsights.dashboard.store import (
    DashboardStore,
    InvalidTimeRange,
    SyntheticSource,
    UploadedSource,
)
from loginsights.sources.decoders import DecodeError
from tests.conftest import HEADER, make_csv


def test_initial_state_is_seven_synthetic_days():
    store = DashboardStore()
    assert store.time_range == 7
    assert store.is_synthetic
    assert len(store.active_series) == 7
    assert store.active_series[0].timestamp == "2023-01-01"


def test_initial_range_follows_config():
    store = DashboardStore(DashboardConfig(default_time_range=30))
    assert store.time_range == 30
    assert len(store.active_series) == 30


@pytest.mark.parametrize("days", [7, 30, 90])
def test_set_time_range_regenerates(days):
    store = DashboardStore()
    store.set_time_range(days)
    assert store.time_range == days
    assert isinstance(store.source, SyntheticSource)
    assert store.source.range == days
    assert len(store.active_series) == days


@pytest.mark.parametrize("days", [0, 1, 14, 365, "30", 30.0, 7.0, True, None])
def test_set_time_range_rejects_values_outside_the_closed_set(days):
    store = DashboardStore()
    before = store.active_series
    with pytest.raises(InvalidTimeRange, match="time range must be one of 7, 30, 90"):
        store.set_time_range(days)
    assert store.time_range == 7
    assert store.active_series == before


def test_invalid_time_range_is_a_value_error():
    with pytest.raises(ValueError):
        DashboardStore().set_time_range(45)


def test_upload_keeps_range_and_replaces_series():
    store = DashboardStore()
    store.set_time_range(30)
    result = store.upload_text(make_csv(10))

    assert result.ok
    assert store.time_range == 30
    assert len(store.active_series) == 10
    assert isinstance(store.source, UploadedSource)
    assert store.source.format == "csv"
    assert not store.is_synthetic


def test_range_change_after_upload_reverts_to_synthetic():
    store = DashboardStore()
    store.upload_text(make_csv(10))
    store.set_time_range(90)
    assert store.is_synthetic
    assert len(store.active_series) == 90


def test_repeated_uploads_are_record_for_record_equal(csv_text):
    store = DashboardStore()
    store.upload_text(csv_text)
    first = store.active_series
    store.upload_text(csv_text)
    assert store.active_series == first


def test_empty_valid_upload_replaces_series_with_nothing():
    store = DashboardStore()
    store.upload_text("[]")
    assert store.active_series == []
    assert store.notice is None


def test_malformed_json_gives_empty_series_with_notice():
    store = DashboardStore()
    result = store.upload_text("{not valid")
    assert result.error is not None
    assert store.active_series == []
    assert store.notice and "could not be read" in store.notice


def test_deeply_nested_json_gives_empty_series_with_notice():
    store = DashboardStore()
    result = store.upload_text("[" * 100000)
    assert result.error is not None
    assert store.active_series == []
    assert store.notice and "could not be read" in store.notice


def test_csv_decode_error_keeps_previous_series_under_compat_policy():
    store = DashboardStore()
    store.upload_text(make_csv(3))
    before = store.active_series

    bad = HEADER + '\n2023-01-01,1,1,1,1,1\n"2023-01-02,2,2,2,2,2\n'
    with pytest.raises(DecodeError) as exc:
        store.upload_text(bad)

    assert exc.value.format == "csv"
    assert len(exc.value.rows) == 1
    assert store.active_series == before
    assert store.notice and store.notice.startswith("Upload rejected")


def test_csv_decode_error_soft_fails_under_soft_policy():
    store = DashboardStore(DashboardConfig(decode_errors="soft"))
    store.upload_text(make_csv(3))

    result = store.upload_text(HEADER + '\n"2023-01-02,2,2,2,2,2\n')

    assert result.error is not None
    assert store.active_series == []
    assert isinstance(store.source, UploadedSource)


def test_dropped_rows_are_reported_in_notice():
    store = DashboardStore()
    store.upload_text(HEADER + "\n2023-01-01,1,1,1,1,1\n,2,2,2,2,2\n")
    assert len(store.active_series) == 1
    assert store.source.dropped == 1
    assert store.notice == "1 rows without a timestamp were skipped"


def test_active_series_is_a_copy():
    store = DashboardStore()
    series = store.active_series
    series.clear()
    assert len(store.active_series) == 7


def test_csv_delimiter_from_config():
    store = DashboardStore(DashboardConfig(csv_delimiter=";"))
    store.upload_text("timestamp;errorCount\n2023-01-01;4\n")
    assert store.active_series[0].error_count == 4
