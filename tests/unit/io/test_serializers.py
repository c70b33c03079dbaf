import csv
import io
import json

from loginsights.domain.record import TimeSeriesRecord
from loginsights.io.serializers import (
    series_to_csv,
    series_to_dicts,
    series_to_json,
    series_to_jsonl,
)

SERIES = [
    TimeSeriesRecord("2023-01-01", 1, 2, 3, 4.5, 6),
    TimeSeriesRecord("2023-01-02", 0, 0, 0, 0.0, 0),
]


def test_dicts_use_chart_keys():
    assert series_to_dicts(SERIES)[0] == {
        "timestamp": "2023-01-01",
        "errorCount": 1,
        "warningCount": 2,
        "infoCount": 3,
        "responseTime": 4.5,
        "userCount": 6,
    }


def test_json_and_jsonl_payloads():
    assert json.loads(series_to_json(SERIES)) == series_to_dicts(SERIES)
    lines = series_to_jsonl(SERIES).splitlines()
    assert [json.loads(line)["timestamp"] for line in lines] == ["2023-01-01", "2023-01-02"]


def test_csv_has_header_in_chart_order():
    text = series_to_csv(SERIES)
    assert text.splitlines()[0] == "timestamp,errorCount,warningCount,infoCount,responseTime,userCount"
    rows = list(csv.DictReader(io.StringIO(text)))
    assert rows[0]["responseTime"] == "4.5"
    assert len(rows) == 2


def test_empty_series():
    assert series_to_dicts([]) == []
    assert series_to_jsonl([]) == ""
    assert series_to_csv([]).strip() == "timestamp,errorCount,warningCount,infoCount,responseTime,userCount"
