from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import csv
import io
import json
import logging

from loginsights.errors import LogInsightsError

logger = logging.getLogger(__name__)

RawRow = Dict[str, Any]


class DecodeError(LogInsightsError):
    """Structural failure while decoding an upload.

    ``rows`` holds whatever was decoded before the failure.
    """

    def __init__(
        self,
        message: str,
        *,
        format: str,
        line: Optional[int] = None,
        position: Optional[int] = None,
        rows: Optional[List[RawRow]] = None,
    ):
        self.format = format
        self.line = line
        self.position = position
        self.rows = list(rows or [])
        where = []
        if line is not None:
            where.append(f"line {line}")
        if position is not None:
            where.append(f"position {position}")
        suffix = f" ({', '.join(where)})" if where else ""
        super().__init__(f"{format} decode failed{suffix}: {message}")
        self.reason = message


@dataclass
class DecodeResult:
    format: str
    rows: List[RawRow] = field(default_factory=list)
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Decoder(ABC):
    format: str = ""

    @abstractmethod
    def decode(self, text: str) -> DecodeResult:
        pass


class CsvDecoder(Decoder):
    format = "csv"

    def __init__(self, *, delimiter: str = ","):
        self.delimiter = delimiter

    def decode(self, text: str) -> DecodeResult:
        rows: List[RawRow] = []
        reader = csv.DictReader(
            io.StringIO(text.lstrip("\ufeff"), newline=""),
            delimiter=self.delimiter,
            strict=True,
        )
        try:
            for row in reader:
                # Cells beyond the header land under the None key.
                row.pop(None, None)
                rows.append(row)
        except csv.Error as exc:
            error = DecodeError(str(exc), format=self.format, line=reader.line_num, rows=rows)
            logger.warning("%s", error)
            return DecodeResult(self.format, rows, error)
        return DecodeResult(self.format, rows)


class JsonDecoder(Decoder):
    format = "json"

    def decode(self, text: str) -> DecodeResult:
        try:
            data = json.loads(text.lstrip("\ufeff"))
        except json.JSONDecodeError as exc:
            error = DecodeError(exc.msg, format=self.format, line=exc.lineno, position=exc.pos)
            logger.warning("Error parsing JSON: %s", error)
            return DecodeResult(self.format, [], error)
        except RecursionError:
            error = DecodeError("document nested too deeply", format=self.format)
            logger.warning("Error parsing JSON: %s", error)
            return DecodeResult(self.format, [], error)

        if isinstance(data, dict):
            return DecodeResult(self.format, [data])
        if not isinstance(data, list):
            logger.warning("JSON upload is a bare %s; no rows decoded", type(data).__name__)
            return DecodeResult(self.format, [])

        rows: List[RawRow] = []
        for idx, item in enumerate(data):
            if not isinstance(item, dict):
                logger.debug("Skipping non-object JSON item at index %d", idx)
                continue
            rows.append(item)
        return DecodeResult(self.format, rows)


def decoder_for(format: str, *, delimiter: str = ",") -> Decoder:
    fmt = (format or "").lower()
    if fmt == "csv":
        return CsvDecoder(delimiter=delimiter)
    if fmt == "json":
        return JsonDecoder()
    raise ValueError(f"unsupported upload format: {format}")
