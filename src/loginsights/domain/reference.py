"""Static reference tables rendered by the presentation layer.

These never change with uploads or range selection.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple


class ErrorCount(NamedTuple):
    name: str
    count: int


SEVERITY_BREAKDOWN: Mapping[str, int] = MappingProxyType(
    {
        "Error": 1550,
        "Warning": 3000,
        "Info": 15300,
    }
)

TOP_ERRORS: tuple[ErrorCount, ...] = (
    ErrorCount("NullPointerException", 500),
    ErrorCount("FileNotFoundException", 300),
    ErrorCount("SQLException", 250),
    ErrorCount("IndexOutOfBoundsException", 200),
    ErrorCount("IllegalArgumentException", 150),
)

CHART_COLORS: tuple[str, ...] = ("#FF0000", "#FFA500", "#008000", "#0000FF", "#800080")
