from __future__ import annotations

import json
import sys

from loginsights.cli.visuals.table import make_console, severity_table, top_errors_table
from loginsights.domain.reference import CHART_COLORS, SEVERITY_BREAKDOWN, TOP_ERRORS


def handle(*, fmt: str) -> None:
    if fmt == "table":
        console = make_console(sys.stdout)
        console.print(severity_table())
        console.print(top_errors_table())
        return
    payload = {
        "severity": [{"name": k, "value": v} for k, v in SEVERITY_BREAKDOWN.items()],
        "topErrors": [entry._asdict() for entry in TOP_ERRORS],
        "colors": list(CHART_COLORS),
    }
    sys.stdout.write(json.dumps(payload, indent=2) + "\n")
