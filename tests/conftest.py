from __future__ import annotations

from pathlib import Path
import random

import pytest

HEADER = "timestamp,errorCount,warningCount,infoCount,responseTime,userCount"


def make_csv(rows: int) -> str:
    lines = [HEADER]
    for i in range(rows):
        lines.append(f"2024-03-{i + 1:02d},{i},{i * 2},{i * 10},{i * 1.5},{i * 100}")
    return "\n".join(lines) + "\n"


@pytest.fixture
def csv_text() -> str:
    """Ten well-formed daily rows."""
    return make_csv(10)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def write_upload(tmp_path: Path):
    """Return a helper that writes upload content into a temp file."""

    def _write(name: str, content: str | bytes) -> Path:
        dest = tmp_path / name
        if isinstance(content, bytes):
            dest.write_bytes(content)
        else:
            dest.write_text(content, encoding="utf-8")
        return dest

    return _write
