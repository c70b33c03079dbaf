from __future__ import annotations

from pathlib import Path
from typing import Iterator
import asyncio
import codecs
import logging

from loginsights.sources.decoders import DecodeError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 65536


def _iter_chunks(path: Path, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    with open(path, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield chunk


def read_text(path: Path | str, encoding: str = "utf-8") -> str:
    """Read a whole upload into text, raising DecodeError on bad bytes."""
    decoder = codecs.getincrementaldecoder(encoding)()
    parts: list[str] = []
    offset = 0
    try:
        for chunk in _iter_chunks(Path(path)):
            parts.append(decoder.decode(chunk))
            offset += len(chunk)
        parts.append(decoder.decode(b"", final=True))
    except UnicodeDecodeError as exc:
        raise DecodeError(
            f"not valid {encoding} text: {exc.reason}",
            format="text",
            position=offset + exc.start,
        ) from exc
    return "".join(parts)


async def read_upload(path: Path | str, encoding: str = "utf-8") -> str:
    """Read an upload off the event loop."""
    logger.debug("Reading upload %s", path)
    return await asyncio.to_thread(read_text, path, encoding)
