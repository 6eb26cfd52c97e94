"""Per-file parsing: header block first, then body classification.

Each recognized access line is forwarded to the aggregator through a channel
sender owned by this parser.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from enum import Enum
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .channel import Sender
from .errors import ChannelClosed, DeliveryError
from .formats import LanAccessClassifier, LineClassifier
from .header import HeaderState
from .models import FileParseResult, LineKind

LOGGER = logging.getLogger(__name__)


class ParserState(str, Enum):
    HEADER = "header"
    BODY = "body"


@asynccontextmanager
async def _open_text(path: Path, *, encoding: str, decode_errors: str):
    """Open a log file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors, newline="\n")
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(
            path, encoding=encoding, errors=decode_errors, newline="\n"
        ) as f:
            yield f


async def iter_lines(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> AsyncIterator[str]:
    """Yield the lines of a file without their line terminators."""
    async with _open_text(Path(path), encoding=encoding, decode_errors=decode_errors) as f:
        async for line in f:
            yield line.rstrip("\r\n")


async def parse_file(
    path: str | Path,
    sender: Sender,
    *,
    classifier: LineClassifier | None = None,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> FileParseResult:
    """Parse one mail log file and forward its access events.

    Raises OSError when the file cannot be read and DeliveryError when an event
    cannot be forwarded. The sender is released either way.
    """
    path = Path(path)
    classifier = classifier or LanAccessClassifier()
    source = str(path)

    head = HeaderState()
    state = ParserState.HEADER
    peripheral: list[str] = []
    events = 0
    unrecognized = 0
    line_count = 0

    async with sender:
        async for line in iter_lines(path, encoding=encoding, decode_errors=decode_errors):
            line_count += 1
            if state is ParserState.HEADER:
                if head.push(line):
                    continue
                state = ParserState.BODY

            classified = classifier.classify(line, source=source)
            if classified.kind is LineKind.ACCESS and classified.event is not None:
                try:
                    await sender.send(classified.event)
                except ChannelClosed as exc:
                    LOGGER.warning("could not forward access event from %s: %s", path.name, exc)
                    raise DeliveryError(source, str(exc)) from exc
                events += 1
            elif classified.kind is LineKind.UNRECOGNIZED_ACCESS:
                unrecognized += 1
            else:
                peripheral.append(classified.line)

    LOGGER.debug(
        "parsed %s: %d lines, %d headers, %d events, %d peripheral",
        path.name,
        line_count,
        len(head.headers),
        events,
        len(peripheral),
    )
    return FileParseResult(
        path=path,
        headers=dict(head.headers),
        events=events,
        unrecognized=unrecognized,
        peripheral=tuple(peripheral),
        lines=line_count,
    )
