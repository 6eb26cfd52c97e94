"""Directory scanning: one parser task per file, one aggregator for all."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from .aggregator import Aggregator
from .channel import EventChannel
from .config import ScanConfig
from .errors import ConfigError
from .file_parser import parse_file
from .formats import LanAccessClassifier, LineClassifier
from .models import FileOutcome, ScanResult

LOGGER = logging.getLogger(__name__)


def _resolve_input_dir(input_dir: str | Path | None) -> Path:
    if input_dir is None:
        raise ConfigError("no '--input-dir'")
    path = Path(input_dir)
    if not path.is_dir():
        raise ConfigError(f"'--input-dir' is not a directory: {path}")
    return path


def list_log_files(input_dir: str | Path) -> list[Path]:
    """Direct non-directory children of input_dir, sorted by name."""
    path = _resolve_input_dir(input_dir)
    return sorted((p for p in path.iterdir() if not p.is_dir()), key=lambda p: p.name)


async def scan_directory(
    input_dir: str | Path | None,
    *,
    config: ScanConfig | None = None,
    classifier: LineClassifier | None = None,
) -> ScanResult:
    """Parse every file in input_dir concurrently and count access events per address.

    A file that fails to parse is recorded in the outcomes and does not affect
    the other files. Only an invalid input directory aborts the run.
    """
    config = config or ScanConfig()
    classifier = classifier or LanAccessClassifier()
    path = _resolve_input_dir(input_dir)

    LOGGER.info("scanning '%s'", path)
    files = list_log_files(path)

    channel = EventChannel(capacity=config.capacity)
    own_sender = channel.sender()
    tasks: list[asyncio.Task] = []
    for file_path in files:
        LOGGER.info("checking '%s'", file_path.name)
        tasks.append(
            asyncio.create_task(
                parse_file(
                    file_path,
                    channel.sender(),
                    classifier=classifier,
                    encoding=config.encoding,
                    decode_errors=config.decode_errors,
                ),
                name=f"parse:{file_path.name}",
            )
        )

    # All parsers hold their own sender now; the channel closes when they finish.
    await own_sender.release()

    aggregator = Aggregator()
    try:
        counts = await aggregator.drain(channel)
    finally:
        channel.close()
        results = await asyncio.gather(*tasks, return_exceptions=True)

    outcomes: list[FileOutcome] = []
    for file_path, res in zip(files, results):
        if isinstance(res, BaseException):
            LOGGER.warning("failed to parse '%s': %s", file_path.name, res)
            outcomes.append(FileOutcome(path=file_path, error=res))
        else:
            outcomes.append(FileOutcome(path=file_path, result=res))

    return ScanResult(input_dir=path, counts=dict(counts), outcomes=outcomes)
