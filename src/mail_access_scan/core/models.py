"""Core data models for mail access scanning."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# address -> number of access events seen for it
CountTable = dict[str, int]


class LineKind(str, Enum):
    """How a body line was classified."""

    ACCESS = "access"
    UNRECOGNIZED_ACCESS = "unrecognized_access"
    PERIPHERAL = "peripheral"


@dataclass(frozen=True, slots=True)
class AccessEvent:
    """One recognized remote-access line, reduced to the peer address."""

    address: str
    source: str | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """Result of classifying a single body line."""

    kind: LineKind
    line: str
    event: AccessEvent | None = None


@dataclass(frozen=True, slots=True)
class FileParseResult:
    """Per-file summary produced by the file parser."""

    path: Path
    headers: dict[str, str]
    events: int
    unrecognized: int
    peripheral: tuple[str, ...]
    lines: int


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """What happened to one file during a scan: a result or an error."""

    path: Path
    result: FileParseResult | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Aggregated counts plus the per-file outcomes of one run."""

    input_dir: Path
    counts: CountTable
    outcomes: list[FileOutcome]

    @property
    def failed(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if not o.ok]
