"""Render a scan result for the console (text or JSON)."""

from __future__ import annotations

import json

from pydantic import BaseModel, Field

from mail_access_scan.core.config import DEFAULT_THRESHOLD
from mail_access_scan.core.models import CountTable, ScanResult


class ScanReport(BaseModel):
    visible: dict[str, int] = Field(
        default_factory=dict, description="Addresses above the threshold with their counts."
    )
    hidden: int = Field(ge=0, description="Addresses at or below the threshold.")
    total: int = Field(ge=0, description="Distinct addresses observed.")
    threshold: int = Field(ge=0)
    files_scanned: int = Field(default=0, ge=0)
    failed_files: list[str] = Field(default_factory=list)


def _ordered(counts: CountTable) -> list[tuple[str, int]]:
    return sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))


def render_report(counts: CountTable, threshold: int = DEFAULT_THRESHOLD) -> list[str]:
    """One line per address above threshold, then a hidden/total summary."""
    lines: list[str] = []
    hidden = 0
    for address, count in _ordered(counts):
        if count > threshold:
            lines.append(f"{json.dumps(address)}: {count}")
        else:
            hidden += 1
    lines.append(f"{hidden} hidden entries (of {len(counts)})")
    return lines


def build_report(result: ScanResult, threshold: int = DEFAULT_THRESHOLD) -> ScanReport:
    visible = {a: c for a, c in _ordered(result.counts) if c > threshold}
    return ScanReport(
        visible=visible,
        hidden=len(result.counts) - len(visible),
        total=len(result.counts),
        threshold=threshold,
        files_scanned=len(result.outcomes),
        failed_files=[o.path.name for o in result.failed],
    )
