from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _clear_scan_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MAIL_ACCESS_SCAN_QUEUE_SIZE", "MAIL_ACCESS_SCAN_THRESHOLD"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def access_line() -> Callable[..., str]:
    def _line(peer: str = "10.0.0.5:4444", mine: str = "me") -> str:
        return f"[LAN access from remote] from {peer} to {mine} Mon Jan 1 00:00:00"

    return _line


@pytest.fixture
def write_mail_log() -> Callable[[Path, Sequence[str], Sequence[str]], None]:
    def _write(path: Path, headers: Sequence[str], body: Sequence[str]) -> None:
        path.write_text("\n".join([*headers, "", *body]) + "\n", encoding="utf-8")

    return _write
