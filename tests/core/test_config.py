from __future__ import annotations

import pytest

from mail_access_scan.core.config import ScanConfig, resolve_scan_config
from mail_access_scan.core.errors import ConfigError


def test_defaults() -> None:
    assert resolve_scan_config() == ScanConfig(capacity=4, threshold=100)


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAIL_ACCESS_SCAN_QUEUE_SIZE", "16")
    monkeypatch.setenv("MAIL_ACCESS_SCAN_THRESHOLD", "5")
    cfg = resolve_scan_config()
    assert cfg.capacity == 16
    assert cfg.threshold == 5


def test_explicit_values_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAIL_ACCESS_SCAN_THRESHOLD", "5")
    assert resolve_scan_config(threshold=0).threshold == 0


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("MAIL_ACCESS_SCAN_QUEUE_SIZE", "0"),
        ("MAIL_ACCESS_SCAN_QUEUE_SIZE", "lots"),
        ("MAIL_ACCESS_SCAN_THRESHOLD", "-1"),
    ],
)
def test_invalid_env_raises(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError, match=name):
        resolve_scan_config()


def test_invalid_explicit_capacity_raises() -> None:
    with pytest.raises(ConfigError):
        resolve_scan_config(capacity=0)
