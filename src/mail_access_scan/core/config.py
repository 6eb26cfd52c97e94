"""Run configuration with optional env overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .channel import DEFAULT_CAPACITY
from .errors import ConfigError

DEFAULT_THRESHOLD = 100


@dataclass(frozen=True, slots=True)
class ScanConfig:
    capacity: int = DEFAULT_CAPACITY
    # addresses with more events than this are listed; the rest are hidden
    threshold: int = DEFAULT_THRESHOLD
    encoding: str = "utf-8"
    decode_errors: str = "replace"


def _env_int(name: str) -> int | None:
    env = os.getenv(name)
    if env is None or env == "":
        return None
    try:
        return int(env)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer") from exc


def _resolve_capacity(capacity: int | None) -> int:
    if capacity is not None:
        if capacity < 1:
            raise ConfigError("capacity must be >= 1")
        return capacity

    value = _env_int("MAIL_ACCESS_SCAN_QUEUE_SIZE")
    if value is None:
        return DEFAULT_CAPACITY
    if value < 1:
        raise ConfigError("MAIL_ACCESS_SCAN_QUEUE_SIZE must be >= 1")
    return value


def _resolve_threshold(threshold: int | None) -> int:
    if threshold is not None:
        if threshold < 0:
            raise ConfigError("threshold must be >= 0")
        return threshold

    value = _env_int("MAIL_ACCESS_SCAN_THRESHOLD")
    if value is None:
        return DEFAULT_THRESHOLD
    if value < 0:
        raise ConfigError("MAIL_ACCESS_SCAN_THRESHOLD must be >= 0")
    return value


def resolve_scan_config(
    *,
    capacity: int | None = None,
    threshold: int | None = None,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> ScanConfig:
    """Build a ScanConfig: explicit values win, then env vars, then defaults."""
    return ScanConfig(
        capacity=_resolve_capacity(capacity),
        threshold=_resolve_threshold(threshold),
        encoding=encoding,
        decode_errors=decode_errors,
    )
