"""Error types raised by the scanning pipeline."""

from __future__ import annotations


class MailAccessScanError(Exception):
    """Base class for all scanner errors."""


class ConfigError(MailAccessScanError, ValueError):
    """Invalid run configuration (bad input directory, bad env override)."""


class ChannelClosed(MailAccessScanError):
    """Raised when sending on a channel that no longer accepts events."""


class DeliveryError(MailAccessScanError):
    """A file parser could not forward an access event to the aggregator."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"failed to deliver access event from {path}: {reason}")
        self.path = path
        self.reason = reason
