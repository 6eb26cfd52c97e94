"""Body line classifiers.

Only the router's ``[LAN access from remote]`` shape is recognized.
"""

from __future__ import annotations

from .base import LineClassifier
from .lan_access import LOG_LINE_DELIM, REMOTE_ACCESS_PREFIX, LanAccessClassifier

__all__ = [
    "LOG_LINE_DELIM",
    "LanAccessClassifier",
    "LineClassifier",
    "REMOTE_ACCESS_PREFIX",
]
