"""Line classifier interface."""

from __future__ import annotations

from typing import Protocol

from ..models import ClassifiedLine


class LineClassifier(Protocol):
    """Classifier interface: map a body line to a ClassifiedLine."""

    def classify(self, line: str, *, source: str | None = None) -> ClassifiedLine:
        """Classify one body line; ``source`` tags any emitted event."""
        ...
