"""'LAN access from remote' log line classifier."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..models import AccessEvent, ClassifiedLine, LineKind

LOGGER = logging.getLogger(__name__)

LOG_LINE_DELIM = "] "
REMOTE_ACCESS_PREFIX = "[LAN access from remote"


@dataclass(frozen=True, slots=True)
class LanAccessClassifier:
    """Recognize ``[LAN access from remote] from <peer> to <mine> <day> <mon> <date> <time>``.

    Only the positions of the ``from`` / ``to`` words are checked; the trailing
    timestamp tokens are accepted as-is.
    """

    delimiter: str = LOG_LINE_DELIM
    prefix: str = REMOTE_ACCESS_PREFIX

    @staticmethod
    def peer_address(peer: str) -> str:
        """Strip an optional ``:port`` suffix from a peer token."""
        return peer.split(":", 1)[0]

    def classify(self, line: str, *, source: str | None = None) -> ClassifiedLine:
        """Classify a body line as access, unrecognized access, or peripheral."""
        parts = line.split(self.delimiter)
        if len(parts) != 2 or parts[0] != self.prefix:
            return ClassifiedLine(
                kind=LineKind.PERIPHERAL,
                line=self.delimiter.join(parts),
            )

        tokens = parts[1].split(" ")
        if len(tokens) == 8 and tokens[0] == "from" and tokens[2] == "to":
            event = AccessEvent(address=self.peer_address(tokens[1]), source=source)
            return ClassifiedLine(kind=LineKind.ACCESS, line=line, event=event)

        LOGGER.info("unrecognized access log - '%s'", "|".join(tokens))
        return ClassifiedLine(kind=LineKind.UNRECOGNIZED_ACCESS, line=line)
