"""Leading header block of a mail log file."""

from __future__ import annotations

from dataclasses import dataclass, field

HEADER_DELIM = ": "


@dataclass(slots=True)
class HeaderState:
    """Accumulate ``Key: Value`` lines until the first blank line.

    ``push`` returns True while the line belongs to (or terminates) the header
    and False once the header is closed, at which point the caller should treat
    the line as body.
    """

    headers: dict[str, str] = field(default_factory=dict)
    done: bool = False

    def push(self, line: str) -> bool:
        """Consume one header line (no trailing newline)."""
        if self.done:
            return False

        if not line:
            self.done = True
            return True

        key, sep, value = line.partition(HEADER_DELIM)
        if not sep:
            # Lines without a delimiter collapse onto the empty key.
            key, value = "", ""
        self.headers[key] = value
        return True
