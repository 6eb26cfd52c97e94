"""Module entrypoint.

Allows:
    python -m mail_access_scan --input-dir <path>
"""

from __future__ import annotations

from mail_access_scan.cli import main

if __name__ == "__main__":
    main()
