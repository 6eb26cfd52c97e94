from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Sequence

from mail_access_scan.core.config import resolve_scan_config
from mail_access_scan.core.errors import ConfigError
from mail_access_scan.core.scanner import scan_directory
from mail_access_scan.reporting import build_report, render_report

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Log to stderr so stdout carries only the report."""
    level_name = os.getenv("MAIL_ACCESS_SCAN_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mail-access-scan",
        description="Count remote LAN access attempts per address across a directory of mail logs.",
    )
    p.add_argument("--input-dir", required=True, help="Directory of log files to scan (not recursive)")
    p.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Only list addresses seen more than N times (default: 100, env MAIL_ACCESS_SCAN_THRESHOLD)",
    )
    p.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Event queue size between parsers and aggregator (default: 4, env MAIL_ACCESS_SCAN_QUEUE_SIZE)",
    )
    p.add_argument("--json", dest="as_json", action="store_true", help="Print the report as JSON")
    return p


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    _configure_logging()

    try:
        config = resolve_scan_config(capacity=args.capacity, threshold=args.threshold)
        result = asyncio.run(scan_directory(args.input_dir, config=config))
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    if result.failed:
        LOGGER.warning("%d of %d files could not be parsed", len(result.failed), len(result.outcomes))

    if args.as_json:
        print(build_report(result, config.threshold).model_dump_json(indent=2))
        return

    for line in render_report(result.counts, config.threshold):
        print(line)


if __name__ == "__main__":
    main()
