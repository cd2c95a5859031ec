#!/usr/bin/env python3
"""
run_scan.py — Scan conversation transcripts for swearing and flattery.

Usage:
    python run_scan.py                        # Summary for you and the assistant
    python run_scan.py --breakdown            # Word-by-word tables
    python run_scan.py --me                   # Only your swearing
    python run_scan.py --assistant            # Only apologies/sycophancy
    python run_scan.py --json                 # JSON output (for scripts)
    python run_scan.py --projects-dir path/   # Custom transcript location
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from swearcounter.config import settings
from swearcounter.logging import setup_logging
from swearcounter.reporter import ReportOptions, build_json_report, format_report
from swearcounter.transcripts import find_transcript_files, scan_transcripts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scans conversation logs for your swearing and the assistant's apologies.",
    )
    parser.add_argument(
        "--projects-dir",
        default=settings.PROJECTS_DIR,
        help=f"Transcript root directory (default: {settings.PROJECTS_DIR})",
    )
    parser.add_argument("--me", action="store_true", help="Only show your swearing")
    parser.add_argument(
        "--assistant", action="store_true",
        help="Only show the assistant's apologies/sycophancy",
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument(
        "--breakdown", action="store_true",
        help="Show full word-by-word breakdown tables",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(log_format="text")

    options = ReportOptions(
        show_user=args.me or not args.assistant,
        show_assistant=args.assistant or not args.me,
        json=args.json,
        breakdown=args.breakdown,
    )

    files = find_transcript_files(args.projects_dir)
    counts = scan_transcripts(files)

    if options.json:
        print(json.dumps(build_json_report(counts, options), indent=2))
    else:
        print(format_report(counts, options))
    return 0


if __name__ == "__main__":
    sys.exit(main())
