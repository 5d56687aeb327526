"""
Equipment Report Manager
========================
Command-line entry point: configures logging, loads the persisted reports and runs
the console menu.

Usage:
    python main.py
    python main.py --data-file /tmp/reports.json --reports-dir /tmp/out
    python main.py --log-level DEBUG --no-log-file --notify
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from equipment_reports.config import LOG_FOLDER, REPORTS_FOLDER
from equipment_reports.logging_setup import setup_logging
from equipment_reports.repository import ReportRepository
from equipment_reports.storage import get_base_dir, get_data_path
from equipment_reports.ui import ConsoleUI
from equipment_reports.utils import notify_export


def build_parser() -> argparse.ArgumentParser:
    base = get_base_dir()
    parser = argparse.ArgumentParser(
        description="Register, query and export fault reports for electronic equipment."
    )
    parser.add_argument("--data-file", type=Path, default=get_data_path(),
                        help="JSON file holding the report collection")
    parser.add_argument("--reports-dir", type=Path, default=base / REPORTS_FOLDER,
                        help="Folder receiving exported report files")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Console log level")
    parser.add_argument("--log-dir", type=Path, default=base / LOG_FOLDER,
                        help="Folder for the rotating log file")
    parser.add_argument("--no-log-file", action="store_true",
                        help="Only log to the console")
    parser.add_argument("--notify", action="store_true",
                        help="Show a desktop notification after each export")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_dir, enable_file=not args.no_log_file)

    repo = ReportRepository(
        data_path=args.data_file,
        reports_dir=args.reports_dir,
        on_export=notify_export if args.notify else None,
    )
    repo.load()
    logger.info("{} report(s) available", len(repo))

    try:
        ConsoleUI(repo).run()
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
