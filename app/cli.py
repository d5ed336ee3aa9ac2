"""
Command-line entry point.

Usage:
  dag-stats database.txt
  dag-stats database.txt --json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from app.config import LOG_LEVEL
from core.ingestion.database_parser import parse_database
from core.output.report_formatter import format_output, format_text_report
from services.processing_pipeline import ProcessingService

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dag-stats",
        description="Compute depth and reference statistics of a transaction DAG.",
    )
    parser.add_argument("database", help="Path to the transaction database file.")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON instead of text.",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help=f"Logging level (default: {LOG_LEVEL}).",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s: %(message)s")

    # Parse everything before printing anything: a bad line means no report.
    try:
        records = parse_database(args.database)
    except OSError as e:
        print(f"Error: cannot read {args.database}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Loaded %d transactions from %s", len(records), args.database)
    result = ProcessingService().process(records)

    if args.json:
        print(json.dumps(format_output(records, result), indent=2))
    else:
        print(format_text_report(records, result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
