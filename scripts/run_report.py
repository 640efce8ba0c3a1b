#!/usr/bin/env python3
"""
Run the party finance report flow.

Downloads the FEC all-candidates, committee master and individual
contribution bulk files, joins them and writes report.md plus the donation
chart. Downloaded archives are deleted once parsed.

Usage:
    # 2005-2006 cycle with defaults
    poetry run python scripts/run_report.py

    # Different output directory and employer
    poetry run python scripts/run_report.py --output-dir reports/2006 --employer "HARVARD UNIVERSITY"
"""

import argparse
import logging
import sys
from datetime import datetime

from fec_party_report.config import get_settings
from fec_party_report.flows.report_flow import party_finance_report_flow


# Setup logging
def setup_logging(level: str = "INFO") -> str:
    """Setup logging to both console and file in /tmp."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = f"/tmp/party_finance_report_{timestamp}.log"

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(log_file), logging.StreamHandler(sys.stdout)],
    )

    return log_file


logger = logging.getLogger(__name__)


def parse_args():
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Build the FEC party finance report from bulk files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default report (2006 cycle, Harvard University donations)
  %(prog)s

  # Write into a specific directory
  %(prog)s --output-dir reports/2006

  # Show the top 10 parties by cash on hand
  %(prog)s --top-n 10

Settings can also be provided through environment variables or .env
(ELECTION_CYCLE, OUTPUT_DIR, EMPLOYER_FILTER, TOP_N_PARTIES, ...).
        """,
    )
    parser.add_argument(
        "--cycle",
        type=int,
        default=settings.election_cycle,
        help=f"Election cycle year (default: {settings.election_cycle})",
    )
    parser.add_argument(
        "--output-dir",
        default=str(settings.output_dir),
        help=f"Directory for report.md and the chart (default: {settings.output_dir})",
    )
    parser.add_argument(
        "--employer",
        default=settings.employer_filter,
        help=f"Exact employer string for the donation chart (default: {settings.employer_filter})",
    )
    parser.add_argument(
        "--top-n",
        type=int,
        default=settings.top_n_parties,
        help=f"Parties shown in the cash-holdings table (default: {settings.top_n_parties})",
    )

    return parser.parse_args()


def main():
    # Setup logging first
    log_file = setup_logging(get_settings().log_level)
    logger.info(f"Logging to: {log_file}")

    args = parse_args()

    try:
        result = party_finance_report_flow(
            election_cycle=args.cycle,
            output_dir=args.output_dir,
            employer=args.employer,
            top_n=args.top_n,
        )

        logger.info("\n" + "=" * 80)
        logger.info("PARTY FINANCE REPORT COMPLETE")
        logger.info("=" * 80)
        logger.info(f"Report: {result['report_path']}")
        logger.info(f"Contributions parsed: {result['contributions_loaded']:,}")
        logger.info("=" * 80)
        logger.info(f"\nLog file: {log_file}")

    except Exception as e:
        logger.error(f"\n✗ REPORT FAILED: {e}")
        logger.exception("Full traceback:")
        sys.exit(1)


if __name__ == "__main__":
    main()
