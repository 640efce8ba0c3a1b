"""
Party Finance Report Flow

Downloads the FEC all-candidates, committee master and individual
contribution bulk files for one election cycle, joins them and writes the
party finance report.

Bulk files are downloaded from: https://www.fec.gov/data/browse-data/?tab=bulk-data
"""

import logging
from pathlib import Path
from typing import Any

import pandas as pd
from prefect import flow, get_run_logger, task
from prefect.cache_policies import NONE as NO_CACHE
from prefect.exceptions import MissingContextError

from fec_party_report.clients.fec_bulk import FECBulkClient, archive_url
from fec_party_report.config import get_settings, validate_election_cycle
from fec_party_report.extractors.base import BaseExtractor
from fec_party_report.extractors.bulk import (
    BulkFECCandidateSummaryExtractor,
    BulkFECCommitteeExtractor,
    BulkFECContributionExtractor,
)
from fec_party_report.reports.builder import build_report, write_report
from fec_party_report.reports.tables import (
    render_cash_table,
    render_counts_table,
    render_donations_table,
)


def get_logger():
    """Get logger - Prefect if available, otherwise standard logging."""
    try:
        return get_run_logger()
    except MissingContextError:
        return logging.getLogger(__name__)


# Bulk downloads are not retried: a failed fetch or parse aborts the run
BULK_TIMEOUT = 3600  # 1 hour for the large contribution file

EXTRACTORS: dict[str, type[BaseExtractor]] = {
    "weball": BulkFECCandidateSummaryExtractor,
    "cm": BulkFECCommitteeExtractor,
    "indiv": BulkFECContributionExtractor,
}


# ============================================================================
# EXTRACTION TASKS
# ============================================================================


@task(
    name="fetch_and_extract_bulk_file",
    retries=0,
    timeout_seconds=BULK_TIMEOUT,
    cache_policy=NO_CACHE,
)
def fetch_and_extract_task(
    file_type: str,
    election_cycle: int,
    base_url: str,
    request_timeout: int = 60,
    chunksize: int = 100_000,
) -> pd.DataFrame:
    """
    Download one bulk archive, parse its data file and discard the download.

    Args:
        file_type: One of "weball", "cm", "indiv"
        election_cycle: Election cycle year (e.g., 2006)
        base_url: FEC bulk download base URL
        request_timeout: HTTP timeout in seconds
        chunksize: Rows per parsing chunk

    Returns:
        Cleaned DataFrame for the record type
    """
    logger = get_logger()

    if file_type not in EXTRACTORS:
        raise ValueError(f"Unknown file type: {file_type}")

    extractor = EXTRACTORS[file_type]()
    schema = extractor.schema
    url = archive_url(base_url, election_cycle, schema.archive_name(election_cycle))

    logger.info(f"Processing {schema.description} ({url})")

    client = FECBulkClient(timeout=request_timeout)
    with client.bulk_data_file(url, schema.data_file_name(election_cycle)) as data_file:
        df = extractor.extract(file_path=data_file, chunksize=chunksize)

    logger.info(f"✓ {schema.description}: {len(df):,} records")
    return df


@task(name="write_party_finance_report", retries=0, cache_policy=NO_CACHE)
def write_report_task(
    candidates: pd.DataFrame,
    committees: pd.DataFrame,
    contributions: pd.DataFrame,
    election_cycle: int,
    employer: str,
    top_n: int,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Join, aggregate and render the report.

    Returns:
        Summary statistics and output paths
    """
    logger = get_logger()

    report = build_report(
        candidates,
        committees,
        contributions,
        election_cycle=election_cycle,
        employer=employer,
        top_n=top_n,
    )

    logger.info("Top parties by cash on hand:\n" + render_cash_table(report.cash_holdings))
    logger.info(
        "Committees and candidates by party:\n" + render_counts_table(report.committee_counts)
    )
    logger.info("Donations by quarter:\n" + render_donations_table(report.donations))

    report_path = write_report(report, output_dir)

    return {
        "report_path": str(report_path),
        "parties_in_cash_table": len(report.cash_holdings),
        "parties_in_counts_table": len(report.committee_counts),
        "donation_groups": len(report.donations),
    }


# ============================================================================
# MAIN REPORT FLOW
# ============================================================================


@flow(
    name="party_finance_report",
    description="Build the FEC party finance report from bulk files",
    retries=0,
)
def party_finance_report_flow(
    election_cycle: int | None = None,
    output_dir: Path | str | None = None,
    employer: str | None = None,
    top_n: int | None = None,
) -> dict[str, Any]:
    """
    Main report flow.

    The three downloads have no data dependency on each other, so they are
    submitted together and joined once all of them have finished.

    Args:
        election_cycle: Election cycle year (default from settings: 2006)
        output_dir: Directory for report.md and the chart
        employer: Exact employer string for the donation breakdown
        top_n: Number of parties in the cash-holdings table

    Returns:
        Summary statistics for the run

    Example:
        >>> party_finance_report_flow(election_cycle=2006, output_dir="reports/2006")
    """
    logger = get_run_logger()
    settings = get_settings()

    if election_cycle is None:
        election_cycle = settings.election_cycle
    if output_dir is None:
        output_dir = settings.output_dir
    if employer is None:
        employer = settings.employer_filter
    if top_n is None:
        top_n = settings.top_n_parties

    election_cycle = validate_election_cycle(election_cycle)
    output_path = Path(output_dir)

    logger.info("=" * 80)
    logger.info("FEC PARTY FINANCE REPORT")
    logger.info("=" * 80)
    logger.info(f"Election cycle: {election_cycle}")
    logger.info(f"Output directory: {output_path}")
    logger.info(f"Employer filter: {employer}")
    logger.info(f"Top parties: {top_n}")
    logger.info("=" * 80)

    futures = {
        file_type: fetch_and_extract_task.submit(
            file_type=file_type,
            election_cycle=election_cycle,
            base_url=settings.fec_bulk_base_url,
            request_timeout=settings.request_timeout,
            chunksize=settings.chunksize,
        )
        for file_type in EXTRACTORS
    }
    frames = {file_type: future.result() for file_type, future in futures.items()}

    results = write_report_task(
        candidates=frames["weball"],
        committees=frames["cm"],
        contributions=frames["indiv"],
        election_cycle=election_cycle,
        employer=employer,
        top_n=top_n,
        output_dir=output_path,
    )

    results.update(
        {
            "election_cycle": election_cycle,
            "candidates_loaded": len(frames["weball"]),
            "committees_loaded": len(frames["cm"]),
            "contributions_loaded": len(frames["indiv"]),
        }
    )

    logger.info("=" * 80)
    logger.info("REPORT COMPLETE")
    logger.info("=" * 80)
    logger.info(f"Candidates: {results['candidates_loaded']:,}")
    logger.info(f"Committees: {results['committees_loaded']:,}")
    logger.info(f"Contributions: {results['contributions_loaded']:,}")
    logger.info(f"Report: {results['report_path']}")

    return results
