"""Assemble and write the party finance report."""

import logging
from dataclasses import dataclass
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd
from prefect import get_run_logger
from prefect.exceptions import MissingContextError

from fec_party_report.reports.charts import plot_donations
from fec_party_report.reports.tables import (
    render_cash_table,
    render_counts_table,
    render_donations_table,
)
from fec_party_report.transformers.aggregates import (
    DEFAULT_EMPLOYER,
    cash_holdings_by_party,
    committee_candidate_counts,
    donations_by_quarter,
)
from fec_party_report.transformers.joins import CommitteeContributionJoinTransformer


def get_logger():
    """Get logger - Prefect if available, otherwise standard logging."""
    try:
        return get_run_logger()
    except MissingContextError:
        return logging.getLogger(__name__)


REPORT_FILE_NAME = "report.md"
CHART_FILE_NAME = "donations_by_quarter.png"


@dataclass(frozen=True)
class PartyFinanceReport:
    """Aggregated tables behind one report."""

    election_cycle: int
    employer: str
    cash_holdings: pd.DataFrame
    committee_counts: pd.DataFrame
    donations: pd.DataFrame


def build_report(
    candidates: pd.DataFrame,
    committees: pd.DataFrame,
    contributions: pd.DataFrame,
    election_cycle: int = 2006,
    employer: str = DEFAULT_EMPLOYER,
    top_n: int = 5,
) -> PartyFinanceReport:
    """
    Join the three record sets and compute every report aggregate.

    Args:
        candidates: Candidate summary DataFrame
        committees: Committee DataFrame
        contributions: Individual contribution DataFrame
        election_cycle: Cycle the data belongs to (used in headings)
        employer: Exact employer string for the donation breakdown
        top_n: Number of parties in the cash-holdings table

    Returns:
        PartyFinanceReport
    """
    joined = CommitteeContributionJoinTransformer().run(
        committees, contributions=contributions, candidates=candidates
    )

    return PartyFinanceReport(
        election_cycle=election_cycle,
        employer=employer,
        cash_holdings=cash_holdings_by_party(candidates, top_n=top_n),
        committee_counts=committee_candidate_counts(committees),
        donations=donations_by_quarter(joined, employer=employer),
    )


def render_report(report: PartyFinanceReport, chart_name: str | None = CHART_FILE_NAME) -> str:
    """Markdown document with the three tables and a link to the chart."""
    cycle = report.election_cycle
    lines = [
        f"# FEC {cycle - 1}-{cycle} Party Finance Report",
        "",
        "## Top Parties by Candidate Cash on Hand",
        "",
        "```",
        render_cash_table(report.cash_holdings),
        "```",
        "",
        "## Committees and Candidates by Party",
        "",
        "```",
        render_counts_table(report.committee_counts),
        "```",
        "",
        f"## Donations from {report.employer} by Quarter",
        "",
        "```",
        render_donations_table(report.donations),
        "```",
    ]

    if chart_name:
        lines += ["", f"![Donations by quarter and party]({chart_name})"]

    return "\n".join(lines) + "\n"


def write_report(report: PartyFinanceReport, output_dir: Path | str) -> Path:
    """
    Write report.md and the donation chart to a directory.

    Args:
        report: Report to write
        output_dir: Destination directory (created if missing)

    Returns:
        Path to report.md
    """
    logger = get_logger()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    chart_path = output_dir / CHART_FILE_NAME
    fig = plot_donations(report.donations, output_path=chart_path, employer=report.employer)
    plt.close(fig)

    report_path = output_dir / REPORT_FILE_NAME
    report_path.write_text(render_report(report), encoding="utf-8")

    logger.info(f"Wrote report to {report_path}")
    logger.info(f"Wrote chart to {chart_path}")

    return report_path
