"""Grouped aggregations behind the report tables and chart."""

import logging

import pandas as pd
from prefect import get_run_logger
from prefect.exceptions import MissingContextError

from fec_party_report.transformers.party import apply_party_display, apply_party_donation


def get_logger():
    """Get logger - Prefect if available, otherwise standard logging."""
    try:
        return get_run_logger()
    except MissingContextError:
        return logging.getLogger(__name__)


DEFAULT_EMPLOYER = "HARVARD UNIVERSITY"

# Candidate affiliation column carried into the joined frame by join_candidates
CANDIDATE_PARTY_COLUMN = "party"


def cash_holdings_by_party(candidates: pd.DataFrame, top_n: int = 5) -> pd.DataFrame:
    """
    Total end-of-period cash on hand per display party, largest first.

    Candidates without a cash figure are left out of the sums; a party whose
    candidates all lack one does not appear.

    Args:
        candidates: Candidate summary DataFrame
        top_n: Number of parties to keep

    Returns:
        DataFrame with columns party, total_cash (at most top_n rows)
    """
    df = candidates.dropna(subset=["cash_on_hand"])
    if df.empty:
        return pd.DataFrame(
            {"party": pd.Series(dtype=object), "total_cash": pd.Series(dtype=float)}
        )

    df = df.assign(party=apply_party_display(df["party"]))
    totals = df.groupby("party")["cash_on_hand"].sum().reset_index(name="total_cash")

    totals = totals.sort_values(["total_cash", "party"], ascending=[False, True])
    totals["total_cash"] = totals["total_cash"].round(2)

    return totals.head(top_n).reset_index(drop=True)


def committee_candidate_counts(committees: pd.DataFrame) -> pd.DataFrame:
    """
    Distinct committees and linked candidates per display party.

    Missing committee or candidate IDs are not counted. Sorted by committee
    count, largest first.

    Returns:
        DataFrame with columns party, committees, candidates
    """
    if committees.empty:
        return pd.DataFrame(
            {
                "party": pd.Series(dtype=object),
                "committees": pd.Series(dtype="int64"),
                "candidates": pd.Series(dtype="int64"),
            }
        )

    df = committees.assign(party=apply_party_display(committees["committee_party"]))
    counts = (
        df.groupby("party")
        .agg(
            committees=("committee_id", "nunique"),
            candidates=("candidate_id", "nunique"),
        )
        .reset_index()
    )

    counts = counts.sort_values(["committees", "party"], ascending=[False, True])

    return counts.reset_index(drop=True)


def quarter_start(dates: pd.Series) -> pd.Series:
    """Truncate datetimes to the first day of their calendar quarter."""
    return dates.dt.to_period("Q").dt.start_time


def donation_party_codes(joined: pd.DataFrame) -> pd.Series:
    """Candidate party where the join found one, else the committee party."""
    committee_party = joined["committee_party"]
    if CANDIDATE_PARTY_COLUMN not in joined.columns:
        return committee_party

    candidate_party = joined[CANDIDATE_PARTY_COLUMN]
    return candidate_party.where(candidate_party.notna(), committee_party)


def donations_by_quarter(
    joined: pd.DataFrame,
    employer: str = DEFAULT_EMPLOYER,
) -> pd.DataFrame:
    """
    Contributions from one employer, summed per calendar quarter and party.

    The employer must match exactly. Party is the linked candidate's
    affiliation, falling back to the recipient committee's when the
    committee has no matched candidate or the candidate has no party. Rows
    with neither are "Non-Partisan Donation".

    Args:
        joined: Committee/contribution/candidate joined DataFrame
        employer: Exact employer string to keep

    Returns:
        DataFrame with columns quarter, party, amount, donations
    """
    logger = get_logger()

    rows = joined[joined["employer"] == employer]
    rows = rows.dropna(subset=["contribution_date"])

    logger.info(f"Found {len(rows):,} dated contributions from employer {employer!r}")

    if rows.empty:
        logger.warning(f"No contributions matched employer {employer!r}")
        return pd.DataFrame(
            {
                "quarter": pd.Series(dtype="datetime64[ns]"),
                "party": pd.Series(dtype=object),
                "amount": pd.Series(dtype=float),
                "donations": pd.Series(dtype="int64"),
            }
        )

    rows = rows.assign(
        quarter=quarter_start(pd.to_datetime(rows["contribution_date"])),
        party=apply_party_donation(donation_party_codes(rows)),
    )

    grouped = rows.groupby(["quarter", "party"])
    result = pd.DataFrame(
        {
            # min_count=1 keeps a group with no amounts as NaN instead of 0
            "amount": grouped["amount"].sum(min_count=1),
            "donations": grouped.size(),
        }
    ).reset_index()

    result["amount"] = result["amount"].round(2)

    return result.sort_values(["quarter", "party"]).reset_index(drop=True)
