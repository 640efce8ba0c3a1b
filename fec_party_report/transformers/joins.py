"""Left joins across the committee, contribution and candidate tables."""

import logging

import pandas as pd
from prefect import get_run_logger
from prefect.exceptions import MissingContextError

from fec_party_report.transformers.base import BaseTransformer


def get_logger():
    """Get logger - Prefect if available, otherwise standard logging."""
    try:
        return get_run_logger()
    except MissingContextError:
        return logging.getLogger(__name__)


def _left_join(left: pd.DataFrame, right: pd.DataFrame, key: str, suffix: str) -> pd.DataFrame:
    """
    Left join that never matches on a missing key.

    pandas treats NaN keys as equal to each other, so right-hand rows with a
    missing key are dropped first; left-hand rows are always preserved.
    """
    right = right[right[key].notna()]
    joined = left.merge(right, on=key, how="left", suffixes=("", suffix))

    unmatched = left[key].isna() | ~left[key].isin(right[key])
    if len(left) and unmatched.all():
        get_logger().warning(f"No rows matched on {key}; joined columns are all null")

    return joined


def join_committees_contributions(
    committees: pd.DataFrame, contributions: pd.DataFrame
) -> pd.DataFrame:
    """
    Left join committees to their individual contributions on committee_id.

    Every committee row is kept. A committee with k contributions appears k
    times; one with none appears once with null contribution columns.
    """
    logger = get_logger()
    joined = _left_join(committees, contributions, "committee_id", "_contribution")
    logger.info(
        f"Joined {len(committees):,} committees with {len(contributions):,} contributions "
        f"-> {len(joined):,} rows"
    )
    return joined


def join_candidates(frame: pd.DataFrame, candidates: pd.DataFrame) -> pd.DataFrame:
    """
    Left join a frame to candidate summaries on candidate_id.

    Colliding candidate columns get a "_candidate" suffix.
    """
    logger = get_logger()
    joined = _left_join(frame, candidates, "candidate_id", "_candidate")
    logger.info(f"Joined {len(frame):,} rows with {len(candidates):,} candidates")
    return joined


def build_joined_frame(
    candidates: pd.DataFrame,
    committees: pd.DataFrame,
    contributions: pd.DataFrame,
) -> pd.DataFrame:
    """Committees -> contributions -> candidates, all left joins."""
    return join_candidates(join_committees_contributions(committees, contributions), candidates)


class CommitteeContributionJoinTransformer(BaseTransformer):
    """Join parsed committee records with contributions and candidate summaries."""

    required_columns = ("committee_id", "committee_party", "candidate_id")

    def get_source_stage(self) -> str:
        """Get source stage name."""
        return "parsed"

    def get_target_stage(self) -> str:
        """Get target stage name."""
        return "joined"

    def transform(self, df: pd.DataFrame, **kwargs) -> pd.DataFrame:
        """
        Join committee records with contributions and candidates.

        Args:
            df: Committee DataFrame
            contributions: Contribution DataFrame
            candidates: Candidate summary DataFrame

        Returns:
            Joined DataFrame, one row per committee/contribution pair
        """
        contributions = kwargs.get("contributions")
        candidates = kwargs.get("candidates")

        if contributions is None or candidates is None:
            raise ValueError("contributions and candidates are required")

        return build_joined_frame(candidates, df, contributions)
