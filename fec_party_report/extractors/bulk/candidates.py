"""Bulk file extractor for FEC candidate financial summaries (weball)."""

import logging

import pandas as pd
from prefect import get_run_logger
from prefect.exceptions import MissingContextError

from fec_party_report.extractors.base import BaseExtractor
from fec_party_report.schemas import CANDIDATE_SUMMARY_SCHEMA, BulkFileSchema
from fec_party_report.utils.bulk_file_parser import (
    clean_text_field,
    format_candidate_name,
    read_bulk_file,
)


def get_logger():
    """Get logger - Prefect if available, otherwise standard logging."""
    try:
        return get_run_logger()
    except MissingContextError:
        return logging.getLogger(__name__)


class BulkFECCandidateSummaryExtractor(BaseExtractor):
    """Extract candidate financial summaries from the FEC all-candidates file."""

    @property
    def schema(self) -> BulkFileSchema:
        return CANDIDATE_SUMMARY_SCHEMA

    def extract(self, **kwargs) -> pd.DataFrame:
        """
        Extract candidate summaries from bulk file.

        Args:
            file_path: Path to weballYY.txt bulk file
            chunksize: Rows per parsing chunk
            **kwargs: Additional arguments

        Returns:
            DataFrame with candidate_id, candidate_name, party, cash_on_hand, state
        """
        file_path = kwargs.get("file_path")
        if not file_path:
            raise ValueError("file_path is required")

        logger = get_logger()
        logger.info(f"Extracting candidate summaries from bulk file: {file_path}")

        # Read entire file (one row per candidate, a few thousand records)
        df = read_bulk_file(file_path, self.schema, chunksize=kwargs.get("chunksize", 100_000))

        df = self._clean_data(df)

        logger.info(f"Extracted {len(df):,} candidate summaries from bulk file")

        return df

    def _clean_data(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Clean and standardize candidate summary data.

        Args:
            df: Raw DataFrame from bulk file

        Returns:
            Cleaned DataFrame
        """
        df = df.copy()

        for field in ["candidate_id", "party", "state"]:
            df[field] = df[field].apply(clean_text_field).astype(object)

        # "LAST, FIRST" -> "FIRST LAST"
        df["candidate_name"] = df["candidate_name"].apply(format_candidate_name).astype(object)

        # Uppercase state codes
        df["state"] = df["state"].apply(lambda s: s.upper() if s else None).astype(object)

        return df
