"""Bulk file extractor for FEC committees."""

import logging

import pandas as pd
from prefect import get_run_logger
from prefect.exceptions import MissingContextError

from fec_party_report.extractors.base import BaseExtractor
from fec_party_report.schemas import COMMITTEE_MASTER_SCHEMA, BulkFileSchema
from fec_party_report.utils.bulk_file_parser import (
    clean_text_field,
    read_bulk_file,
)


def get_logger():
    """Get logger - Prefect if available, otherwise standard logging."""
    try:
        return get_run_logger()
    except MissingContextError:
        return logging.getLogger(__name__)


class BulkFECCommitteeExtractor(BaseExtractor):
    """Extract committee data from FEC bulk files."""

    @property
    def schema(self) -> BulkFileSchema:
        return COMMITTEE_MASTER_SCHEMA

    def extract(self, **kwargs) -> pd.DataFrame:
        """
        Extract committee data from bulk file.

        Args:
            file_path: Path to cm.txt bulk file
            chunksize: Rows per parsing chunk
            **kwargs: Additional arguments

        Returns:
            DataFrame with committee_id, committee_party, candidate_id
        """
        file_path = kwargs.get("file_path")
        if not file_path:
            raise ValueError("file_path is required")

        logger = get_logger()
        logger.info(f"Extracting committees from bulk file: {file_path}")

        # Read entire file (committees are small, ~10K records per cycle)
        df = read_bulk_file(file_path, self.schema, chunksize=kwargs.get("chunksize", 100_000))

        df = self._clean_data(df)

        logger.info(f"Extracted {len(df):,} committees from bulk file")

        return df

    def _clean_data(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Clean and standardize committee data.

        Party affiliation and candidate ID are optional in the committee
        master file; blanks become None.
        """
        df = df.copy()

        for field in ["committee_id", "committee_party", "candidate_id"]:
            df[field] = df[field].apply(clean_text_field).astype(object)

        return df
