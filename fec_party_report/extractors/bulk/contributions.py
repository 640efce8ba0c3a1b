"""Bulk file extractor for FEC individual contributions (itcont.txt)."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pandas as pd
from prefect import get_run_logger
from prefect.exceptions import MissingContextError

from fec_party_report.extractors.base import BaseExtractor
from fec_party_report.schemas import INDIVIDUAL_CONTRIBUTION_SCHEMA, BulkFileSchema
from fec_party_report.utils.bulk_file_parser import (
    clean_text_field,
    empty_frame,
    parse_fec_date,
    read_bulk_file_chunked,
)


def get_logger():
    """Get logger - Prefect if available, otherwise standard logging."""
    try:
        return get_run_logger()
    except MissingContextError:
        return logging.getLogger(__name__)


class BulkFECContributionExtractor(BaseExtractor):
    """Extract individual contributions from FEC bulk files.

    The individual contributions file is by far the largest of the three
    inputs (hundreds of thousands to millions of rows), so it is always
    parsed in chunks; extract() only concatenates the cleaned chunks.
    """

    @property
    def schema(self) -> BulkFileSchema:
        return INDIVIDUAL_CONTRIBUTION_SCHEMA

    def extract(self, **kwargs) -> pd.DataFrame:
        """
        Extract all contributions from bulk file.

        Args:
            file_path: Path to itcont.txt bulk file
            chunksize: Rows per parsing chunk (default 100K)
            **kwargs: Additional arguments

        Returns:
            DataFrame with committee_id, employer, occupation, contribution_date, amount
        """
        file_path = kwargs.get("file_path")
        if not file_path:
            raise ValueError("file_path is required")

        chunks = list(
            self.extract_chunked(file_path=file_path, chunksize=kwargs.get("chunksize", 100_000))
        )

        if not chunks:
            return self._clean_data(empty_frame(self.schema))

        return pd.concat(chunks, ignore_index=True)

    def extract_chunked(
        self,
        file_path: Path | str,
        chunksize: int = 100_000,
        **kwargs,
    ) -> Iterator[pd.DataFrame]:
        """
        Extract contribution data in chunks.

        Args:
            file_path: Path to itcont.txt bulk file
            chunksize: Rows per chunk (default 100K for memory efficiency)
            **kwargs: Additional arguments

        Yields:
            DataFrame chunks with contribution data

        Example:
            >>> extractor = BulkFECContributionExtractor()
            >>> for chunk in extractor.extract_chunked("data/itcont.txt"):
            ...     process(chunk)
        """
        logger = get_logger()
        logger.info(f"Extracting contributions from bulk file in chunks: {file_path}")

        chunk_num = 0
        total_rows = 0

        for chunk in read_bulk_file_chunked(file_path, self.schema, chunksize):
            chunk_num += 1
            total_rows += len(chunk)

            chunk = self._clean_data(chunk)

            # Log progress every 10 chunks
            if chunk_num % 10 == 0:
                logger.info(f"Processed {chunk_num} chunks ({total_rows:,} rows) from bulk file")

            yield chunk

        logger.info(f"Completed extraction: {chunk_num} chunks, {total_rows:,} total rows")

    def _clean_data(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Clean and standardize contribution data.

        Args:
            df: Raw DataFrame from bulk file

        Returns:
            Cleaned DataFrame
        """
        df = df.copy()

        # Clean text fields (trim whitespace, convert empty to None)
        for field in ["committee_id", "employer", "occupation"]:
            df[field] = df[field].apply(clean_text_field).astype(object)

        # Parse contribution date (MMDDYYYY format); unparseable dates become NaT
        df["contribution_date"] = pd.to_datetime(
            df["contribution_date"].apply(parse_fec_date).astype(object)
        )

        df["amount"] = df["amount"].astype("float64")

        return df
