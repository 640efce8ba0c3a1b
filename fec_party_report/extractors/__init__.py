"""Extractors for FEC bulk data files."""

from fec_party_report.extractors.bulk import (
    BulkFECCandidateSummaryExtractor,
    BulkFECCommitteeExtractor,
    BulkFECContributionExtractor,
)

__all__ = [
    "BulkFECCandidateSummaryExtractor",
    "BulkFECCommitteeExtractor",
    "BulkFECContributionExtractor",
]
