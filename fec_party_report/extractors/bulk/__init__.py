"""Bulk file extractors for FEC data."""

from fec_party_report.extractors.bulk.candidates import BulkFECCandidateSummaryExtractor
from fec_party_report.extractors.bulk.committees import BulkFECCommitteeExtractor
from fec_party_report.extractors.bulk.contributions import BulkFECContributionExtractor

__all__ = [
    "BulkFECCandidateSummaryExtractor",
    "BulkFECCommitteeExtractor",
    "BulkFECContributionExtractor",
]
