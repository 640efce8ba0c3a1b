"""Transformers for the join, normalize and aggregate stages."""

from fec_party_report.transformers.aggregates import (
    cash_holdings_by_party,
    committee_candidate_counts,
    donations_by_quarter,
)
from fec_party_report.transformers.joins import (
    CommitteeContributionJoinTransformer,
    build_joined_frame,
    join_candidates,
    join_committees_contributions,
)
from fec_party_report.transformers.party import (
    DONATION_PARTY_COLORS,
    apply_party_display,
    apply_party_donation,
    normalize_party_display,
    normalize_party_donation,
)

__all__ = [
    # Joins
    "CommitteeContributionJoinTransformer",
    "build_joined_frame",
    "join_candidates",
    "join_committees_contributions",
    # Aggregates
    "cash_holdings_by_party",
    "committee_candidate_counts",
    "donations_by_quarter",
    # Party normalization
    "DONATION_PARTY_COLORS",
    "apply_party_display",
    "apply_party_donation",
    "normalize_party_display",
    "normalize_party_donation",
]
