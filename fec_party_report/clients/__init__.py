"""Clients for remote data sources."""

from fec_party_report.clients.fec_bulk import FECBulkClient, archive_url, extract_member

__all__ = ["FECBulkClient", "archive_url", "extract_member"]
