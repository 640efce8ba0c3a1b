"""Utility functions and classes."""

from fec_party_report.utils.bulk_file_parser import (
    clean_text_field,
    format_candidate_name,
    parse_fec_date,
    read_bulk_file,
    read_bulk_file_chunked,
)

__all__ = [
    "clean_text_field",
    "format_candidate_name",
    "parse_fec_date",
    "read_bulk_file",
    "read_bulk_file_chunked",
]
