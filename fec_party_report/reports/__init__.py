"""Report rendering: tables, chart and the written report."""

from fec_party_report.reports.builder import (
    CHART_FILE_NAME,
    REPORT_FILE_NAME,
    PartyFinanceReport,
    build_report,
    render_report,
    write_report,
)
from fec_party_report.reports.charts import plot_donations
from fec_party_report.reports.tables import (
    format_currency,
    render_cash_table,
    render_counts_table,
    render_donations_table,
)

__all__ = [
    "CHART_FILE_NAME",
    "REPORT_FILE_NAME",
    "PartyFinanceReport",
    "build_report",
    "render_report",
    "write_report",
    "plot_donations",
    "format_currency",
    "render_cash_table",
    "render_counts_table",
    "render_donations_table",
]
