"""Prefect flows for report orchestration."""

from fec_party_report.flows.report_flow import party_finance_report_flow

__all__ = ["party_finance_report_flow"]
