"""Tests for report tables, the donation chart and report assembly."""

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

from fec_party_report.extractors.bulk import (
    BulkFECCandidateSummaryExtractor,
    BulkFECCommitteeExtractor,
    BulkFECContributionExtractor,
)
from fec_party_report.reports import (
    CHART_FILE_NAME,
    REPORT_FILE_NAME,
    build_report,
    format_currency,
    plot_donations,
    render_cash_table,
    render_counts_table,
    render_donations_table,
    render_report,
    write_report,
)
from fec_party_report.reports.charts import MAX_MARKER_SIZE, MIN_MARKER_SIZE, marker_sizes
from fec_party_report.reports.tables import EMPTY_TABLE


@pytest.fixture
def report(candidate_file, committee_file, contribution_file):
    return build_report(
        BulkFECCandidateSummaryExtractor().extract(file_path=candidate_file),
        BulkFECCommitteeExtractor().extract(file_path=committee_file),
        BulkFECContributionExtractor().extract(file_path=contribution_file),
        election_cycle=2006,
        employer="HARVARD UNIVERSITY",
    )


@pytest.fixture
def donations():
    return pd.DataFrame(
        {
            "quarter": pd.to_datetime(["2006-01-01", "2006-01-01", "2006-04-01"]),
            "party": ["Democrat", "Republican", "Non-Partisan Donation"],
            "amount": [350.0, 12.5, 1000.0],
            "donations": [2, 1, 3],
        }
    )


class TestFormatting:
    def test_format_currency(self):
        assert format_currency(1234567.891) == "$1,234,567.89"
        assert format_currency(0) == "$0.00"
        assert format_currency(-50) == "-$50.00"
        assert format_currency(None) == ""
        assert format_currency(np.nan) == ""

    def test_cash_table(self):
        frame = pd.DataFrame(
            {"party": ["Republican Party", "Democratic Party"], "total_cash": [2500.0, 1000.5]}
        )

        table = render_cash_table(frame)

        assert "Total Cash on Hand" in table
        assert "$2,500.00" in table
        assert table.index("Republican Party") < table.index("Democratic Party")

    def test_counts_table(self):
        frame = pd.DataFrame({"party": ["Other"], "committees": [1200], "candidates": [3]})

        table = render_counts_table(frame)

        assert "Committees" in table
        assert "1,200" in table

    def test_donations_table(self, donations):
        table = render_donations_table(donations)

        assert "2006-Q1" in table
        assert "2006-Q2" in table
        assert "$1,000.00" in table

    def test_empty_tables(self):
        empty = pd.DataFrame()
        assert render_cash_table(empty) == EMPTY_TABLE
        assert render_counts_table(empty) == EMPTY_TABLE
        assert render_donations_table(empty) == EMPTY_TABLE


class TestChart:
    def test_marker_sizes_scale_with_amount(self):
        sizes = marker_sizes(pd.Series([0.0, 50.0, 100.0]), 100.0)

        assert sizes.tolist() == [MIN_MARKER_SIZE, 260.0, MAX_MARKER_SIZE]

    def test_log_scale_and_one_series_per_party(self, donations, tmp_path):
        output = tmp_path / "chart.png"

        fig = plot_donations(donations, output_path=output)
        ax = fig.axes[0]

        assert ax.get_yscale() == "log"
        assert len(ax.collections) == 3
        assert output.read_bytes()[:4] == b"\x89PNG"
        plt.close(fig)

    def test_non_positive_amounts_are_not_drawn(self, donations):
        donations.loc[1, "amount"] = -20.0

        fig = plot_donations(donations)

        assert len(fig.axes[0].collections) == 2
        plt.close(fig)

    def test_empty_frame(self):
        empty = pd.DataFrame(columns=["quarter", "party", "amount", "donations"])

        fig = plot_donations(empty)

        texts = [t.get_text() for t in fig.axes[0].texts]
        assert "No matching donations" in texts
        plt.close(fig)


class TestReport:
    def test_cash_holdings(self, report):
        assert report.cash_holdings.to_dict("records") == [
            {"party": "Republican Party", "total_cash": 2500.0},
            {"party": "Democratic Party", "total_cash": 1000.5},
            {"party": "Libertarian Party", "total_cash": 300.25},
        ]

    def test_committee_counts(self, report):
        assert report.committee_counts.to_dict("records") == [
            {"party": "Democratic Party", "committees": 1, "candidates": 1},
            {"party": "Other", "committees": 1, "candidates": 1},
        ]

    def test_donations(self, report):
        assert report.donations.to_dict("records") == [
            {
                "quarter": pd.Timestamp("2005-10-01"),
                # committee C00000002 has no party; its candidate is REP
                "party": "Republican",
                "amount": 50.0,
                "donations": 1,
            },
            {
                "quarter": pd.Timestamp("2006-01-01"),
                "party": "Democrat",
                "amount": 350.0,
                "donations": 2,
            },
            {
                "quarter": pd.Timestamp("2006-04-01"),
                "party": "Democrat",
                "amount": 500.0,
                "donations": 1,
            },
        ]

    def test_render_report(self, report):
        text = render_report(report)

        assert text.startswith("# FEC 2005-2006 Party Finance Report")
        assert "## Donations from HARVARD UNIVERSITY by Quarter" in text
        assert f"]({CHART_FILE_NAME})" in text

    def test_write_report(self, report, tmp_path):
        output_dir = tmp_path / "out" / "2006"

        report_path = write_report(report, output_dir)

        assert report_path == output_dir / REPORT_FILE_NAME
        assert "Republican Party" in report_path.read_text(encoding="utf-8")
        assert (output_dir / CHART_FILE_NAME).read_bytes()[:4] == b"\x89PNG"
