"""Tests for party code normalization."""

import numpy as np
import pandas as pd
import pytest

from fec_party_report.transformers.party import (
    DONATION_PARTY_COLORS,
    apply_party_display,
    apply_party_donation,
    normalize_party_display,
    normalize_party_donation,
)


class TestDisplayParty:
    @pytest.mark.parametrize("code", ["DEM", "Dem", "dem", "DFL"])
    def test_democratic_variants(self, code):
        assert normalize_party_display(code) == "Democratic Party"

    @pytest.mark.parametrize(
        "code,label",
        [
            ("REP", "Republican Party"),
            ("rep", "Republican Party"),
            ("IND", "Independent"),
            ("Lib", "Libertarian Party"),
            ("GRN", "Green Party"),
            ("gre", "Green Party"),
        ],
    )
    def test_other_known_parties(self, code, label):
        assert normalize_party_display(code) == label

    def test_unknown_code_passes_through(self):
        assert normalize_party_display("CON") == "CON"
        assert normalize_party_display(" AIP ") == "AIP"

    @pytest.mark.parametrize("code", [None, "", "  ", np.nan])
    def test_missing_code_is_other(self, code):
        assert normalize_party_display(code) == "Other"


class TestDonationParty:
    @pytest.mark.parametrize("code", ["DEM", "Dem", "dem", "DFL"])
    def test_democrat(self, code):
        assert normalize_party_donation(code) == "Democrat"

    @pytest.mark.parametrize("code", ["REP", "Rep", "rep"])
    def test_republican(self, code):
        assert normalize_party_donation(code) == "Republican"

    @pytest.mark.parametrize("code", ["LIB", "GRE", "IND", "CON"])
    def test_everything_else_is_other(self, code):
        assert normalize_party_donation(code) == "Other"

    @pytest.mark.parametrize("code", [None, "", np.nan])
    def test_missing_code_is_non_partisan(self, code):
        assert normalize_party_donation(code) == "Non-Partisan Donation"

    def test_every_label_has_a_color(self):
        labels = {normalize_party_donation(c) for c in ["DEM", "REP", "LIB", None]}
        assert labels == set(DONATION_PARTY_COLORS)


def test_series_helpers():
    codes = pd.Series(["DEM", None, "XYZ", "rep"])

    assert apply_party_display(codes).tolist() == [
        "Democratic Party",
        "Other",
        "XYZ",
        "Republican Party",
    ]
    assert apply_party_donation(codes).tolist() == [
        "Democrat",
        "Non-Partisan Donation",
        "Other",
        "Republican",
    ]


class TestCaseInsensitiveMatching:
    @pytest.mark.parametrize("code", ["dfl", "DeM", "dEm"])
    def test_mixed_case_democratic_codes(self, code):
        assert normalize_party_display(code) == "Democratic Party"
        assert normalize_party_donation(code) == "Democrat"

    def test_mixed_case_republican_code(self):
        assert normalize_party_display("rEp") == "Republican Party"
        assert normalize_party_donation("rEp") == "Republican"

    def test_unknown_code_keeps_its_spelling(self):
        assert normalize_party_display("cOn") == "cOn"
