"""Party code normalization.

FEC party codes are free-form in older filings ("DEM", "Dem", "DFL", ...).
The report shows them in two places with two different policies:

- Cash-holdings and committee tables keep every party visible, so codes
  that are not recognized pass through unchanged.
- The donation chart has exactly four categories, so everything that is not
  Democratic or Republican collapses into "Other", and contributions whose
  committee has no party at all are labelled "Non-Partisan Donation".
"""

import pandas as pd

# Canonical display label -> upper-case code variants (first matching class wins).
# Codes are compared case-insensitively, so "Dem", "dem" and "DeM" all match DEM.
DISPLAY_PARTY_CLASSES: dict[str, frozenset[str]] = {
    "Democratic Party": frozenset({"DEM", "DFL"}),
    "Republican Party": frozenset({"REP"}),
    "Independent": frozenset({"IND"}),
    "Libertarian Party": frozenset({"LIB"}),
    "Green Party": frozenset({"GRE", "GRN"}),
}

DONATION_PARTY_CLASSES: dict[str, frozenset[str]] = {
    "Democrat": frozenset({"DEM", "DFL"}),
    "Republican": frozenset({"REP"}),
}

MISSING_PARTY_LABEL = "Other"
OTHER_DONATION_LABEL = "Other"
NON_PARTISAN_DONATION_LABEL = "Non-Partisan Donation"

# Fixed category colors for the donation chart
DONATION_PARTY_COLORS: dict[str, str] = {
    "Democrat": "#1f4e9c",
    "Republican": "#c0392b",
    OTHER_DONATION_LABEL: "#7f8c8d",
    NON_PARTISAN_DONATION_LABEL: "#27ae60",
}


def _is_missing(code) -> bool:
    if code is None:
        return True
    if isinstance(code, str):
        return not code.strip()
    return bool(pd.isna(code))


def _match_class(code: str, classes: dict[str, frozenset[str]]) -> str | None:
    key = code.upper()
    for label, variants in classes.items():
        if key in variants:
            return label
    return None


def normalize_party_display(code: str | None) -> str:
    """
    Canonical party label for the cash-holdings and committee tables.

    Unrecognized codes are returned unchanged; missing codes become "Other".

    Examples:
        >>> normalize_party_display("DFL")
        'Democratic Party'
        >>> normalize_party_display("CON")
        'CON'
        >>> normalize_party_display(None)
        'Other'
    """
    if _is_missing(code):
        return MISSING_PARTY_LABEL

    code = str(code).strip()
    return _match_class(code, DISPLAY_PARTY_CLASSES) or code


def normalize_party_donation(code: str | None) -> str:
    """
    Canonical party label for the donation table and chart.

    Examples:
        >>> normalize_party_donation("rep")
        'Republican'
        >>> normalize_party_donation("LIB")
        'Other'
        >>> normalize_party_donation(None)
        'Non-Partisan Donation'
    """
    if _is_missing(code):
        return NON_PARTISAN_DONATION_LABEL

    return _match_class(str(code).strip(), DONATION_PARTY_CLASSES) or OTHER_DONATION_LABEL


def apply_party_display(codes: pd.Series) -> pd.Series:
    """Map a Series of raw party codes to display labels."""
    return codes.map(normalize_party_display).astype(object)


def apply_party_donation(codes: pd.Series) -> pd.Series:
    """Map a Series of raw party codes to donation chart labels."""
    return codes.map(normalize_party_donation).astype(object)
