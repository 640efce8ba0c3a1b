"""Plain-text rendering of the report tables."""

import math

import pandas as pd

EMPTY_TABLE = "(no rows)"


def format_currency(value: float | None) -> str:
    """
    Format a dollar amount with thousands separators and cents.

    Examples:
        >>> format_currency(1234567.891)
        '$1,234,567.89'
        >>> format_currency(-50)
        '-$50.00'
    """
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def render_cash_table(frame: pd.DataFrame) -> str:
    """Party / total cash on hand table."""
    if frame.empty:
        return EMPTY_TABLE

    display = frame[["party", "total_cash"]].rename(
        columns={"party": "Party", "total_cash": "Total Cash on Hand"}
    )
    return display.to_string(
        index=False,
        formatters={"Total Cash on Hand": format_currency},
        justify="left",
    )


def render_counts_table(frame: pd.DataFrame) -> str:
    """Party / committee count / candidate count table."""
    if frame.empty:
        return EMPTY_TABLE

    display = frame[["party", "committees", "candidates"]].rename(
        columns={"party": "Party", "committees": "Committees", "candidates": "Candidates"}
    )
    return display.to_string(
        index=False,
        formatters={
            "Committees": lambda n: f"{n:,}",
            "Candidates": lambda n: f"{n:,}",
        },
        justify="left",
    )


def render_donations_table(frame: pd.DataFrame) -> str:
    """Quarter / party / amount table backing the donation chart."""
    if frame.empty:
        return EMPTY_TABLE

    display = frame[["quarter", "party", "amount", "donations"]].rename(
        columns={
            "quarter": "Quarter",
            "party": "Party",
            "amount": "Amount",
            "donations": "Donations",
        }
    )
    return display.to_string(
        index=False,
        formatters={
            "Quarter": lambda q: f"{q.year}-Q{q.quarter}",
            "Amount": format_currency,
        },
        justify="left",
    )
