"""Donation scatter plot."""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from fec_party_report.transformers.party import DONATION_PARTY_COLORS  # noqa: E402

MIN_MARKER_SIZE = 20
MAX_MARKER_SIZE = 500


def marker_sizes(amounts: pd.Series, max_amount: float) -> pd.Series:
    """Scale amounts linearly into the marker size range."""
    if max_amount <= 0:
        return pd.Series(MIN_MARKER_SIZE, index=amounts.index, dtype=float)
    return MIN_MARKER_SIZE + (MAX_MARKER_SIZE - MIN_MARKER_SIZE) * amounts / max_amount


def plot_donations(
    frame: pd.DataFrame,
    output_path: Path | str | None = None,
    employer: str = "HARVARD UNIVERSITY",
) -> Figure:
    """
    Scatter quarterly donation totals by party.

    x is the quarter, y the summed amount on a log scale, marker area grows
    with the amount and color encodes the donation party. Non-positive
    totals (net refunds) cannot be drawn on a log axis and are left out.

    Args:
        frame: Output of donations_by_quarter()
        output_path: Optional PNG path to save the figure to
        employer: Employer name used in the title

    Returns:
        The matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=(12, 7))

    plotted = frame[frame["amount"] > 0] if not frame.empty else frame
    max_amount = float(plotted["amount"].max()) if not plotted.empty else 0.0

    for party, color in DONATION_PARTY_COLORS.items():
        rows = plotted[plotted["party"] == party]
        if rows.empty:
            continue
        ax.scatter(
            rows["quarter"],
            rows["amount"],
            s=marker_sizes(rows["amount"], max_amount),
            color=color,
            alpha=0.7,
            edgecolors="black",
            linewidths=0.5,
            label=party,
        )

    if plotted.empty:
        ax.text(
            0.5,
            0.5,
            "No matching donations",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )
    else:
        ax.set_yscale("log")
        ax.legend(title="Party", loc="upper left")

    ax.set_xlabel("Quarter", fontsize=12)
    ax.set_ylabel("Donation Amount (USD, log scale)", fontsize=12)
    ax.set_title(
        f"Donations from {employer.title()} Employees by Quarter and Party",
        fontsize=14,
        fontweight="bold",
    )
    ax.grid(True, alpha=0.3, which="both")

    fig.tight_layout()

    if output_path is not None:
        fig.savefig(output_path, dpi=150, bbox_inches="tight")

    return fig
