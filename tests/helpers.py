"""Builders for synthetic FEC bulk rows and a fake HTTP layer."""

import io
import zipfile
from pathlib import Path

import requests

# Column counts of the real bulk files
WEBALL_WIDTH = 30
CM_WIDTH = 15
INDIV_WIDTH = 21


def bulk_row(width: int, values: dict[int, str]) -> str:
    """Pipe-delimited row with the given positions filled in."""
    fields = [""] * width
    for position, value in values.items():
        fields[position] = value
    return "|".join(fields)


def candidate_row(cand_id: str, name: str, party: str, cash: str, state: str) -> str:
    return bulk_row(WEBALL_WIDTH, {0: cand_id, 1: name, 4: party, 10: cash, 18: state})


def committee_row(cmte_id: str, party: str, cand_id: str) -> str:
    return bulk_row(CM_WIDTH, {0: cmte_id, 1: f"COMMITTEE {cmte_id}", 10: party, 14: cand_id})


def contribution_row(cmte_id: str, employer: str, occupation: str, dt: str, amount: str) -> str:
    return bulk_row(
        INDIV_WIDTH,
        {0: cmte_id, 7: "DOE, JOHN", 11: employer, 12: occupation, 13: dt, 14: amount},
    )


CANDIDATE_ROWS = [
    candidate_row("H6MA01001", "SMITH, JOHN", "DEM", "1000.50", "ma"),
    candidate_row("S6NY02002", "DOE, JANE", "REP", "2500.00", "NY"),
    candidate_row("P60003003", "ROE , RICHARD", "LIB", "300.25", "CA"),
]

COMMITTEE_ROWS = [
    committee_row("C00000001", "DEM", "H6MA01001"),
    committee_row("C00000002", "", "S6NY02002"),
]

CONTRIBUTION_ROWS = [
    contribution_row("C00000001", "HARVARD UNIVERSITY", "PROFESSOR", "01152006", "100"),
    contribution_row("C00000001", "HARVARD UNIVERSITY", "PROFESSOR", "3052006", "250"),
    contribution_row("C00000001", "HARVARD UNIVERSITY", "LIBRARIAN", "04202006", "500"),
    contribution_row("C00000002", "HARVARD UNIVERSITY", "STUDENT", "11302005", "50"),
    contribution_row("C00000002", "MIT", "PROFESSOR", "02012006", "1000"),
]


def write_lines(path: Path, rows: list[str]) -> Path:
    path.write_text("".join(row + "\n" for row in rows), encoding="latin-1")
    return path


def zip_bytes(member: str, rows: list[str]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr(member, "".join(row + "\n" for row in rows))
    return buffer.getvalue()


class FakeResponse:
    """Minimal stand-in for a streamed requests.Response."""

    def __init__(self, content: bytes = b"", status_code: int = 200):
        self.content = content
        self.status_code = status_code
        self.headers = {"content-length": str(len(content))}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Client Error")

    def iter_content(self, chunk_size: int = 8192):
        for start in range(0, len(self.content), chunk_size):
            yield self.content[start : start + chunk_size]


class FakeFECServer:
    """In-memory URL -> archive bytes map; unknown URLs get a 404."""

    def __init__(self):
        self.archives: dict[str, bytes] = {}
        self.requested: list[str] = []

    def get(self, url, stream=False, timeout=None):
        self.requested.append(url)
        if url not in self.archives:
            return FakeResponse(status_code=404)
        return FakeResponse(self.archives[url])
