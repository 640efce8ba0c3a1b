"""Shared fixtures: small synthetic FEC bulk files and a fake FEC server."""

from pathlib import Path

import pytest

from tests.helpers import (
    CANDIDATE_ROWS,
    COMMITTEE_ROWS,
    CONTRIBUTION_ROWS,
    FakeFECServer,
    write_lines,
)


@pytest.fixture
def candidate_file(tmp_path: Path) -> Path:
    return write_lines(tmp_path / "weball06.txt", CANDIDATE_ROWS)


@pytest.fixture
def committee_file(tmp_path: Path) -> Path:
    return write_lines(tmp_path / "cm.txt", COMMITTEE_ROWS)


@pytest.fixture
def contribution_file(tmp_path: Path) -> Path:
    return write_lines(tmp_path / "itcont.txt", CONTRIBUTION_ROWS)


@pytest.fixture
def fake_fec_server(monkeypatch) -> FakeFECServer:
    """Route requests.get in the bulk client to a FakeFECServer."""
    server = FakeFECServer()
    monkeypatch.setattr("fec_party_report.clients.fec_bulk.requests.get", server.get)
    return server
