"""Positional schemas for the FEC bulk files used by the report.

FEC bulk files are pipe-delimited (|) with no header row. The FEC publishes
the column order in its data dictionaries; only the columns the report
needs are listed here, keyed by their zero-based position in the row.

Data dictionaries:
    https://www.fec.gov/campaign-finance-data/all-candidates-file-description/
    https://www.fec.gov/campaign-finance-data/committee-master-file-description/
    https://www.fec.gov/campaign-finance-data/contributions-individuals-file-description/
"""

from dataclasses import dataclass
from typing import Literal

ColumnType = Literal["str", "float"]


@dataclass(frozen=True)
class BulkColumn:
    """A single retained column of a bulk file."""

    position: int
    source_name: str  # Name used in the FEC data dictionary
    field: str  # Name used throughout the report
    dtype: ColumnType = "str"


@dataclass(frozen=True)
class BulkFileSchema:
    """Column-position-to-field mapping for one FEC bulk record type."""

    name: str
    zip_name: str  # Archive name template, e.g. "cm{yy}.zip"
    member_name: str  # Data file inside the archive, e.g. "cm.txt"
    width: int  # Fields per row in the FEC data dictionary
    columns: tuple[BulkColumn, ...]
    description: str = ""

    def __post_init__(self):
        outside = [c.position for c in self.columns if not 0 <= c.position < self.width]
        if outside:
            raise ValueError(
                f"{self.name} schema positions {outside} exceed row width {self.width}"
            )

    @property
    def positions(self) -> list[int]:
        return [column.position for column in self.columns]

    @property
    def field_names(self) -> list[str]:
        return [column.field for column in self.columns]

    @property
    def position_to_field(self) -> dict[int, str]:
        return {column.position: column.field for column in self.columns}

    @property
    def dtypes(self) -> dict[str, ColumnType]:
        return {column.field: column.dtype for column in self.columns}

    @property
    def numeric_fields(self) -> list[str]:
        return [column.field for column in self.columns if column.dtype == "float"]

    def archive_name(self, cycle: int) -> str:
        """Archive file name for an election cycle (e.g. 2006 -> cm06.zip)."""
        return self.zip_name.format(yy=f"{cycle % 100:02d}", cycle=cycle)

    def data_file_name(self, cycle: int) -> str:
        """Name of the data file inside the archive."""
        return self.member_name.format(yy=f"{cycle % 100:02d}", cycle=cycle)


# All-candidates file (weball): one financial summary row per candidate
CANDIDATE_SUMMARY_SCHEMA = BulkFileSchema(
    name="weball",
    zip_name="weball{yy}.zip",
    member_name="weball{yy}.txt",
    width=30,
    description="All Candidates Financial Summary",
    columns=(
        BulkColumn(0, "CAND_ID", "candidate_id"),
        BulkColumn(1, "CAND_NAME", "candidate_name"),
        BulkColumn(4, "CAND_PTY_AFFILIATION", "party"),
        BulkColumn(10, "COH_COP", "cash_on_hand", "float"),
        BulkColumn(18, "CAND_OFFICE_ST", "state"),
    ),
)

# Committee master file (cm)
COMMITTEE_MASTER_SCHEMA = BulkFileSchema(
    name="cm",
    zip_name="cm{yy}.zip",
    member_name="cm.txt",
    width=15,
    description="Committee Master File",
    columns=(
        BulkColumn(0, "CMTE_ID", "committee_id"),
        BulkColumn(10, "CMTE_PTY_AFFILIATION", "committee_party"),
        BulkColumn(14, "CAND_ID", "candidate_id"),
    ),
)

# Individual contributions file (indiv / itcont.txt)
INDIVIDUAL_CONTRIBUTION_SCHEMA = BulkFileSchema(
    name="indiv",
    zip_name="indiv{yy}.zip",
    member_name="itcont.txt",
    width=21,
    description="Individual Contributions",
    columns=(
        BulkColumn(0, "CMTE_ID", "committee_id"),
        BulkColumn(11, "EMPLOYER", "employer"),
        BulkColumn(12, "OCCUPATION", "occupation"),
        BulkColumn(13, "TRANSACTION_DT", "contribution_date"),
        BulkColumn(14, "TRANSACTION_AMT", "amount", "float"),
    ),
)

REPORT_SCHEMAS = {
    schema.name: schema
    for schema in (
        CANDIDATE_SUMMARY_SCHEMA,
        COMMITTEE_MASTER_SCHEMA,
        INDIVIDUAL_CONTRIBUTION_SCHEMA,
    )
}
