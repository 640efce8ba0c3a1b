"""Utilities for parsing FEC bulk data files."""

import csv
import logging
from collections.abc import Iterator
from datetime import date
from pathlib import Path

import pandas as pd
from prefect import get_run_logger
from prefect.exceptions import MissingContextError

from fec_party_report.schemas import BulkFileSchema


def get_logger():
    """Get logger - Prefect if available, otherwise standard logging."""
    try:
        return get_run_logger()
    except MissingContextError:
        return logging.getLogger(__name__)


# Values treated as missing when reading bulk files
NA_VALUES = ["", " ", "NULL", "null"]

# Older cycles contain bytes that are not valid UTF-8
BULK_FILE_ENCODING = "latin-1"

# Separator used to read each line whole before splitting on "|"
RAW_LINE_SEPARATOR = "\x1f"


def parse_fec_date(date_str: str | None) -> date | None:
    """
    Parse FEC date format (MMDDYYYY or MDDYYYY) to a calendar date.

    FEC dates may have leading zeros omitted (e.g., "3312006" for "03312006").

    Args:
        date_str: Date string in MMDDYYYY or MDDYYYY format (e.g., "12312006", "3312006")

    Returns:
        Parsed date or None if invalid/empty

    Examples:
        >>> parse_fec_date("12312006")
        datetime.date(2006, 12, 31)
        >>> parse_fec_date("3312006")
        datetime.date(2006, 3, 31)
        >>> parse_fec_date(None)
        None
        >>> parse_fec_date("")
        None
    """
    if date_str is None or pd.isna(date_str):
        return None

    try:
        # Remove any whitespace
        date_str = str(date_str).strip()

        # FEC dates can be 7 or 8 characters (leading zero may be omitted)
        if len(date_str) == 7:
            # MDDYYYY format - pad with leading zero
            date_str = "0" + date_str
        elif len(date_str) != 8:
            # Invalid length
            return None

        month = int(date_str[:2])
        day = int(date_str[2:4])
        year = int(date_str[4:8])

        return date(year, month, day)
    except (ValueError, AttributeError):
        return None


def clean_text_field(text: str | None) -> str | None:
    """
    Clean text field by trimming whitespace and converting empty to None.

    Args:
        text: Text string to clean

    Returns:
        Cleaned text or None if empty

    Examples:
        >>> clean_text_field("  Hello  ")
        'Hello'
        >>> clean_text_field("")
        None
        >>> clean_text_field(None)
        None
    """
    if text is None or pd.isna(text):
        return None

    cleaned = str(text).strip()

    return cleaned if cleaned else None


def format_candidate_name(raw_name: str | None) -> str | None:
    """
    Turn an FEC "LAST, FIRST" candidate name into "FIRST LAST".

    The name is split on the first comma only, so suffixes and middle names
    stay with the first-name part. Names without a comma are only trimmed.

    Examples:
        >>> format_candidate_name("CLINTON, HILLARY RODHAM")
        'HILLARY RODHAM CLINTON'
        >>> format_candidate_name(" SANDERS ,BERNARD ")
        'BERNARD SANDERS'
        >>> format_candidate_name("CHERYL")
        'CHERYL'
    """
    name = clean_text_field(raw_name)
    if name is None:
        return None

    if "," not in name:
        return name

    last, first = (part.strip() for part in name.split(",", 1))
    full_name = f"{first} {last}".strip()

    return full_name or None


def count_data_lines(file_path: Path | str) -> int:
    """Count non-blank physical lines in a bulk file."""
    count = 0
    with open(file_path, "rb") as f:
        for line in f:
            if line.strip():
                count += 1
    return count


def coerce_numeric_fields(df: pd.DataFrame, schema: BulkFileSchema) -> tuple[pd.DataFrame, int]:
    """
    Convert the schema's numeric fields from text to float.

    Values that are present but not numeric become NaN.

    Returns:
        Tuple of (converted DataFrame, number of values coerced to NaN)
    """
    df = df.copy()
    coerced = 0

    for field in schema.numeric_fields:
        raw = df[field]
        stripped = raw.map(lambda v: v.strip() if isinstance(v, str) else v)
        converted = pd.to_numeric(stripped, errors="coerce")
        coerced += int((raw.notna() & converted.isna()).sum())
        df[field] = converted.astype("float64")

    return df, coerced


def split_bulk_lines(lines: pd.Series, schema: BulkFileSchema) -> pd.DataFrame:
    """
    Split raw pipe-delimited lines into the schema's fixed-width columns.

    Lines with more fields than schema.width are dropped. Shorter lines are
    padded with NaN, and NA_VALUES become NaN.

    Returns:
        DataFrame with integer columns 0..width-1, indexed like the input
    """
    lines = lines[lines.str.strip() != ""]
    fields = lines.str.split("|", regex=False)
    fields = fields[fields.str.len() <= schema.width]

    frame = pd.DataFrame(fields.tolist(), index=fields.index, dtype=object)
    frame = frame.reindex(columns=range(schema.width))

    return frame.mask(frame.isin(NA_VALUES))


def read_bulk_file_chunked(
    file_path: Path | str,
    schema: BulkFileSchema,
    chunksize: int = 100_000,
) -> Iterator[pd.DataFrame]:
    """
    Read FEC bulk data file in chunks.

    FEC bulk files are pipe-delimited (|) with no header row. Each line is
    read as raw text and split against the schema's fixed row width, so the
    width never depends on whichever line happens to come first. Only the
    columns listed in the schema are kept, renamed to the schema's field
    names. Numeric fields are converted afterwards so malformed values can
    be counted.

    Rows with more fields than the schema width are skipped. Rows with
    fewer fields are padded with NaN. Both skipped rows and coerced
    numeric values are reported as warnings.

    Args:
        file_path: Path to the bulk data file (.txt)
        schema: Positional schema for the record type
        chunksize: Number of rows per chunk

    Yields:
        DataFrame chunks with the schema's field names as columns

    Example:
        >>> for chunk in read_bulk_file_chunked("data/cm.txt", COMMITTEE_MASTER_SCHEMA):
        ...     process_chunk(chunk)
    """
    logger = get_logger()

    line_count = count_data_lines(file_path)
    if line_count == 0:
        logger.warning(f"Bulk file {file_path} is empty")
        return

    logger.info(
        f"Reading {schema.description or schema.name} bulk file {file_path} "
        f"({len(schema.columns)} of its columns) in chunks of {chunksize:,} rows"
    )

    # One raw text column per line; unit separator (0x1F) never occurs in FEC files
    chunks = pd.read_csv(
        file_path,
        sep=RAW_LINE_SEPARATOR,
        header=None,
        names=["line"],
        chunksize=chunksize,
        dtype=str,
        na_filter=False,
        quoting=csv.QUOTE_NONE,
        on_bad_lines="skip",
        encoding=BULK_FILE_ENCODING,
    )

    total_rows = 0
    total_coerced = 0

    for i, raw in enumerate(chunks, start=1):
        chunk = split_bulk_lines(raw["line"], schema)
        chunk = chunk[schema.positions].rename(columns=schema.position_to_field)
        chunk, coerced = coerce_numeric_fields(chunk, schema)

        total_rows += len(chunk)
        total_coerced += coerced

        logger.debug(f"Processing chunk {i} ({len(chunk):,} rows)")
        yield chunk

    skipped = line_count - total_rows
    if skipped > 0:
        logger.warning(f"Skipped {skipped:,} malformed rows in {file_path}")
    if total_coerced > 0:
        logger.warning(
            f"Coerced {total_coerced:,} non-numeric values to null in "
            f"{', '.join(schema.numeric_fields)}"
        )

    logger.info(f"Loaded {total_rows:,} rows from {file_path}")


def read_bulk_file(
    file_path: Path | str,
    schema: BulkFileSchema,
    chunksize: int = 100_000,
) -> pd.DataFrame:
    """
    Read entire FEC bulk data file into memory.

    The file is still parsed chunk by chunk; only the retained columns of
    each chunk are kept before concatenation.

    Args:
        file_path: Path to the bulk data file (.txt)
        schema: Positional schema for the record type
        chunksize: Number of rows per parsing chunk

    Returns:
        Complete DataFrame

    Example:
        >>> df = read_bulk_file("data/cm.txt", COMMITTEE_MASTER_SCHEMA)
    """
    chunks = list(read_bulk_file_chunked(file_path, schema, chunksize=chunksize))

    if not chunks:
        return empty_frame(schema)

    return pd.concat(chunks, ignore_index=True)


def empty_frame(schema: BulkFileSchema) -> pd.DataFrame:
    """Empty DataFrame with the schema's columns and dtypes."""
    return pd.DataFrame(
        {
            field: pd.Series(dtype="float64" if dtype == "float" else "object")
            for field, dtype in schema.dtypes.items()
        }
    )
