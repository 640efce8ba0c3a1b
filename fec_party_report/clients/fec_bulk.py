"""Client for downloading FEC bulk data archives.

Bulk files are published at https://www.fec.gov/data/browse-data/?tab=bulk-data
as ZIP archives, one per file type and election cycle. The report only
needs them long enough to parse, so every download lives in a temporary
directory that is removed when the caller is done with it.
"""

import logging
import tempfile
import zipfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from urllib.parse import urljoin

import requests
from prefect import get_run_logger
from prefect.exceptions import MissingContextError


def get_logger():
    """Get logger - Prefect if available, otherwise standard logging."""
    try:
        return get_run_logger()
    except MissingContextError:
        return logging.getLogger(__name__)


def archive_url(base_url: str, cycle: int, zip_name: str) -> str:
    """
    Build the download URL for a bulk archive.

    Examples:
        >>> archive_url("https://www.fec.gov/files/bulk-downloads/", 2006, "cm06.zip")
        'https://www.fec.gov/files/bulk-downloads/2006/cm06.zip'
    """
    if not base_url.endswith("/"):
        base_url += "/"
    return urljoin(base_url, f"{cycle}/{zip_name}")


class FECBulkClient:
    """Download FEC bulk archives to transient local files."""

    CHUNK_SIZE = 8192

    def __init__(self, timeout: int = 60):
        """
        Initialize bulk client.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout

    def download(self, url: str, output_path: Path) -> Path:
        """
        Download a file with progress tracking.

        There is no retry: any transport failure aborts the download.

        Args:
            url: URL to download from
            output_path: Local path to save to

        Returns:
            Path of the downloaded file

        Raises:
            RuntimeError: If the request fails or returns an error status
        """
        logger = get_logger()
        logger.info(f"Downloading {url} -> {output_path}")

        try:
            response = requests.get(url, stream=True, timeout=self.timeout)
            response.raise_for_status()

            # Get file size if available
            total_size = int(response.headers.get("content-length", 0))
            if total_size:
                logger.info(f"  Size: {total_size / (1024 * 1024):.1f} MB")

            downloaded = 0
            last_log_percent = 0

            with open(output_path, "wb") as f:
                for chunk in response.iter_content(chunk_size=self.CHUNK_SIZE):
                    if not chunk:
                        continue
                    f.write(chunk)
                    downloaded += len(chunk)

                    # Log progress every 10%
                    if total_size:
                        percent = int((downloaded / total_size) * 100)
                        if percent >= last_log_percent + 10:
                            logger.info(
                                f"  Progress: {percent}% ({downloaded / (1024 * 1024):.1f} MB)"
                            )
                            last_log_percent = percent
        except requests.exceptions.RequestException as e:
            raise RuntimeError(f"Download failed for {url}: {e}") from e

        logger.info(f"Downloaded {downloaded:,} bytes to {output_path.name}")
        return output_path

    @contextmanager
    def bulk_archive(self, url: str) -> Iterator[Path]:
        """
        Download an archive into a temporary directory for the duration of a block.

        The directory and everything in it are removed when the block exits,
        whether it finishes normally or raises.

        Args:
            url: Archive URL

        Yields:
            Path to the downloaded archive
        """
        logger = get_logger()
        archive_name = url.rstrip("/").rsplit("/", 1)[-1] or "archive.zip"

        with tempfile.TemporaryDirectory(prefix="fec_bulk_") as temp_dir:
            archive_path = Path(temp_dir) / archive_name
            try:
                yield self.download(url, archive_path)
            finally:
                logger.info(f"Removing transient files for {archive_name}")

    @contextmanager
    def bulk_data_file(self, url: str, member: str) -> Iterator[Path]:
        """
        Download an archive and extract one data file from it.

        Args:
            url: Archive URL
            member: Name of the data file inside the archive (e.g. "cm.txt")

        Yields:
            Path to the extracted data file

        Raises:
            ValueError: If the archive does not contain the member
            zipfile.BadZipFile: If the download is not a valid ZIP archive
        """
        with self.bulk_archive(url) as archive_path:
            yield extract_member(archive_path, member, archive_path.parent)


def extract_member(zip_path: Path, member: str, output_dir: Path) -> Path:
    """
    Extract a single file from a ZIP archive.

    Args:
        zip_path: Path to ZIP file
        member: File name inside the archive
        output_dir: Directory to extract to

    Returns:
        Path to the extracted file
    """
    logger = get_logger()
    logger.info(f"Extracting {member} from {zip_path.name}...")

    with zipfile.ZipFile(zip_path, "r") as zip_ref:
        members = zip_ref.namelist()
        logger.info(f"  Files in archive: {len(members)}")

        if member not in members:
            raise ValueError(
                f"{zip_path.name} does not contain {member} (found: {', '.join(members)})"
            )

        extracted = zip_ref.extract(member, output_dir)

    return Path(extracted)
