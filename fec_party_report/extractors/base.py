"""Base extractor class for all data sources."""

from abc import ABC, abstractmethod

import pandas as pd

from fec_party_report.schemas import BulkFileSchema


class BaseExtractor(ABC):
    """Abstract base class for extractors."""

    @property
    @abstractmethod
    def schema(self) -> BulkFileSchema:
        """
        Positional schema of the bulk file this extractor reads.

        Returns:
            Schema descriptor for the record type.
        """
        pass

    @abstractmethod
    def extract(self, **kwargs) -> pd.DataFrame:
        """
        Extract data from source.

        Returns:
            DataFrame containing extracted data.
        """
        pass
