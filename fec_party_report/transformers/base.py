"""Base class for frame-to-frame report transformations."""

import logging
from abc import ABC, abstractmethod

import pandas as pd
from prefect import get_run_logger
from prefect.exceptions import MissingContextError


def get_logger():
    """Get logger - Prefect if available, otherwise standard logging."""
    try:
        return get_run_logger()
    except MissingContextError:
        return logging.getLogger(__name__)


class BaseTransformer(ABC):
    """
    Abstract base class for transformers.

    Subclasses implement transform(); callers use run(), which checks the
    input columns and logs the stage change with row counts.
    """

    # Columns the primary input frame must carry
    required_columns: tuple[str, ...] = ()

    @abstractmethod
    def transform(self, df: pd.DataFrame, **kwargs) -> pd.DataFrame:
        """
        Transform a frame from the source stage to the target stage.

        Args:
            df: Input DataFrame
            **kwargs: Additional frames or parameters

        Returns:
            Transformed DataFrame
        """
        pass

    @abstractmethod
    def get_source_stage(self) -> str:
        """Stage name of the input frame (e.g., 'parsed')."""
        pass

    @abstractmethod
    def get_target_stage(self) -> str:
        """Stage name of the output frame (e.g., 'joined')."""
        pass

    def validate_input(self, df: pd.DataFrame) -> None:
        """Raise ValueError if the input lacks a required column."""
        missing = [c for c in self.required_columns if c not in df.columns]
        if missing:
            raise ValueError(
                f"{type(self).__name__} input is missing columns: {', '.join(missing)}"
            )

    def run(self, df: pd.DataFrame, **kwargs) -> pd.DataFrame:
        """Validate, transform and log one stage transition."""
        logger = get_logger()
        self.validate_input(df)

        result = self.transform(df, **kwargs)

        logger.info(
            f"{self.get_source_stage()} -> {self.get_target_stage()}: "
            f"{len(df):,} rows in, {len(result):,} rows out"
        )
        return result
