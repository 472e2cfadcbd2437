"""
Data service - Centralized dataset loading with memoized parsing.
Provides a single source of truth for the monthly and annual records.
"""

import hashlib
from pathlib import Path
from typing import Optional

from ..config import DATA_DIR
from ..logger import setup_logger, log_records_stats
from ..models import ANNUAL_DATASET, MONTHLY_DATASET, DatasetSpec, EnergyRecord
from ..parsing import load_dataset_text, parse_dataset

logger = setup_logger(__name__)


def _get_cache_key(text: str, dataset: DatasetSpec) -> str:
    """Generate a hash-based cache key from the input text and layout."""
    digest = hashlib.md5(text.encode()).hexdigest()
    return f"{dataset.name}:{digest}"


class EnergyDataService:
    """
    Service layer for dataset access with built-in parse caching.
    Identical input text is parsed once per service instance.
    """

    def __init__(self, data_dir: Optional[str | Path] = None, cache_enabled: bool = True):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        self.cache_enabled = cache_enabled
        self._cache: dict[str, list[EnergyRecord]] = {}

    @property
    def cache_size(self) -> int:
        """Number of memoized parse results."""
        return len(self._cache)

    def parse(self, text: str, dataset: DatasetSpec) -> list[EnergyRecord]:
        """
        Parse CSV text, reusing an earlier result for identical text.

        Args:
            text: Full CSV text
            dataset: Layout of the table

        Returns:
            Parsed records (shared with the cache; do not mutate)
        """
        if not self.cache_enabled:
            return parse_dataset(text, dataset)

        key = _get_cache_key(text, dataset)
        if key in self._cache:
            logger.debug(f"Cache hit: {dataset.name}")
            return self._cache[key]

        records = parse_dataset(text, dataset)
        self._cache[key] = records
        return records

    def get_dataset(self, dataset: DatasetSpec) -> list[EnergyRecord]:
        """
        Load a bundled CSV file from the data directory and parse it.

        Raises:
            FileNotFoundError: If the file is not in the data directory
        """
        text = load_dataset_text(self.data_dir / dataset.filename)
        records = self.parse(text, dataset)
        log_records_stats(records, logger, f"{dataset.name.capitalize()} data", dataset.label_key)
        return records

    def get_monthly(self) -> list[EnergyRecord]:
        """Monthly records keyed by "Month"."""
        return self.get_dataset(MONTHLY_DATASET)

    def get_annual(self) -> list[EnergyRecord]:
        """Annual records keyed by "Year"."""
        return self.get_dataset(ANNUAL_DATASET)

    def get_series(
        self,
        dataset: DatasetSpec,
        column: Optional[str] = None,
    ) -> tuple[list[Optional[str]], list[Optional[float]]]:
        """
        Get one column as parallel label/value lists.

        Args:
            dataset: Which dataset to read
            column: Column to extract (defaults to the dataset's value column)

        Returns:
            Tuple of (labels, values); missing values are None
        """
        column = column or dataset.value_column
        records = self.get_dataset(dataset)
        labels = [record.get(dataset.label_key) for record in records]
        values = [record.get(column) for record in records]
        return labels, values

    def clear_cache(self):
        """Drop all memoized parse results."""
        cleared = len(self._cache)
        self._cache.clear()
        if cleared > 0:
            logger.info(f"Cleared {cleared} cached dataset(s)")
