"""
Dataset layout models and record type definitions.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

from ..config import (
    ANNUAL_FILENAME,
    ANNUAL_HEADER_PREFIX,
    ANNUAL_LABEL_COLUMN,
    ANNUAL_LABEL_KEY,
    FOOTNOTE_PREFIX,
    MONTHLY_FILENAME,
    MONTHLY_HEADER_PREFIX,
    MONTHLY_LABEL_COLUMN,
    TOTAL_CONSUMPTION_COLUMN,
)

# One parsed CSV row: label column -> str, every other column -> float or None
EnergyRecord = Dict[str, Optional[Union[str, float]]]


@dataclass(frozen=True)
class DatasetSpec:
    """
    Describes how one bundled CSV file is laid out.

    Attributes:
        name: Short identifier ("monthly", "annual")
        header_prefix: Literal prefix identifying the header line
        label_source: Header name of the label column in the file
        label_key: Key the label value is stored under in each record
        footnote_prefix: Prefix of trailing citation lines to drop
        value_column: Series charted by default
        filename: Name of the bundled file inside the data directory
    """
    name: str
    header_prefix: str
    label_source: str
    label_key: str
    footnote_prefix: str = FOOTNOTE_PREFIX
    value_column: str = TOTAL_CONSUMPTION_COLUMN
    filename: str = ""

    def __post_init__(self):
        """Validate dataset layout."""
        if not self.header_prefix:
            raise ValueError("Header prefix cannot be empty")
        if not self.label_source or not self.label_key:
            raise ValueError("Label column names cannot be empty")


MONTHLY_DATASET = DatasetSpec(
    name="monthly",
    header_prefix=MONTHLY_HEADER_PREFIX,
    label_source=MONTHLY_LABEL_COLUMN,
    label_key=MONTHLY_LABEL_COLUMN,
    filename=MONTHLY_FILENAME,
)

ANNUAL_DATASET = DatasetSpec(
    name="annual",
    header_prefix=ANNUAL_HEADER_PREFIX,
    label_source=ANNUAL_LABEL_COLUMN,
    label_key=ANNUAL_LABEL_KEY,
    filename=ANNUAL_FILENAME,
)
