"""
CSV parsing module for EIA primary energy tables.
Handles header detection, units/footnote skipping, and numeric coercion.
"""

import re
from pathlib import Path
from typing import Optional

from ..config import CSV_ENCODING, FOOTNOTE_PREFIX, UNITS_ROWS_AFTER_HEADER
from ..logger import setup_logger
from ..models import ANNUAL_DATASET, MONTHLY_DATASET, DatasetSpec, EnergyRecord
from .numeric import coerce_number

logger = setup_logger(__name__)

# "\n" and "\r\n" only; a lone "\r" stays inside the line
LINE_BREAK = re.compile(r'\r?\n')


def _find_header_index(lines: list[str], header_prefix: str) -> Optional[int]:
    """Return the index of the first line starting with header_prefix."""
    for index, line in enumerate(lines):
        if line.startswith(header_prefix):
            return index
    return None


def _build_record(
    cells: list[str],
    headers: list[str],
    label_source: str,
    label_key: str,
) -> EnergyRecord:
    """Map one split data line onto the header columns."""
    record: EnergyRecord = {}
    for i, key in enumerate(headers):
        value = cells[i].strip() if i < len(cells) else ''
        if key == label_source:
            record[label_key] = value
        else:
            record[key] = coerce_number(value)
    return record


def parse_table(
    text: str,
    header_prefix: str,
    label_source: str,
    label_key: str,
    footnote_prefix: str = FOOTNOTE_PREFIX,
) -> list[EnergyRecord]:
    """
    Parse a fixed-layout CSV table into row records.

    The header is the first line starting with header_prefix. The line right
    after it holds units and is skipped. Remaining non-empty lines are data,
    except those starting with footnote_prefix.

    Args:
        text: Full CSV text
        header_prefix: Literal prefix of the header line, e.g. "Month,"
        label_source: Header name of the label column
        label_key: Key the label value is stored under
        footnote_prefix: Prefix of trailing citation lines to drop

    Returns:
        Records in source order; empty when no header line is found
    """
    lines = LINE_BREAK.split(text)

    header_index = _find_header_index(lines, header_prefix)
    if header_index is None:
        logger.debug(f"No header line starting with {header_prefix!r}")
        return []

    headers = [h.strip() for h in lines[header_index].split(',')]

    records = []
    for line in lines[header_index + 1 + UNITS_ROWS_AFTER_HEADER:]:
        line = line.strip()
        if not line:
            continue
        if footnote_prefix and line.startswith(footnote_prefix):
            continue
        records.append(_build_record(line.split(','), headers, label_source, label_key))

    logger.debug(f"Parsed {len(records)} rows under header {header_prefix!r}")
    return records


def parse_dataset(text: str, dataset: DatasetSpec) -> list[EnergyRecord]:
    """Parse CSV text using the layout described by a DatasetSpec."""
    return parse_table(
        text,
        header_prefix=dataset.header_prefix,
        label_source=dataset.label_source,
        label_key=dataset.label_key,
        footnote_prefix=dataset.footnote_prefix,
    )


def parse_monthly(text: str) -> list[EnergyRecord]:
    """
    Parse the monthly table. Each record is keyed by "Month" ("1973 January").
    """
    return parse_dataset(text, MONTHLY_DATASET)


def parse_annual(text: str) -> list[EnergyRecord]:
    """
    Parse the annual table. The "Annual Total" column is stored as "Year".
    """
    return parse_dataset(text, ANNUAL_DATASET)


def load_dataset_text(filepath: str | Path) -> str:
    """
    Read a bundled CSV file as text.

    Args:
        filepath: Path to the CSV file

    Returns:
        File contents

    Raises:
        FileNotFoundError: If CSV file doesn't exist
        ValueError: If the file cannot be decoded as text
    """
    filepath = Path(filepath)

    if not filepath.exists():
        logger.error(f"CSV file not found: {filepath}")
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    logger.info(f"Reading CSV file: {filepath.name}")

    # Decode bytes directly so "\r\n" reaches the parser untranslated
    try:
        text = filepath.read_bytes().decode(CSV_ENCODING)
    except UnicodeDecodeError as e:
        logger.error(f"Failed to decode CSV: {e}")
        raise ValueError(f"Invalid CSV file: {e}") from e

    logger.debug(f"CSV loaded: {len(text)} characters")
    return text
