"""
Numeric coercion for CSV cells.
Plain decimal notation only; everything else becomes a gap.
"""

import math
import re
from typing import Optional

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent.
# Rejects nan/inf, hex literals and digit separators that float() would accept.
NUMBER_PATTERN = re.compile(r'^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?\Z')


def coerce_number(cell: str) -> Optional[float]:
    """
    Convert a CSV cell to a float, or None when it is not a plain number.

    Args:
        cell: Raw cell text, e.g. "34.5", "-3", "1.2e3", "", "Not Available"

    Returns:
        The numeric value, or None for empty and non-numeric cells
    """
    cell = cell.strip()
    if not NUMBER_PATTERN.match(cell):
        return None
    value = float(cell)
    # "1e999" overflows to inf
    return value if math.isfinite(value) else None
