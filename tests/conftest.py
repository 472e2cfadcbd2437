"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


MONTHLY_CSV = (
    "Table 1.1 Primary Energy Overview\n"
    "Release date: monthly\n"
    "\n"
    "Month,Total Fossil Fuels Production,Total Primary Energy Consumption\n"
    "(Units),(Quadrillion Btu),(Quadrillion Btu)\n"
    "1973 January,4.932,7.223\n"
    "1973 February,4.729,6.726\n"
    "1973 March,5.152,\n"
    "\n"
    "Table 1.1 Source: U.S. Energy Information Administration\n"
)

ANNUAL_CSV = (
    "Table 1.1 Primary Energy Overview\r\n"
    "Annual Total,Total Fossil Fuels Production,Total Primary Energy Consumption\r\n"
    "(Units),(Quadrillion Btu),(Quadrillion Btu)\r\n"
    "1949,28.748,31.982\r\n"
    "1950,32.563,34.616\r\n"
    "1951,35.792,Not Available\r\n"
    "Table 1.1 Footnote text\r\n"
)


@pytest.fixture
def monthly_csv():
    """Monthly table with preamble, a blank cell and a trailing footnote."""
    return MONTHLY_CSV


@pytest.fixture
def annual_csv():
    """Annual table with CRLF line endings and a non-numeric cell."""
    return ANNUAL_CSV


@pytest.fixture
def data_dir(tmp_path):
    """Temporary data directory holding both bundled files."""
    (tmp_path / "Monthly Data-Table 1.csv").write_text(MONTHLY_CSV, encoding="utf-8")
    (tmp_path / "Annual Data-Table 1.csv").write_text(ANNUAL_CSV, encoding="utf-8", newline="")
    return tmp_path
