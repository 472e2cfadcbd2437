"""
Configuration constants for the energy overview.
Centralized configuration for dataset layout, file locations, and chart styling.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Data files
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = Path(os.getenv(
    "ENERGY_DATA_DIR",
    PROJECT_ROOT / "data" / "primary_energy_overview",
))
MONTHLY_FILENAME = "Monthly Data-Table 1.csv"
ANNUAL_FILENAME = "Annual Data-Table 1.csv"
CSV_ENCODING = "utf-8-sig"

# CSV layout (EIA Monthly Energy Review, Table 1.1)
MONTHLY_HEADER_PREFIX = "Month,"
ANNUAL_HEADER_PREFIX = "Annual Total,"
MONTHLY_LABEL_COLUMN = "Month"
ANNUAL_LABEL_COLUMN = "Annual Total"
ANNUAL_LABEL_KEY = "Year"
FOOTNOTE_PREFIX = "Table 1.1"
UNITS_ROWS_AFTER_HEADER = 1

# Default charted series
TOTAL_CONSUMPTION_COLUMN = "Total Primary Energy Consumption"

# Chart Defaults
DEFAULT_CHART_HEIGHT = 400
MONTHLY_LINE_COLOR = "#6366f1"
ANNUAL_LINE_COLOR = "#22c55e"
FALLBACK_LINE_COLOR = "#9E9E9E"
LINE_WIDTH = 2
MONTHLY_CHART_TITLE = "Monthly total primary energy consumption"
ANNUAL_CHART_TITLE = "Annual total primary energy consumption"
MONTHLY_CHART_DESCRIPTION = "Quadrillion Btu, by month, beginning in 1973."
ANNUAL_CHART_DESCRIPTION = "Quadrillion Btu, annual totals from 1949 onward."
Y_AXIS_TITLE = "Quadrillion Btu"

# Page copy
PAGE_TITLE = "U.S. Primary Energy Overview"
PAGE_SUBTITLE = (
    "Monthly and annual primary energy consumption in the United States, "
    "measured in quadrillion Btu."
)
SOURCE_LABEL = "U.S. Energy Information Administration - Energy Consumption (Data.gov)"
SOURCE_URL = (
    "https://catalog.data.gov/dataset/monthly-and-annual-energy-consumption-by-sector/"
    "resource/521de5ae-b112-405b-8474-4214ddd5675b"
)

# Logging
LOG_LEVEL = os.getenv("ENERGY_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
