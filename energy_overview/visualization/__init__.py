"""
Visualization package - Plotly line charts for the energy datasets.
"""

from .charts import (
    create_empty_chart,
    create_energy_line_chart,
    create_monthly_chart,
    create_annual_chart,
)
from .utils import get_series_color, records_to_dataframe

__all__ = [
    'create_empty_chart',
    'create_energy_line_chart',
    'create_monthly_chart',
    'create_annual_chart',
    'get_series_color',
    'records_to_dataframe',
]
