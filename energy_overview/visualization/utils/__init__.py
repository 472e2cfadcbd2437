"""
Visualization utils - Helper functions for chart generation.
"""

from .utils import get_series_color, records_to_dataframe

__all__ = ['get_series_color', 'records_to_dataframe']
