"""
Services package - Data access layer.
"""

from .data_service import EnergyDataService

__all__ = ['EnergyDataService']
