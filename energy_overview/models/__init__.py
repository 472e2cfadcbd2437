"""
Models package - Dataset layouts and record type definitions.
"""

from .dataset import DatasetSpec, EnergyRecord, MONTHLY_DATASET, ANNUAL_DATASET

__all__ = ['DatasetSpec', 'EnergyRecord', 'MONTHLY_DATASET', 'ANNUAL_DATASET']
