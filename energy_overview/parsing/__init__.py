"""Parsing package for CSV ingestion and numeric coercion."""

from .numeric import coerce_number
from .csv_parser import (
    parse_table,
    parse_dataset,
    parse_monthly,
    parse_annual,
    load_dataset_text,
)

__all__ = [
    'coerce_number',
    'parse_table',
    'parse_dataset',
    'parse_monthly',
    'parse_annual',
    'load_dataset_text',
]
