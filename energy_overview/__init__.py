"""
Energy overview - parsing and charting of U.S. primary energy consumption tables.
"""

from .parsing import parse_monthly, parse_annual, parse_table

__all__ = ['parse_monthly', 'parse_annual', 'parse_table']
