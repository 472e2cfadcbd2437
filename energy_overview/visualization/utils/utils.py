"""
Utility functions for chart creation.
Common helpers used across all visualization modules.
"""

import pandas as pd
import plotly.express as px
from typing import List, Optional

from ...config import FALLBACK_LINE_COLOR
from ...models import EnergyRecord


def get_series_color(index: int, colors: Optional[List[str]] = None) -> str:
    """Get color for the nth series, falling back to the Plotly palette."""
    if colors and index < len(colors):
        return colors[index]

    palette = px.colors.qualitative.Plotly
    if not palette:
        return FALLBACK_LINE_COLOR
    return palette[index % len(palette)]


def records_to_dataframe(records: List[EnergyRecord], label_key: str) -> pd.DataFrame:
    """
    Convert parsed records into a DataFrame for plotting.

    Args:
        records: Parsed row records
        label_key: Key of the label column ("Month" or "Year")

    Returns:
        DataFrame with the label column first and float value columns
        (NaN where the record holds None)
    """
    if not records:
        return pd.DataFrame(columns=[label_key])

    df = pd.DataFrame.from_records(records)
    value_columns = [col for col in df.columns if col != label_key]
    for col in value_columns:
        df[col] = pd.to_numeric(df[col], errors='coerce').astype(float)

    if label_key in df.columns:
        df = df[[label_key] + value_columns]
    return df
