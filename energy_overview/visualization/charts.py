"""
Visualization module for Plotly charts.
Creates line charts of energy consumption series against their time label.
"""

import plotly.graph_objects as go
from typing import List, Optional, Union

from ..config import (
    ANNUAL_CHART_TITLE,
    ANNUAL_LINE_COLOR,
    DEFAULT_CHART_HEIGHT,
    LINE_WIDTH,
    MONTHLY_CHART_TITLE,
    MONTHLY_LINE_COLOR,
    Y_AXIS_TITLE,
)
from ..logger import setup_logger
from ..models import ANNUAL_DATASET, MONTHLY_DATASET, EnergyRecord
from .utils import get_series_color, records_to_dataframe

logger = setup_logger(__name__)


def create_empty_chart(message: str = "No data available") -> go.Figure:
    """Create a figure with no traces and a centered message."""
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        xref="paper", yref="paper",
        x=0.5, y=0.5, showarrow=False,
        font=dict(size=16)
    )
    fig.update_layout(height=DEFAULT_CHART_HEIGHT)
    return fig


def create_energy_line_chart(
    records: List[EnergyRecord],
    label_key: str,
    value_keys: Union[str, List[str]],
    title: str = "",
    colors: Optional[List[str]] = None,
) -> go.Figure:
    """
    Create a line chart with one line per requested column.

    Missing values are drawn as gaps, never interpolated.

    Args:
        records: Parsed row records
        label_key: Column used for the x axis ("Month" or "Year")
        value_keys: Column name or list of column names to plot
        title: Chart title
        colors: Optional line colors, in value_keys order

    Returns:
        Plotly Figure with one Scatter trace per value key
    """
    if isinstance(value_keys, str):
        value_keys = [value_keys]

    if not records:
        return create_empty_chart()

    df = records_to_dataframe(records, label_key)
    if label_key not in df.columns:
        logger.warning(f"Label column not found in records: {label_key}")
        return create_empty_chart(f"No {label_key} column in data")
    x = df[label_key].tolist()

    fig = go.Figure()
    for i, key in enumerate(value_keys):
        if key in df.columns:
            y = df[key].tolist()
        else:
            logger.warning(f"Column not found in records: {key}")
            y = [None] * len(df)

        fig.add_trace(go.Scatter(
            x=x,
            y=y,
            name=key,
            mode='lines',
            connectgaps=False,
            line=dict(color=get_series_color(i, colors), width=LINE_WIDTH),
            hovertemplate='%{x}<br>%{y:.3f}<extra>%{fullData.name}</extra>'
        ))

    fig.update_layout(
        title=title,
        xaxis_title=label_key,
        yaxis_title=Y_AXIS_TITLE,
        height=DEFAULT_CHART_HEIGHT,
        hovermode='x unified',
        showlegend=True,
        legend=dict(orientation='h', yanchor='bottom', y=1.02, xanchor='right', x=1)
    )
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, griddash='dash')

    return fig


def create_monthly_chart(records: List[EnergyRecord], value_key: Optional[str] = None) -> go.Figure:
    """Create the monthly consumption chart."""
    return create_energy_line_chart(
        records,
        label_key=MONTHLY_DATASET.label_key,
        value_keys=value_key or MONTHLY_DATASET.value_column,
        title=MONTHLY_CHART_TITLE,
        colors=[MONTHLY_LINE_COLOR],
    )


def create_annual_chart(records: List[EnergyRecord], value_key: Optional[str] = None) -> go.Figure:
    """Create the annual consumption chart."""
    return create_energy_line_chart(
        records,
        label_key=ANNUAL_DATASET.label_key,
        value_keys=value_key or ANNUAL_DATASET.value_column,
        title=ANNUAL_CHART_TITLE,
        colors=[ANNUAL_LINE_COLOR],
    )
