"""
Unit tests for chart creation
"""
import math

import pandas as pd
import pytest

from energy_overview.parsing import parse_annual, parse_monthly
from energy_overview.visualization import (
    create_annual_chart,
    create_energy_line_chart,
    create_monthly_chart,
    get_series_color,
    records_to_dataframe,
)


def _is_gap(value) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


@pytest.mark.unit
class TestRecordsToDataFrame:
    """Test conversion of records to a DataFrame."""

    def test_columns_and_dtypes(self, monthly_csv):
        """Test label column comes first and values are floats."""
        df = records_to_dataframe(parse_monthly(monthly_csv), "Month")

        assert list(df.columns) == [
            "Month", "Total Fossil Fuels Production", "Total Primary Energy Consumption",
        ]
        assert df["Total Primary Energy Consumption"].dtype == float
        assert pd.isna(df.loc[2, "Total Primary Energy Consumption"])

    def test_all_none_column(self):
        """Test a column of only None becomes NaN floats."""
        records = [{"Year": "1949", "A": None}, {"Year": "1950", "A": None}]

        df = records_to_dataframe(records, "Year")

        assert df["A"].isna().all()
        assert df["A"].dtype == float

    def test_empty_records(self):
        """Test empty input gives an empty frame with the label column."""
        df = records_to_dataframe([], "Year")

        assert df.empty
        assert list(df.columns) == ["Year"]


@pytest.mark.unit
class TestCreateEnergyLineChart:
    """Test the generic line chart."""

    def test_one_trace_per_key(self, monthly_csv):
        """Test one line is drawn for each requested column."""
        records = parse_monthly(monthly_csv)

        fig = create_energy_line_chart(
            records,
            "Month",
            ["Total Primary Energy Consumption", "Total Fossil Fuels Production"],
        )

        assert len(fig.data) == 2
        assert [trace.name for trace in fig.data] == [
            "Total Primary Energy Consumption", "Total Fossil Fuels Production",
        ]

    def test_label_on_x_axis(self, annual_csv):
        """Test x values are the label column."""
        fig = create_energy_line_chart(
            parse_annual(annual_csv), "Year", "Total Primary Energy Consumption",
        )

        assert list(fig.data[0].x) == ["1949", "1950", "1951"]
        assert fig.layout.xaxis.title.text == "Year"

    def test_nulls_are_gaps(self, annual_csv):
        """Test missing values stay missing and are not connected."""
        fig = create_energy_line_chart(
            parse_annual(annual_csv), "Year", "Total Primary Energy Consumption",
        )
        trace = fig.data[0]

        assert trace.connectgaps is False
        assert list(trace.y[:2]) == [31.982, 34.616]
        assert _is_gap(trace.y[2])

    def test_unknown_key(self, annual_csv):
        """Test an unknown column gives an all-gap line."""
        fig = create_energy_line_chart(parse_annual(annual_csv), "Year", "Nuclear")

        assert len(fig.data) == 1
        assert all(_is_gap(v) for v in fig.data[0].y)

    def test_missing_label_column(self, monthly_csv):
        """Test records without the label column give an empty figure."""
        fig = create_annual_chart(parse_monthly(monthly_csv))

        assert len(fig.data) == 0
        assert fig.layout.annotations[0].text == "No Year column in data"

    def test_empty_records(self):
        """Test empty input produces an annotated figure without traces."""
        fig = create_energy_line_chart([], "Year", "Total Primary Energy Consumption")

        assert len(fig.data) == 0
        assert fig.layout.annotations[0].text == "No data available"

    def test_colors(self, monthly_csv):
        """Test explicit colors are applied in order, then the palette."""
        fig = create_energy_line_chart(
            parse_monthly(monthly_csv),
            "Month",
            ["Total Primary Energy Consumption", "Total Fossil Fuels Production"],
            colors=["#000000"],
        )

        assert fig.data[0].line.color == "#000000"
        assert fig.data[1].line.color == get_series_color(1)


@pytest.mark.unit
class TestDatasetCharts:
    """Test the monthly and annual chart presets."""

    def test_monthly_chart(self, monthly_csv):
        """Test monthly chart defaults."""
        fig = create_monthly_chart(parse_monthly(monthly_csv))

        assert fig.layout.title.text == "Monthly total primary energy consumption"
        assert fig.data[0].name == "Total Primary Energy Consumption"
        assert fig.data[0].line.color == "#6366f1"

    def test_annual_chart(self, annual_csv):
        """Test annual chart defaults."""
        fig = create_annual_chart(parse_annual(annual_csv))

        assert fig.layout.title.text == "Annual total primary energy consumption"
        assert list(fig.data[0].x) == ["1949", "1950", "1951"]
        assert fig.data[0].line.color == "#22c55e"

    def test_value_key_override(self, monthly_csv):
        """Test charting a different column."""
        fig = create_monthly_chart(parse_monthly(monthly_csv), "Total Fossil Fuels Production")

        assert fig.data[0].name == "Total Fossil Fuels Production"
