"""
U.S. Primary Energy Overview page
Built with Reflex - two line charts from the bundled EIA tables
"""

import sys
from pathlib import Path

import plotly.graph_objects as go
import reflex as rx

# Add project root to path for package imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from energy_overview.config import (
    ANNUAL_CHART_DESCRIPTION,
    ANNUAL_CHART_TITLE,
    MONTHLY_CHART_DESCRIPTION,
    MONTHLY_CHART_TITLE,
    PAGE_SUBTITLE,
    PAGE_TITLE,
    SOURCE_LABEL,
    SOURCE_URL,
)
from energy_overview.logger import setup_logger
from energy_overview.services import EnergyDataService
from energy_overview.visualization import (
    create_annual_chart,
    create_empty_chart,
    create_monthly_chart,
)

logger = setup_logger(__name__)

# Style constants
FONT = "Inter, system-ui, sans-serif"
TEXT = "#111827"
MUTED = "#6b7280"
CARD_BG = "#ffffff"
PAGE_BG = "#f9fafb"
BORDER_COLOR = "#e5e7eb"

# One service per process; parse results are memoized per file text
data_service = EnergyDataService()


class State(rx.State):
    status_msg: str = ""
    monthly_rows: int = 0
    annual_rows: int = 0

    chart_monthly: go.Figure = create_empty_chart()
    chart_annual: go.Figure = create_empty_chart()

    def load_data(self):
        try:
            monthly = data_service.get_monthly()
            annual = data_service.get_annual()
        except FileNotFoundError as e:
            logger.warning(f"Energy data unavailable: {e}")
            self.status_msg = "Data files not found."
            return

        self.monthly_rows = len(monthly)
        self.annual_rows = len(annual)
        self.chart_monthly = create_monthly_chart(monthly)
        self.chart_annual = create_annual_chart(annual)
        self.status_msg = ""


def chart_card(title: str, description: str, chart_data) -> rx.Component:
    """Card with a heading, a one-line description and a chart."""
    return rx.box(
        rx.vstack(
            rx.heading(title, size="4", color=TEXT),
            rx.text(description, size="2", color=MUTED),
            spacing="1",
            margin_bottom="12px",
        ),
        rx.plotly(data=chart_data, width="100%", height="400px"),
        background=CARD_BG,
        border=f"1px solid {BORDER_COLOR}",
        border_radius="12px",
        padding="20px",
        width="100%",
    )


def index() -> rx.Component:
    return rx.box(
        rx.vstack(
            rx.heading(PAGE_TITLE, size="7", color=TEXT),
            rx.text(PAGE_SUBTITLE, size="3", color=MUTED),
            rx.text(
                "Data source: ",
                rx.link(SOURCE_LABEL, href=SOURCE_URL, is_external=True),
                size="2",
                color=MUTED,
            ),
            rx.cond(
                State.status_msg != "",
                rx.text(State.status_msg, size="2", color="#b91c1c"),
                rx.fragment(),
            ),
            spacing="2",
            margin_bottom="24px",
        ),
        rx.vstack(
            chart_card(MONTHLY_CHART_TITLE, MONTHLY_CHART_DESCRIPTION, State.chart_monthly),
            chart_card(ANNUAL_CHART_TITLE, ANNUAL_CHART_DESCRIPTION, State.chart_annual),
            spacing="5",
            width="100%",
        ),
        max_width="1100px",
        margin="0 auto",
        padding="32px 16px",
        font_family=FONT,
    )


app = rx.App(
    style={"font_family": FONT, "background": PAGE_BG},
)
app.add_page(index, title=PAGE_TITLE, on_load=State.load_data)
