"""
src/layout/main.py
───────────────────
Main application layout composition.

Contains:
  - dcc.Interval driving the equipment status poll
  - Navbar + overview page
"""
from dash import dcc, html

from config.settings import settings
from src.data.models import CoolingProcess
from src.layout.navbar import create_navbar
from src.pages import overview


def create_layout(process: CoolingProcess) -> html.Div:
    """Assemble the root application layout around the startup configuration."""
    return html.Div(
        [
            # ── Status polling interval ───────────────────────────────────────
            dcc.Interval(
                id="interval-status",
                interval=settings.UPDATE_INTERVAL_MS,
                n_intervals=0,
            ),

            create_navbar(),

            html.Div(
                overview.layout(process),
                id="page-content",
                style={"minHeight": "calc(100vh - 60px)"},
            ),

            html.Footer(
                [
                    html.Span("HSM Cooling Monitor"),
                    html.Span(" · "),
                    html.Span(f"Area {settings.AREA_ID} / {settings.CENTER_ID}"),
                ],
                style={
                    "textAlign": "center",
                    "padding": ".7rem",
                    "fontSize": ".72rem",
                    "color": "#8b949e",
                    "borderTop": "1px solid #30363d",
                    "marginTop": "2rem",
                },
            ),
        ],
        style={"backgroundColor": "#0d1117", "minHeight": "100vh", "color": "#c9d1d9"},
    )
