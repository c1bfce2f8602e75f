"""
src/pages/overview.py
──────────────────────
Cooling line overview page.

Zone cards are static (startup configuration); KPIs, heatmaps and the
zone availability table are filled by the status polling callback.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html

from src.data.models import CoolingProcess
from src.layout.components.cards import zone_card

STATUS_GRAPHS = [
    ("top_bank_status", "Top banks"),
    ("bottom_bank_status", "Bottom banks"),
    ("top_device_status", "Top intensive devices"),
    ("bottom_device_status", "Bottom intensive devices"),
    ("sidesweep_status", "Sidesweeps"),
]


def graph_id(field: str) -> str:
    return f"status-graph-{field.replace('_', '-')}"


def layout(process: CoolingProcess) -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    html.H2("Cooling Line", className="page-title"),
                    html.P(
                        f"{process.zone_num} zones configured · live L1/L2 equipment enablement",
                        className="page-subtitle",
                    ),
                ],
                className="page-header",
            ),
            # ── Zone configuration (static) ───────────────────────────────────
            dbc.Row(
                [dbc.Col(zone_card(z), md=12 // max(process.zone_num, 1)) for z in process.zones],
                className="g-3 mb-4",
            ),
            # ── Enablement KPIs (dynamic) ─────────────────────────────────────
            html.Div(id="status-kpi-banner", className="mb-4"),
            # ── Slot heatmaps (dynamic) ───────────────────────────────────────
            html.Div(
                [
                    html.Div(dcc.Graph(id=graph_id(field), config={"displayModeBar": False}), className="chart-card mb-2")
                    for field, _ in STATUS_GRAPHS
                ]
            ),
            # ── Bank availability per zone (dynamic) ──────────────────────────
            html.Div(
                [
                    html.Div("Bank availability by zone", className="chart-title"),
                    html.Div(id="status-zone-table"),
                ],
                className="chart-card",
            ),
        ],
        style={"padding": "1.5rem"},
    )
