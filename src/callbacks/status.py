"""
src/callbacks/status.py
───────────────────────
Equipment status polling callback.

Each interval tick publishes a fresh snapshot through the StatusPublisher and
re-renders KPIs, heatmaps and the zone availability table from it. When live
simulation is enabled the seeded status rows drift a little before each poll.
"""
from __future__ import annotations

from datetime import UTC, datetime

import dash_bootstrap_components as dbc
import numpy as np
from dash import Input, Output, html

from src.analytics.status_summary import enabled_counts, zone_availability
from src.data.simulator import generate_realtime_update
from src.data.store import CoolingPlantStore
from src.layout.components.cards import kpi_card
from src.layout.components.status_grid import status_heatmap
from src.pages.overview import STATUS_GRAPHS, graph_id
from src.services.status_aggregator import StatusPublisher


MUTED = "#8b949e"


def _ratio_color(ratio: float) -> str:
    if ratio >= 0.95:
        return "#2ea44f"
    if ratio >= 0.8:
        return "#e8a020"
    return "#da3633"


class LiveStatusSimulator:
    """Keeps the simulated raw rows between polls and writes each drift to the store."""

    def __init__(self, store: CoolingPlantStore, rows: list[dict], seed: int):
        self._store = store
        self._rows = rows
        self._rng = np.random.default_rng(seed)

    def step(self) -> None:
        self._rows = generate_realtime_update(self._rows, self._rng)
        self._store.insert_status_rows(self._rows)


def register(app, publisher: StatusPublisher, simulator: LiveStatusSimulator | None = None) -> None:

    @app.callback(
        [
            Output("status-kpi-banner", "children"),
            Output("status-zone-table", "children"),
            Output("navbar-last-poll", "children"),
            *[Output(graph_id(field), "figure") for field, _ in STATUS_GRAPHS],
        ],
        Input("interval-status", "n_intervals"),
    )
    def update_status(n_intervals: int):
        if simulator is not None:
            simulator.step()
        status = publisher.poll()

        counts = enabled_counts(status)
        cards = []
        for (field, title) in STATUS_GRAPHS:
            row = counts.loc[field.removesuffix("_status")]
            ratio = row["available"] / row["total"] if row["total"] else 0.0
            cards.append(
                dbc.Col(
                    kpi_card(
                        title,
                        f"{row['available']}/{row['total']}",
                        _ratio_color(ratio),
                        sub_label=f"L1 {row['enabled_l1']} · L2 {row['enabled_l2']}",
                    ),
                    xs=6, md=2,
                )
            )
        kpi_banner = dbc.Row(cards, className="g-3")

        zones = zone_availability(status)
        if zones.empty:
            zone_table = html.Div("No bank ranges configured.", style={"color": MUTED, "padding": "12px"})
        else:
            zone_table = dbc.Table.from_dataframe(
                zones.rename(columns={
                    "zone_type": "Zone", "position": "Side", "total": "Banks",
                    "available": "Available", "availability_pct": "Availability %",
                }),
                striped=True, bordered=False, hover=True, size="sm", color="dark",
            )

        figures = [status_heatmap(getattr(status, field), title) for field, title in STATUS_GRAPHS]
        polled_at = datetime.now(tz=UTC).strftime("%H:%M:%S UTC")
        return (kpi_banner, zone_table, f"Last poll {polled_at} (#{publisher.polls})", *figures)
