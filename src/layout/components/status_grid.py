"""
src/layout/components/status_grid.py
─────────────────────────────────────
Heatmap of L1/L2 enablement for one slot collection.

Rows: L1, L2. Columns: component number (slot + 1).
"""
from __future__ import annotations

from collections.abc import Sequence

import plotly.graph_objects as go

from src.data.models import EquipmentStatus

CARD_BG = "#161b22"
MUTED = "#8b949e"
DISABLED = "#da3633"
ENABLED = "#2ea44f"


def status_heatmap(slots: Sequence[EquipmentStatus], title: str = "", height: int = 130) -> go.Figure:
    numbers = list(range(1, len(slots) + 1))
    z = [
        [int(s.is_enabled_l1) for s in slots],
        [int(s.is_enabled_l2) for s in slots],
    ]
    fig = go.Figure(
        go.Heatmap(
            z=z,
            x=numbers,
            y=["L1", "L2"],
            zmin=0,
            zmax=1,
            colorscale=[[0.0, DISABLED], [0.5, DISABLED], [0.5, ENABLED], [1.0, ENABLED]],
            showscale=False,
            xgap=2,
            ygap=2,
            hovertemplate="#%{x} %{y}: %{z}<extra></extra>",
        )
    )
    fig.update_layout(
        template="plotly_dark",
        paper_bgcolor=CARD_BG,
        plot_bgcolor=CARD_BG,
        margin={"l": 30, "r": 10, "t": 26, "b": 20},
        height=height,
        title={"text": title, "font": {"size": 12, "color": MUTED}},
        font={"color": "#c9d1d9", "size": 10},
        xaxis={"showgrid": False, "dtick": 4 if len(slots) > 24 else 1},
        yaxis={"showgrid": False},
    )
    return fig
