"""
src/layout/components/cards.py
──────────────────────────────
KPI and zone configuration cards.
"""
from dash import html

from src.data.models import CoolingZone

CARD_BG = "#161b22"
BORDER = "#30363d"
MUTED = "#8b949e"

ZONE_COLORS = {
    "intensive": "#58a6ff",
    "standard": "#2ea44f",
    "trimming": "#e8a020",
}


def kpi_card(label: str, value: str, color: str = "#c9d1d9", sub_label: str = "") -> html.Div:
    """
    Compact metric card.

    Args:
        label: Metric name (shown above value)
        value: Formatted value string
        color: Value text color, also used for the card border
        sub_label: Small secondary label below value
    """
    children = [
        html.Div(label, style={"fontSize": ".68rem", "color": MUTED, "textTransform": "uppercase", "letterSpacing": ".06em"}),
        html.Div(value, style={"fontSize": "1.4rem", "fontWeight": "700", "color": color, "lineHeight": "1.2", "marginTop": "2px"}),
    ]
    if sub_label:
        children.append(html.Div(sub_label, style={"fontSize": ".68rem", "color": MUTED, "marginTop": "2px"}))

    return html.Div(
        children,
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {color if color != '#c9d1d9' else BORDER}",
            "borderRadius": "8px",
            "padding": "14px 16px",
            "minWidth": "120px",
        },
    )


def _field(label: str, value: str) -> html.Div:
    return html.Div([
        html.Div(label, style={"fontSize": ".62rem", "color": MUTED, "textTransform": "uppercase"}),
        html.Div(value, style={"fontSize": ".85rem", "fontWeight": "700", "color": "#c9d1d9"}),
    ])


def zone_card(zone: CoolingZone) -> html.Div:
    """Static configuration of one cooling zone."""
    kind = zone.zone_type.name.lower()
    color = ZONE_COLORS[kind]
    return html.Div(
        [
            html.Div(
                [
                    html.Span(kind.capitalize(), style={"fontWeight": "700", "color": color, "fontSize": ".95rem"}),
                    html.Span(f"{zone.zone_id} · #{zone.zone_no}", style={"fontSize": ".68rem", "color": MUTED, "marginLeft": "8px"}),
                ],
                style={"marginBottom": "10px"},
            ),
            html.Div(
                [
                    _field("Units", str(zone.num_units)),
                    _field("Length", f"{zone.length_mm / 1000:.1f} m"),
                    _field("Width", f"{zone.width_mm:.0f} mm"),
                    _field("Pressure", f"{zone.main_pressure:.2f} bar"),
                    _field("Water", f"{zone.water_temp_c:.1f} °C"),
                    _field("Sequence", str(zone.zone_seq)),
                ],
                style={"display": "grid", "gridTemplateColumns": "1fr 1fr 1fr", "gap": "8px"},
            ),
        ],
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {color}",
            "borderRadius": "8px",
            "padding": "14px",
        },
    )
