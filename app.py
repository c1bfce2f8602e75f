"""
app.py
──────
HSM Cooling Monitor: application entry point.

Startup sequence:
  1. Initialize SQLite DB and seed the reference cooling plant
  2. Assemble the cooling process configuration (fails fast on any gap)
  3. Create Dash app with DARKLY bootstrap theme
  4. Register the equipment status polling callback
  5. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.settings import settings
from src.data.simulator import generate_status_rows
from src.data.store import initialize_db
from src.layout.main import create_layout
from src.services.status_aggregator import StatusAggregator, StatusPublisher
from src.services.zone_assembler import assemble_process

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
)
logger = logging.getLogger("cooling_monitor")

# ── 1. Seed database on startup ───────────────────────────────────────────────
logger.info("Initializing cooling plant database...")
store = initialize_db()

# ── 2. Startup configuration (a fatal error stops the service here) ──────────
process = assemble_process(store, settings.EXPECTED_ZONE_COUNT)
for zone in process.zones:
    logger.info(
        f"  - {zone.zone_type.name.capitalize()} zone {zone.zone_no}: "
        f"{zone.zone_id}, {zone.num_units} units"
    )

publisher = StatusPublisher(StatusAggregator(store))

# ── 3. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="Cooling Monitor",
)

server = app.server  # gunicorn entry point
app.layout = create_layout(process)

# ── 4. Register callbacks ─────────────────────────────────────────────────────
from src.callbacks import status
from src.callbacks.status import LiveStatusSimulator

simulator = None
if settings.SIMULATE_LIVE_CHANGES:
    simulator = LiveStatusSimulator(store, generate_status_rows(), seed=settings.SIMULATION_SEED + 1)

status.register(app, publisher, simulator)

# ── 5. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
