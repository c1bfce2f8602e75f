"""
tests/test_layout.py
─────────────────────
Smoke tests for dashboard components built from the domain models.
"""
from src.callbacks.status import LiveStatusSimulator
from src.data.models import CoolingProcessStatus, DeviceType, EquipmentStatus, VerticalPosition
from src.data.simulator import generate_status_rows
from src.layout.components.cards import zone_card
from src.layout.components.status_grid import status_heatmap
from src.pages.overview import STATUS_GRAPHS, graph_id, layout
from src.services.zone_assembler import assemble_process


class TestStatusHeatmap:
    def test_two_rows_one_column_per_slot(self):
        slots = [EquipmentStatus(is_enabled_l1=True)] + [EquipmentStatus()] * 7
        fig = status_heatmap(slots, "Sidesweeps")
        z = fig.data[0].z
        assert len(z) == 2
        assert list(z[0]) == [1, 0, 0, 0, 0, 0, 0, 0]
        assert list(z[1]) == [0] * 8
        assert list(fig.data[0].x) == list(range(1, 9))


class TestOverview:
    def test_graph_ids_cover_all_collections(self):
        fields = [f for f, _ in STATUS_GRAPHS]
        assert fields == list(CoolingProcessStatus.model_fields)
        assert graph_id("top_bank_status") == "status-graph-top-bank-status"

    def test_layout_renders_zone_cards(self, zone_source):
        process = assemble_process(zone_source, 3)
        page = layout(process)
        assert "3 zones configured" in str(page)

    def test_zone_card_shows_identity(self, zone_source):
        zone = assemble_process(zone_source, 1).intensive_zone
        assert "IC_ZONE" in str(zone_card(zone))


class TestLiveStatusSimulator:
    def test_step_writes_rows(self, store):
        rows = generate_status_rows(seed=1, outage_rate=0.0, missing_rate=0.0)
        sim = LiveStatusSimulator(store, rows, seed=0)
        sim.step()
        assert store.load_equipment_status(1, VerticalPosition.TOP, DeviceType.BANK) is not None
