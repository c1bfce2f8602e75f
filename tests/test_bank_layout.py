"""
tests/test_bank_layout.py
──────────────────────────
Tests for the bank → zone numbering of the cooling line.
"""
import pytest

from src.data.layout import REFERENCE_PLANT, BankRange, PlantLayout
from src.data.models import ZoneType
from src.data.simulator import generate_status_rows
from src.data.store import CoolingPlantStore
from src.services.status_aggregator import refresh_status

SHORT_INTENSIVE = PlantLayout(
    bank_ranges=(
        BankRange(ZoneType.INTENSIVE, 1, 8),
        BankRange(ZoneType.STANDARD, 9, 40),
        BankRange(ZoneType.TRIMMING, 41, 68),
    )
)


class TestReferencePlant:
    @pytest.mark.parametrize(
        "bank_no, expected",
        [(1, ZoneType.INTENSIVE), (12, ZoneType.INTENSIVE), (13, ZoneType.STANDARD),
         (36, ZoneType.STANDARD), (37, ZoneType.TRIMMING), (68, ZoneType.TRIMMING)],
    )
    def test_zone_boundaries(self, bank_no, expected):
        assert REFERENCE_PLANT.zone_type_for_bank(bank_no) is expected

    @pytest.mark.parametrize("bank_no", [0, 69])
    def test_unmapped_bank(self, bank_no):
        assert REFERENCE_PLANT.zone_type_for_bank(bank_no) is None

    def test_range_for(self):
        standard = REFERENCE_PLANT.range_for(ZoneType.STANDARD)
        assert (standard.first_bank, standard.last_bank, standard.size) == (13, 36, 24)


class TestCustomLayout:
    def test_slot_counts_are_not_configurable(self):
        with pytest.raises(TypeError):
            PlantLayout(total_sidesweeps=10)

    def test_range_beyond_last_bank_rejected(self):
        with pytest.raises(ValueError, match="outside banks 1-68"):
            PlantLayout(bank_ranges=(BankRange(ZoneType.TRIMMING, 37, 70),))

    def test_other_boundaries(self):
        assert SHORT_INTENSIVE.zone_type_for_bank(9) is ZoneType.STANDARD
        assert SHORT_INTENSIVE.range_for(ZoneType.TRIMMING).size == 28

    def test_refresh_succeeds_for_rows_seeded_with_other_layout(self, tmp_path):
        store = CoolingPlantStore(db_path=str(tmp_path / "short.db"), area_id="HSM", center_id="DC")
        store.create_tables()
        store.insert_status_rows(
            generate_status_rows(seed=3, outage_rate=0.0, missing_rate=0.0, layout=SHORT_INTENSIVE)
        )
        status = refresh_status(store)
        assert all(s.is_available for s in status.top_bank_status)
        assert all(s.is_available for s in status.sidesweep_status)
