"""
tests/test_status_summary.py
─────────────────────────────
Tests for the tabular snapshot views.
"""
from src.analytics.status_summary import COLUMNS, enabled_counts, status_to_dataframe, zone_availability
from src.data.models import CoolingProcessStatus, EquipmentStatus

ON = EquipmentStatus(is_enabled_l1=True, is_enabled_l2=True)
L1_ONLY = EquipmentStatus(is_enabled_l1=True)


def _status_with_top_banks(slots: dict[int, EquipmentStatus]) -> CoolingProcessStatus:
    top = [slots.get(i, EquipmentStatus()) for i in range(68)]
    return CoolingProcessStatus(top_bank_status=top)


class TestStatusToDataframe:
    def test_one_row_per_slot(self):
        df = status_to_dataframe(CoolingProcessStatus())
        assert len(df) == 216
        assert list(df.columns) == COLUMNS

    def test_component_number_is_slot_plus_one(self):
        df = status_to_dataframe(CoolingProcessStatus())
        assert (df["component_no"] == df["slot"] + 1).all()

    def test_zone_type_only_on_banks(self):
        df = status_to_dataframe(CoolingProcessStatus())
        banks = df[df["device_type"] == "bank"]
        others = df[df["device_type"] != "bank"]
        assert banks["zone_type"].notna().all()
        assert others["zone_type"].isna().all()

    def test_bank_zone_ranges(self):
        df = status_to_dataframe(CoolingProcessStatus())
        top = df[df["collection"] == "top_bank"].set_index("component_no")
        assert top.loc[12, "zone_type"] == "intensive"
        assert top.loc[13, "zone_type"] == "standard"
        assert top.loc[36, "zone_type"] == "standard"
        assert top.loc[37, "zone_type"] == "trimming"

    def test_flags_reflected(self):
        df = status_to_dataframe(_status_with_top_banks({0: L1_ONLY}))
        row = df[(df["collection"] == "top_bank") & (df["slot"] == 0)].iloc[0]
        assert row["is_enabled_l1"]
        assert not row["is_enabled_l2"]
        assert not row["is_available"]


class TestEnabledCounts:
    def test_default_all_zero(self):
        counts = enabled_counts(CoolingProcessStatus())
        assert list(counts.index) == ["top_bank", "bottom_bank", "top_device", "bottom_device", "sidesweep"]
        assert counts["total"].tolist() == [68, 68, 24, 48, 8]
        assert counts[["enabled_l1", "enabled_l2", "available"]].sum().sum() == 0

    def test_counts(self):
        counts = enabled_counts(_status_with_top_banks({0: ON, 1: ON, 2: L1_ONLY}))
        assert counts.loc["top_bank", "enabled_l1"] == 3
        assert counts.loc["top_bank", "enabled_l2"] == 2
        assert counts.loc["top_bank", "available"] == 2
        assert counts.loc["bottom_bank", "enabled_l1"] == 0


class TestZoneAvailability:
    def test_rows_per_zone_and_side(self):
        out = zone_availability(CoolingProcessStatus())
        assert len(out) == 6
        totals = out.set_index(["zone_type", "position"])["total"]
        assert totals[("intensive", "top")] == 12
        assert totals[("standard", "bottom")] == 24
        assert totals[("trimming", "top")] == 32

    def test_percentage(self):
        slots = {i: ON for i in range(6)}  # half of the 12 intensive top banks
        out = zone_availability(_status_with_top_banks(slots)).set_index(["zone_type", "position"])
        assert out.loc[("intensive", "top"), "available"] == 6
        assert out.loc[("intensive", "top"), "availability_pct"] == 50.0
        assert out.loc[("standard", "top"), "availability_pct"] == 0.0
