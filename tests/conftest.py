"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the cooling monitor test suite.
"""
import os

import pytest

# Keep tests away from the dev database file
os.environ.setdefault("DATABASE_URL", "test_cooling_plant.db")
os.environ.setdefault("SIMULATION_SEED", "42")

from src.data.models import DeviceType, StatusRecord, VerticalPosition, ZoneRecord  # noqa: E402


def make_zone_record(
    zone_no: int = 1,
    zone_type: int = 1,
    num_units: int = 2,
    zone_id: str = "IC_ZONE",
    zone_seq: int | None = None,
    length: float = 12_500.0,
    width: float = 1_900.0,
    main_pressure: float = 1.2,
    water_temperature: float = 23.0,
) -> ZoneRecord:
    return ZoneRecord(
        area_id="HSM",
        center_id="DC",
        zone_no=zone_no,
        zone_id=zone_id,
        zone_seq=zone_no if zone_seq is None else zone_seq,
        zone_type=zone_type,
        num_units=num_units,
        length=length,
        width=width,
        main_pressure=main_pressure,
        water_temperature=water_temperature,
    )


def make_status_record(
    index: int,
    position: VerticalPosition,
    device_type: DeviceType,
    flag_1: bool = True,
    flag_2: bool = True,
) -> StatusRecord:
    return StatusRecord(
        bank_no=index,
        position=position,
        device_type=device_type,
        zone_no=1,
        zone_id="IC_ZONE",
        bank_seq=index,
        enabled_flag_1=flag_1,
        enabled_flag_2=flag_2,
        record_id=index,
    )


class FakeZoneSource:
    """Zone rows keyed by zone number; records every requested zone."""

    def __init__(self, records: list[ZoneRecord] | None = None):
        self.records = {r.zone_no: r for r in records or []}
        self.calls: list[int] = []

    def load_zone_config(self, zone_no: int) -> ZoneRecord | None:
        self.calls.append(zone_no)
        return self.records.get(zone_no)


class FakeStatusSource:
    """Status rows keyed by (index, position, device_type); records every lookup."""

    def __init__(self, records: list[StatusRecord] | None = None):
        self.records = {(r.bank_no, r.position, r.device_type): r for r in records or []}
        self.calls: list[tuple[int, VerticalPosition, DeviceType]] = []

    def load_equipment_status(self, index, position, device_type):
        self.calls.append((index, position, device_type))
        return self.records.get((index, position, device_type))


class RecordingSink:
    def __init__(self):
        self.events: list[tuple[str, dict]] = []

    def publish(self, event, payload):
        self.events.append((event, payload))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def reference_zones() -> list[ZoneRecord]:
    return [
        make_zone_record(zone_no=1, zone_type=1, num_units=3, zone_id="IC_ZONE"),
        make_zone_record(zone_no=2, zone_type=2, num_units=6, zone_id="STD_ZONE",
                         length=30_000.0, width=2_000.0, main_pressure=0.95, water_temperature=21.0),
        make_zone_record(zone_no=3, zone_type=3, num_units=2, zone_id="TRIM_ZONE",
                         length=16_000.0, width=2_000.0, main_pressure=0.8, water_temperature=20.0),
    ]


@pytest.fixture
def zone_source(reference_zones) -> FakeZoneSource:
    return FakeZoneSource(reference_zones)


@pytest.fixture
def empty_status_source() -> FakeStatusSource:
    return FakeStatusSource()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def store(tmp_path):
    from src.data.store import CoolingPlantStore

    s = CoolingPlantStore(db_path=str(tmp_path / "plant.db"), area_id="HSM", center_id="DC")
    s.create_tables()
    return s


@pytest.fixture
def zone_record():
    """Factory for ZoneRecord rows."""
    return make_zone_record


@pytest.fixture
def status_record():
    """Factory for StatusRecord rows."""
    return make_status_record


@pytest.fixture
def status_source_with():
    """Build a FakeStatusSource from a list of StatusRecord rows."""
    return FakeStatusSource


@pytest.fixture
def zone_source_with():
    """Build a FakeZoneSource from a list of ZoneRecord rows."""
    return FakeZoneSource
