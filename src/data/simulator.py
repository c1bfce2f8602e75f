"""
src/data/simulator.py
─────────────────────
Synthetic plant data for the reference cooling line.

Generates:
  - Zone configuration rows for the three zones (intensive, standard, trimming)
  - Raw RTDB_ACC_STATUS rows for every status slot, with random outages
    and a few missing rows
  - Small random flag changes between polls via generate_realtime_update()

Design:
  - Reproducible with SIMULATION_SEED for consistent demos
  - Enabled flags are written with assorted nonzero raw values (1 or 5), the
    way the plant database does, to exercise the nonzero-means-enabled rule
"""
from __future__ import annotations

import math
from datetime import UTC, datetime

import numpy as np

from config.settings import settings
from src.data.layout import REFERENCE_PLANT, PlantLayout
from src.data.models import (
    DeviceType,
    IntensiveCoolingUnit,
    StandardCoolingUnit,
    TrimmingCoolingUnit,
    ZoneRecord,
    ZoneType,
)
from src.services.status_aggregator import plant_sweeps

# ── Zone reference data ───────────────────────────────────────────────────────

ZONE_IDS: dict[ZoneType, str] = {
    ZoneType.INTENSIVE: "IC_ZONE",
    ZoneType.STANDARD: "STD_ZONE",
    ZoneType.TRIMMING: "TRIM_ZONE",
}

# length mm, width mm, main pressure bar, water temperature °C
ZONE_GEOMETRY: dict[ZoneType, tuple[float, float, float, float]] = {
    ZoneType.INTENSIVE: (12_500.0, 1_900.0, 1.2, 23.0),
    ZoneType.STANDARD: (30_000.0, 2_000.0, 0.95, 21.0),
    ZoneType.TRIMMING: (16_000.0, 2_000.0, 0.8, 20.0),
}

_BANKS_PER_UNIT: dict[ZoneType, int] = {
    ZoneType.INTENSIVE: IntensiveCoolingUnit.MAX_TOP_BANKS,
    ZoneType.STANDARD: StandardCoolingUnit.MAX_TOP_BANKS,
    ZoneType.TRIMMING: TrimmingCoolingUnit.MAX_TOP_BANKS,
}

SIDESWEEP_ZONE_ID = "SIDESWEEP"
RAW_ENABLED_VALUES = (1, 5)


def generate_zone_records(
    area_id: str = "HSM",
    center_id: str = "DC",
    layout: PlantLayout = REFERENCE_PLANT,
) -> list[ZoneRecord]:
    """One row per zone, numbered in line order; unit count derived from the bank range."""
    records: list[ZoneRecord] = []
    for zone_no, bank_range in enumerate(layout.bank_ranges, start=1):
        zone_type = bank_range.zone_type
        length, width, pressure, water_temp = ZONE_GEOMETRY[zone_type]
        records.append(
            ZoneRecord(
                area_id=area_id,
                center_id=center_id,
                zone_no=zone_no,
                zone_id=ZONE_IDS[zone_type],
                zone_seq=zone_no,
                zone_type=int(zone_type),
                num_units=math.ceil(bank_range.size / _BANKS_PER_UNIT[zone_type]),
                length=length,
                width=width,
                main_pressure=pressure,
                water_temperature=water_temp,
            )
        )
    return records


def _slot_location(
    device_type: DeviceType,
    component_no: int,
    count: int,
    layout: PlantLayout,
) -> tuple[int, str, int]:
    """(zone_no, zone_id, bank_seq) for one status slot."""
    zone_nos = {r.zone_type: n for n, r in enumerate(layout.bank_ranges, start=1)}

    if device_type is DeviceType.BANK:
        zone_type = layout.zone_type_for_bank(component_no)
        if zone_type is None:
            return 0, "", component_no
        bank_range = layout.range_for(zone_type)
        return zone_nos[zone_type], ZONE_IDS[zone_type], component_no - bank_range.first_bank + 1

    if device_type is DeviceType.DEVICE:
        intensive = layout.range_for(ZoneType.INTENSIVE)
        if intensive is None:
            return 0, "", component_no
        per_bank = max(1, count // intensive.size)
        return (
            zone_nos[ZoneType.INTENSIVE],
            ZONE_IDS[ZoneType.INTENSIVE],
            (component_no - 1) // per_bank + 1,
        )

    return 0, SIDESWEEP_ZONE_ID, component_no


def _raw_flag(rng: np.random.Generator, outage_rate: float) -> int:
    if rng.random() < outage_rate:
        return 0
    return int(rng.choice(RAW_ENABLED_VALUES))


def generate_status_rows(
    seed: int | None = None,
    outage_rate: float = 0.08,
    missing_rate: float = 0.02,
    layout: PlantLayout = REFERENCE_PLANT,
) -> list[dict]:
    """
    Raw status rows for every slot of the plant, in sweep order.
    Each row is dropped with probability missing_rate; each flag is zero
    (disabled) with probability outage_rate.
    """
    rng = np.random.default_rng(settings.SIMULATION_SEED if seed is None else seed)
    now = datetime.now(tz=UTC).isoformat()
    rows: list[dict] = []
    record_id = 0

    for sweep in plant_sweeps():
        for component_no in range(1, sweep.count + 1):
            if rng.random() < missing_rate:
                continue
            record_id += 1
            zone_no, zone_id, bank_seq = _slot_location(
                sweep.device_type, component_no, sweep.count, layout
            )
            rows.append(
                {
                    "record_id": record_id,
                    "bank_no": component_no,
                    "position": sweep.position,
                    "device_type": sweep.device_type,
                    "zone_no": zone_no,
                    "zone_id": zone_id,
                    "bank_seq": bank_seq,
                    "bank_out_of_order": _raw_flag(rng, outage_rate),
                    "device_out_of_order": _raw_flag(rng, outage_rate),
                    "update_time": now,
                }
            )
    return rows


def generate_realtime_update(
    rows: list[dict],
    rng: np.random.Generator,
    flip_rate: float = 0.02,
) -> list[dict]:
    """
    Return a new list of rows where each raw flag is toggled with probability
    flip_rate (0 ↔ 1). The input rows are not modified.
    """
    now = datetime.now(tz=UTC).isoformat()
    updated: list[dict] = []
    for row in rows:
        new_row = dict(row)
        changed = False
        for col in ("bank_out_of_order", "device_out_of_order"):
            if rng.random() < flip_rate:
                new_row[col] = 0 if row[col] != 0 else 1
                changed = True
        if changed:
            new_row["update_time"] = now
        updated.append(new_row)
    return updated
