"""
src/analytics/status_summary.py
───────────────────────────────
Tabular views over an equipment status snapshot.

Provides:
  - status_to_dataframe()  : one row per slot (long form)
  - enabled_counts()       : L1 / L2 / available counts per collection
  - zone_availability()    : bank availability aggregated per cooling zone
"""
from __future__ import annotations

import pandas as pd

from src.data.layout import REFERENCE_PLANT, PlantLayout
from src.data.models import CoolingProcessStatus
from src.services.status_aggregator import plant_sweeps

COLUMNS = [
    "collection",
    "slot",
    "component_no",
    "position",
    "device_type",
    "zone_type",
    "is_enabled_l1",
    "is_enabled_l2",
    "is_available",
]


def status_to_dataframe(
    status: CoolingProcessStatus,
    layout: PlantLayout = REFERENCE_PLANT,
) -> pd.DataFrame:
    """
    Flatten a snapshot. zone_type is filled for bank slots only, from the
    layout's bank ranges; device and sidesweep rows carry None.
    """
    records = []
    for sweep in plant_sweeps():
        for slot, eq in enumerate(getattr(status, sweep.field)):
            component_no = slot + 1
            zone_type = None
            if sweep.field.endswith("bank_status"):
                zt = layout.zone_type_for_bank(component_no)
                zone_type = zt.name.lower() if zt is not None else None
            records.append(
                {
                    "collection": sweep.field.removesuffix("_status"),
                    "slot": slot,
                    "component_no": component_no,
                    "position": sweep.position.value,
                    "device_type": sweep.device_type.name.lower(),
                    "zone_type": zone_type,
                    "is_enabled_l1": eq.is_enabled_l1,
                    "is_enabled_l2": eq.is_enabled_l2,
                    "is_available": eq.is_available,
                }
            )
    return pd.DataFrame.from_records(records, columns=COLUMNS)


def enabled_counts(status: CoolingProcessStatus, layout: PlantLayout = REFERENCE_PLANT) -> pd.DataFrame:
    """Per-collection totals, indexed by collection name in sweep order."""
    df = status_to_dataframe(status, layout)
    order = list(dict.fromkeys(df["collection"]))
    counts = df.groupby("collection", sort=False).agg(
        total=("slot", "size"),
        enabled_l1=("is_enabled_l1", "sum"),
        enabled_l2=("is_enabled_l2", "sum"),
        available=("is_available", "sum"),
    )
    return counts.reindex(order).astype(int)


def zone_availability(status: CoolingProcessStatus, layout: PlantLayout = REFERENCE_PLANT) -> pd.DataFrame:
    """
    Bank availability per zone and side.
    Columns: zone_type, position, total, available, availability_pct.
    """
    df = status_to_dataframe(status, layout)
    banks = df[df["zone_type"].notna()]
    if banks.empty:
        return pd.DataFrame(columns=["zone_type", "position", "total", "available", "availability_pct"])

    out = (
        banks.groupby(["zone_type", "position"], sort=False)
        .agg(total=("slot", "size"), available=("is_available", "sum"))
        .reset_index()
    )
    out["available"] = out["available"].astype(int)
    out["availability_pct"] = (out["available"] / out["total"] * 100.0).round(1)
    return out
