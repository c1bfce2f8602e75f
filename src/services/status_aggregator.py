"""
src/services/status_aggregator.py
─────────────────────────────────
Real-time equipment enablement snapshot.

Each refresh sweeps five fixed-size slot collections, one status lookup per
slot, strictly in sequence:

  collection            count  position  device type
  top_bank_status          68  TOP       BANK
  bottom_bank_status       68  BOTTOM    BANK
  top_device_status        24  TOP       DEVICE
  bottom_device_status     48  BOTTOM    DEVICE
  sidesweep_status          8  BOTTOM    SIDESWEEP

Slot i is looked up as component number i + 1. A missing row leaves the slot
at its default (disabled, disabled) and never aborts the sweep. Transport
errors from the source propagate to the caller.

StatusPublisher wraps the aggregator for polling: every poll builds a new
snapshot and publishes it by swapping a single reference, so a reader never
sees a half-updated snapshot.
"""
import logging
from dataclasses import dataclass

from src.data.contracts import EquipmentStatusSource, EventSink
from src.data.models import (
    CoolingProcessStatus,
    DeviceType,
    EquipmentStatus,
    VerticalPosition,
)
from src.services.events import notify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sweep:
    field: str
    count: int
    position: VerticalPosition
    device_type: DeviceType


def plant_sweeps() -> tuple[Sweep, ...]:
    """Sweep plan in lookup order; counts are the fixed snapshot slot sizes."""
    return (
        Sweep("top_bank_status", CoolingProcessStatus.TOTAL_BANKS, VerticalPosition.TOP, DeviceType.BANK),
        Sweep("bottom_bank_status", CoolingProcessStatus.TOTAL_BANKS, VerticalPosition.BOTTOM, DeviceType.BANK),
        Sweep("top_device_status", CoolingProcessStatus.TOTAL_TOP_DEVICES, VerticalPosition.TOP, DeviceType.DEVICE),
        Sweep("bottom_device_status", CoolingProcessStatus.TOTAL_BOTTOM_DEVICES, VerticalPosition.BOTTOM, DeviceType.DEVICE),
        Sweep("sidesweep_status", CoolingProcessStatus.TOTAL_SIDESWEEPS, VerticalPosition.BOTTOM, DeviceType.SIDESWEEP),
    )


class StatusAggregator:
    def __init__(self, source: EquipmentStatusSource, events: EventSink | None = None):
        self._source = source
        self._sweeps = plant_sweeps()
        self._events = events

    def _sweep(self, sweep: Sweep) -> tuple[tuple[EquipmentStatus, ...], int]:
        slots: list[EquipmentStatus] = []
        misses = 0
        for i in range(sweep.count):
            record = self._source.load_equipment_status(i + 1, sweep.position, sweep.device_type)
            if record is None:
                logger.debug(
                    f"No ACC status for {sweep.device_type.name.lower()} {i + 1} "
                    f"({sweep.position.value}); slot left disabled"
                )
                misses += 1
                slots.append(EquipmentStatus())
                continue
            slots.append(
                EquipmentStatus(
                    is_enabled_l1=record.enabled_flag_1,
                    is_enabled_l2=record.enabled_flag_2,
                )
            )
        return tuple(slots), misses

    def refresh(self) -> CoolingProcessStatus:
        logger.info("Loading cooling process equipment status from database")
        notify(self._events, "equipment_status.start")

        collections: dict[str, tuple[EquipmentStatus, ...]] = {}
        total_misses = 0
        for sweep in self._sweeps:
            collections[sweep.field], misses = self._sweep(sweep)
            total_misses += misses

        status = CoolingProcessStatus(**collections)
        logger.info(
            f"Cooling process equipment status loaded successfully "
            f"({total_misses} slots without status)"
        )
        notify(self._events, "equipment_status.loaded", missing_slots=total_misses)
        return status


class StatusPublisher:
    """Holds the latest published snapshot; poll() replaces it wholesale."""

    def __init__(self, aggregator: StatusAggregator):
        self._aggregator = aggregator
        self._current = CoolingProcessStatus()
        self.polls = 0

    @property
    def current(self) -> CoolingProcessStatus:
        return self._current

    def poll(self) -> CoolingProcessStatus:
        snapshot = self._aggregator.refresh()
        self._current = snapshot
        self.polls += 1
        return snapshot


def refresh_status(source: EquipmentStatusSource) -> CoolingProcessStatus:
    """One-shot snapshot without keeping an aggregator around."""
    return StatusAggregator(source).refresh()
