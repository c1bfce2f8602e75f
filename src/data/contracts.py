"""
src/data/contracts.py
─────────────────────
Collaborator interfaces consumed by the zone assembler and the status
aggregator. Any object with matching methods qualifies; the SQLite store
in src/data/store.py is the production implementation and tests use
in-memory fakes.
"""
from typing import Any, Protocol

from src.data.models import DeviceType, StatusRecord, VerticalPosition, ZoneRecord


class ZoneConfigSource(Protocol):
    def load_zone_config(self, zone_no: int) -> ZoneRecord | None:
        """Return the configuration row for a zone, or None when no row exists."""
        ...


class EquipmentStatusSource(Protocol):
    def load_equipment_status(
        self,
        index: int,
        position: VerticalPosition,
        device_type: DeviceType,
    ) -> StatusRecord | None:
        """Return the status row for a 1-based component number, or None when missing."""
        ...


class EventSink(Protocol):
    """Fire-and-forget operational notifications (message bus stand-in)."""

    def publish(self, event: str, payload: dict[str, Any]) -> None:
        ...
