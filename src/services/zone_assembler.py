"""
src/services/zone_assembler.py
──────────────────────────────
Builds the startup CoolingProcess from the zone configuration table.

Zones 1..N are loaded one at a time, in order. Each row is classified by
its zone-type code into the matching zone variant:
  1 → intensive   2 → standard   3 → trimming

Any gap is fatal: a missing zone raises ZoneLoadFailure and an unknown
type code raises UnknownZoneType. No partial process is ever returned.

Only zone-level scalars are copied; units, banks and devices are not
hydrated from the configuration row.
"""
import logging

from pydantic import TypeAdapter

from src.data.contracts import EventSink, ZoneConfigSource
from src.data.models import CoolingProcess, CoolingZone, CoolingZoneVariant, ZoneRecord, ZoneType
from src.services.errors import UnknownZoneType, ZoneLoadFailure
from src.services.events import notify

logger = logging.getLogger(__name__)

_ZONE_ADAPTER: TypeAdapter[CoolingZone] = TypeAdapter(CoolingZoneVariant)

_ZONE_SLOTS: dict[ZoneType, str] = {
    ZoneType.INTENSIVE: "intensive_zone",
    ZoneType.STANDARD: "standard_zone",
    ZoneType.TRIMMING: "trimming_zone",
}


def classify_zone_type(code: int, zone_id: str = "") -> ZoneType:
    """Map a raw zone-type code to ZoneType. Never coerces unknown codes."""
    try:
        return ZoneType(code)
    except ValueError:
        raise UnknownZoneType(code, zone_id) from None


def build_zone(record: ZoneRecord) -> CoolingZone:
    """Copy the scalar columns of a zone row into the variant selected by its type code."""
    zone_type = classify_zone_type(record.zone_type, record.zone_id)
    return _ZONE_ADAPTER.validate_python(
        {
            "zone_id": record.zone_id,
            "zone_no": record.zone_no,
            "zone_seq": record.zone_seq,
            "zone_type": zone_type,
            "num_units": record.num_units,
            "length_mm": record.length,
            "width_mm": record.width,
            "main_pressure": record.main_pressure,
            "water_temp_c": record.water_temperature,
        }
    )


class ZoneAssembler:
    def __init__(self, source: ZoneConfigSource, events: EventSink | None = None):
        self._source = source
        self._events = events

    def assemble(self, expected_zone_count: int) -> CoolingProcess:
        if expected_zone_count < 1:
            raise ValueError(f"expected_zone_count must be positive, got {expected_zone_count}")

        logger.info(f"Starting cooling process initialization with {expected_zone_count} zones")
        notify(self._events, "cooling_process.start", expected_zone_count=expected_zone_count)

        zones: dict[str, CoolingZone] = {}
        for zone_no in range(1, expected_zone_count + 1):
            record = self._source.load_zone_config(zone_no)
            if record is None:
                logger.error(
                    f"Failed to load cooling zone data from database for zone {zone_no}. "
                    "Initialization failed"
                )
                notify(self._events, "cooling_process.zone_load_failure", zone_no=zone_no)
                raise ZoneLoadFailure(zone_no)

            try:
                zone = build_zone(record)
            except UnknownZoneType:
                logger.error(
                    f"Unknown cooling zone type {record.zone_type} loaded from database: "
                    f"{record.zone_id}. Cannot initialize"
                )
                notify(
                    self._events, "cooling_process.unknown_zone_type",
                    zone_no=zone_no, zone_type=record.zone_type, zone_id=record.zone_id,
                )
                raise

            slot = _ZONE_SLOTS[zone.zone_type]
            if slot in zones:
                logger.warning(
                    f"Zone {zone_no} ({record.zone_id}) replaces previously loaded "
                    f"{zone.zone_type.name.lower()} zone {zones[slot].zone_no}"
                )
            zones[slot] = zone
            logger.debug(f"Initialized {zone.zone_type.name.lower()} cooling zone {zone_no}")
            notify(
                self._events, "cooling_process.zone_loaded",
                zone_no=zone_no, zone_id=zone.zone_id, zone_type=int(zone.zone_type),
            )

        process = CoolingProcess(**zones)
        logger.info(f"Cooling process initialized successfully with {process.zone_num} zones")
        notify(self._events, "cooling_process.ready", zone_num=process.zone_num)
        return process


def assemble_process(
    source: ZoneConfigSource,
    expected_zone_count: int,
    events: EventSink | None = None,
) -> CoolingProcess:
    """Convenience wrapper: ZoneAssembler(source, events).assemble(expected_zone_count)."""
    return ZoneAssembler(source, events).assemble(expected_zone_count)
