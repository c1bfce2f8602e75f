"""
src/data/models.py
──────────────────
Pydantic v2 data models for the cooling plant topology, the equipment
status snapshot, and the raw records returned by the plant database.

Hierarchy:
  CoolingProcess ─┬─ IntensiveCoolingZone ── IntensiveCoolingUnit ── IntensiveCoolingBank ── CoolingDevice
                  ├─ StandardCoolingZone  ── StandardCoolingUnit  ── CoolingBank
                  └─ TrimmingCoolingZone  ── TrimmingCoolingUnit  ── CoolingBank
"""

from enum import Enum, IntEnum
from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

# Plant-wide slot counts for the live status snapshot
TOTAL_BANKS = 68
TOTAL_TOP_DEVICES = 24
TOTAL_BOTTOM_DEVICES = 48
TOTAL_SIDESWEEPS = 8


class ZoneType(IntEnum):
    INTENSIVE = 1
    STANDARD = 2
    TRIMMING = 3


class VerticalPosition(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


class DeviceType(IntEnum):
    DEVICE = 1
    SIDESWEEP = 2
    BANK = 3


# ── Topology ──────────────────────────────────────────────────────────────────


class CoolingDevice(BaseModel):
    """Single spray/nozzle element of an intensive bank."""

    model_config = ConfigDict(frozen=True)

    device_no: int
    device_seq: int
    device_type: int
    description: str = ""
    wet_length_mm: float = Field(default=0.0, ge=0.0)
    efficiency: float = Field(default=1.0, ge=0.0)  # 1.0 = nominal flow


class CoolingBank(BaseModel):
    model_config = ConfigDict(frozen=True)

    bank_no: int
    bank_seq: int
    position: VerticalPosition
    length_mm: float = 0.0
    width_mm: float = 0.0
    main_pressure: float = 0.0
    water_temp_c: float = 0.0


class IntensiveCoolingBank(CoolingBank):
    MAX_TOP_DEVICES: ClassVar[int] = 4
    MAX_BOTTOM_DEVICES: ClassVar[int] = 4

    top_devices: tuple[CoolingDevice, ...] = Field(default_factory=tuple, max_length=4)
    bottom_devices: tuple[CoolingDevice, ...] = Field(default_factory=tuple, max_length=4)


class CoolingUnit(BaseModel):
    model_config = ConfigDict(frozen=True)

    unit_no: int
    unit_seq: int
    length_mm: float = 0.0
    width_mm: float = 0.0


class IntensiveCoolingUnit(CoolingUnit):
    MAX_TOP_BANKS: ClassVar[int] = 8
    MAX_BOTTOM_BANKS: ClassVar[int] = 8

    top_banks: tuple[IntensiveCoolingBank, ...] = Field(default_factory=tuple, max_length=8)
    bottom_banks: tuple[IntensiveCoolingBank, ...] = Field(default_factory=tuple, max_length=8)


class StandardCoolingUnit(CoolingUnit):
    MAX_TOP_BANKS: ClassVar[int] = 6
    MAX_BOTTOM_BANKS: ClassVar[int] = 6

    top_banks: tuple[CoolingBank, ...] = Field(default_factory=tuple, max_length=6)
    bottom_banks: tuple[CoolingBank, ...] = Field(default_factory=tuple, max_length=6)


class TrimmingCoolingUnit(CoolingUnit):
    MAX_TOP_BANKS: ClassVar[int] = 4
    MAX_BOTTOM_BANKS: ClassVar[int] = 4

    top_banks: tuple[CoolingBank, ...] = Field(default_factory=tuple, max_length=4)
    bottom_banks: tuple[CoolingBank, ...] = Field(default_factory=tuple, max_length=4)


class CoolingZone(BaseModel):
    model_config = ConfigDict(frozen=True)

    zone_id: str
    zone_no: int
    zone_seq: int
    zone_type: ZoneType
    num_units: int = Field(ge=0)
    length_mm: float = 0.0
    width_mm: float = 0.0
    main_pressure: float = 0.0
    water_temp_c: float = 0.0


class IntensiveCoolingZone(CoolingZone):
    MAX_UNITS: ClassVar[int] = 2

    zone_type: Literal[ZoneType.INTENSIVE] = ZoneType.INTENSIVE
    units: tuple[IntensiveCoolingUnit, ...] = Field(default_factory=tuple, max_length=2)


class StandardCoolingZone(CoolingZone):
    MAX_UNITS: ClassVar[int] = 2

    zone_type: Literal[ZoneType.STANDARD] = ZoneType.STANDARD
    units: tuple[StandardCoolingUnit, ...] = Field(default_factory=tuple, max_length=2)


class TrimmingCoolingZone(CoolingZone):
    MAX_UNITS: ClassVar[int] = 1

    zone_type: Literal[ZoneType.TRIMMING] = ZoneType.TRIMMING
    units: tuple[TrimmingCoolingUnit, ...] = Field(default_factory=tuple, max_length=1)


CoolingZoneVariant = Annotated[
    Union[IntensiveCoolingZone, StandardCoolingZone, TrimmingCoolingZone],
    Field(discriminator="zone_type"),
]


class CoolingProcess(BaseModel):
    """Startup configuration of the whole cooling line. Built once, read-only."""

    model_config = ConfigDict(frozen=True)

    # Pyrometer positions (mm from process beginning)
    entry_scan_pyro_pos: float = 0.0
    entry_pyro_pos: float = 0.0
    inter_pyro_pos: float = 0.0
    exit_pyro_pos: float = 0.0
    exit_scan_pyro_pos: float = 0.0
    entry_pyro_first_bank_dist: float = 0.0
    exit_pyro_last_bank_dist: float = 0.0

    intensive_zone: IntensiveCoolingZone | None = None
    standard_zone: StandardCoolingZone | None = None
    trimming_zone: TrimmingCoolingZone | None = None

    @computed_field
    @property
    def zone_num(self) -> int:
        return len(self.zones)

    @property
    def zones(self) -> list[CoolingZone]:
        """Present zones in line order (intensive → standard → trimming)."""
        return [
            z
            for z in (self.intensive_zone, self.standard_zone, self.trimming_zone)
            if z is not None
        ]


# ── Live equipment status ─────────────────────────────────────────────────────


class EquipmentStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_enabled_l1: bool = False
    is_enabled_l2: bool = False

    @property
    def is_available(self) -> bool:
        """Both enablement levels must be set for normal operation."""
        return self.is_enabled_l1 and self.is_enabled_l2


def default_slots(count: int) -> tuple[EquipmentStatus, ...]:
    return tuple(EquipmentStatus() for _ in range(count))


class CoolingProcessStatus(BaseModel):
    """
    Snapshot of L1/L2 enablement for every addressable component.
    A fresh instance has every slot disabled.
    """

    model_config = ConfigDict(frozen=True)

    TOTAL_BANKS: ClassVar[int] = TOTAL_BANKS
    TOTAL_TOP_DEVICES: ClassVar[int] = TOTAL_TOP_DEVICES
    TOTAL_BOTTOM_DEVICES: ClassVar[int] = TOTAL_BOTTOM_DEVICES
    TOTAL_SIDESWEEPS: ClassVar[int] = TOTAL_SIDESWEEPS

    top_bank_status: tuple[EquipmentStatus, ...] = Field(
        default_factory=lambda: default_slots(TOTAL_BANKS),
        min_length=TOTAL_BANKS, max_length=TOTAL_BANKS,
    )
    bottom_bank_status: tuple[EquipmentStatus, ...] = Field(
        default_factory=lambda: default_slots(TOTAL_BANKS),
        min_length=TOTAL_BANKS, max_length=TOTAL_BANKS,
    )
    top_device_status: tuple[EquipmentStatus, ...] = Field(
        default_factory=lambda: default_slots(TOTAL_TOP_DEVICES),
        min_length=TOTAL_TOP_DEVICES, max_length=TOTAL_TOP_DEVICES,
    )
    bottom_device_status: tuple[EquipmentStatus, ...] = Field(
        default_factory=lambda: default_slots(TOTAL_BOTTOM_DEVICES),
        min_length=TOTAL_BOTTOM_DEVICES, max_length=TOTAL_BOTTOM_DEVICES,
    )
    sidesweep_status: tuple[EquipmentStatus, ...] = Field(
        default_factory=lambda: default_slots(TOTAL_SIDESWEEPS),
        min_length=TOTAL_SIDESWEEPS, max_length=TOTAL_SIDESWEEPS,
    )


# ── Database records ──────────────────────────────────────────────────────────


class ZoneRecord(BaseModel):
    """One row of TDB_COOLING_ZONE_DATA. zone_type is left raw for validation upstream."""

    area_id: str
    center_id: str
    zone_no: int
    zone_id: str
    zone_seq: int
    zone_type: int
    num_units: int
    length: float
    width: float
    main_pressure: float
    water_temperature: float


class StatusRecord(BaseModel):
    """One row of RTDB_ACC_STATUS with the raw out-of-order columns already decoded."""

    bank_no: int
    position: VerticalPosition
    device_type: DeviceType
    zone_no: int
    zone_id: str
    bank_seq: int
    enabled_flag_1: bool
    enabled_flag_2: bool
    record_id: int
