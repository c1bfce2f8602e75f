"""
src/data/layout.py
──────────────────
Bank numbering of the reference hot-strip-mill cooling plant.

Bank numbers are global along the line and map to zones by range:
   1–12  intensive
  13–36  standard
  37–68  trimming

Slot counts of the status snapshot are fixed by CoolingProcessStatus and
are not part of the layout. Build another PlantLayout for a plant with
different zone boundaries instead of editing the ranges in place.
"""
from dataclasses import dataclass, field

from src.data.models import CoolingProcessStatus, ZoneType


@dataclass(frozen=True)
class BankRange:
    zone_type: ZoneType
    first_bank: int   # inclusive, 1-based
    last_bank: int    # inclusive, 1-based

    def __contains__(self, bank_no: int) -> bool:
        return self.first_bank <= bank_no <= self.last_bank

    @property
    def size(self) -> int:
        return self.last_bank - self.first_bank + 1


@dataclass(frozen=True)
class PlantLayout:
    bank_ranges: tuple[BankRange, ...] = field(
        default=(
            BankRange(ZoneType.INTENSIVE, 1, 12),
            BankRange(ZoneType.STANDARD, 13, 36),
            BankRange(ZoneType.TRIMMING, 37, 68),
        )
    )

    def __post_init__(self):
        for bank_range in self.bank_ranges:
            if not 1 <= bank_range.first_bank <= bank_range.last_bank <= CoolingProcessStatus.TOTAL_BANKS:
                raise ValueError(
                    f"Bank range {bank_range.first_bank}-{bank_range.last_bank} for "
                    f"{bank_range.zone_type.name.lower()} zone is outside banks "
                    f"1-{CoolingProcessStatus.TOTAL_BANKS}"
                )

    def zone_type_for_bank(self, bank_no: int) -> ZoneType | None:
        """Return the zone type owning a 1-based bank number, or None if unmapped."""
        for bank_range in self.bank_ranges:
            if bank_no in bank_range:
                return bank_range.zone_type
        return None

    def range_for(self, zone_type: ZoneType) -> BankRange | None:
        for bank_range in self.bank_ranges:
            if bank_range.zone_type == zone_type:
                return bank_range
        return None


REFERENCE_PLANT = PlantLayout()
