"""
src/services/errors.py
──────────────────────
Fatal startup errors raised while assembling the cooling process.

Status lookup misses are not errors: the aggregator leaves the slot
disabled and carries on.
"""


class CoolingConfigError(RuntimeError):
    """Cooling process configuration could not be assembled."""


class ZoneLoadFailure(CoolingConfigError):
    def __init__(self, zone_no: int):
        self.zone_no = zone_no
        super().__init__(f"Failed to load zone {zone_no}")


class UnknownZoneType(CoolingConfigError):
    def __init__(self, code: int, zone_id: str = ""):
        self.code = code
        self.zone_id = zone_id
        super().__init__(f"Unknown zone type: {code}")
