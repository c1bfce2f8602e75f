"""
src/data/store.py
─────────────────
SQLite stand-in for the plant database.

Provides:
  - CoolingPlantStore.load_zone_config()       : TDB_COOLING_ZONE_DATA lookup by zone number
  - CoolingPlantStore.load_equipment_status()  : RTDB_ACC_STATUS lookup by (bank, position, type)
  - CoolingPlantStore.insert_zone_records()    : Bulk insert zone configuration rows
  - CoolingPlantStore.insert_status_rows()     : Bulk insert/replace raw status rows
  - initialize_db()                            : Create tables + seed the reference plant

Every lookup opens its own connection and closes it on every exit path;
no connection is held between calls.

Column conventions kept from the plant database:
  - key strings are CHAR columns padded with trailing blanks (RTRIM on compare)
  - BANK_POS is +10 for top and -10 for bottom
  - BANK_OUT_OF_ORDER / DEVICE_OUT_OF_ORDER: any nonzero value means ENABLED
"""
from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterable, Iterator
from contextlib import closing, contextmanager

from config.settings import settings
from pydantic import ValidationError

from src.data.models import DeviceType, StatusRecord, VerticalPosition, ZoneRecord

logger = logging.getLogger(__name__)

# Translation table for the BANK_POS column; never used for in-memory logic
POSITION_CODES: dict[VerticalPosition, int] = {
    VerticalPosition.TOP: 10,
    VerticalPosition.BOTTOM: -10,
}
POSITIONS_BY_CODE: dict[int, VerticalPosition] = {v: k for k, v in POSITION_CODES.items()}

CHAR_WIDTH = 8


def encode_position(position: VerticalPosition) -> int:
    return POSITION_CODES[position]


def decode_position(code: int) -> VerticalPosition:
    try:
        return POSITIONS_BY_CODE[code]
    except KeyError:
        raise ValueError(f"Invalid BANK_POS code: {code}") from None


def _pad(value: str, width: int = CHAR_WIDTH) -> str:
    """Emulate a fixed-width CHAR column."""
    return value.ljust(width)


# ── Schema ────────────────────────────────────────────────────────────────────

_CREATE_ZONE_DATA = """
CREATE TABLE IF NOT EXISTS TDB_COOLING_ZONE_DATA (
    AREA_ID      TEXT    NOT NULL,
    CENTER_ID    TEXT    NOT NULL,
    ZONE_NO      INTEGER NOT NULL,
    ZONE_ID      TEXT    NOT NULL,
    ZONE_SEQ     INTEGER NOT NULL,
    ZONE_TYPE    INTEGER NOT NULL,
    NUM_UNITS    INTEGER NOT NULL,
    LENGTH       REAL    NOT NULL,
    WIDTH        REAL    NOT NULL,
    MAIN_PRES    REAL    NOT NULL,
    WATER_TEMP   REAL    NOT NULL,
    PRIMARY KEY (AREA_ID, CENTER_ID, ZONE_NO)
);
"""

_CREATE_ACC_STATUS = """
CREATE TABLE IF NOT EXISTS RTDB_ACC_STATUS (
    RTDB_ACC_STATUS_NO   INTEGER PRIMARY KEY,
    AREA_ID              TEXT    NOT NULL,
    CENTER_ID            TEXT    NOT NULL,
    BANK_NO              INTEGER NOT NULL,
    BANK_POS             INTEGER NOT NULL,
    DEVICE_TYPE          INTEGER NOT NULL,
    ZONE_NO              INTEGER NOT NULL,
    ZONE_ID              TEXT    NOT NULL,
    BANK_SEQ             INTEGER NOT NULL,
    BANK_OUT_OF_ORDER    INTEGER NOT NULL DEFAULT 0,
    DEVICE_OUT_OF_ORDER  INTEGER NOT NULL DEFAULT 0,
    UPDATE_TIME          TEXT
);
"""

_CREATE_IDX = """
CREATE UNIQUE INDEX IF NOT EXISTS idx_acc_status_key
    ON RTDB_ACC_STATUS (BANK_NO, BANK_POS, DEVICE_TYPE);
"""

_SELECT_ZONE = """
SELECT AREA_ID, CENTER_ID, ZONE_NO, ZONE_ID, ZONE_SEQ, ZONE_TYPE,
       NUM_UNITS, LENGTH, WIDTH, MAIN_PRES, WATER_TEMP
  FROM TDB_COOLING_ZONE_DATA
 WHERE RTRIM(AREA_ID) = ?
   AND RTRIM(CENTER_ID) = ?
   AND ZONE_NO = ?
"""

_SELECT_STATUS = """
SELECT ZONE_NO, ZONE_ID, BANK_SEQ, BANK_OUT_OF_ORDER, DEVICE_OUT_OF_ORDER, RTDB_ACC_STATUS_NO
  FROM RTDB_ACC_STATUS
 WHERE BANK_NO = ?
   AND BANK_POS = ?
   AND DEVICE_TYPE = ?
"""


class CoolingPlantStore:
    """Zone configuration and equipment status sources backed by one SQLite file."""

    def __init__(
        self,
        db_path: str | None = None,
        area_id: str | None = None,
        center_id: str | None = None,
    ):
        self.db_path = db_path or settings.DATABASE_URL
        self.area_id = area_id or settings.AREA_ID
        self.center_id = center_id or settings.CENTER_ID

    @contextmanager
    def _session(self) -> Iterator[sqlite3.Connection]:
        with closing(sqlite3.connect(self.db_path)) as conn:
            conn.row_factory = sqlite3.Row
            yield conn

    # ── Schema / seeding ──────────────────────────────────────────────────────

    def create_tables(self) -> None:
        with self._session() as conn, conn:
            conn.executescript(_CREATE_ZONE_DATA + _CREATE_ACC_STATUS + _CREATE_IDX)

    def clear(self) -> None:
        with self._session() as conn, conn:
            conn.execute("DELETE FROM TDB_COOLING_ZONE_DATA")
            conn.execute("DELETE FROM RTDB_ACC_STATUS")

    def count_zones(self) -> int:
        with self._session() as conn:
            return conn.execute("SELECT COUNT(*) FROM TDB_COOLING_ZONE_DATA").fetchone()[0]

    def insert_zone_records(self, records: Iterable[ZoneRecord]) -> None:
        rows = [
            (
                _pad(r.area_id),
                _pad(r.center_id),
                r.zone_no,
                _pad(r.zone_id, 16),
                r.zone_seq,
                r.zone_type,
                r.num_units,
                r.length,
                r.width,
                r.main_pressure,
                r.water_temperature,
            )
            for r in records
        ]
        if not rows:
            return
        with self._session() as conn, conn:
            conn.executemany(
                """INSERT OR REPLACE INTO TDB_COOLING_ZONE_DATA
                   (AREA_ID, CENTER_ID, ZONE_NO, ZONE_ID, ZONE_SEQ, ZONE_TYPE,
                    NUM_UNITS, LENGTH, WIDTH, MAIN_PRES, WATER_TEMP)
                   VALUES (?,?,?,?,?,?,?,?,?,?,?)""",
                rows,
            )

    def insert_status_rows(self, rows: Iterable[dict]) -> None:
        """
        Insert raw RTDB_ACC_STATUS rows. Each dict carries the in-memory
        position and device type plus the raw out-of-order integers:
          bank_no, position, device_type, zone_no, zone_id, bank_seq,
          bank_out_of_order, device_out_of_order, record_id, update_time (optional)
        """
        params = [
            (
                row["record_id"],
                _pad(self.area_id),
                _pad(self.center_id),
                row["bank_no"],
                encode_position(row["position"]),
                int(row["device_type"]),
                row["zone_no"],
                _pad(row["zone_id"], 16),
                row["bank_seq"],
                int(row["bank_out_of_order"]),
                int(row["device_out_of_order"]),
                row.get("update_time"),
            )
            for row in rows
        ]
        if not params:
            return
        with self._session() as conn, conn:
            conn.executemany(
                """INSERT OR REPLACE INTO RTDB_ACC_STATUS
                   (RTDB_ACC_STATUS_NO, AREA_ID, CENTER_ID, BANK_NO, BANK_POS,
                    DEVICE_TYPE, ZONE_NO, ZONE_ID, BANK_SEQ,
                    BANK_OUT_OF_ORDER, DEVICE_OUT_OF_ORDER, UPDATE_TIME)
                   VALUES (?,?,?,?,?,?,?,?,?,?,?,?)""",
                params,
            )

    # ── Collaborator lookups ──────────────────────────────────────────────────

    def load_zone_config(self, zone_no: int) -> ZoneRecord | None:
        try:
            with self._session() as conn:
                row = conn.execute(
                    _SELECT_ZONE, (self.area_id, self.center_id, zone_no)
                ).fetchone()

            if row is None:
                logger.debug(
                    f"No cooling zone data found in database for area: {self.area_id}, "
                    f"center: {self.center_id}, zone: {zone_no}"
                )
                return None

            return ZoneRecord(
                area_id=row["AREA_ID"].rstrip(),
                center_id=row["CENTER_ID"].rstrip(),
                zone_no=row["ZONE_NO"],
                zone_id=row["ZONE_ID"].rstrip(),
                zone_seq=row["ZONE_SEQ"],
                zone_type=row["ZONE_TYPE"],
                num_units=row["NUM_UNITS"],
                length=row["LENGTH"],
                width=row["WIDTH"],
                main_pressure=row["MAIN_PRES"],
                water_temperature=row["WATER_TEMP"],
            )
        except (sqlite3.Error, ValidationError):
            logger.error(
                f"Failed to load cooling zone data for zone {zone_no} "
                f"(area: {self.area_id}, center: {self.center_id})"
            )
            raise

    def load_equipment_status(
        self,
        index: int,
        position: VerticalPosition,
        device_type: DeviceType,
    ) -> StatusRecord | None:
        try:
            with self._session() as conn:
                row = conn.execute(
                    _SELECT_STATUS, (index, encode_position(position), int(device_type))
                ).fetchone()

            if row is None:
                return None

            return StatusRecord(
                bank_no=index,
                position=position,
                device_type=device_type,
                zone_no=row["ZONE_NO"],
                zone_id=row["ZONE_ID"].rstrip(),
                bank_seq=row["BANK_SEQ"],
                # Column names say "out of order" but nonzero means enabled
                enabled_flag_1=int(row["BANK_OUT_OF_ORDER"]) != 0,
                enabled_flag_2=int(row["DEVICE_OUT_OF_ORDER"]) != 0,
                record_id=row["RTDB_ACC_STATUS_NO"],
            )
        except (sqlite3.Error, ValidationError):
            logger.error(
                f"Failed to load ACC status for bank {index}, position {position.value}, "
                f"type {device_type.name}"
            )
            raise


# ── Public API ────────────────────────────────────────────────────────────────

def initialize_db(store: CoolingPlantStore | None = None, force_reseed: bool = False) -> CoolingPlantStore:
    """
    Create tables and seed the reference plant if the zone table is empty.
    Safe to call multiple times (idempotent).
    """
    # Import here to avoid circular deps
    from src.data.simulator import generate_status_rows, generate_zone_records

    store = store or CoolingPlantStore()
    store.create_tables()

    if store.count_zones() > 0 and not force_reseed:
        return store  # Already seeded

    store.clear()
    store.insert_zone_records(generate_zone_records(store.area_id, store.center_id))
    store.insert_status_rows(generate_status_rows())
    logger.info(f"Seeded reference cooling plant into {store.db_path}")
    return store
