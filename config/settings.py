"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Server
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    PORT: int = int(os.getenv("PORT", "8050"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    # Database (SQLite path standing in for the plant database)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "cooling_plant.db")

    # Plant database keys
    AREA_ID: str = os.getenv("AREA_ID", "HSM")
    CENTER_ID: str = os.getenv("CENTER_ID", "DC")

    # Startup: number of zones expected in TDB_COOLING_ZONE_DATA
    EXPECTED_ZONE_COUNT: int = int(os.getenv("EXPECTED_ZONE_COUNT", "3"))

    # Equipment status polling interval in milliseconds
    UPDATE_INTERVAL_MS: int = int(os.getenv("UPDATE_INTERVAL_MS", "5000"))

    # Simulation
    SIMULATION_SEED: int = int(os.getenv("SIMULATION_SEED", "42"))
    SIMULATE_LIVE_CHANGES: bool = os.getenv("SIMULATE_LIVE_CHANGES", "true").lower() == "true"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
