import logging
from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Routing
    AVERAGE_URBAN_SPEED_KMH: float = 40.0  # straight-line estimate, no road network

    # Facility coverage circles
    COVERAGE_RADIUS_M: float = 1000.0
    NEAREST_HOSPITALS_LIMIT: int = 3

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_prefix = "RISKMAP_"
        env_file = ".env"

settings = Settings()

def configure_logging(level: Optional[str] = None) -> None:
    """Apply the configured log level to the root logger"""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper())
