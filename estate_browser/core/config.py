from pydantic_settings import BaseSettings
from typing import Optional
from pathlib import Path


class Settings(BaseSettings):
    # Simulated API latency
    LATENCY_SCALE: float = 1.0  # 0 disables sleeping entirely
    LATENCY_JITTER_MS: int = 0
    
    # Seed data
    FIXTURES_DIR: Optional[Path] = None  # defaults to the bundled fixtures
    
    # Logging
    LOG_LEVEL: str = "INFO"
    
    # Listing form defaults
    DEFAULT_AGENT_ID: str = "agent-1"
    MAP_ORIGIN_LAT: float = 40.7128
    MAP_ORIGIN_LNG: float = -74.0060
    
    class Config:
        env_file = ".env"
        env_prefix = "ESTATE_"


settings = Settings()
