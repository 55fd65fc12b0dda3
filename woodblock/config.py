"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    # Board Configuration
    default_pattern_id: int = Field(default=1, description="Pattern shown on startup")
    default_grid_size: int = Field(default=30, description="Default board side in blocks")
    min_grid_size: int = Field(default=5, ge=1, description="Smallest allowed board side")
    max_grid_size: int = Field(default=30, ge=1, description="Largest allowed board side")

    # Viewer Configuration
    min_zoom: float = Field(default=0.5, gt=0, description="Minimum zoom level")
    max_zoom: float = Field(default=3.0, gt=0, description="Maximum zoom level")
    zoom_step: float = Field(default=0.2, gt=0, description="Zoom change per button press")

    class Config:
        env_prefix = "WOODBLOCK_"
        env_file = ".env"
        env_file_encoding = "utf-8"


def clamp_grid_size(size: int, config: Settings = None) -> int:
    """Clamp a requested board side into [min_grid_size, max_grid_size]."""
    config = config or settings
    return max(config.min_grid_size, min(config.max_grid_size, int(size)))


def clamp_zoom(level: float, config: Settings = None) -> float:
    """Clamp a zoom level into [min_zoom, max_zoom]."""
    config = config or settings
    return max(config.min_zoom, min(config.max_zoom, float(level)))


# Instantiate singleton settings object
settings = Settings()
