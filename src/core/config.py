"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="LAYOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Canvas
    canvas_width: int = Field(default=1200, gt=0, description="Canvas width in pixels")
    element_gap: int = Field(default=20, ge=0, description="Gap between placed elements")

    # Grid packing (main content)
    grid_columns: int = Field(default=3, gt=0, description="Columns used for main content")
    grid_margin: int = Field(default=20, ge=0, description="Left/right margin of the grid")
    min_clamped_height: int = Field(
        default=50, gt=0, description="Smallest height an overflowing element is clamped to"
    )

    # Page model grid
    page_columns: int = Field(default=12, gt=0, description="Columns of the page model grid")

    # Rendering
    render_workers: int = Field(default=1, gt=0, description="Worker threads per render pass")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Validation
    max_payload_size: int = Field(default=512 * 1024, gt=0, description="Max payload size (bytes)")
    max_payload_depth: int = Field(default=20, gt=0, description="Max payload nesting depth")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
