"""
Pixabay MCP Server - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import Literal
from pathlib import Path


class PixabaySettings(BaseSettings):
    """Pixabay API configuration."""
    api_key: str = Field(..., alias="PIXABAY_API_KEY")
    base_url: str = Field("https://pixabay.com/api/", alias="PIXABAY_BASE_URL")
    video_base_url: str = Field(
        "https://pixabay.com/api/videos/", alias="PIXABAY_VIDEO_BASE_URL"
    )
    default_locale: str = Field("en", alias="PIXABAY_DEFAULT_LOCALE")
    default_per_page: int = Field(6, alias="PIXABAY_DEFAULT_PER_PAGE")
    max_per_page: int = Field(20, alias="PIXABAY_MAX_PER_PAGE")
    timeout_seconds: float = Field(30.0, alias="PIXABAY_TIMEOUT_SECONDS")

    model_config = {"env_prefix": "", "extra": "ignore", "frozen": True}

    @field_validator("api_key")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Missing required environment variable: PIXABAY_API_KEY")
        return value


class MCPSettings(BaseSettings):
    """MCP server configuration."""
    transport: Literal["sse", "stdio"] = Field("stdio", alias="MCP_TRANSPORT")
    port: int = Field(8080, alias="MCP_PORT")
    host: str = Field("0.0.0.0", alias="MCP_HOST")

    model_config = {"env_prefix": "", "extra": "ignore", "frozen": True}


class WidgetSettings(BaseSettings):
    """Gallery widget bundle location."""
    dist_dir: Path = Field(Path("./web/dist"), alias="WIDGET_DIST_DIR")

    model_config = {"env_prefix": "", "extra": "ignore", "frozen": True}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )

    model_config = {"env_prefix": "", "extra": "ignore", "frozen": True}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    pixabay: PixabaySettings = Field(default_factory=PixabaySettings)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    widget: WidgetSettings = Field(default_factory=WidgetSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore", "frozen": True}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
