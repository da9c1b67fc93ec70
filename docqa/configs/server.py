"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: uvicorn bind configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from docqa.configs.base import env_config


class ApiSettings(BaseSettings):
    """uvicorn host/port configuration."""

    model_config = env_config("API_")

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")
    reload: bool = Field(default=False, description="Enable auto-reload (development only)")
