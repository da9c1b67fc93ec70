"""
Ingestion configuration settings.

Chunking parameters and upload limits for the PDF ingestion path.

Dependencies: pydantic, pydantic_settings
System role: Centralized ingestion configuration
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from docqa.configs.base import env_config


class ChunkingSettings(BaseSettings):
    """Settings for splitting extracted text into chunks."""

    model_config = env_config("CHUNKING_")

    chunk_size: int = Field(
        default=1000,
        gt=0,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        ge=0,
        description="Overlap between consecutive chunks",
    )

    @model_validator(mode="after")
    def _overlap_below_size(self) -> "ChunkingSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than chunk_size ({self.chunk_size})"
            )
        return self


class UploadSettings(BaseSettings):
    """Settings for multipart PDF uploads."""

    model_config = env_config("UPLOAD_")

    max_bytes: int = Field(
        default=25 * 1024 * 1024,
        gt=0,
        description="Maximum accepted upload size in bytes",
    )
    temp_prefix: str = Field(
        default="docqa_",
        description="Prefix of the scratch directory created per upload",
    )
    read_chunk_bytes: int = Field(
        default=1024 * 1024,
        gt=0,
        description="Read size used when streaming an upload to disk",
    )
