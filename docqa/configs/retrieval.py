"""
Retrieval and document store configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Query-time defaults and registry capacity
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from docqa.configs.base import env_config


class RetrievalSettings(BaseSettings):
    """Query-time retrieval defaults."""

    model_config = env_config("RETRIEVAL_")

    default_top_k: int = Field(
        default=3,
        ge=1,
        description="Number of chunks retrieved when the request omits topK",
    )


class StoreSettings(BaseSettings):
    """In-memory document store configuration."""

    model_config = env_config("STORE_")

    max_documents: int | None = Field(
        default=None,
        ge=1,
        description="Evict oldest documents beyond this count (unbounded when unset)",
    )
