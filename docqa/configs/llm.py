"""
Language model configuration settings.

Manages Google Gemini credentials and model identifiers used for
embeddings and answer generation.

Dependencies: pydantic, pydantic_settings
System role: External model configuration for ingestion and retrieval
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from docqa.configs.base import env_config


class ModelSettings(BaseSettings):
    """Gemini embedding and chat model configuration."""

    model_config = env_config("MODEL_")

    google_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("MODEL_GOOGLE_API_KEY", "GOOGLE_API_KEY", "GOOGLE"),
        description="Google Generative AI API key (GOOGLE is accepted for older deployments)",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID",
    )
    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Google Gemini chat model used to generate answers",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for answer generation",
    )
