"""External service clients."""

from docqa.boundary.genai_clients import create_chat_model, create_embeddings

__all__ = ["create_chat_model", "create_embeddings"]
