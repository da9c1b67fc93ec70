"""
Google Generative AI client factories.

Builds the Gemini embedding and chat clients from ModelSettings.
Document embeddings use the RETRIEVAL_DOCUMENT task type and question
embeddings RETRIEVAL_QUERY (the langchain_google_genai defaults).

Dependencies: langchain_google_genai
System role: External model boundary
"""

import logging

from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings

from docqa.configs.llm import ModelSettings

logger = logging.getLogger(__name__)


def _credentials(settings: ModelSettings) -> dict:
    # Fall back to the client's own GOOGLE_API_KEY lookup when unset
    if settings.google_api_key:
        return {"google_api_key": settings.google_api_key}
    return {}


def create_embeddings(settings: ModelSettings) -> GoogleGenerativeAIEmbeddings:
    """
    Create the Gemini embeddings client.

    Args:
        settings: Model configuration

    Returns:
        GoogleGenerativeAIEmbeddings: Embeddings client
    """
    logger.info("Creating embeddings client", extra={"model": settings.embedding_model})
    return GoogleGenerativeAIEmbeddings(
        model=settings.embedding_model,
        **_credentials(settings),
    )


def create_chat_model(settings: ModelSettings) -> ChatGoogleGenerativeAI:
    """
    Create the Gemini chat model used for answers.

    Args:
        settings: Model configuration

    Returns:
        ChatGoogleGenerativeAI: Chat model client
    """
    logger.info("Creating chat model", extra={"model": settings.chat_model})
    return ChatGoogleGenerativeAI(
        model=settings.chat_model,
        temperature=settings.temperature,
        **_credentials(settings),
    )
