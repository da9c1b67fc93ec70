"""
Answer generation capability wrapper.

Sends a fully built prompt to a LangChain chat model and returns plain
answer text.

Dependencies: langchain_core.language_models
System role: Final stage of question answering
"""

import logging

from langchain_core.language_models import BaseChatModel

from docqa.core.exceptions import GenerationError

logger = logging.getLogger(__name__)


def _message_text(content) -> str:
    """Flatten chat message content (string or list of parts) to text."""
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class AnswerGenerator:
    """Generate answers with a chat model."""

    def __init__(self, chat_model: BaseChatModel, model_name: str | None = None) -> None:
        self._chat_model = chat_model
        self._model_name = model_name

    async def generate(self, prompt: str) -> str:
        """
        Generate an answer for a prompt.

        Args:
            prompt: Complete prompt including context and question

        Returns:
            str: Generated answer text

        Raises:
            GenerationError: When the model call fails or returns no text
        """
        try:
            message = await self._chat_model.ainvoke(prompt)
        except Exception as e:
            logger.error(
                "Answer generation failed",
                extra={"model": self._model_name, "error": str(e)},
            )
            raise GenerationError(f"Failed to generate answer: {e}", model=self._model_name) from e

        answer = _message_text(message.content).strip()
        if not answer:
            raise GenerationError("Model returned an empty answer", model=self._model_name)
        return answer
