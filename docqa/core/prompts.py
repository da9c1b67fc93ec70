"""
Question answering prompt.

Defines the prompt template that wraps retrieved context and the user's
question for the generator.

Dependencies: langchain_core.prompts
System role: Prompt template for grounded answers
"""

from langchain_core.prompts import PromptTemplate

from docqa.models.chunk import Chunk

NOT_FOUND_ANSWER = "I cannot find the answer in the provided document."

CONTEXT_SEPARATOR = "\n\n"

ANSWER_PROMPT = PromptTemplate.from_template(
    "Based on the following context from the document, answer the question. "
    'If the answer cannot be found in the context, say "' + NOT_FOUND_ANSWER + '"\n'
    "Format your answer in Markdown. Use headings, bullet or numbered lists and "
    "short examples where they make the answer clearer.\n\n"
    "Context:\n{context}\n\n"
    "Question: {question}\n\n"
    "Answer:"
)


def format_context(chunks: list[Chunk]) -> str:
    """Join chunk texts with blank lines, in retrieval order."""
    return CONTEXT_SEPARATOR.join(chunk.content for chunk in chunks)


def build_answer_prompt(question: str, chunks: list[Chunk]) -> str:
    """
    Render the answer prompt.

    Args:
        question: User question
        chunks: Retrieved chunks, most relevant first

    Returns:
        str: Prompt text for the generator
    """
    return ANSWER_PROMPT.format(context=format_context(chunks), question=question)
