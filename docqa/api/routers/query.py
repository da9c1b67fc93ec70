"""
Query API endpoints.

Routes:
- POST /query/{document_id} - Ask a question about a document

Dependencies: docqa.core.retrieval, docqa.models
System role: Question answering HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from docqa.api.deps import get_retrieval_orchestrator
from docqa.api.error_handling import handle_document_errors
from docqa.core.retrieval import RetrievalOrchestrator
from docqa.models.query import QueryRequest, QueryResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["query"])


@router.post("/query/{document_id}", response_model=QueryResponse, response_model_by_alias=True)
@handle_document_errors
async def query_document(
    document_id: str,
    request: QueryRequest,
    orchestrator: RetrievalOrchestrator = Depends(get_retrieval_orchestrator),
) -> QueryResponse:
    """
    Answer a question using the document's most relevant chunks.

    Args:
        document_id: Document ID returned by upload
        request: Question and optional topK
        orchestrator: Injected RetrievalOrchestrator

    Returns:
        QueryResponse: Answer, sources and document info

    Raises:
        HTTPException(400): Empty question or invalid topK
        HTTPException(404): Unknown document ID
        HTTPException(500): Embedding or generation failed
    """
    result = await orchestrator.answer(
        document_id=document_id,
        question=request.question,
        top_k=request.top_k,
    )
    return QueryResponse.from_answer(result)
