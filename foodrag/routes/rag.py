"""RAG question answering endpoint."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from foodrag.errors import RAGError, error_message
from foodrag.rag import RAGEngine
from foodrag.schemas import ErrorResponse, QuestionRequest, RAGResponse, StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["rag"])


def get_rag_engine(request: Request) -> RAGEngine:
    return request.app.state.rag


@router.post(
    "/rag",
    response_model=RAGResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def ask(q: QuestionRequest, rag: RAGEngine = Depends(get_rag_engine)):
    try:
        return await rag.ask(q.question)
    except RAGError as e:
        if e.status_code >= 500:
            logger.error(f"RAG error: {e}")
        return JSONResponse({"error": error_message(e)}, status_code=e.status_code)
    except Exception as e:
        logger.exception("Unexpected RAG error")
        return JSONResponse({"error": error_message(e)}, status_code=500)


@router.get("/rag", response_model=StatusResponse, response_model_exclude_none=True)
async def status(rag: RAGEngine = Depends(get_rag_engine)):
    return rag.status()
