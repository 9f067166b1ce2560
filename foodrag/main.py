"""FastAPI application entrypoint with RAG engine lifecycle management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse

from foodrag.config import Settings
from foodrag.errors import InvalidQuestionError
from foodrag.logging_config import setup_logging
from foodrag.rag import RAGEngine
from foodrag.routes import health_router, rag_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    app.state.rag = RAGEngine(settings)
    yield
    await app.state.rag.close()


app = FastAPI(title="Food RAG", lifespan=lifespan)

app.include_router(health_router)
app.include_router(rag_router)


@app.exception_handler(RequestValidationError)
async def invalid_question_handler(request: Request, exc: RequestValidationError):
    # The only request body is {"question": str}; any malformed body means no usable question.
    logger.warning(f"Rejected request body | errors={len(exc.errors())}")
    return JSONResponse({"error": str(InvalidQuestionError())}, status_code=InvalidQuestionError.status_code)


@app.get("/")
async def root():
    return RedirectResponse(url="/docs")
