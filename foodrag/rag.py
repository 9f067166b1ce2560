"""Core RAG engine: retrieval, prompt assembly, generation, and source formatting."""

import logging
import time
from typing import Dict, List, Optional

import httpx

from foodrag.config import Settings
from foodrag.documents import DocumentStore
from foodrag.errors import InvalidQuestionError
from foodrag.llm import GroqClient
from foodrag.logging_config import QueryMetrics, log_latency
from foodrag.prompts import build_context, build_messages
from foodrag.retrievers import RetrievedItem, Retriever, build_retriever

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    "corpus": "RAG API with food knowledge base is running",
    "web": "RAG API with Google Search is running",
}


class RAGEngine:
    def __init__(
        self,
        settings: Settings,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        store: Optional[DocumentStore] = None,
    ):
        self.settings = settings
        self._owns_http = http_client is None
        self.http = http_client or httpx.AsyncClient(timeout=settings.http_timeout)

        self.retriever: Retriever = build_retriever(settings, self.http, store)
        self.llm = GroqClient(
            self.http,
            api_key=settings.groq_api_key,
            model=settings.groq_model,
            url=settings.groq_url,
        )
        self.metrics = QueryMetrics()

        logger.info(f"RAGEngine initialized successfully | retriever={self.retriever.name}")

    async def close(self):
        if self._owns_http:
            await self.http.aclose()
        logger.info("RAGEngine resources closed")

    def format_sources(self, items: List[RetrievedItem]) -> List[Dict]:
        sources = []
        for item in items:
            source = {
                "id": item.id,
                "name": item.name,
                "text": item.text,
                "region": item.region or self.retriever.default_region,
                "type": item.type or self.retriever.default_type,
            }
            if item.url:
                source["url"] = item.url
            sources.append(source)
        return sources

    @log_latency("rag.ask", expected=(InvalidQuestionError,))
    async def ask(self, question: Optional[str]) -> Dict:
        start = time.perf_counter()
        question = (question or "").strip()

        if not question:
            self.metrics.record_rejected()
            raise InvalidQuestionError()

        logger.info(f"Query received | question_length={len(question)}")

        try:
            # Fail on a missing completion key before retrieval spends any search quota.
            self.llm.ensure_configured()
            items = await self.retriever.retrieve(question, self.settings.top_k)
            context = build_context(self.retriever.name, [item.context for item in items])
            messages = build_messages(self.retriever.name, question, context)
            answer = await self.llm.complete(messages)
        except Exception:
            self.metrics.record_query(False, (time.perf_counter() - start) * 1000)
            raise

        self.metrics.record_query(True, (time.perf_counter() - start) * 1000)
        logger.info(f"Query complete | sources={len(items)}")

        return {"answer": answer, "sources": self.format_sources(items)}

    def status(self) -> Dict:
        return {
            "status": "ok",
            "message": STATUS_MESSAGES[self.retriever.name],
            "retriever": self.retriever.name,
            **self.retriever.describe(),
        }
