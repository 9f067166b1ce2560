"""Retrieval strategies: ranked static food corpus or external web search."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import httpx

from foodrag.config import Settings
from foodrag.documents import DocumentStore
from foodrag.errors import ConfigurationError
from foodrag.ingest import load_food_documents
from foodrag.ranking import LexicalScorer
from foodrag.search import GoogleSearchClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetrievedItem:
    id: str
    name: str
    text: str
    context: str
    region: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    score: Optional[float] = None


class Retriever:
    """Base class for retrieval strategies.

    Region and type defaults are applied when formatting sources, not here.
    """

    name = ""
    default_region = ""
    default_type = ""

    async def retrieve(self, question: str, top_k: int = 3) -> List[RetrievedItem]:
        raise NotImplementedError

    def describe(self) -> Dict:
        return {}


class CorpusRetriever(Retriever):
    name = "corpus"
    default_region = "Global"
    default_type = "Food"

    def __init__(self, store: DocumentStore, scorer: Optional[LexicalScorer] = None):
        self.store = store
        self.scorer = scorer or LexicalScorer()

    def rank(self, question: str, top_k: int = 3) -> List[RetrievedItem]:
        scored = [
            (self.scorer.score(question, doc.text, region=doc.region, type=doc.type), doc)
            for doc in self.store
        ]
        # sorted() is stable, so equal scores keep store order.
        ranked = sorted(scored, key=lambda pair: pair[0], reverse=True)[:top_k]

        if ranked:
            logger.info(f"Retrieval complete | documents={len(ranked)} | top_score={ranked[0][0]:.3f}")
        else:
            logger.warning("Retrieval returned no documents, corpus is empty")

        return [
            RetrievedItem(
                id=doc.id,
                name=doc.name,
                text=doc.text,
                context=doc.enriched_text,
                region=doc.region,
                type=doc.type,
                score=score,
            )
            for score, doc in ranked
        ]

    async def retrieve(self, question: str, top_k: int = 3) -> List[RetrievedItem]:
        return self.rank(question, top_k)

    def describe(self) -> Dict:
        return {"documents": len(self.store), "last_updated": self.store.last_updated}


class WebSearchRetriever(Retriever):
    name = "web"
    default_region = "Internet"
    default_type = "Web Source"

    def __init__(self, search_client: GoogleSearchClient):
        self.search_client = search_client

    async def retrieve(self, question: str, top_k: int = 3) -> List[RetrievedItem]:
        results = await self.search_client.search(question, top_k)
        return [
            RetrievedItem(
                id=str(idx),
                name=result.title,
                text=result.snippet,
                context=f"{result.title}\n{result.snippet}",
                url=result.link,
            )
            for idx, result in enumerate(results)
        ]


def build_retriever(
    settings: Settings,
    http_client: httpx.AsyncClient,
    store: Optional[DocumentStore] = None,
) -> Retriever:
    if settings.retriever == "corpus":
        return CorpusRetriever(store if store is not None else load_food_documents(settings.corpus_path))
    if settings.retriever == "web":
        return WebSearchRetriever(
            GoogleSearchClient(
                http_client,
                api_key=settings.google_api_key,
                engine_id=settings.google_engine_id,
                url=settings.google_url,
            )
        )
    raise ConfigurationError(f"Unknown retriever: {settings.retriever}")
