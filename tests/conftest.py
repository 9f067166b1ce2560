import json

import httpx
import pytest

from foodrag.config import Settings
from foodrag.documents import DocumentStore, FoodDocument
from foodrag.rag import RAGEngine

SUSHI = FoodDocument(
    id="1",
    text="Sushi is a Japanese dish of vinegared rice.",
    region="Japan",
    type="Seafood",
)


class FakeUpstream:
    """Records outbound requests and answers them like Groq and Google would."""

    def __init__(self, answer="Sushi is rice with fish.", search_items=None):
        self.answer = answer
        self.search_items = search_items if search_items is not None else []
        self.requests = []
        self.groq_response = None
        self.search_response = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "api.groq.com":
            if self.groq_response is not None:
                return self.groq_response
            return httpx.Response(200, json={"choices": [{"message": {"content": self.answer}}]})
        if request.url.host == "www.googleapis.com":
            if self.search_response is not None:
                return self.search_response
            return httpx.Response(200, json={"items": self.search_items})
        return httpx.Response(404)

    def completion_bodies(self):
        return [json.loads(r.content) for r in self.requests if r.url.host == "api.groq.com"]


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def http_client(upstream):
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream))


@pytest.fixture
def store():
    return DocumentStore(
        documents=(
            SUSHI,
            FoodDocument(id="2", text="Paella is a Spanish rice dish from Valencia.", region="Spain", type="Rice"),
            FoodDocument(id="3", text="Saffron is a costly spice\nharvested by hand."),
        ),
        last_updated="2026-10-01",
    )


@pytest.fixture
def corpus_settings():
    return Settings(retriever="corpus", groq_api_key="test-groq-key")


@pytest.fixture
def web_settings():
    return Settings(
        retriever="web",
        groq_api_key="test-groq-key",
        google_api_key="test-google-key",
        google_engine_id="test-engine",
    )


@pytest.fixture
def corpus_engine(corpus_settings, http_client, store):
    return RAGEngine(corpus_settings, http_client=http_client, store=store)


@pytest.fixture
def web_engine(web_settings, http_client):
    return RAGEngine(web_settings, http_client=http_client)
