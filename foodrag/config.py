"""Environment-driven settings. Credentials are optional until an operation needs them."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from foodrag.errors import ConfigurationError

DEFAULT_CORPUS_PATH = Path(__file__).parent / "data" / "food_facts.json"
RETRIEVERS = ("corpus", "web")


def _optional(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    retriever: str = "corpus"
    top_k: int = 3
    groq_api_key: Optional[str] = None
    groq_model: str = "llama-3.1-8b-instant"
    groq_url: str = "https://api.groq.com/openai/v1/chat/completions"
    google_api_key: Optional[str] = None
    google_engine_id: Optional[str] = None
    google_url: str = "https://www.googleapis.com/customsearch/v1"
    corpus_path: Path = DEFAULT_CORPUS_PATH
    http_timeout: float = 30.0
    log_level: str = "INFO"

    def __post_init__(self):
        if self.retriever not in RETRIEVERS:
            raise ConfigurationError(
                f"Unknown RAG_RETRIEVER '{self.retriever}'. Expected one of: {', '.join(RETRIEVERS)}"
            )
        if self.top_k < 1:
            raise ConfigurationError("RAG_TOP_K must be a positive integer")

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        try:
            top_k = int(os.getenv("RAG_TOP_K", "3"))
            http_timeout = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e

        return cls(
            retriever=os.getenv("RAG_RETRIEVER", "corpus").strip().lower(),
            top_k=top_k,
            groq_api_key=_optional("GROQ_API_KEY"),
            groq_model=os.getenv("GROQ_MODEL", cls.groq_model),
            groq_url=os.getenv("GROQ_API_URL", cls.groq_url),
            google_api_key=_optional("GOOGLE_SEARCH_API_KEY"),
            google_engine_id=_optional("GOOGLE_SEARCH_ENGINE_ID"),
            google_url=os.getenv("GOOGLE_SEARCH_API_URL", cls.google_url),
            corpus_path=Path(os.getenv("FOOD_CORPUS_PATH") or DEFAULT_CORPUS_PATH),
            http_timeout=http_timeout,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
