"""Google Custom Search adapter returning title/link/snippet triples."""

import logging
from dataclasses import dataclass
from typing import List, Optional

import httpx

from foodrag.errors import ConfigurationError, UpstreamServiceError, upstream_error_detail
from foodrag.logging_config import log_latency

logger = logging.getLogger(__name__)

GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"


@dataclass(frozen=True)
class SearchResult:
    title: str
    link: str
    snippet: str


class GoogleSearchClient:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        api_key: Optional[str],
        engine_id: Optional[str],
        url: str = GOOGLE_SEARCH_URL,
    ):
        self.http = http_client
        self.api_key = api_key
        self.engine_id = engine_id
        self.url = url

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.engine_id)

    @log_latency("search.google")
    async def search(self, query: str, top_k: int = 3) -> List[SearchResult]:
        if not self.configured:
            raise ConfigurationError(
                "Google Search API credentials are not configured. Please set "
                "GOOGLE_SEARCH_API_KEY and GOOGLE_SEARCH_ENGINE_ID environment variables."
            )

        response = await self.http.get(
            self.url,
            params={"q": query, "key": self.api_key, "cx": self.engine_id, "num": str(top_k)},
        )

        if not response.is_success:
            raise UpstreamServiceError("Google Search", upstream_error_detail(response))

        items = response.json().get("items") or []
        logger.info(f"Search complete | results={len(items)}")

        return [
            SearchResult(
                title=item.get("title", ""),
                link=item.get("link", ""),
                snippet=item.get("snippet", ""),
            )
            for item in items[:top_k]
        ]
