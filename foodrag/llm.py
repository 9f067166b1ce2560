"""Chat-completion client for Groq's OpenAI-compatible endpoint."""

import logging
from typing import Dict, List, Optional

import httpx

from foodrag.errors import ConfigurationError, UpstreamServiceError, upstream_error_detail
from foodrag.logging_config import log_latency

logger = logging.getLogger(__name__)

GROQ_CHAT_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_MODEL = "llama-3.1-8b-instant"
TEMPERATURE = 0.7
MAX_TOKENS = 500


class GroqClient:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        url: str = GROQ_CHAT_URL,
    ):
        self.http = http_client
        self.api_key = api_key
        self.model = model
        self.url = url

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def ensure_configured(self):
        if not self.configured:
            raise ConfigurationError("GROQ_API_KEY is not configured")

    @log_latency("llm.complete")
    async def complete(self, messages: List[Dict[str, str]]) -> str:
        self.ensure_configured()

        response = await self.http.post(
            self.url,
            headers={"Authorization": f"Bearer {self.api_key}"},
            json={
                "model": self.model,
                "messages": messages,
                "temperature": TEMPERATURE,
                "max_tokens": MAX_TOKENS,
            },
        )

        if not response.is_success:
            raise UpstreamServiceError("Groq", upstream_error_detail(response))

        try:
            answer = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise UpstreamServiceError("Groq", f"malformed completion response ({e})") from e

        logger.info(f"LLM response received | answer_length={len(answer)}")
        return answer
