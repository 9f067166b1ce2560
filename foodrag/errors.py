"""Error taxonomy shared by the RAG engine and the HTTP layer."""

from typing import Optional

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class RAGError(Exception):
    status_code = 500


class InvalidQuestionError(RAGError):
    status_code = 400

    def __init__(self, message: str = "Question is required"):
        super().__init__(message)


class ConfigurationError(RAGError):
    pass


class UpstreamServiceError(RAGError):
    def __init__(self, service: str, detail: Optional[str] = None):
        super().__init__(f"{service} API error: {detail or 'Unknown error'}")


def error_message(exc: BaseException) -> str:
    return str(exc) or UNEXPECTED_ERROR_MESSAGE


def upstream_error_detail(response) -> Optional[str]:
    """Pull ``error.message`` out of an upstream JSON error body, if there is one."""
    try:
        payload = response.json()
    except ValueError:
        return None

    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        return error.get("message") or None
    if isinstance(error, str):
        return error or None
    return None
