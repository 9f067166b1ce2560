"""FastAPI routes package."""

from foodrag.routes.health import router as health_router
from foodrag.routes.rag import router as rag_router

__all__ = ["health_router", "rag_router"]
