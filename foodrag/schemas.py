"""Request and response models for the HTTP layer."""

from typing import List, Optional

from pydantic import BaseModel


class QuestionRequest(BaseModel):
    question: Optional[str] = None


class Source(BaseModel):
    id: str
    name: str
    text: str
    region: str
    type: str
    url: Optional[str] = None


class RAGResponse(BaseModel):
    answer: str
    sources: List[Source]


class ErrorResponse(BaseModel):
    error: str


class StatusResponse(BaseModel):
    status: str
    message: str
    retriever: str
    documents: Optional[int] = None
    last_updated: Optional[str] = None
