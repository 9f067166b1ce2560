"""Food corpus ingestion: loads the JSON fact file into an immutable DocumentStore."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from foodrag.config import DEFAULT_CORPUS_PATH
from foodrag.documents import DocumentStore, FoodDocument

logger = logging.getLogger(__name__)


def _parse_record(record: Dict, index: int) -> FoodDocument:
    doc_id = record.get("id")
    text = record.get("text")
    if doc_id is None or not text:
        raise ValueError(f"Record #{index} is missing 'id' or 'text'")

    for field in ("text", "region", "type"):
        value = record.get(field)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"Record #{index} field '{field}' must be a string, got {type(value).__name__}")

    return FoodDocument(
        id=str(doc_id),
        text=text,
        region=record.get("region") or None,
        type=record.get("type") or None,
    )


def parse_food_documents(records: List[Dict]) -> List[FoodDocument]:
    documents: List[FoodDocument] = []
    seen = set()

    for index, record in enumerate(records):
        document = _parse_record(record, index)
        if document.id in seen:
            raise ValueError(f"Duplicate document id: {document.id}")
        seen.add(document.id)
        documents.append(document)

    return documents


def load_food_documents(path: Optional[Path] = None) -> DocumentStore:
    path = Path(path or DEFAULT_CORPUS_PATH)
    if not path.exists():
        raise FileNotFoundError(f"Food corpus not found: {path}")

    with path.open(encoding="utf-8") as f:
        payload = json.load(f)

    documents = parse_food_documents(payload.get("documents", []))
    store = DocumentStore(documents=tuple(documents), last_updated=payload.get("last_updated"))

    logger.info(f"Food corpus loaded | path={path.name} | documents={len(store)}")
    return store
