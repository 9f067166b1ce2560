"""Immutable food-fact records and the process-wide document store."""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class FoodDocument:
    id: str
    text: str
    region: Optional[str] = None
    type: Optional[str] = None

    @property
    def enriched_text(self) -> str:
        text = self.text
        if self.region:
            text += f" Region: {self.region}."
        if self.type:
            text += f" Type: {self.type}."
        return text

    @property
    def name(self) -> str:
        first_line = self.text.strip().split("\n")[0]
        return first_line.split(" is ")[0].strip()


@dataclass(frozen=True)
class DocumentStore:
    documents: Tuple[FoodDocument, ...] = ()
    last_updated: Optional[str] = None

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[FoodDocument]:
        return iter(self.documents)
