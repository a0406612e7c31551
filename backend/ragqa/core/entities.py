from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

@dataclass(frozen=True)
class Document:
    doc_id: str
    text: str
    title: str = "Unknown"
    author: str = "Anonymous"
    date: str = "Unknown"
    category: str = "Misc"
    tags: List[str] = field(default_factory=list)
    source: str = ""

    def to_payload(self) -> dict:
        return {
            "text": self.text,
            "title": self.title,
            "author": self.author,
            "date": self.date,
            "category": self.category,
            "tags": list(self.tags),
            "source": self.source,
        }

@dataclass(frozen=True)
class SearchHit:
    payload: dict  # text, title, author, date, category, tags, source
    score: float

    @property
    def text(self) -> str:
        return self.payload.get("text") or ""

@dataclass(frozen=True)
class Source:
    title: str
    author: str
    date: str
    score: int  # percentage 0-100

    def as_dict(self) -> dict:
        return {"title": self.title, "author": self.author, "date": self.date, "score": self.score}

@dataclass(frozen=True)
class AnswerResult:
    answer: str
    sources: List[Source]
    found: bool

@dataclass(frozen=True)
class QAOutcome:
    """Success carries `result`; failure carries the exception that stopped the pipeline."""
    result: Optional[AnswerResult] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None
