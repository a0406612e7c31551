from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field

MAX_QUESTION_LENGTH = 1000

class AskRequest(BaseModel):
    # validated in the router so that bad input maps to 400, not 422
    question: Optional[str] = Field(default=None, description="User question")

class SourceOut(BaseModel):
    title: str
    author: str
    date: str
    score: int

class AskResponse(BaseModel):
    answer: str
    sources: List[SourceOut]
    found: bool

class HealthResponse(BaseModel):
    status: str
    vector_store: bool
    points: Optional[int] = None
