# backend/ragqa/models/index_model.py
from pydantic import BaseModel


class IndexReport(BaseModel):
    corpus_dir: str
    collection: str

    files_seen: int
    indexed: int
    skipped: int
    failed: int
    duration_sec: float
