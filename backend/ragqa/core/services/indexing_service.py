from __future__ import annotations
from pathlib import Path
from typing import Optional
import json
import logging
import time
import uuid

from ragqa.core.entities import Document
from ragqa.core.ports.embeddings import IEmbeddingModel, PASSAGE
from ragqa.core.ports.vector_store import IVectorStore
from ragqa.models.index_model import IndexReport

log = logging.getLogger("ragqa.indexing")


def _str_or(obj: dict, key: str, default: str) -> str:
    v = obj.get(key)
    return v if isinstance(v, str) and v else default


def map_record(obj: dict, source: str) -> Optional[Document]:
    """Map one corpus JSON object to a Document; None when `text` is unusable."""
    text = obj.get("text")
    if not isinstance(text, str) or not text:
        return None
    tags = obj.get("tags")
    return Document(
        doc_id=str(uuid.uuid4()),
        text=text,
        title=_str_or(obj, "title", "Unknown"),
        author=_str_or(obj, "author", "Anonymous"),
        date=_str_or(obj, "date", "Unknown"),
        category=_str_or(obj, "category", "Misc"),
        tags=[str(t) for t in tags] if isinstance(tags, list) else [],
        source=source,
    )


class IndexingService:
    """
    Offline corpus indexing: one point per `*.json` file in a directory.
    Bad files and per-document failures are logged and skipped.
    """

    def __init__(self, store: IVectorStore, embedder: IEmbeddingModel, dim: int, collection: str = "corpus"):
        self.store = store
        self.embedder = embedder
        self.dim = dim
        self.collection = collection

    def index_directory(self, corpus_dir: str | Path) -> IndexReport:
        start_time = time.time()
        root = Path(corpus_dir)
        if not root.is_dir():
            raise FileNotFoundError(f"Corpus directory not found: {root}")

        self.store.ensure_collection(self.dim)

        files = sorted(p for p in root.iterdir() if p.suffix == ".json" and p.is_file())
        if not files:
            log.warning(f"No .json files found in {root}")

        indexed = skipped = failed = 0
        for path in files:
            try:
                obj = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                log.error(f"❌ Cannot read {path.name}: {e}")
                failed += 1
                continue

            doc = map_record(obj, path.name) if isinstance(obj, dict) else None
            if doc is None:
                log.warning(f"⚠️ Skipping {path.name} - missing or invalid \"text\" field.")
                skipped += 1
                continue

            try:
                vector = self.embedder.embed(doc.text, role=PASSAGE)
                self.store.upsert([doc], [vector])
            except Exception as e:
                log.error(f"❌ Error indexing {path.name}: {e}")
                failed += 1
                continue

            indexed += 1
            log.debug(f"File {path.name} indexed")

        duration = round(time.time() - start_time, 3)
        log.info(
            "📥 Index summary | dir=%s | files=%d | indexed=%d | skipped=%d | failed=%d | took=%.3fs",
            str(root), len(files), indexed, skipped, failed, duration,
        )
        return IndexReport(
            corpus_dir=str(root),
            collection=self.collection,
            files_seen=len(files),
            indexed=indexed,
            skipped=skipped,
            failed=failed,
            duration_sec=duration,
        )
