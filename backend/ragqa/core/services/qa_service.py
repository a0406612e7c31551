from __future__ import annotations
from typing import Dict, List, Tuple
import logging, math

from ragqa.core.entities import AnswerResult, QAOutcome, SearchHit, Source
from ragqa.core.ports.embeddings import IEmbeddingModel, QUERY
from ragqa.core.ports.generator import IAnswerGenerator
from ragqa.core.ports.vector_store import IVectorStore

logger = logging.getLogger("ragqa.qa")

# ==========================================================
# ⚙️ Fixed pipeline policy
# ==========================================================
GREETINGS = frozenset({"salut", "bonjour", "hello", "coucou"})
GREETING_TEXT = "Bonjour ! Comment puis-je vous aider aujourd'hui ?"
NO_HIT_TEXT = "Desole, je n'ai pas d'informations sur ce sujet dans ma base de connaissances."
CONTEXT_SEPARATOR = "\n---\n"
TOP_K = 3


def is_greeting(question: str) -> bool:
    return question.strip().lower() in GREETINGS


def adaptive_threshold(question: str) -> float:
    """Minimum similarity by question length. Every bucket is 0.0 for now."""
    word_count = len(question.split(" "))
    if word_count <= 3:
        return 0.0
    if word_count <= 6:
        return 0.0
    return 0.0


def build_context(hits: List[SearchHit]) -> str:
    return CONTEXT_SEPARATOR.join(h.text for h in hits)


def format_sources(hits: List[SearchHit]) -> List[Source]:
    """First hit per (title, author) wins; incomplete sources are dropped."""
    unique: Dict[Tuple[str, str], Source] = {}
    for h in hits:
        p = h.payload
        key = (p.get("title"), p.get("author"))
        if key not in unique:
            unique[key] = Source(
                title=p.get("title"),
                author=p.get("author"),
                date=p.get("date"),
                score=int(math.floor(h.score * 100 + 0.5)),  # half up
            )
    return [s for s in unique.values() if s.title and s.author and s.date]


# ==========================================================
# 🧠 RAG Service
# ==========================================================
class RAGService:
    """
    Question → embed → search → context → generate → sources.
    External failures are not retried and not masked: `answer()` raises,
    `try_answer()` hands the error back in a QAOutcome.
    """

    def __init__(
        self,
        embedder: IEmbeddingModel,
        store: IVectorStore,
        generator: IAnswerGenerator,
        top_k: int = TOP_K,
    ):
        self.embedder = embedder
        self.store = store
        self.generator = generator
        self.top_k = top_k

    def answer(self, question: str) -> AnswerResult:
        if is_greeting(question):
            logger.debug("👋 Greeting short-circuit")
            return AnswerResult(answer=GREETING_TEXT, sources=[], found=True)

        vector = self.embedder.embed(question, role=QUERY)

        threshold = adaptive_threshold(question)
        hits = self.store.search(vector, limit=self.top_k, score_threshold=threshold)
        logger.info(
            f"🔍 Retrieved {len(hits)} hits (threshold={threshold:.2f}, "
            f"scores={[round(h.score, 3) for h in hits]})"
        )

        if not hits:
            return AnswerResult(answer=NO_HIT_TEXT, sources=[], found=False)

        context = build_context(hits)
        answer_text = self.generator.generate(question, context)

        return AnswerResult(answer=answer_text, sources=format_sources(hits), found=True)

    def try_answer(self, question: str) -> QAOutcome:
        try:
            return QAOutcome(result=self.answer(question))
        except Exception as e:
            logger.error(f"❌ RAG pipeline failed: {e}", exc_info=True)
            return QAOutcome(error=e)
