from __future__ import annotations
import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# ============================================================
# 🪵 Logging Setup
# ============================================================
logging.basicConfig(
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(filename)s:%(lineno)d | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
)
logger = logging.getLogger("ragqa.app")

from ragqa.config import get_settings
from ragqa.container import AppContainer, build_container
from ragqa.core.errors import ConfigurationError
from ragqa.router.ask import router as ask_router
from ragqa.router.health import router as health_router

# ============================================================
# 🚀 Startup / Shutdown Lifecycle
# ============================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Build the container unless one was injected, then gate on the vector
    store: the process refuses to serve without credentials or Qdrant.
    """
    if getattr(app.state, "container", None) is None:
        logger.info("🚀 Initializing RAG QA service...")
        try:
            settings = get_settings()
        except ConfigurationError as e:
            logger.critical(f"❌ {e}")
            raise SystemExit(1) from e
        app.state.container = build_container(settings)

    container: AppContainer = app.state.container
    if not container.store.check_connection():
        logger.critical("❌ Vector store unreachable; shutting down.")
        raise SystemExit(1)

    try:
        logger.info(f"🎯 API ready | indexed points={container.store.count()}")
    except Exception as e:
        logger.warning(f"⚠️ Could not count indexed points: {e}")

    yield
    logger.info("🧹 Application shutdown complete")

# ============================================================
# 🌍 FastAPI App Definition
# ============================================================
def create_app(container: AppContainer | None = None) -> FastAPI:
    app = FastAPI(
        title="RAG QA API",
        description="Retrieval-augmented question answering over an indexed corpus",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health_router)
    app.include_router(ask_router)

    @app.get("/")
    def root():
        return {
            "app": "RAG QA API (Qdrant + Hugging Face)",
            "version": "1.0.0",
            "endpoints": {"docs": "/docs", "health": "/health", "ask": "/ask"},
            "examples": {
                "ask": {"method": "POST", "path": "/ask", "body": {"question": "What is the capital of France?"}},
            },
        }

    return app


app = create_app()

# ============================================================
# 🏁 Entrypoint
# ============================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("ragqa.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "3000")), reload=False, log_config=None)
