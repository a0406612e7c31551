# backend/ragqa/config.py
from __future__ import annotations
import logging
from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from ragqa.core.errors import ConfigurationError

# Load .env before reading settings
load_dotenv()

logger = logging.getLogger("ragqa.config")

HF_ROUTER = "https://router.huggingface.co/hf-inference/models"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    qdrant_url: str = "http://vectordb:6333"
    qdrant_collection: str = "corpus"
    vector_backend: Literal["qdrant", "memory"] = "qdrant"
    vector_size: int = 256

    hf_api_key: str = ""
    hf_embedding_model: str = "sentence-transformers/all-MiniLM-L6-v2"
    hf_embedding_endpoint: str = HF_ROUTER
    hf_chat_model: str = "HuggingFaceH4/zephyr-7b-beta"
    hf_chat_endpoint: str = HF_ROUTER
    use_hf_embeddings: bool = False
    use_hf_chat: bool = False

    corpus_dir: str = "./corpus"
    request_timeout: int = 60
    log_level: str = "INFO"

    def require_credentials(self) -> None:
        if not self.hf_api_key.strip():
            raise ConfigurationError("HF_API_KEY not defined in environment or .env")


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.require_credentials()
    logger.info(
        f"Settings loaded | qdrant={settings.qdrant_url} | backend={settings.vector_backend} | "
        f"hf_embeddings={settings.use_hf_embeddings} | hf_chat={settings.use_hf_chat}"
    )
    return settings
