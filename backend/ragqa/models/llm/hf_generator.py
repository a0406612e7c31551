# backend/ragqa/models/llm/hf_generator.py

from __future__ import annotations
import logging
import requests
from ragqa.core.errors import GenerationError
from ragqa.core.ports.generator import IAnswerGenerator

logger = logging.getLogger("ragqa.llm.hf")

PROMPT_TEMPLATE = """Tu es un assistant IA specialise dans la recherche documentaire.

Contexte disponible :
{context}

Question : "{question}"

Instructions :
- Reponds uniquement en te basant sur le contexte fourni
- Si le contexte ne contient pas d'informations pertinentes, dis-le clairement
- Sois precis et factuel
- N'invente pas d'informations

Reponse :"""


def build_prompt(question: str, context: str) -> str:
    return PROMPT_TEMPLATE.format(context=context, question=question)


class HFAnswerGenerator(IAnswerGenerator):
    def __init__(
        self,
        api_key: str,
        model: str = "HuggingFaceH4/zephyr-7b-beta",
        endpoint: str = "https://router.huggingface.co/hf-inference/models",
        max_new_tokens: int = 256,
        temperature: float = 0.3,
        timeout: float = 60.0,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.model = model.strip()
        self.url = f"{endpoint.rstrip('/')}/{self.model}"
        self.max_new_tokens = max_new_tokens
        self.temperature = temperature
        self.timeout = timeout
        self.http = session or requests.Session()

    def generate(self, question: str, context: str) -> str:
        payload = {
            "inputs": build_prompt(question, context),
            "parameters": {
                "max_new_tokens": self.max_new_tokens,
                "temperature": self.temperature,
                "return_full_text": False,
            },
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}
        try:
            r = self.http.post(self.url, json=payload, headers=headers, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            logger.error(f"❌ Generation request to {self.url} failed: {e}")
            raise GenerationError(f"Generation request failed: {e}") from e
        except ValueError as e:
            raise GenerationError(f"Invalid JSON from generation endpoint: {e}") from e

        # text-generation answers either [{"generated_text": ...}] or {"generated_text": ...}
        if isinstance(data, list):
            data = data[0] if data else {}
        if not isinstance(data, dict):
            raise GenerationError(f"Unexpected generation payload: {type(data).__name__}")
        return (data.get("generated_text") or "").strip()
