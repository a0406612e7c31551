from __future__ import annotations
from abc import ABC, abstractmethod

class IAnswerGenerator(ABC):
    @abstractmethod
    def generate(self, question: str, context: str) -> str:
        ...
