from __future__ import annotations
from typing import List
import re
from ragqa.core.ports.generator import IAnswerGenerator

_LINE_SPLIT = re.compile(r"\n+")

NO_INFO_TEXT = "Desole, je n'ai pas d'informations sur ce sujet dans ma base de connaissances."
ANSWER_TEMPLATE = "Selon les documents, voici l'information la plus pertinente : {line}"

def _lines(s: str) -> List[str]:
    return [x for x in _LINE_SPLIT.split(s or "") if x]

class ExtractiveAnswerGenerator(IAnswerGenerator):
    """
    Pure-offline fallback: quote the first non-empty line of the context.
    """

    def generate(self, question: str, context: str) -> str:
        lines = _lines(context)
        if not lines:
            return NO_INFO_TEXT
        return ANSWER_TEMPLATE.format(line=lines[0])
