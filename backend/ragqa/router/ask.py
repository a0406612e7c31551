from __future__ import annotations
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from ragqa.core.services.qa_service import RAGService
from ragqa.models.schemas import MAX_QUESTION_LENGTH, AskRequest, AskResponse, SourceOut
from ragqa.router.deps import get_rag_service

router = APIRouter(prefix="", tags=["qa"])
logger = logging.getLogger("ragqa.router.ask")

INVALID_QUESTION = "Question invalide ou trop longue"
SERVER_ERROR = "Erreur serveur"

@router.post("/ask", response_model=AskResponse)
def ask(payload: AskRequest, service: RAGService = Depends(get_rag_service)):
    question = payload.question
    if not question or len(question) > MAX_QUESTION_LENGTH:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_QUESTION)

    outcome = service.try_answer(question)
    if not outcome.ok:
        logger.error(f"Error in /ask: {outcome.error}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SERVER_ERROR)

    result = outcome.result
    return AskResponse(
        answer=result.answer,
        sources=[SourceOut(**s.as_dict()) for s in result.sources],
        found=result.found,
    )
