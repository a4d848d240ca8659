from fastapi import APIRouter, Depends, HTTPException
from backend.app.models.schemas import AnswerSelection, SessionState
from backend.app.routes.deps import get_session
from backend.app.services.exceptions import QuizGenerationError, QuizStateError
from backend.app.services.session import KnowledgeBaseSession

router = APIRouter(prefix="/sessions/{session_id}/quiz")

@router.post("", response_model=SessionState)
async def start_quiz(session: KnowledgeBaseSession = Depends(get_session)):
    try:
        await session.start_quiz()
    except QuizGenerationError as e:
        raise HTTPException(502, {"message": str(e), "kind": e.kind.value}) from e
    return session.snapshot()

@router.put("/answers/{index}", response_model=SessionState)
async def select_answer(index: int, payload: AnswerSelection,
                        session: KnowledgeBaseSession = Depends(get_session)):
    try:
        session.select_answer(index, payload.option)
    except QuizStateError as e:
        raise HTTPException(409, str(e)) from e
    return session.snapshot()

@router.post("/submit", response_model=SessionState)
async def submit_quiz(session: KnowledgeBaseSession = Depends(get_session)):
    try:
        session.submit_quiz()
    except QuizStateError as e:
        raise HTTPException(409, str(e)) from e
    return session.snapshot()
