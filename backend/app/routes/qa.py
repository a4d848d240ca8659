from fastapi import APIRouter, Depends
from backend.app.models.schemas import QARequest, SessionState
from backend.app.routes.deps import get_session
from backend.app.services.session import KnowledgeBaseSession

router = APIRouter()

@router.post("/sessions/{session_id}/qa", response_model=SessionState)
async def qa(payload: QARequest, session: KnowledgeBaseSession = Depends(get_session)):
    await session.ask(payload.question)
    return session.snapshot()
