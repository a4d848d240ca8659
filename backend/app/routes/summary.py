from fastapi import APIRouter, Depends
from backend.app.models.schemas import SessionState
from backend.app.routes.deps import get_session
from backend.app.services.session import KnowledgeBaseSession

router = APIRouter(prefix="/sessions/{session_id}/summaries")

# Moves are clamped and ignored while the current summary is loading;
# the returned state tells the client whether it moved.
@router.post("/next", response_model=SessionState)
async def next_section(session: KnowledgeBaseSession = Depends(get_session)):
    await session.next_section()
    return session.snapshot()

@router.post("/previous", response_model=SessionState)
async def previous_section(session: KnowledgeBaseSession = Depends(get_session)):
    await session.previous_section()
    return session.snapshot()
