from fastapi import APIRouter, Depends, HTTPException, Request, Response
from backend.app.models.schemas import SearchUpdate, SessionState, ViewUpdate
from backend.app.routes.deps import get_registry, get_session
from backend.app.services.exceptions import SessionNotFoundError
from backend.app.services.session import KnowledgeBaseSession

router = APIRouter(prefix="/sessions")

@router.post("", status_code=201, response_model=SessionState)
async def create_session(request: Request):
    return get_registry(request).create().snapshot()

@router.get("/{session_id}", response_model=SessionState)
async def read_session(session: KnowledgeBaseSession = Depends(get_session)):
    return session.snapshot()

@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str, request: Request):
    try:
        get_registry(request).delete(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(404, str(e)) from e
    return Response(status_code=204)

@router.post("/{session_id}/reset", response_model=SessionState)
async def reset_session(session: KnowledgeBaseSession = Depends(get_session)):
    session.reset()
    return session.snapshot()

@router.put("/{session_id}/view", response_model=SessionState)
async def update_view(payload: ViewUpdate, session: KnowledgeBaseSession = Depends(get_session)):
    await session.navigate(payload.mode)
    return session.snapshot()

@router.put("/{session_id}/search", response_model=SessionState)
async def update_search(payload: SearchUpdate, session: KnowledgeBaseSession = Depends(get_session)):
    session.set_search_term(payload.term)
    return session.snapshot()
