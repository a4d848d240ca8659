from fastapi import HTTPException, Request
from backend.app.services.exceptions import SessionNotFoundError
from backend.app.services.session import KnowledgeBaseSession, SessionRegistry


def get_registry(request: Request) -> SessionRegistry:
    return request.app.state.registry


def get_session(request: Request, session_id: str) -> KnowledgeBaseSession:
    try:
        return get_registry(request).get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(404, str(e)) from e
