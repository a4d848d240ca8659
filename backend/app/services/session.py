"""
Interactive session controller and the in-memory session registry.

A KnowledgeBaseSession owns all per-session state (view, summaries, Q&A,
quiz) and routes user actions to the store that owns them. Nothing here is
persisted; a reset or a new session starts from scratch, and sessions idle
longer than the registry TTL are dropped.
"""
from __future__ import annotations
import logging
import time
import uuid
from typing import Callable, List, Optional
from cachetools import TTLCache

from backend.app.models.schemas import (
    QnAView,
    QuizStatus,
    QuizView,
    Section,
    SessionState,
    SummaryView,
    ViewMode,
)
from backend.app.services.exceptions import SessionNotFoundError
from backend.app.services.gateway import LanguageModelGateway
from backend.app.services.session_stores import QnAStore, QuizStore, SummariesStore
from backend.app.services.view_state import ViewState

logger = logging.getLogger(__name__)


class KnowledgeBaseSession:
    def __init__(self, document: str, sections: List[Section], gateway: LanguageModelGateway,
                 session_id: Optional[str] = None):
        self.session_id = session_id or uuid.uuid4().hex
        self.document = document
        self.sections = sections
        self.view = ViewState()
        self.summaries = SummariesStore(sections, gateway)
        self.qna = QnAStore(document, gateway)
        self.quiz = QuizStore(document, gateway)

    async def navigate(self, mode: ViewMode) -> None:
        self.view.navigate(mode)
        if mode == ViewMode.SUMMARIES:
            await self.summaries.load_current()

    def set_search_term(self, term: str) -> None:
        self.view.set_search_term(term)

    async def next_section(self) -> bool:
        if not self.summaries.next():
            return False
        await self.summaries.load_current()
        return True

    async def previous_section(self) -> bool:
        if not self.summaries.previous():
            return False
        await self.summaries.load_current()
        return True

    async def ask(self, question: str) -> bool:
        return await self.qna.ask(question)

    async def start_quiz(self) -> bool:
        return await self.quiz.start()

    def select_answer(self, index: int, option: str) -> None:
        self.quiz.select(index, option)

    def submit_quiz(self) -> int:
        self.quiz.submit()
        score = self.quiz.score()
        logger.info(f"Session {self.session_id}: quiz submitted, score={score}/{len(self.quiz.questions)}")
        return score

    def reset(self) -> None:
        self.view = ViewState()
        self.summaries.reset()
        self.qna.reset()
        self.quiz.reset()

    def snapshot(self) -> SessionState:
        s = self.summaries
        current = s.current
        entry = s.entries.get(current.title)
        q = self.quiz
        return SessionState(
            session_id=self.session_id,
            view=self.view.mode,
            search_term=self.view.search_term,
            summaries=SummaryView(
                index=s.index,
                total=len(s.sections),
                title=current.title,
                status=s.status(current.title),
                text=entry.text if entry else "",
                error=entry.error if entry else None,
                can_previous=s.can_previous,
                can_next=s.can_next,
            ),
            qna=QnAView(
                status=self.qna.status,
                question=self.qna.question,
                answer=self.qna.answer,
                error=self.qna.error,
            ),
            quiz=QuizView(
                status=q.status,
                questions=list(q.questions),
                answers=dict(q.answers),
                can_submit=q.can_submit,
                score=q.score() if q.status == QuizStatus.SUBMITTED else None,
                error=q.error,
            ),
        )


class SessionRegistry:
    """
    In-memory sessions keyed by id.

    Sessions expire after `ttl_seconds` without a lookup, and the least
    recently used one is evicted once `max_sessions` is reached.
    """

    def __init__(self, document: str, sections: List[Section], gateway: LanguageModelGateway,
                 ttl_seconds: float = 3600.0, max_sessions: int = 1000,
                 timer: Callable[[], float] = time.monotonic):
        self.document = document
        self.sections = sections
        self.gateway = gateway
        self._sessions: TTLCache = TTLCache(maxsize=max_sessions, ttl=ttl_seconds, timer=timer)

    def create(self) -> KnowledgeBaseSession:
        session = KnowledgeBaseSession(self.document, self.sections, self.gateway)
        self._sessions[session.session_id] = session
        logger.info(f"Session created: {session.session_id} (active={len(self._sessions)})")
        return session

    def get(self, session_id: str) -> KnowledgeBaseSession:
        try:
            session = self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(f"Unknown session: {session_id}") from None
        # re-inserting restarts the idle timer
        self._sessions[session_id] = session
        return session

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(f"Unknown session: {session_id}")
        logger.info(f"Session deleted: {session_id}")

    def __len__(self) -> int:
        self._sessions.expire()
        return len(self._sessions)
