import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from backend.app.routes import qa, quiz, report, session, summary
from backend.app.services.gateway import LanguageModelGateway
from backend.app.services.langsmith_logger import configure_tracing
from backend.app.services.llm_client import AzureCompletionClient, CompletionBackend
from backend.app.services.sectionizer import segment
from backend.app.services.session import SessionRegistry
from shared.config import settings
from storage.document_store import load_document

logger = logging.getLogger(__name__)


def create_app(backend: Optional[CompletionBackend] = None, document: Optional[str] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logging.basicConfig(level=settings.log_level)
        configure_tracing()
        doc = document if document is not None else load_document()
        completion = backend if backend is not None else AzureCompletionClient()
        if not completion.configured:
            logger.warning("AZURE_OPENAI_API_KEY is not set; model features will report a configuration error")
        sections = segment(doc)
        app.state.registry = SessionRegistry(
            doc, sections, LanguageModelGateway(completion),
            ttl_seconds=settings.session_ttl_seconds,
            max_sessions=settings.max_sessions,
        )
        logger.info(f"Knowledge base ready: {len(sections)} sections, {len(doc)} chars")
        yield
        close = getattr(completion, "close", None)
        if close is not None:
            await close()

    app = FastAPI(title="Trillium Model Knowledge Base", lifespan=lifespan)
    app.include_router(report.router)
    app.include_router(session.router)
    app.include_router(summary.router)
    app.include_router(qa.router)
    app.include_router(quiz.router)
    return app


app = create_app()
