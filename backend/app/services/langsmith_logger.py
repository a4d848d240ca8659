import os
from typing import Callable
from shared.config import settings


def tracing_enabled() -> bool:
    return settings.langsmith_tracing and bool(settings.langsmith_api_key)


def configure_tracing() -> None:
    """Export LangSmith settings for the SDK; called once at app startup."""
    if not tracing_enabled():
        return
    os.environ.setdefault("LANGSMITH_API_KEY", settings.langsmith_api_key)
    os.environ.setdefault("LANGSMITH_PROJECT", settings.langsmith_project)
    os.environ.setdefault("LANGSMITH_TRACING", "true")


def traceable(name: str, run_type: str = "llm") -> Callable:
    """Trace a gateway coroutine in LangSmith; identity decorator when tracing is off."""
    if not tracing_enabled():
        def _wrap(func):
            return func
        return _wrap

    # langsmith is an optional extra
    from langsmith import traceable as _traceable  # type: ignore
    return _traceable(name=name, run_type=run_type, project_name=settings.langsmith_project,
                      tags=["trillium-kb", settings.app_env])
