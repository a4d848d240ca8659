"""
Workflow classes that shape prompts for the completion backend and parse its replies.

Each workflow exposes a `run(...)` coroutine that:
1) checks the backend has a credential (ConfigurationError otherwise),
2) calls the backend (CompletionError wraps any remote failure),
3) for quizzes, parses and validates the JSON (ResponseFormatError on failure).

The gateway decides which of these failures become fallback text.
"""
from __future__ import annotations
import json
import logging
from typing import List
from pydantic import ValidationError as PydanticValidationError

from agents import system_prompts
from backend.app.models.schemas import QuizPayload, QuizQuestion
from backend.app.services.exceptions import CompletionError, ConfigurationError, ResponseFormatError
from backend.app.services.llm_client import CompletionBackend
from backend.app.services.validators import QuizValidator, QUIZ_LENGTH, OPTIONS_PER_QUESTION

logger = logging.getLogger(__name__)

CONFIG_ERROR_MESSAGE = (
    "API Key is not configured. Please set up the AZURE_OPENAI_API_KEY environment variable."
)


class _Workflow:
    def __init__(self, backend: CompletionBackend):
        self.backend = backend

    def _check_configured(self):
        if not self.backend.configured:
            logger.error(CONFIG_ERROR_MESSAGE)
            raise ConfigurationError(CONFIG_ERROR_MESSAGE)

    async def _complete(self, prompt: str, schema=None) -> str:
        try:
            return await self.backend.complete(prompt, schema)
        except Exception as e:
            raise CompletionError(str(e)) from e


class SectionSummaryWorkflow(_Workflow):
    async def run(self, title: str, content: str) -> str:
        self._check_configured()
        return await self._complete(system_prompts.SUMMARY_PROMPT.format(title=title, content=content))


class QuestionAnswerWorkflow(_Workflow):
    async def run(self, document: str, question: str) -> str:
        self._check_configured()
        return await self._complete(system_prompts.ANSWER_PROMPT.format(document=document, question=question))


def parse_quiz(text: str) -> List[QuizQuestion]:
    json_text = text.strip()
    if not json_text.startswith("{") and not json_text.startswith("["):
        logger.error(f"Received non-JSON response for quiz generation: {json_text[:200]}")
        raise ResponseFormatError("Invalid response format from API.")
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise ResponseFormatError(f"Quiz response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ResponseFormatError("Quiz response must be an object with a 'quiz' key.", {"reason": "not_an_object"})
    try:
        questions = QuizPayload.model_validate(data).quiz
    except PydanticValidationError as e:
        raise ResponseFormatError("Quiz response has the wrong shape.", {"errors": e.errors()}) from e
    ok, info = QuizValidator.validate(questions)
    if not ok:
        raise ResponseFormatError("Quiz did not pass validation", info)
    return questions


class QuizGenerationWorkflow(_Workflow):
    async def run(self, document: str) -> List[QuizQuestion]:
        self._check_configured()
        prompt = system_prompts.QUIZ_PROMPT.format(
            num_questions=QUIZ_LENGTH,
            num_options=OPTIONS_PER_QUESTION,
            document=document,
        )
        return parse_quiz(await self._complete(prompt, QuizPayload))
