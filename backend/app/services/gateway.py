"""
Language-model gateway.

summarize/answer always resolve to displayable text: a real reply, a fixed
fallback string, or the configuration-error text. generate_quiz is the only
operation whose failures reach the caller, as QuizGenerationError.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional

from agents.workflows import (
    CONFIG_ERROR_MESSAGE,
    QuestionAnswerWorkflow,
    QuizGenerationWorkflow,
    SectionSummaryWorkflow,
)
from backend.app.models.schemas import QuizQuestion
from backend.app.services.exceptions import (
    ConfigurationError,
    ErrorKind,
    QuizGenerationError,
    ResponseFormatError,
)
from backend.app.services.langsmith_logger import traceable
from backend.app.services.llm_client import CompletionBackend

logger = logging.getLogger(__name__)

SUMMARY_FALLBACK = "Failed to generate summary."
ANSWER_FALLBACK = "Failed to get an answer. Please try again."
QUIZ_FAILURE = "Failed to generate quiz. Please try again."


@dataclass(frozen=True)
class GatewayReply:
    text: str
    error: Optional[ErrorKind] = None


class LanguageModelGateway:
    def __init__(self, backend: CompletionBackend):
        self.backend = backend
        self._summary = SectionSummaryWorkflow(backend)
        self._answer = QuestionAnswerWorkflow(backend)
        self._quiz = QuizGenerationWorkflow(backend)

    @traceable("summarize_section")
    async def summarize_reply(self, title: str, content: str) -> GatewayReply:
        try:
            return GatewayReply(await self._summary.run(title, content))
        except ConfigurationError:
            return GatewayReply(CONFIG_ERROR_MESSAGE, ErrorKind.CONFIGURATION)
        except Exception as e:
            logger.error(f"Error generating summary for '{title}': {e}")
            return GatewayReply(SUMMARY_FALLBACK, ErrorKind.REMOTE)

    async def summarize(self, title: str, content: str) -> str:
        return (await self.summarize_reply(title, content)).text

    @traceable("answer_question")
    async def answer_reply(self, document: str, question: str) -> GatewayReply:
        try:
            return GatewayReply(await self._answer.run(document, question))
        except ConfigurationError:
            return GatewayReply(CONFIG_ERROR_MESSAGE, ErrorKind.CONFIGURATION)
        except Exception as e:
            logger.error(f"Error answering question: {e}")
            return GatewayReply(ANSWER_FALLBACK, ErrorKind.REMOTE)

    async def answer(self, document: str, question: str) -> str:
        return (await self.answer_reply(document, question)).text

    @traceable("generate_quiz")
    async def generate_quiz(self, document: str) -> List[QuizQuestion]:
        try:
            return await self._quiz.run(document)
        except ConfigurationError as e:
            raise QuizGenerationError(str(e), ErrorKind.CONFIGURATION) from e
        except ResponseFormatError as e:
            logger.error(f"Error generating quiz: {e} {e.details}")
            raise QuizGenerationError(QUIZ_FAILURE, ErrorKind.MALFORMED) from e
        except Exception as e:
            logger.error(f"Error generating quiz: {e}")
            raise QuizGenerationError(QUIZ_FAILURE, ErrorKind.REMOTE) from e
