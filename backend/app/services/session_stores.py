"""
Per-feature session stores.

Each store owns the request lifecycle and cached results of one feature and
is driven by awaiting a gateway call. Stores never cancel a request: a reply
that arrives after the user moved elsewhere is still stored. A generation
counter, bumped by `reset()`, discards replies to requests issued before the
reset.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from backend.app.models.schemas import QnAStatus, QuizQuestion, QuizStatus, Section, SummaryStatus
from backend.app.services.exceptions import ErrorKind, QuizGenerationError, QuizStateError
from backend.app.services.gateway import LanguageModelGateway

logger = logging.getLogger(__name__)


@dataclass
class SummaryEntry:
    text: str = ""
    loading: bool = True
    error: Optional[ErrorKind] = None


class SummariesStore:
    """Summaries keyed by section title: Unrequested -> Loading -> Loaded."""

    def __init__(self, sections: List[Section], gateway: LanguageModelGateway):
        self.sections = sections
        self.gateway = gateway
        self.entries: Dict[str, SummaryEntry] = {}
        self.index = 0
        self._generation = 0

    @property
    def current(self) -> Section:
        return self.sections[self.index]

    def status(self, title: str) -> SummaryStatus:
        entry = self.entries.get(title)
        if entry is None:
            return SummaryStatus.UNREQUESTED
        return SummaryStatus.LOADING if entry.loading else SummaryStatus.LOADED

    @property
    def can_previous(self) -> bool:
        return self.index > 0 and self.status(self.current.title) != SummaryStatus.LOADING

    @property
    def can_next(self) -> bool:
        return (self.index < len(self.sections) - 1
                and self.status(self.current.title) != SummaryStatus.LOADING)

    def next(self) -> bool:
        if not self.can_next:
            return False
        self.index += 1
        return True

    def previous(self) -> bool:
        if not self.can_previous:
            return False
        self.index -= 1
        return True

    async def load_current(self) -> bool:
        """
        Request the current section's summary unless it is already Loading or
        Loaded. A summary that failed remotely is requested again.
        """
        section = self.current
        existing = self.entries.get(section.title)
        if existing is not None and (existing.loading or existing.error != ErrorKind.REMOTE):
            return False
        entry = SummaryEntry()
        self.entries[section.title] = entry
        generation = self._generation

        reply = await self.gateway.summarize_reply(section.title, section.content)
        if generation != self._generation:
            logger.info(f"Discarding summary for '{section.title}' issued before reset")
            return False
        entry.text, entry.error, entry.loading = reply.text, reply.error, False
        return True

    def reset(self):
        self.entries = {}
        self.index = 0
        self._generation += 1


class QnAStore:
    """Single last question/answer exchange: Idle -> Loading -> Answered."""

    def __init__(self, document: str, gateway: LanguageModelGateway):
        self.document = document
        self.gateway = gateway
        self.question = ""
        self.answer = ""
        self.error: Optional[ErrorKind] = None
        self.loading = False
        self._generation = 0

    @property
    def status(self) -> QnAStatus:
        if self.loading:
            return QnAStatus.LOADING
        return QnAStatus.ANSWERED if self.question else QnAStatus.IDLE

    async def ask(self, question: str) -> bool:
        """Returns False without calling the gateway for blank questions or while a request is in flight."""
        if not question.strip() or self.loading:
            return False
        self.question, self.answer, self.error = question, "", None
        self.loading = True
        self._generation += 1
        generation = self._generation

        reply = await self.gateway.answer_reply(self.document, question)
        if generation != self._generation:
            logger.info("Discarding answer issued before reset")
            return False
        self.answer, self.error = reply.text, reply.error
        self.loading = False
        return True

    def reset(self):
        self.question, self.answer, self.error = "", "", None
        self.loading = False
        self._generation += 1


class QuizStore:
    """Quiz session: Empty -> Loading -> InProgress -> Submitted."""

    def __init__(self, document: str, gateway: LanguageModelGateway):
        self.document = document
        self.gateway = gateway
        self.status = QuizStatus.EMPTY
        self.questions: List[QuizQuestion] = []
        self.answers: Dict[int, str] = {}
        self.error: Optional[str] = None
        self._generation = 0

    async def start(self) -> bool:
        """
        Discard any prior quiz and generate a new one.

        Returns False while a generation is already in flight. On failure the
        store goes back to Empty and the QuizGenerationError is re-raised,
        unless the store was reset meanwhile, in which case it returns False.
        """
        if self.status == QuizStatus.LOADING:
            return False
        self.questions, self.answers, self.error = [], {}, None
        self.status = QuizStatus.LOADING
        self._generation += 1
        generation = self._generation

        try:
            questions = await self.gateway.generate_quiz(self.document)
        except QuizGenerationError as e:
            if generation != self._generation:
                logger.info(f"Discarding quiz failure issued before reset: {e}")
                return False
            self.status = QuizStatus.EMPTY
            self.error = str(e)
            raise
        if generation != self._generation:
            logger.info("Discarding quiz issued before reset")
            return False
        self.questions = questions
        self.status = QuizStatus.IN_PROGRESS
        return True

    def select(self, index: int, option: str) -> None:
        if self.status != QuizStatus.IN_PROGRESS:
            raise QuizStateError(f"Cannot answer while quiz is {self.status.value}")
        if not 0 <= index < len(self.questions):
            raise QuizStateError(f"No question at index {index}")
        if option not in self.questions[index].options:
            raise QuizStateError(f"'{option}' is not an option of question {index}")
        self.answers[index] = option

    @property
    def can_submit(self) -> bool:
        return (self.status == QuizStatus.IN_PROGRESS
                and bool(self.questions)
                and all(i in self.answers for i in range(len(self.questions))))

    def submit(self) -> None:
        if not self.can_submit:
            raise QuizStateError("Every question must be answered before submitting")
        self.status = QuizStatus.SUBMITTED

    def score(self) -> int:
        if self.status != QuizStatus.SUBMITTED:
            raise QuizStateError("Quiz has not been submitted")
        return sum(1 for i, q in enumerate(self.questions) if self.answers.get(i) == q.correct_answer)

    def reset(self):
        self.status = QuizStatus.EMPTY
        self.questions, self.answers, self.error = [], {}, None
        self._generation += 1
