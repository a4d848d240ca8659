from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from backend.app.services.exceptions import ErrorKind


class Section(BaseModel):
    title: str
    content: str

class QuizQuestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question: str
    options: List[str]
    correct_answer: str = Field(alias="correctAnswer")

class QuizPayload(BaseModel):
    """Structured-output schema sent with quiz requests: {"quiz": [...]}."""
    quiz: List[QuizQuestion]


class ViewMode(str, Enum):
    REPORT = "report"
    SUMMARIES = "summaries"
    QNA = "qna"
    QUIZ = "quiz"

class SummaryStatus(str, Enum):
    UNREQUESTED = "unrequested"
    LOADING = "loading"
    LOADED = "loaded"

class QnAStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ANSWERED = "answered"

class QuizStatus(str, Enum):
    EMPTY = "empty"
    LOADING = "loading"
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"


# Session snapshots returned by the API
class SummaryView(BaseModel):
    index: int
    total: int
    title: str
    status: SummaryStatus
    text: str = ""
    error: Optional[ErrorKind] = None
    can_previous: bool
    can_next: bool

class QnAView(BaseModel):
    status: QnAStatus
    question: str = ""
    answer: str = ""
    error: Optional[ErrorKind] = None

class QuizView(BaseModel):
    status: QuizStatus
    questions: List[QuizQuestion] = []
    answers: Dict[int, str] = {}
    can_submit: bool = False
    score: Optional[int] = None
    error: Optional[str] = None

class SessionState(BaseModel):
    session_id: str
    view: ViewMode
    search_term: str
    summaries: SummaryView
    qna: QnAView
    quiz: QuizView


# Request bodies
class ViewUpdate(BaseModel):
    mode: ViewMode

class SearchUpdate(BaseModel):
    term: str = ""

class QARequest(BaseModel):
    question: str

class AnswerSelection(BaseModel):
    option: str
