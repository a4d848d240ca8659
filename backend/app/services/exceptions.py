from enum import Enum


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    REMOTE = "remote"
    MALFORMED = "malformed"


class KnowledgeBaseError(Exception):
    """Base class for knowledge-base exceptions."""

class ConfigurationError(KnowledgeBaseError):
    """Raised when the model credential is missing."""

class CompletionError(KnowledgeBaseError):
    """Raised when the remote completion call fails."""

class ResponseFormatError(KnowledgeBaseError):
    """Raised when a structured response is unparsable or has the wrong shape; include details."""
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}

class QuizGenerationError(KnowledgeBaseError):
    """Raised by quiz generation; the only gateway failure that reaches callers."""
    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.kind = kind

class QuizStateError(KnowledgeBaseError):
    """Raised when a quiz action is not allowed in the current quiz state."""

class SessionNotFoundError(KnowledgeBaseError):
    """Raised when a session id is unknown to the registry."""
