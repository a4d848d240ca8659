"""
Pytest configuration and shared fixtures for all tests.

This module provides a scripted completion backend standing in for the
remote model, sample documents and quiz payloads.
"""
import json
import os
import pytest

from backend.app.services.gateway import LanguageModelGateway


class FakeCompletionBackend:
    """Scripted stand-in for the remote model; records every prompt it receives."""

    def __init__(self, responses=None, configured=True, error=None, structured=None):
        self.responses = list(responses or [])
        # replies to schema-constrained requests, kept apart from plain-text ones
        self.structured = list(structured or [])
        self._configured = configured
        self.error = error
        self.calls = []
        self.gate = None

    @property
    def configured(self):
        return self._configured

    async def complete(self, prompt, schema=None):
        self.calls.append((prompt, schema))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        if schema is not None and self.structured:
            return self.structured.pop(0)
        return self.responses.pop(0) if self.responses else "A concise summary."


@pytest.fixture
def make_backend():
    """Factory for scripted completion backends."""
    return FakeCompletionBackend


@pytest.fixture
def fake_backend():
    return FakeCompletionBackend()


@pytest.fixture
def gateway(fake_backend):
    return LanguageModelGateway(fake_backend)


@pytest.fixture
def sample_document():
    """Small report with an abstract, two populated sections and one empty heading."""
    return (
        "# Sample Report\n"
        "\n"
        "## Abstract\n"
        "\n"
        "This report describes the sample model.\n"
        "\n"
        "## I. First Part\n"
        "\n"
        "The first part covers the past.\n"
        "### Detail\n"
        "A nested detail line.\n"
        "\n"
        "## II. Empty Part\n"
        "   \n"
        "## III. Last Part\n"
        "The last part covers the future.\n"
    )


def quiz_questions(n=5, options=4):
    return [
        {
            "question": f"Question {i}?",
            "options": [f"Q{i} option {j}" for j in range(options)],
            "correctAnswer": f"Q{i} option {i % options}",
        }
        for i in range(n)
    ]


@pytest.fixture
def make_quiz():
    """Factory for quiz question dicts in the wire shape."""
    return quiz_questions


@pytest.fixture
def quiz_json():
    """A valid five-question quiz response as the model would return it."""
    return json.dumps({"quiz": quiz_questions()})


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Set up test environment before each test."""
    os.environ["APP_ENV"] = "test"
    os.environ["LANGSMITH_TRACING"] = "0"  # Disable tracing in tests
    yield


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
