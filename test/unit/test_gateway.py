"""
Unit tests for the language-model gateway and its workflows.

summarize/answer must always resolve to text; generate_quiz must raise
QuizGenerationError on every failure path.
"""
import json
import pytest

from agents.workflows import CONFIG_ERROR_MESSAGE, parse_quiz
from backend.app.models.schemas import QuizPayload
from backend.app.services.exceptions import ErrorKind, QuizGenerationError, ResponseFormatError
from backend.app.services.gateway import (
    ANSWER_FALLBACK,
    QUIZ_FAILURE,
    SUMMARY_FALLBACK,
    LanguageModelGateway,
)

pytestmark = pytest.mark.unit


class TestSummarize:
    @pytest.mark.asyncio
    async def test_returns_model_text(self, make_backend):
        backend = make_backend(responses=["The past informs the present."])
        gateway = LanguageModelGateway(backend)

        text = await gateway.summarize("I. Framework", "Some content")

        assert text == "The past informs the present."
        prompt, schema = backend.calls[0]
        assert "Section Title: I. Framework" in prompt
        assert "Section Content: Some content" in prompt
        assert "This section is about" in prompt  # named as phrasing to avoid
        assert schema is None

    @pytest.mark.asyncio
    async def test_remote_failure_returns_fallback(self, make_backend):
        gateway = LanguageModelGateway(make_backend(error=RuntimeError("boom")))

        reply = await gateway.summarize_reply("T", "C")

        assert reply.text == SUMMARY_FALLBACK
        assert reply.error == ErrorKind.REMOTE

    @pytest.mark.asyncio
    async def test_missing_credential_returns_config_text(self, make_backend):
        backend = make_backend(configured=False)
        gateway = LanguageModelGateway(backend)

        reply = await gateway.summarize_reply("T", "C")

        assert reply.text == CONFIG_ERROR_MESSAGE
        assert reply.error == ErrorKind.CONFIGURATION
        assert backend.calls == []

    @pytest.mark.asyncio
    async def test_empty_inputs_still_resolve(self, gateway):
        assert isinstance(await gateway.summarize("", ""), str)


class TestAnswer:
    @pytest.mark.asyncio
    async def test_prompt_embeds_document_and_question(self, make_backend):
        backend = make_backend(responses=["Zero is the present."])
        gateway = LanguageModelGateway(backend)

        text = await gateway.answer("FULL DOCUMENT", "What is zero?")

        assert text == "Zero is the present."
        prompt, _ = backend.calls[0]
        assert "FULL DOCUMENT" in prompt
        assert "Question: What is zero?" in prompt
        assert "cannot answer" in prompt

    @pytest.mark.asyncio
    async def test_remote_failure_returns_fallback(self, make_backend):
        gateway = LanguageModelGateway(make_backend(error=ConnectionError("down")))

        assert await gateway.answer("doc", "q") == ANSWER_FALLBACK

    @pytest.mark.asyncio
    async def test_missing_credential_returns_config_text(self, make_backend):
        gateway = LanguageModelGateway(make_backend(configured=False))

        assert await gateway.answer("doc", "q") == CONFIG_ERROR_MESSAGE


class TestGenerateQuiz:
    @pytest.mark.asyncio
    async def test_success(self, make_backend, quiz_json):
        backend = make_backend(responses=["  " + quiz_json + "\n"])
        gateway = LanguageModelGateway(backend)

        questions = await gateway.generate_quiz("doc")

        assert len(questions) == 5
        for q in questions:
            assert len(q.options) == 4
            assert q.correct_answer in q.options
        prompt, schema = backend.calls[0]
        assert schema is QuizPayload
        assert "5-question" in prompt
        assert "exactly 4 options" in prompt

    @pytest.mark.asyncio
    async def test_missing_credential_raises(self, make_backend):
        gateway = LanguageModelGateway(make_backend(configured=False))

        with pytest.raises(QuizGenerationError) as exc:
            await gateway.generate_quiz("doc")

        assert exc.value.kind == ErrorKind.CONFIGURATION
        assert str(exc.value) == CONFIG_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_remote_failure_raises(self, make_backend):
        gateway = LanguageModelGateway(make_backend(error=TimeoutError()))

        with pytest.raises(QuizGenerationError) as exc:
            await gateway.generate_quiz("doc")

        assert exc.value.kind == ErrorKind.REMOTE
        assert str(exc.value) == QUIZ_FAILURE

    @pytest.mark.asyncio
    async def test_non_json_text_raises(self, make_backend):
        gateway = LanguageModelGateway(make_backend(responses=["Here is your quiz: {...}"]))

        with pytest.raises(QuizGenerationError) as exc:
            await gateway.generate_quiz("doc")

        assert exc.value.kind == ErrorKind.MALFORMED
        assert isinstance(exc.value.__cause__, ResponseFormatError)

    @pytest.mark.asyncio
    async def test_option_count_is_validated(self, make_backend, make_quiz):
        payload = json.dumps({"quiz": make_quiz(options=3)})
        gateway = LanguageModelGateway(make_backend(responses=[payload]))

        with pytest.raises(QuizGenerationError) as exc:
            await gateway.generate_quiz("doc")

        assert exc.value.kind == ErrorKind.MALFORMED


class TestParseQuiz:
    def test_rejects_text_not_starting_with_brace(self):
        with pytest.raises(ResponseFormatError, match="Invalid response format"):
            parse_quiz("Sure! {\"quiz\": []}")

    def test_rejects_broken_json(self):
        with pytest.raises(ResponseFormatError):
            parse_quiz('{"quiz": [')

    def test_rejects_bare_array(self, make_quiz):
        with pytest.raises(ResponseFormatError):
            parse_quiz(json.dumps(make_quiz()))

    def test_rejects_missing_fields(self):
        with pytest.raises(ResponseFormatError):
            parse_quiz(json.dumps({"quiz": [{"question": "Q?"}]}))

    def test_rejects_answer_outside_options(self, make_quiz):
        questions = make_quiz()
        questions[2]["correctAnswer"] = "not an option"

        with pytest.raises(ResponseFormatError) as exc:
            parse_quiz(json.dumps({"quiz": questions}))

        assert exc.value.details == {"reason": "answer_not_in_options", "index": 2}

    def test_rejects_wrong_question_count(self, make_quiz):
        with pytest.raises(ResponseFormatError) as exc:
            parse_quiz(json.dumps({"quiz": make_quiz(n=4)}))

        assert exc.value.details["reason"] == "wrong_question_count"
