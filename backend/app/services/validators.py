"""
Validation of generated quiz payloads.

The model is asked for a fixed quiz shape; this module checks the parsed
payload against that shape so scoring can rely on it.
"""
from __future__ import annotations
from typing import Dict, List, Tuple

from backend.app.models.schemas import QuizQuestion

QUIZ_LENGTH = 5
OPTIONS_PER_QUESTION = 4


class QuizValidator:
    """
    Validator for generated quizzes.

    Checks question count, option count and that every correct answer is one
    of its own options.
    """

    @staticmethod
    def validate(questions: List[QuizQuestion]) -> Tuple[bool, Dict]:
        """
        Validate a parsed quiz.

        Args:
            questions: Questions parsed from the model response

        Returns:
            Tuple of (is_valid, details) where:
            - is_valid: Boolean indicating if the quiz can be shown and scored
            - details: Dictionary with the failure reason and question index if applicable
        """
        if len(questions) != QUIZ_LENGTH:
            return False, {"reason": "wrong_question_count", "count": len(questions)}
        for i, q in enumerate(questions):
            if not q.question.strip():
                return False, {"reason": "empty_question", "index": i}
            if len(q.options) != OPTIONS_PER_QUESTION:
                return False, {"reason": "wrong_option_count", "index": i, "count": len(q.options)}
            if q.correct_answer not in q.options:
                return False, {"reason": "answer_not_in_options", "index": i}
        return True, {}
