# =============================================================================
# TESTES - Quiz Schemas Module
# =============================================================================
# Testes unitarios para schemas Pydantic do quiz
# =============================================================================

import pytest
from pydantic import ValidationError


class TestDifficulty:
    """Testes para Difficulty enum."""

    def test_values(self):
        """Verifica os tres niveis."""
        from quiz.models.enums import Difficulty

        assert [d.value for d in Difficulty] == ["Easy", "Medium", "Hard"]

    def test_invalid_value(self):
        """Verifica rejeicao de nivel desconhecido."""
        from quiz.models.schemas import GenerateQuizRequest

        with pytest.raises(ValidationError):
            GenerateQuizRequest(skill="Python", difficulty="easy")


class TestQuizWireFormat:
    """Testes para o formato camelCase na fronteira HTTP."""

    def test_quiz_dumps_camel_case(self, sample_quiz):
        """Verifica chaves camelCase com by_alias."""
        data = sample_quiz.model_dump(by_alias=True, mode="json")

        assert data["skillId"] == "skill-python"
        assert data["createdBy"] == "user-1"
        assert "createdAt" in data
        assert data["questions"][0]["options"] == ["A", "B", "C", "D"]

    def test_quiz_emits_quiz_id(self, sample_quiz):
        """Verifica quizId igual ao id no JSON do quiz."""
        data = sample_quiz.model_dump(by_alias=True, mode="json")

        assert data["quizId"] == data["id"] == "quiz-123"

    def test_quiz_reload_ignores_quiz_id(self, sample_quiz):
        """Verifica que o registro salvo (com quiz_id) recarrega igual."""
        from quiz.models.schemas import Quiz

        reloaded = Quiz.model_validate(sample_quiz.model_dump(mode="json"))

        assert reloaded == sample_quiz
        assert reloaded.quiz_id == "quiz-123"

    def test_submitted_answers_aliases(self):
        """Verifica quizId, userAnswers e timeTaken aceitos."""
        from quiz.models.schemas import SubmittedAnswers

        submission = SubmittedAnswers.model_validate(
            {"quizId": "q1", "userAnswers": ["A", "B"], "timeTaken": 120}
        )

        assert submission.quiz_id == "q1"
        assert submission.user_answers == ["A", "B"]
        assert submission.time_taken_seconds == 120

    def test_submitted_answers_negative_time(self):
        """Verifica rejeicao de tempo negativo."""
        from quiz.models.schemas import SubmittedAnswers

        with pytest.raises(ValidationError):
            SubmittedAnswers(quiz_id="q1", user_answers=["A"], time_taken_seconds=-1)

    def test_evaluation_result_score_bounds(self):
        """Verifica score entre 0 e 5."""
        from datetime import datetime, timezone

        from quiz.models.schemas import EvaluationResult

        with pytest.raises(ValidationError):
            EvaluationResult(
                id="r1",
                quiz_id="q1",
                user_id="u1",
                score=6,
                user_answers=("A",) * 5,
                ai_feedback="",
                created_at=datetime.now(timezone.utc),
            )


class TestValidationErrorMessage:
    """Testes para a mensagem do erro de validacao."""

    def test_message_with_index(self):
        """Verifica codigo, detalhe e indice na mensagem."""
        from quiz.errors import ValidationError as QuizValidationError
        from quiz.models.enums import ValidationReason

        error = QuizValidationError(ValidationReason.INVALID_OPTIONS, "expected 4 options", index=2)

        assert str(error) == "InvalidOptions: expected 4 options (question 2)"
