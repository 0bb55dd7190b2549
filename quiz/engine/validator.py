"""Quiz Validator - Segundo estagio da fronteira de confianca: semantica."""

import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from ..errors import ValidationError
from ..models.enums import Difficulty, ValidationReason
from ..models.schemas import OPTIONS_PER_QUESTION, QUESTIONS_PER_QUIZ, Question, Quiz


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuizValidator:
    """Valida o candidato decodificado e constroi um Quiz imutavel.

    Regras (cada uma com codigo proprio em ValidationReason):
        - Exatamente 5 questoes (WrongQuestionCount)
        - Cada questao e um objeto com prompt nao vazio (InvalidQuestion)
        - 4 options nao vazias e distintas (InvalidOptions)
        - answer igual a uma das options (AnswerNotInOptions)
        - campo explanation presente e string (MissingExplanation)

    Nao ha exigencia de unicidade entre questoes.

    Example:
        >>> validator = QuizValidator()
        >>> quiz = validator.validate(candidate, skill_id="s1", difficulty=Difficulty.EASY, created_by="u1")
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ):
        self._clock = clock
        self._id_factory = id_factory

    def validate(
        self,
        candidate: list[Any],
        *,
        skill_id: str,
        difficulty: Difficulty,
        created_by: str,
    ) -> Quiz:
        """Valida o candidato e retorna o Quiz.

        Args:
            candidate: Lista nao tipada vinda do ResponseParser
            skill_id: ID da skill do usuario
            difficulty: Dificuldade pedida
            created_by: ID do usuario dono

        Returns:
            Quiz com ID novo e timestamps iguais ao instante da validacao

        Raises:
            ValidationError: com o codigo da primeira regra violada
        """
        if len(candidate) != QUESTIONS_PER_QUIZ:
            raise ValidationError(
                ValidationReason.WRONG_QUESTION_COUNT,
                f"expected {QUESTIONS_PER_QUIZ}, got {len(candidate)}",
            )

        questions = tuple(
            self._validate_question(index, item) for index, item in enumerate(candidate)
        )

        now = self._clock()
        return Quiz(
            id=self._id_factory(),
            skill_id=skill_id,
            difficulty=difficulty,
            questions=questions,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )

    def _validate_question(self, index: int, item: Any) -> Question:
        if not isinstance(item, dict):
            raise ValidationError(ValidationReason.INVALID_QUESTION, "not an object", index)

        prompt = item.get("prompt")
        if not isinstance(prompt, str) or not prompt.strip():
            raise ValidationError(ValidationReason.INVALID_QUESTION, "empty prompt", index)

        options = item.get("options")
        if not isinstance(options, list) or len(options) != OPTIONS_PER_QUESTION:
            raise ValidationError(
                ValidationReason.INVALID_OPTIONS,
                f"expected {OPTIONS_PER_QUESTION} options",
                index,
            )
        if not all(isinstance(option, str) and option.strip() for option in options):
            raise ValidationError(ValidationReason.INVALID_OPTIONS, "empty option", index)
        if len(set(options)) != len(options):
            raise ValidationError(ValidationReason.INVALID_OPTIONS, "duplicate options", index)

        answer = item.get("answer")
        if not isinstance(answer, str) or answer not in options:
            raise ValidationError(ValidationReason.ANSWER_NOT_IN_OPTIONS, index=index)

        if "explanation" not in item or not isinstance(item["explanation"], str):
            raise ValidationError(ValidationReason.MISSING_EXPLANATION, index=index)

        return Question(
            prompt=prompt,
            options=tuple(options),
            answer=answer,
            explanation=item["explanation"],
        )
