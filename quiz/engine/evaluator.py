"""Evaluator - Pontuacao de submissoes e feedback qualitativo da IA."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from ..errors import GeneratorError, IncompleteSubmission
from ..models.schemas import EvaluationResult, Quiz, SubmittedAnswers
from ..prompts import FEEDBACK_UNAVAILABLE
from .scoring_engine import QuizScoringEngine

if TYPE_CHECKING:
    from ..llm.client import GenerativeClient

logger = logging.getLogger(__name__)


class Evaluator:
    """Avalia respostas contra o quiz armazenado.

    Fluxo:
        1. Rejeita submissao incompleta ANTES de qualquer chamada externa
        2. Calcula score deterministico (QuizScoringEngine)
        3. Pede feedback ao gerador; falha do gerador vira placeholder neutro

    O score e autoritativo e sempre retornado, mesmo sem feedback.
    """

    def __init__(
        self,
        client: GenerativeClient,
        scoring: QuizScoringEngine | None = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.client = client
        self.scoring = scoring or QuizScoringEngine()
        self._clock = clock

    @staticmethod
    def check_submission(quiz: Quiz, submission: SubmittedAnswers) -> None:
        """Garante uma resposta nao vazia por questao.

        Raises:
            IncompleteSubmission: tamanho diferente ou alguma resposta vazia
        """
        answers = submission.user_answers
        if len(answers) != len(quiz.questions):
            raise IncompleteSubmission(
                f"expected {len(quiz.questions)} answers, got {len(answers)}"
            )
        if any(not answer or not answer.strip() for answer in answers):
            raise IncompleteSubmission("all questions must be answered")

    async def evaluate(
        self, quiz: Quiz, submission: SubmittedAnswers, user_id: str
    ) -> EvaluationResult:
        """Pontua a submissao e gera o EvaluationResult.

        Args:
            quiz: Quiz armazenado (nunca e alterado)
            submission: Respostas do usuario
            user_id: ID do usuario avaliado

        Returns:
            EvaluationResult (ainda nao persistido)

        Raises:
            IncompleteSubmission: sem chamar o gerador
        """
        self.check_submission(quiz, submission)

        answers = list(submission.user_answers)
        score = self.scoring.calculate_score(quiz.questions, answers)
        logger.info(f"[Quiz {quiz.id}] Score {score}/{len(quiz.questions)} para usuario {user_id}")

        try:
            feedback = await self.client.generate_feedback(quiz, answers, score)
        except GeneratorError as e:
            logger.warning(f"[Quiz {quiz.id}] Feedback indisponivel ({type(e).__name__}): {e}")
            feedback = FEEDBACK_UNAVAILABLE

        return EvaluationResult(
            id=uuid.uuid4().hex,
            quiz_id=quiz.id,
            user_id=user_id,
            score=score,
            user_answers=tuple(answers),
            ai_feedback=feedback or FEEDBACK_UNAVAILABLE,
            time_taken_seconds=submission.time_taken_seconds,
            created_at=self._clock(),
        )
