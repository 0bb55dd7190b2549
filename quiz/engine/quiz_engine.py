"""Quiz Engine - Orquestracao da geracao e avaliacao de quizzes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..errors import ParseError, QuizNotFound, SkillNotFound, ValidationError
from ..models.enums import Difficulty
from ..models.schemas import (
    EvaluationResult,
    GenerationRequest,
    PerformanceSummary,
    Quiz,
    SubmittedAnswers,
)
from ..prompts import build_generation_prompt
from .evaluator import Evaluator
from .parser import ResponseParser
from .scoring_engine import QuizScoringEngine
from .validator import QuizValidator

if TYPE_CHECKING:
    from ..llm.client import GenerationConfig, GenerativeClient
    from ..storage.quiz_store import QuizStore, ResultStore, SkillStore

logger = logging.getLogger(__name__)

# Retry de parse limitado: a API do gerador e paga
MAX_PARSE_RETRIES_CAP = 1


class QuizEngine:
    """Motor de quiz: liga gerador, parser, validador, avaliador e stores.

    Geracao:
        request -> prompt -> gerador -> ResponseParser -> QuizValidator -> QuizStore
    Avaliacao:
        respostas + quiz armazenado -> Evaluator -> ResultStore

    Politica de retry: somente ParseError (texto malformado) pode ser
    repetido, no maximo uma vez. Falhas do gerador e ValidationError
    propagam direto. Nada e persistido antes de o quiz ser validado.

    Example:
        >>> engine = QuizEngine(client, quiz_store, result_store, skill_store)
        >>> quiz = await engine.generate_quiz("user-1", "Python", Difficulty.EASY)
        >>> result = await engine.evaluate_quiz("user-1", submission)
    """

    def __init__(
        self,
        client: GenerativeClient,
        quiz_store: QuizStore,
        result_store: ResultStore,
        skill_store: SkillStore,
        *,
        parser: ResponseParser | None = None,
        validator: QuizValidator | None = None,
        evaluator: Evaluator | None = None,
        scoring: QuizScoringEngine | None = None,
        max_parse_retries: int = 1,
        generation_config: GenerationConfig | None = None,
    ):
        self.client = client
        self.quiz_store = quiz_store
        self.result_store = result_store
        self.skill_store = skill_store
        self.parser = parser or ResponseParser()
        self.validator = validator or QuizValidator()
        self.scoring = scoring or QuizScoringEngine()
        self.evaluator = evaluator or Evaluator(client, self.scoring)
        self.max_parse_retries = max(0, min(max_parse_retries, MAX_PARSE_RETRIES_CAP))
        self.generation_config = generation_config

    # =========================================================================
    # GERACAO
    # =========================================================================

    async def generate_quiz(self, owner_id: str, skill_name: str, difficulty: Difficulty) -> Quiz:
        """Gera, valida e persiste um quiz para uma skill do usuario.

        Args:
            owner_id: ID do usuario autenticado
            skill_name: Nome de uma skill do usuario
            difficulty: Easy, Medium ou Hard

        Returns:
            Quiz persistido (inclui as respostas corretas)

        Raises:
            SkillNotFound: skill nao pertence ao usuario
            GeneratorError: timeout, indisponibilidade ou resposta vazia
            ParseError: texto malformado mesmo apos o retry
            ValidationError: JSON fora do contrato do quiz
        """
        skill = await self.skill_store.get_by_name(owner_id, skill_name)
        if skill is None:
            raise SkillNotFound(f"skill '{skill_name}' not found for user {owner_id}")

        request = GenerationRequest(
            skill_name=skill.name, sub_skills=skill.sub_skills, difficulty=difficulty
        )
        prompt = build_generation_prompt(request)

        candidate, raw_text = await self._generate_candidate(prompt, skill.skill_id)

        try:
            quiz = self.validator.validate(
                candidate, skill_id=skill.skill_id, difficulty=difficulty, created_by=owner_id
            )
        except ValidationError as e:
            logger.error(f"[Skill {skill.skill_id}] Quiz rejeitado pelo validador: {e}")
            logger.error(f"[Skill {skill.skill_id}] Texto bruto da IA: {raw_text}")
            e.raw_text = raw_text
            raise

        stored = await self.quiz_store.create(quiz)
        logger.info(f"[Quiz {stored.id}] Gerado ({difficulty.value}) para skill {skill.skill_id}")
        return stored

    async def _generate_candidate(self, prompt: str, skill_id: str) -> tuple[list, str]:
        """Retorna o candidato decodificado e o texto bruto que o originou."""
        attempts = 1 + self.max_parse_retries
        for attempt in range(1, attempts + 1):
            raw_text = await self.client.generate(prompt, self.generation_config)
            try:
                return self.parser.parse_quiz_candidate(raw_text), raw_text
            except ParseError as e:
                logger.error(
                    f"[Skill {skill_id}] Resposta da IA invalida (tentativa {attempt}/{attempts}): "
                    f"{e.reason}"
                )
                logger.error(f"[Skill {skill_id}] Texto bruto da IA: {e.raw_text}")
                if attempt == attempts:
                    raise

        raise AssertionError("unreachable")

    # =========================================================================
    # AVALIACAO
    # =========================================================================

    async def evaluate_quiz(self, owner_id: str, submission: SubmittedAnswers) -> EvaluationResult:
        """Avalia as respostas do usuario e persiste o resultado.

        Raises:
            QuizNotFound: quiz inexistente ou de outro usuario
            IncompleteSubmission: respostas faltando (sem chamada ao gerador)
        """
        quiz = await self.quiz_store.get_for_owner(submission.quiz_id, owner_id)
        if quiz is None:
            raise QuizNotFound(f"quiz {submission.quiz_id} not found for user {owner_id}")

        result = await self.evaluator.evaluate(quiz, submission, owner_id)
        return await self.result_store.create(result)

    # =========================================================================
    # LEITURA
    # =========================================================================

    async def list_quizzes(self, owner_id: str) -> list[Quiz]:
        return await self.quiz_store.list_by_owner(owner_id)

    async def list_results(self, owner_id: str) -> list[EvaluationResult]:
        return await self.result_store.list_by_user(owner_id)

    async def performance_summary(self, owner_id: str) -> PerformanceSummary:
        """Resumo de desempenho sobre todos os resultados do usuario."""
        results = await self.result_store.list_by_user(owner_id)
        return self.scoring.summarize(results)
