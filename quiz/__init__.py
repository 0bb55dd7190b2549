"""Quiz Module - Geracao de quizzes por IA e avaliacao de respostas.

Arquitetura:
- models/: Enums e Schemas Pydantic (Quiz, Question, EvaluationResult)
- prompts/: Templates de geracao e feedback
- llm/: GenerativeClient (Gemini via httpx) e LLMClientFactory
- engine/: ResponseParser, QuizValidator, QuizScoringEngine, Evaluator, QuizEngine
- storage/: QuizStore, ResultStore, SkillStore (KV assincrono)
- errors.py: Taxonomia de falhas
- router.py: FastAPI endpoints
"""

from .engine import (
    Evaluator,
    QuizEngine,
    QuizScoringEngine,
    QuizValidator,
    ResponseParser,
)
from .llm import GenerationConfig, GenerativeClient, GeneratorSettings, LLMClientFactory
from .models import Difficulty, EvaluationResult, Question, Quiz, SubmittedAnswers
from .storage import InMemoryKV, QuizStore, ResultStore, SkillStore

__all__ = [
    # Models
    "Difficulty",
    "Question",
    "Quiz",
    "SubmittedAnswers",
    "EvaluationResult",
    # Engines
    "ResponseParser",
    "QuizValidator",
    "QuizScoringEngine",
    "Evaluator",
    "QuizEngine",
    # LLM
    "GenerationConfig",
    "GeneratorSettings",
    "GenerativeClient",
    "LLMClientFactory",
    # Storage
    "InMemoryKV",
    "QuizStore",
    "ResultStore",
    "SkillStore",
]
