"""Quiz Models - Enums e Schemas."""

from .enums import Difficulty, ValidationReason
from .schemas import (
    OPTIONS_PER_QUESTION,
    QUESTIONS_PER_QUIZ,
    EvaluateQuizResponse,
    EvaluationResult,
    GenerateQuizRequest,
    GenerationRequest,
    PerformanceSummary,
    Question,
    Quiz,
    Skill,
    SubmittedAnswers,
)

__all__ = [
    # Enums
    "Difficulty",
    "ValidationReason",
    # Constantes
    "QUESTIONS_PER_QUIZ",
    "OPTIONS_PER_QUESTION",
    # Dominio
    "GenerationRequest",
    "Question",
    "Quiz",
    "SubmittedAnswers",
    "EvaluationResult",
    "Skill",
    "PerformanceSummary",
    # Request/Response
    "GenerateQuizRequest",
    "EvaluateQuizResponse",
]
