"""Quiz Engines - Logica de negocios."""

from .evaluator import Evaluator
from .parser import ResponseParser, strip_code_fence
from .quiz_engine import QuizEngine
from .scoring_engine import QuizScoringEngine
from .validator import QuizValidator

__all__ = [
    "ResponseParser",
    "strip_code_fence",
    "QuizValidator",
    "QuizScoringEngine",
    "Evaluator",
    "QuizEngine",
]
