"""Quiz Enums - Dificuldade e codigos de validacao."""

from enum import Enum


class Difficulty(str, Enum):
    """Niveis de dificuldade aceitos na geracao de quiz."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class ValidationReason(str, Enum):
    """Motivos de rejeicao de um candidato gerado pela IA."""

    WRONG_QUESTION_COUNT = "WrongQuestionCount"
    INVALID_QUESTION = "InvalidQuestion"  # nao e objeto / prompt vazio
    INVALID_OPTIONS = "InvalidOptions"
    ANSWER_NOT_IN_OPTIONS = "AnswerNotInOptions"
    MISSING_EXPLANATION = "MissingExplanation"
