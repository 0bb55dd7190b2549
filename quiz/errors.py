"""Quiz Errors - Taxonomia de falhas do pipeline de geracao e avaliacao.

Hierarquia:
- GeneratorError: falhas transitorias do servico de IA (timeout, indisponivel, vazio)
- ParseError: texto da IA malformado (nao decodifica como array JSON)
- ValidationError: JSON bem formado que viola o contrato do quiz
- EvaluationError / IncompleteSubmission: erro de entrada do usuario
- SkillNotFound / QuizNotFound: registro inexistente para o usuario
"""

from __future__ import annotations

from .models.enums import ValidationReason


class QuizError(Exception):
    """Base de todos os erros do modulo quiz."""


# =============================================================================
# GERADOR (servico externo)
# =============================================================================


class GeneratorError(QuizError):
    """Falha ao obter texto do gerador."""


class GeneratorTimeout(GeneratorError):
    """Chamada ao gerador excedeu o deadline."""


class GeneratorUnavailable(GeneratorError):
    """Erro HTTP, de rede ou envelope inesperado."""


class GeneratorEmptyResponse(GeneratorError):
    """Resposta sem candidato ou com texto vazio."""


# =============================================================================
# PARSE / VALIDACAO (saida nao confiavel da IA)
# =============================================================================


class ParseError(QuizError):
    """Texto da IA nao decodifica como um array JSON nao vazio."""

    def __init__(self, reason: str, raw_text: str = ""):
        super().__init__(reason)
        self.reason = reason
        self.raw_text = raw_text


class ValidationError(QuizError):
    """Candidato decodificado viola o contrato Question/Quiz."""

    def __init__(
        self,
        reason: ValidationReason,
        detail: str = "",
        index: int | None = None,
        raw_text: str = "",
    ):
        message = reason.value if not detail else f"{reason.value}: {detail}"
        if index is not None:
            message = f"{message} (question {index})"
        super().__init__(message)
        self.reason = reason
        self.detail = detail
        self.index = index
        self.raw_text = raw_text


# =============================================================================
# AVALIACAO / REGISTROS
# =============================================================================


class EvaluationError(QuizError):
    """Falha ao avaliar uma submissao."""


class IncompleteSubmission(EvaluationError):
    """Numero de respostas diferente do numero de questoes, ou resposta vazia."""


class SkillNotFound(QuizError):
    """Skill nao existe para o usuario."""


class QuizNotFound(QuizError):
    """Quiz nao existe ou pertence a outro usuario."""
