"""Quiz Schemas - Modelos Pydantic do dominio e de request/response."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from .enums import Difficulty

QUESTIONS_PER_QUIZ = 5
OPTIONS_PER_QUESTION = 4


class CamelModel(BaseModel):
    """Base com campos snake_case no Python e camelCase no JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    """Base imutavel para registros que nunca mudam apos criados."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# =============================================================================
# DOMINIO
# =============================================================================


class GenerationRequest(FrozenCamelModel):
    """Pedido de geracao construido a cada chamada."""

    skill_name: str = Field(..., min_length=1, description="Nome da skill")
    sub_skills: tuple[str, ...] = Field(default=(), description="Sub-skills em ordem")
    difficulty: Difficulty = Field(..., description="Nivel de dificuldade")


class Question(FrozenCamelModel):
    """Questao de multipla escolha ja validada."""

    prompt: str = Field(..., min_length=1, description="Enunciado da questao")
    options: tuple[str, ...] = Field(..., description="4 alternativas distintas")
    answer: str = Field(..., description="Alternativa correta (igual a uma das options)")
    explanation: str = Field(default="", description="Explicacao da resposta correta")


class Quiz(FrozenCamelModel):
    """Quiz persistido. Imutavel depois de validado."""

    id: str = Field(..., description="ID unico do quiz")
    skill_id: str = Field(..., description="ID da skill do usuario")
    difficulty: Difficulty
    questions: tuple[Question, ...] = Field(..., description="Exatamente 5 questoes")
    created_by: str = Field(..., description="ID do usuario dono do quiz")
    created_at: datetime
    updated_at: datetime

    @computed_field(alias="quizId")
    @property
    def quiz_id(self) -> str:
        """Mesmo valor de id; o cliente web envia quizId na avaliacao."""
        return self.id


class SubmittedAnswers(CamelModel):
    """Respostas enviadas pelo usuario para avaliacao."""

    quiz_id: str = Field(..., min_length=1)
    user_answers: list[str] = Field(..., description="Uma resposta por questao, em ordem")
    time_taken_seconds: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("timeTakenSeconds", "timeTaken", "time_taken_seconds"),
        description="Tempo gasto em segundos",
    )


class EvaluationResult(FrozenCamelModel):
    """Resultado de uma avaliacao. Append-only: retakes geram novos registros."""

    id: str
    quiz_id: str
    user_id: str
    score: int = Field(..., ge=0, le=QUESTIONS_PER_QUIZ)
    user_answers: tuple[str, ...]
    ai_feedback: str
    time_taken_seconds: int = Field(default=0, ge=0)
    created_at: datetime


class Skill(FrozenCamelModel):
    """Registro de skill (colaborador externo ao core)."""

    skill_id: str
    owner_id: str
    name: str = Field(..., min_length=1)
    sub_skills: tuple[str, ...] = ()


class PerformanceSummary(CamelModel):
    """Resumo de desempenho do usuario em todos os resultados."""

    total_quizzes: int = 0
    average_raw_score: float = 0.0
    average_percent_score: float = 0.0
    best_raw_score: int = 0
    worst_raw_score: int = 0
    best_percent_score: float = 0.0
    worst_percent_score: float = 0.0


# =============================================================================
# REQUEST / RESPONSE
# =============================================================================


class GenerateQuizRequest(CamelModel):
    """Request para geracao de quiz."""

    skill: str = Field(..., min_length=1, description="Nome de uma skill do usuario")
    difficulty: Difficulty = Field(..., description="Easy, Medium ou Hard")


class EvaluateQuizResponse(CamelModel):
    """Response da avaliacao: score bruto (0-5) e feedback da IA."""

    result_id: str
    score: int
    total_questions: int
    ai_feedback: str
