"""Quiz Router - Endpoints FastAPI de geracao e avaliacao.

Fronteira de erros: falhas do gerador, de parse e de validacao viram
mensagens genericas para o cliente. O tipo especifico e o texto bruto
da IA ficam somente no log do servidor.
"""

import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Request

import app_state

from .engine.quiz_engine import QuizEngine
from .errors import (
    GeneratorError,
    IncompleteSubmission,
    ParseError,
    QuizNotFound,
    SkillNotFound,
    ValidationError,
)
from .models.schemas import (
    EvaluateQuizResponse,
    EvaluationResult,
    GenerateQuizRequest,
    PerformanceSummary,
    Quiz,
    SubmittedAnswers,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quizzes", tags=["Quiz"])
results_router = APIRouter(prefix="/results", tags=["Results"])

GENERATION_FAILED = "AI quiz generation failed. Please try later."
INVALID_AI_FORMAT = "AI response not in expected format. Try again later."
INCOMPLETE_SUBMISSION = "Please answer all questions before submitting."
SKILL_NOT_FOUND = "Skill not found for this user"
QUIZ_NOT_FOUND = "Quiz not found"


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================


def get_current_user(x_user_id: str | None = Header(default=None)) -> str:
    """Identidade do chamador, ja autenticada pela camada de auth."""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Missing user identity")
    return x_user_id


# =============================================================================
# QUIZ ENDPOINTS
# =============================================================================


@router.post("/generate", response_model=Quiz)
@app_state.limiter.limit(app_state.generate_rate_limit)
async def generate_quiz(
    request: Request,
    body: GenerateQuizRequest,
    engine: QuizEngine = Depends(app_state.get_quiz_engine),
    user_id: str = Depends(get_current_user),
):
    """Gera um quiz de 5 questoes para uma skill do usuario.

    - Confere que a skill pertence ao usuario
    - Chama o gerador, valida a resposta e persiste o quiz
    - Retorna o quiz completo (com respostas) para a mesma sessao
    """
    try:
        return await engine.generate_quiz(user_id, body.skill, body.difficulty)
    except SkillNotFound:
        raise HTTPException(status_code=400, detail=SKILL_NOT_FOUND)
    except (ParseError, ValidationError) as e:
        logger.error(f"Geracao de quiz rejeitada ({type(e).__name__}): {e}")
        raise HTTPException(status_code=502, detail=INVALID_AI_FORMAT)
    except GeneratorError as e:
        logger.error(f"Geracao de quiz falhou ({type(e).__name__}): {e}")
        raise HTTPException(status_code=503, detail=GENERATION_FAILED)


@router.get("", response_model=list[Quiz])
async def list_quizzes(
    engine: QuizEngine = Depends(app_state.get_quiz_engine),
    user_id: str = Depends(get_current_user),
):
    """Lista os quizzes do usuario."""
    return await engine.list_quizzes(user_id)


# =============================================================================
# RESULTS ENDPOINTS
# =============================================================================


@results_router.post("/evaluate", response_model=EvaluateQuizResponse)
@app_state.limiter.limit(app_state.evaluate_rate_limit)
async def evaluate_quiz(
    request: Request,
    body: SubmittedAnswers,
    engine: QuizEngine = Depends(app_state.get_quiz_engine),
    user_id: str = Depends(get_current_user),
):
    """Avalia as respostas e retorna score bruto (0-5) e feedback da IA."""
    try:
        result = await engine.evaluate_quiz(user_id, body)
    except IncompleteSubmission as e:
        logger.info(f"[Quiz {body.quiz_id}] Submissao incompleta: {e}")
        raise HTTPException(status_code=400, detail=INCOMPLETE_SUBMISSION)
    except QuizNotFound:
        raise HTTPException(status_code=404, detail=QUIZ_NOT_FOUND)

    return EvaluateQuizResponse(
        result_id=result.id,
        score=result.score,
        total_questions=len(result.user_answers),
        ai_feedback=result.ai_feedback,
    )


@results_router.get("/me", response_model=list[EvaluationResult])
async def list_my_results(
    engine: QuizEngine = Depends(app_state.get_quiz_engine),
    user_id: str = Depends(get_current_user),
):
    """Lista os resultados do usuario, mais recentes primeiro."""
    return await engine.list_results(user_id)


@results_router.get("/me/summary", response_model=PerformanceSummary)
async def my_performance(
    engine: QuizEngine = Depends(app_state.get_quiz_engine),
    user_id: str = Depends(get_current_user),
):
    """Media, melhor e pior score (bruto e percentual)."""
    return await engine.performance_summary(user_id)
