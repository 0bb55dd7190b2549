# =============================================================================
# CONFTEST - Fixtures compartilhadas para todos os testes
# =============================================================================
# Centraliza mocks do gerador, dados de quiz e stores em memoria
# =============================================================================

import json
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

OWNER_ID = "user-1"
OTHER_OWNER_ID = "user-2"
SKILL_ID = "skill-python"
SKILL_NAME = "Python"

# Respostas corretas do quiz de exemplo, na ordem das questoes
CORRECT_ANSWERS = ["A", "B", "A", "C", "D"]


# =============================================================================
# FIXTURES DE DADOS DO QUIZ
# =============================================================================


@pytest.fixture
def sample_questions_data():
    """Candidato valido: 5 questoes com options A-D e respostas [A, B, A, C, D]."""
    prompts = [
        "Which keyword defines a function in Python?",
        "Which type is immutable?",
        "What does len([1, 2, 3]) return?",
        "Which statement handles exceptions?",
        "Which module provides regular expressions?",
    ]
    return [
        {
            "prompt": prompt,
            "options": ["A", "B", "C", "D"],
            "answer": answer,
            "explanation": f"The correct option is {answer}.",
        }
        for prompt, answer in zip(prompts, CORRECT_ANSWERS)
    ]


@pytest.fixture
def raw_quiz_json(sample_questions_data):
    """Texto bruto do gerador sem bloco de codigo."""
    return json.dumps(sample_questions_data)


@pytest.fixture
def fenced_quiz_json(raw_quiz_json):
    """Texto bruto do gerador dentro de ```json ... ```."""
    return f"```json\n{raw_quiz_json}\n```"


@pytest.fixture
def fixed_clock():
    """Relogio fixo para timestamps deterministicos."""
    fixed_time = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
    return lambda: fixed_time


@pytest.fixture
def sample_quiz(sample_questions_data, fixed_clock):
    """Quiz validado a partir do candidato de exemplo."""
    from quiz.engine.validator import QuizValidator
    from quiz.models.enums import Difficulty

    validator = QuizValidator(clock=fixed_clock, id_factory=lambda: "quiz-123")
    return validator.validate(
        sample_questions_data,
        skill_id=SKILL_ID,
        difficulty=Difficulty.EASY,
        created_by=OWNER_ID,
    )


@pytest.fixture
def make_quiz(sample_questions_data):
    """Factory de quizzes com id, dono e data customizaveis."""
    from quiz.engine.validator import QuizValidator
    from quiz.models.enums import Difficulty

    base_time = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

    def _make_quiz(quiz_id: str, owner_id: str = OWNER_ID, minutes: int = 0):
        validator = QuizValidator(
            clock=lambda: base_time + timedelta(minutes=minutes),
            id_factory=lambda: quiz_id,
        )
        return validator.validate(
            sample_questions_data,
            skill_id=SKILL_ID,
            difficulty=Difficulty.MEDIUM,
            created_by=owner_id,
        )

    return _make_quiz


@pytest.fixture
def sample_skill():
    """Skill do usuario de teste."""
    from quiz.models.schemas import Skill

    return Skill(
        skill_id=SKILL_ID,
        owner_id=OWNER_ID,
        name=SKILL_NAME,
        sub_skills=("list comprehensions", "exceptions"),
    )


# =============================================================================
# FIXTURES DO GERADOR
# =============================================================================


@pytest.fixture
def mock_generative_client(raw_quiz_json):
    """Mock do GenerativeClient (sem rede)."""
    mock = MagicMock()
    mock.generate = AsyncMock(return_value=raw_quiz_json)
    mock.generate_feedback = AsyncMock(return_value="Great work! Review exceptions next.")
    mock.aclose = AsyncMock()
    return mock


@pytest.fixture
def gemini_payload():
    """Factory de envelopes de resposta do Gemini."""

    def _payload(text: str):
        return {
            "candidates": [
                {
                    "content": {"role": "model", "parts": [{"text": text}]},
                    "finishReason": "STOP",
                }
            ]
        }

    return _payload


# =============================================================================
# FIXTURES DE STORAGE / ENGINE
# =============================================================================


@pytest.fixture
def memory_kv(sample_skill):
    """KV em memoria ja com a skill do usuario de teste."""
    from quiz.storage.memory_kv import InMemoryKV
    from quiz.storage.quiz_store import SkillStore

    key = f"{SkillStore.KEY_PREFIX}:{sample_skill.owner_id}:{sample_skill.name}"
    return InMemoryKV({key: sample_skill.model_dump(mode="json")})


@pytest.fixture
def quiz_engine(mock_generative_client, memory_kv):
    """QuizEngine com gerador mockado e stores em memoria."""
    from quiz.engine.quiz_engine import QuizEngine
    from quiz.storage.quiz_store import QuizStore, ResultStore, SkillStore

    return QuizEngine(
        client=mock_generative_client,
        quiz_store=QuizStore(memory_kv),
        result_store=ResultStore(memory_kv),
        skill_store=SkillStore(memory_kv),
    )


# =============================================================================
# FIXTURES DO FASTAPI
# =============================================================================


@pytest.fixture
def api_client(quiz_engine):
    """Cliente de teste FastAPI com engine injetado e rate limit desligado."""
    from fastapi.testclient import TestClient

    import app_state
    from server import app

    app_state.limiter.enabled = False
    app.dependency_overrides[app_state.get_quiz_engine] = lambda: quiz_engine

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Identidade do usuario de teste."""
    return {"X-User-Id": OWNER_ID}
