"""Core module - shared state and helper functions."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from slowapi import Limiter
from slowapi.util import get_remote_address

from config import QuizConfig, get_config
from quiz.engine import QuizEngine
from quiz.llm import LLMClientFactory
from quiz.storage import InMemoryKV, QuizStore, ResultStore, SkillStore

if TYPE_CHECKING:
    from quiz.llm import GenerativeClient
    from quiz.storage import KVBackend

logger = logging.getLogger(__name__)

# =============================================================================
# GLOBAL STATE
# =============================================================================

# Backend KV compartilhado (InMemoryKV por padrao)
kv: Optional[KVBackend] = None
client: Optional[GenerativeClient] = None
engine: Optional[QuizEngine] = None

# Serializa a criacao preguicosa do engine (um unico pool httpx)
_startup_lock: Optional[asyncio.Lock] = None

# Rate limiter dos endpoints que chamam a API paga
limiter = Limiter(key_func=get_remote_address)


def generate_rate_limit() -> str:
    return get_config().rate_limit_generate


def evaluate_rate_limit() -> str:
    return get_config().rate_limit_evaluate


# =============================================================================
# LIFECYCLE
# =============================================================================


def build_engine(
    config: QuizConfig, generative_client: GenerativeClient, backend: KVBackend
) -> QuizEngine:
    """Monta o QuizEngine com stores sobre o backend dado."""
    return QuizEngine(
        client=generative_client,
        quiz_store=QuizStore(backend),
        result_store=ResultStore(backend),
        skill_store=SkillStore(backend),
        max_parse_retries=config.max_parse_retries,
        generation_config=config.generation_config,
    )


async def startup(config: QuizConfig | None = None, backend: KVBackend | None = None) -> QuizEngine:
    """Cria cliente do gerador, stores e engine compartilhados."""
    global kv, client, engine

    config = config or get_config()
    limiter.enabled = config.rate_limit_enabled

    kv = backend or InMemoryKV()
    client = LLMClientFactory.from_config(config)
    engine = build_engine(config, client, kv)

    if not config.gemini_api_key:
        logger.warning("GEMINI_API_KEY nao definida: chamadas ao gerador vao falhar")

    logger.info(f"Quiz engine pronto ({config.environment})")
    return engine


async def shutdown() -> None:
    """Fecha o pool httpx do gerador."""
    global kv, client, engine, _startup_lock

    if client is not None:
        await client.aclose()
        logger.info("Cliente do gerador fechado")

    kv = None
    client = None
    engine = None
    _startup_lock = None


# =============================================================================
# DEPENDENCIES
# =============================================================================


async def get_quiz_engine() -> QuizEngine:
    """Dependency para obter o QuizEngine configurado."""
    global _startup_lock

    if engine is not None:
        return engine

    if _startup_lock is None:
        _startup_lock = asyncio.Lock()
    async with _startup_lock:
        if engine is None:
            return await startup()
        return engine
