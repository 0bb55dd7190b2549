# =============================================================================
# CONFIGURACAO DO QUIZ SERVICE
# =============================================================================
# Valores lidos do ambiente (.env via python-dotenv) e injetados nos
# componentes na construcao. Nenhum componente le os.environ direto.
# =============================================================================

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any

from dotenv import load_dotenv

from quiz.llm.client import DEFAULT_GEMINI_API_URL, GenerationConfig, GeneratorSettings

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} invalido, usando padrao {default}")
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} invalido, usando padrao {default}")
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class QuizConfig:
    """Configuracao centralizada do servico de quiz."""

    # Gerador (Gemini)
    gemini_api_url: str = DEFAULT_GEMINI_API_URL
    gemini_api_key: str = ""
    temperature: float = 0.7
    max_output_tokens: int = 1000
    timeout_seconds: float = 30.0
    max_concurrency: int = 4

    # Pipeline
    max_parse_retries: int = 1

    # HTTP
    rate_limit_enabled: bool = True
    rate_limit_generate: str = "10/minute"
    rate_limit_evaluate: str = "30/minute"
    allowed_origins: list[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))

    # Ambiente
    environment: str = "development"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> QuizConfig:
        """Cria configuracao a partir das variaveis de ambiente."""
        load_dotenv()

        temperature = _env_float("GEMINI_TEMPERATURE", 0.7)
        if not 0.0 <= temperature <= 2.0:
            logger.warning(f"GEMINI_TEMPERATURE={temperature} fora de [0, 2], usando 0.7")
            temperature = 0.7

        max_tokens = _env_int("GEMINI_MAX_OUTPUT_TOKENS", 1000)
        if max_tokens <= 0:
            logger.warning(f"GEMINI_MAX_OUTPUT_TOKENS={max_tokens} invalido, usando 1000")
            max_tokens = 1000

        timeout = _env_float("GEMINI_TIMEOUT_SECONDS", 30.0)
        if timeout <= 0:
            timeout = 30.0

        origins = os.getenv("ALLOWED_ORIGINS", "")

        return cls(
            gemini_api_url=os.getenv("GEMINI_API_URL") or DEFAULT_GEMINI_API_URL,
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            temperature=temperature,
            max_output_tokens=max_tokens,
            timeout_seconds=timeout,
            max_concurrency=max(1, _env_int("GEMINI_MAX_CONCURRENCY", 4)),
            max_parse_retries=min(max(_env_int("QUIZ_MAX_PARSE_RETRIES", 1), 0), 1),
            rate_limit_enabled=_env_bool("RATE_LIMIT_ENABLED", True),
            rate_limit_generate=os.getenv("RATE_LIMIT_GENERATE") or "10/minute",
            rate_limit_evaluate=os.getenv("RATE_LIMIT_EVALUATE") or "30/minute",
            allowed_origins=[o.strip() for o in origins.split(",") if o.strip()]
            or list(DEFAULT_ALLOWED_ORIGINS),
            environment=os.getenv("ENVIRONMENT", "development"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def generation_config(self) -> GenerationConfig:
        return GenerationConfig(
            temperature=self.temperature, max_output_tokens=self.max_output_tokens
        )

    def to_generator_settings(self) -> GeneratorSettings:
        """Valor injetado no GenerativeClient."""
        return GeneratorSettings(
            api_url=self.gemini_api_url,
            api_key=self.gemini_api_key,
            timeout_seconds=self.timeout_seconds,
            max_concurrency=self.max_concurrency,
            generation=self.generation_config,
        )

    def to_dict(self) -> dict[str, Any]:
        """Converte para dicionario (chave da API mascarada)."""
        return {
            "generator": {
                "api_url": self.gemini_api_url,
                "api_key_set": bool(self.gemini_api_key),
                "temperature": self.temperature,
                "max_output_tokens": self.max_output_tokens,
                "timeout_seconds": self.timeout_seconds,
                "max_concurrency": self.max_concurrency,
            },
            "pipeline": {"max_parse_retries": self.max_parse_retries},
            "rate_limit": {
                "enabled": self.rate_limit_enabled,
                "generate": self.rate_limit_generate,
                "evaluate": self.rate_limit_evaluate,
            },
            "environment": self.environment,
            "log_level": self.log_level,
        }


_config: QuizConfig | None = None


def get_config() -> QuizConfig:
    """Retorna a configuracao global (criada na primeira chamada)."""
    global _config
    if _config is None:
        _config = QuizConfig.from_env()
    return _config


def reload_config() -> QuizConfig:
    """Recarrega a configuracao a partir do ambiente."""
    global _config
    _config = QuizConfig.from_env()
    return _config
