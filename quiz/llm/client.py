"""Generative Client - Chamadas ao servico externo de geracao de texto (Gemini).

O cliente nao faz retry: a politica de retry pertence ao chamador (QuizEngine).
Toda chamada tem deadline rigido e passa por um semaforo que limita as
chamadas simultaneas ao servico pago.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from ..errors import GeneratorEmptyResponse, GeneratorTimeout, GeneratorUnavailable
from ..models.schemas import Quiz
from ..prompts import build_feedback_prompt

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_API_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-flash:generateContent"
)


@dataclass(frozen=True)
class GenerationConfig:
    """Parametros de geracao enviados em cada chamada."""

    temperature: float = 0.7
    max_output_tokens: int = 1000

    def to_payload(self) -> dict[str, Any]:
        return {"temperature": self.temperature, "maxOutputTokens": self.max_output_tokens}


@dataclass(frozen=True)
class GeneratorSettings:
    """Configuracao injetada no GenerativeClient na construcao.

    Attributes:
        api_url: Endpoint generateContent do modelo
        api_key: Chave da API (enviada como query param `key`)
        timeout_seconds: Deadline de cada chamada
        max_concurrency: Maximo de chamadas simultaneas ao servico
        generation: Parametros de geracao padrao
    """

    api_url: str = DEFAULT_GEMINI_API_URL
    api_key: str = ""
    timeout_seconds: float = 30.0
    max_concurrency: int = 4
    generation: GenerationConfig = field(default_factory=GenerationConfig)


class GenerativeClient:
    """Cliente do gerador de texto.

    Mapeia falhas para a taxonomia do quiz:
        - deadline excedido -> GeneratorTimeout
        - erro HTTP, de rede ou envelope inesperado -> GeneratorUnavailable
        - sem candidato ou texto vazio -> GeneratorEmptyResponse

    Example:
        >>> client = GenerativeClient(GeneratorSettings(api_key="..."))
        >>> raw = await client.generate("Generate 5 Easy level ...")
        >>> await client.aclose()
    """

    def __init__(
        self,
        settings: GeneratorSettings,
        http_client: httpx.AsyncClient | None = None,
        *,
        close_http_client: bool = False,
    ):
        self.settings = settings
        self._owns_http = http_client is None or close_http_client
        self._http = http_client or httpx.AsyncClient(timeout=settings.timeout_seconds)
        self._semaphore = asyncio.Semaphore(max(1, settings.max_concurrency))

    async def generate(
        self, prompt_text: str, generation_config: GenerationConfig | None = None
    ) -> str:
        """Envia um prompt e retorna o texto bruto da resposta.

        Args:
            prompt_text: Prompt completo
            generation_config: Sobrescreve temperatura/max tokens padrao

        Returns:
            Texto bruto do primeiro candidato (pode vir em bloco de codigo)

        Raises:
            GeneratorTimeout, GeneratorUnavailable, GeneratorEmptyResponse
        """
        config = generation_config or self.settings.generation
        body = {
            "contents": [{"role": "user", "parts": [{"text": prompt_text}]}],
            "generationConfig": config.to_payload(),
        }

        try:
            return await asyncio.wait_for(self._post(body), timeout=self.settings.timeout_seconds)
        except asyncio.TimeoutError as e:
            logger.warning(f"Gerador excedeu deadline de {self.settings.timeout_seconds}s")
            raise GeneratorTimeout(
                f"generator call exceeded {self.settings.timeout_seconds}s"
            ) from e

    async def generate_feedback(
        self,
        quiz: Quiz,
        user_answers: list[str],
        score: int,
        generation_config: GenerationConfig | None = None,
    ) -> str:
        """Pede feedback qualitativo para uma submissao ja pontuada."""
        prompt = build_feedback_prompt(quiz, user_answers, score)
        text = await self.generate(prompt, generation_config)
        return text.strip()

    async def aclose(self) -> None:
        """Fecha o httpx client se ele foi criado aqui."""
        if self._owns_http:
            await self._http.aclose()

    async def _post(self, body: dict[str, Any]) -> str:
        async with self._semaphore:
            try:
                response = await self._http.post(
                    self.settings.api_url,
                    params={"key": self.settings.api_key},
                    json=body,
                    headers={"Content-Type": "application/json"},
                )
            except httpx.TimeoutException as e:
                raise GeneratorTimeout("generator request timed out") from e
            except httpx.HTTPError as e:
                # str(e) pode conter a URL com a chave
                logger.error(f"Falha de rede no gerador: {type(e).__name__}")
                raise GeneratorUnavailable(f"transport error: {type(e).__name__}") from e

        if response.status_code >= 400:
            logger.error(f"Gerador retornou HTTP {response.status_code}: {response.text[:500]}")
            raise GeneratorUnavailable(f"generator returned HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise GeneratorUnavailable("generator returned a non-JSON body") from e

        return self._extract_text(payload)

    @staticmethod
    def _extract_text(payload: Any) -> str:
        """Extrai candidates[0].content.parts[*].text do envelope."""
        if not isinstance(payload, dict):
            raise GeneratorUnavailable("unexpected response envelope")

        candidates = payload.get("candidates")
        if not candidates:
            raise GeneratorEmptyResponse("generator returned no candidates")

        try:
            content = candidates[0].get("content") or {}
            parts = content.get("parts") or []
            text = "".join(part.get("text") or "" for part in parts)
        except (AttributeError, KeyError, TypeError) as e:
            raise GeneratorUnavailable("unexpected response envelope") from e

        if not text.strip():
            raise GeneratorEmptyResponse("generator returned empty text")

        return text
