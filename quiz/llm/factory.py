"""LLM Client Factory - Criacao do GenerativeClient a partir da configuracao."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from .client import GenerativeClient, GeneratorSettings

if TYPE_CHECKING:
    from config import QuizConfig


class LLMClientFactory:
    """Factory para criar o GenerativeClient com pool de conexoes limitado.

    Centraliza a criacao do cliente de geracao, permitindo:
    - Pool httpx dimensionado pelo max_concurrency
    - Deadline consistente em todas as chamadas
    - Substituicao do httpx client nos testes (MockTransport)

    Example:
        >>> client = LLMClientFactory.from_config(get_config())
        >>> raw = await client.generate("...")
    """

    @staticmethod
    def create_http_client(
        settings: GeneratorSettings, transport: httpx.AsyncBaseTransport | None = None
    ) -> httpx.AsyncClient:
        """Cria httpx.AsyncClient com limites de conexao e timeout.

        Args:
            settings: Configuracao do gerador
            transport: Transport customizado (usado em testes)

        Returns:
            httpx.AsyncClient configurado
        """
        limits = httpx.Limits(
            max_connections=settings.max_concurrency,
            max_keepalive_connections=settings.max_concurrency,
        )
        return httpx.AsyncClient(
            timeout=httpx.Timeout(settings.timeout_seconds),
            limits=limits,
            transport=transport,
        )

    @classmethod
    def create_client(
        cls, settings: GeneratorSettings, transport: httpx.AsyncBaseTransport | None = None
    ) -> GenerativeClient:
        """Cria GenerativeClient dono do proprio pool httpx."""
        return GenerativeClient(
            settings,
            http_client=cls.create_http_client(settings, transport),
            close_http_client=True,
        )

    @classmethod
    def from_config(cls, config: QuizConfig) -> GenerativeClient:
        """Cria GenerativeClient a partir da configuracao da aplicacao."""
        return cls.create_client(config.to_generator_settings())
