"""Quiz LLM - Cliente do gerador de texto e factory."""

from .client import GenerationConfig, GenerativeClient, GeneratorSettings
from .factory import LLMClientFactory

__all__ = ["GenerationConfig", "GeneratorSettings", "GenerativeClient", "LLMClientFactory"]
