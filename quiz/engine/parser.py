"""Response Parser - Decodificacao do texto bruto da IA em candidato nao tipado."""

import json
import logging
import re
from typing import Any

from ..errors import ParseError

logger = logging.getLogger(__name__)

# ```json / ```JSON / ``` no inicio, ``` no fim
_LEADING_FENCE = re.compile(r"^\s*```[\w-]*[ \t]*\r?\n?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```\s*$")


def strip_code_fence(raw_text: str) -> str:
    """Remove bloco de codigo markdown ao redor do texto e espacos nas pontas."""
    text = _LEADING_FENCE.sub("", raw_text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


class ResponseParser:
    """Primeiro estagio da fronteira de confianca: sintaxe.

    Transforma o texto do gerador em uma lista nao tipada (candidato).
    Nao valida o formato das questoes; isso e papel do QuizValidator.

    Example:
        >>> parser = ResponseParser()
        >>> parser.parse_quiz_candidate('```json\\n[{"prompt": "..."}]\\n```')
        [{'prompt': '...'}]
    """

    def parse_quiz_candidate(self, raw_text: str) -> list[Any]:
        """Decodifica o texto bruto em lista nao vazia.

        Args:
            raw_text: Resposta do gerador, possivelmente em bloco ```json

        Returns:
            Lista decodificada (candidato)

        Raises:
            ParseError: JSON invalido, valor nao e array, ou array vazio
        """
        text = strip_code_fence(raw_text or "")

        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"invalid json: {e.msg}", raw_text=raw_text) from e

        if not isinstance(value, list):
            raise ParseError("not an array", raw_text=raw_text)

        if not value:
            raise ParseError("empty array", raw_text=raw_text)

        logger.debug(f"Candidato decodificado com {len(value)} elementos")
        return value
