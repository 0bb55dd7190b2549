"""Quiz Store - Persistencia de quizzes, resultados e skills sobre um KV assincrono."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from ..models.schemas import EvaluationResult, Quiz, Skill

logger = logging.getLogger(__name__)


class KVBackend(Protocol):
    """Superficie minima do KV assincrono (get, set, list por prefixo)."""

    async def get(self, key: str) -> Any: ...

    async def set(self, key: str, value: Any) -> None: ...

    async def list(self, prefix: str = "") -> list[Any]: ...


def _entry_key(entry: Any) -> str:
    return entry.get("key", "") if isinstance(entry, dict) else str(entry)


async def _ids_with_prefix(kv: KVBackend, prefix: str) -> list[str]:
    """Extrai o ultimo segmento das chaves de indice com o prefixo dado."""
    entries = await kv.list(prefix=prefix)
    return [_entry_key(entry).rsplit(":", 1)[-1] for entry in entries]


class QuizStore:
    """Persistencia de quizzes. Somente create e leitura por dono.

    Estrutura de chaves:
        - quiz:{quiz_id} -> Quiz serializado
        - quiz_owner:{owner_id}:{quiz_id} -> indice por dono

    Example:
        >>> store = QuizStore(InMemoryKV())
        >>> stored = await store.create(quiz)
        >>> await store.get_for_owner(stored.id, stored.created_by)
    """

    KEY_PREFIX = "quiz"
    OWNER_PREFIX = "quiz_owner"

    def __init__(self, kv: KVBackend):
        self.kv = kv

    def _quiz_key(self, quiz_id: str) -> str:
        return f"{self.KEY_PREFIX}:{quiz_id}"

    def _owner_key(self, owner_id: str, quiz_id: str) -> str:
        return f"{self.OWNER_PREFIX}:{owner_id}:{quiz_id}"

    async def create(self, quiz: Quiz) -> Quiz:
        """Persiste o quiz e retorna o registro armazenado."""
        await self.kv.set(self._quiz_key(quiz.id), quiz.model_dump(mode="json"))
        await self.kv.set(self._owner_key(quiz.created_by, quiz.id), quiz.id)
        logger.info(f"[Quiz {quiz.id}] Salvo para usuario {quiz.created_by}")

        stored = await self.get(quiz.id)
        if stored is None:
            raise RuntimeError(f"Quiz {quiz.id} nao foi persistido")
        return stored

    async def get(self, quiz_id: str) -> Quiz | None:
        data = await self.kv.get(self._quiz_key(quiz_id))
        if not data:
            logger.debug(f"Quiz nao encontrado: {quiz_id}")
            return None
        return Quiz.model_validate(data)

    async def get_for_owner(self, quiz_id: str, owner_id: str) -> Quiz | None:
        """Busca quiz somente se pertencer ao usuario."""
        quiz = await self.get(quiz_id)
        if quiz is None or quiz.created_by != owner_id:
            return None
        return quiz

    async def list_by_owner(self, owner_id: str) -> list[Quiz]:
        """Lista quizzes do usuario, mais recentes primeiro."""
        quizzes = []
        for quiz_id in await _ids_with_prefix(self.kv, f"{self.OWNER_PREFIX}:{owner_id}:"):
            quiz = await self.get(quiz_id)
            # o prefixo do indice tambem casa donos como "{owner_id}:x"
            if quiz is not None and quiz.created_by == owner_id:
                quizzes.append(quiz)
        return sorted(quizzes, key=lambda q: q.created_at, reverse=True)


class ResultStore:
    """Persistencia append-only de resultados de avaliacao.

    Estrutura de chaves:
        - result:{result_id} -> EvaluationResult serializado
        - result_user:{user_id}:{result_id} -> indice por usuario
    """

    KEY_PREFIX = "result"
    USER_PREFIX = "result_user"

    def __init__(self, kv: KVBackend):
        self.kv = kv

    def _result_key(self, result_id: str) -> str:
        return f"{self.KEY_PREFIX}:{result_id}"

    def _user_key(self, user_id: str, result_id: str) -> str:
        return f"{self.USER_PREFIX}:{user_id}:{result_id}"

    async def create(self, result: EvaluationResult) -> EvaluationResult:
        """Persiste o resultado e retorna o registro armazenado."""
        await self.kv.set(self._result_key(result.id), result.model_dump(mode="json"))
        await self.kv.set(self._user_key(result.user_id, result.id), result.id)
        logger.info(f"[Quiz {result.quiz_id}] Resultado {result.id} salvo (score {result.score})")

        data = await self.kv.get(self._result_key(result.id))
        if not data:
            raise RuntimeError(f"Resultado {result.id} nao foi persistido")
        return EvaluationResult.model_validate(data)

    async def list_by_user(self, user_id: str) -> list[EvaluationResult]:
        """Lista resultados do usuario, mais recentes primeiro."""
        results = []
        for result_id in await _ids_with_prefix(self.kv, f"{self.USER_PREFIX}:{user_id}:"):
            data = await self.kv.get(self._result_key(result_id))
            if not data:
                continue
            result = EvaluationResult.model_validate(data)
            if result.user_id == user_id:
                results.append(result)
        return sorted(results, key=lambda r: r.created_at, reverse=True)


class SkillStore:
    """Leitura de skills por dono e nome (colaborador externo ao core).

    Estrutura de chaves:
        - skill:{owner_id}:{name} -> Skill serializada
    """

    KEY_PREFIX = "skill"

    def __init__(self, kv: KVBackend):
        self.kv = kv

    def _skill_key(self, owner_id: str, name: str) -> str:
        return f"{self.KEY_PREFIX}:{owner_id}:{name}"

    async def create(self, skill: Skill) -> Skill:
        await self.kv.set(self._skill_key(skill.owner_id, skill.name), skill.model_dump(mode="json"))
        return skill

    async def get_by_name(self, owner_id: str, name: str) -> Skill | None:
        """Busca a skill do usuario pelo nome exato."""
        data = await self.kv.get(self._skill_key(owner_id, name))
        if not data:
            return None
        skill = Skill.model_validate(data)
        if skill.owner_id != owner_id or skill.name != name:
            return None
        return skill
