"""In-memory KV - Backend padrao do servico (sem persistencia entre processos)."""

from typing import Any


class InMemoryKV:
    """KV assincrono em memoria.

    Metodos: get, set, list(prefix). Valores devem ser
    JSON-compativeis (dicts de model_dump(mode="json")).
    """

    def __init__(self, initial: dict[str, Any] | None = None):
        self._storage: dict[str, Any] = dict(initial or {})

    async def get(self, key: str) -> Any:
        return self._storage.get(key)

    async def set(self, key: str, value: Any) -> None:
        self._storage[key] = value

    async def list(self, prefix: str = "") -> list[dict[str, str]]:
        return [{"key": k} for k in self._storage if k.startswith(prefix)]
