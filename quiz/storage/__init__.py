"""Quiz Storage - Colaboradores de persistencia."""

from .memory_kv import InMemoryKV
from .quiz_store import KVBackend, QuizStore, ResultStore, SkillStore

__all__ = ["InMemoryKV", "KVBackend", "QuizStore", "ResultStore", "SkillStore"]
