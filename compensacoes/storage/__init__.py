"""Persistence for tuned calculation factors."""

from compensacoes.storage.repository import (
    FactorRepository,
    InMemoryFactorRepository,
    JsonFileFactorRepository,
    RedisFactorRepository,
    build_repository,
)

__all__ = [
    "FactorRepository",
    "InMemoryFactorRepository",
    "JsonFileFactorRepository",
    "RedisFactorRepository",
    "build_repository",
]
