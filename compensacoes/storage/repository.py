"""Factor repositories: one named slot holding a flat JSON document.

The document is the full factor configuration as camelCase key → number.
Readers get the raw mapping; merging over defaults is the store's job.

Usage:
    from compensacoes.storage import build_repository

    repo = build_repository(settings.storage)
    repo.save({"itaAmbulatorio": 0.7})
    repo.load()   # {"itaAmbulatorio": 0.7}
    repo.clear()
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

import redis

from compensacoes.config import StorageSettings
from compensacoes.errors import FactorStorageError

logger = logging.getLogger(__name__)


class FactorRepository(Protocol):
    """Load/save/clear contract for the persisted factor slot."""

    def load(self) -> dict[str, Any] | None: ...

    def save(self, document: dict[str, Any]) -> None: ...

    def clear(self) -> None: ...


def _parse_document(raw: str | bytes, origin: str) -> dict[str, Any] | None:
    """Decode a stored document; unreadable content is treated as absent."""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Ignoring unreadable factor document in %s", origin)
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring factor document in %s: expected an object", origin)
        return None
    return data


class InMemoryFactorRepository:
    """Process-local slot. Used in tests and when persistence is disabled."""

    def __init__(self, document: dict[str, Any] | None = None) -> None:
        self._document = dict(document) if document is not None else None

    def load(self) -> dict[str, Any] | None:
        return dict(self._document) if self._document is not None else None

    def save(self, document: dict[str, Any]) -> None:
        self._document = dict(document)

    def clear(self) -> None:
        self._document = None


class JsonFileFactorRepository:
    """Slot stored as a JSON file on local disk."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any] | None:
        if not self._path.exists():
            return None
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError:
            logger.exception("Cannot read factor file %s", self._path)
            return None
        return _parse_document(raw, str(self._path))

    def save(self, document: dict[str, Any]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(document, indent=2, sort_keys=True), encoding="utf-8")
            tmp.replace(self._path)
        except OSError as exc:
            tmp.unlink(missing_ok=True)
            raise FactorStorageError(f"Cannot write factor file {self._path}: {exc}") from exc
        logger.debug("Factors saved to %s", self._path)

    def clear(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            raise FactorStorageError(f"Cannot remove factor file {self._path}: {exc}") from exc
        logger.debug("Factor file %s removed", self._path)


class RedisFactorRepository:
    """Slot stored under a single Redis key."""

    def __init__(self, client: redis.Redis, key: str) -> None:
        self._redis = client
        self._key = key

    def load(self) -> dict[str, Any] | None:
        try:
            raw = self._redis.get(self._key)
        except redis.RedisError:
            logger.exception("Redis error reading factors key %s", self._key)
            return None
        if raw is None:
            return None
        return _parse_document(raw, f"redis key {self._key}")

    def save(self, document: dict[str, Any]) -> None:
        try:
            self._redis.set(self._key, json.dumps(document, sort_keys=True))
        except redis.RedisError as exc:
            raise FactorStorageError(f"Cannot write factors to Redis key {self._key}: {exc}") from exc

    def clear(self) -> None:
        try:
            self._redis.delete(self._key)
        except redis.RedisError as exc:
            raise FactorStorageError(f"Cannot delete Redis key {self._key}: {exc}") from exc


def build_repository(storage: StorageSettings) -> FactorRepository:
    """Create the repository selected by ``factors_backend``."""
    if storage.factors_backend == "redis":
        client = redis.Redis.from_url(storage.redis_url)
        logger.info("Persisting factors in Redis key %s", storage.factors_storage_key)
        return RedisFactorRepository(client, storage.factors_storage_key)
    if storage.factors_backend == "memory":
        logger.info("Factor persistence disabled (in-memory only)")
        return InMemoryFactorRepository()
    logger.info("Persisting factors in %s", storage.factors_file)
    return JsonFileFactorRepository(storage.factors_file)
