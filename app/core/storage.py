# app/core/storage.py

import logging
from typing import Dict, Optional, Protocol

import redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Хранилище недоступно или отказалось выполнить операцию."""


class KeyValueStore(Protocol):
    """
    Минимальный интерфейс хранилища документов: строковый ключ -> JSON-строка.
    Транзакций между ключами нет, каждая запись заменяет документ целиком.
    """

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class RedisStore:
    """Хранилище поверх синхронного клиента Redis."""

    def __init__(self, client: redis.Redis):
        self.client = client

    def get(self, key: str) -> Optional[str]:
        try:
            return self.client.get(key)
        except RedisError as e:
            raise StorageError(f"Failed to read key '{key}' from Redis") from e

    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(key, value)
        except RedisError as e:
            raise StorageError(f"Failed to write key '{key}' to Redis") from e

    def delete(self, key: str) -> None:
        try:
            self.client.delete(key)
        except RedisError as e:
            raise StorageError(f"Failed to delete key '{key}' from Redis") from e


class InMemoryStore:
    """Хранилище в памяти процесса. Используется в тестах и при STORAGE_BACKEND=memory."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


def create_store(backend: str, client: Optional[redis.Redis] = None) -> KeyValueStore:
    """Создает хранилище по имени бэкенда из настроек."""
    if backend == "memory":
        logger.warning("Using in-memory storage backend. Data will be lost on restart.")
        return InMemoryStore()
    if backend == "redis":
        if client is None:
            raise ValueError("Redis backend requires a Redis client.")
        return RedisStore(client)
    raise ValueError(f"Unknown storage backend: {backend}")
