# app/dependencies.py

import logging
from typing import Optional

from app.core.config import settings
from app.core.redis import redis_client
from app.core.storage import KeyValueStore, create_store

# --- Инициализация логгера ---
logger = logging.getLogger(__name__)

_store: Optional[KeyValueStore] = None

# --- Управление хранилищем ---
def get_store_instance() -> KeyValueStore:
    """Создает (один раз на процесс) и возвращает хранилище документов."""
    global _store
    if _store is None:
        _store = create_store(settings.STORAGE_BACKEND, client=redis_client)
        logger.info(f"Storage backend '{settings.STORAGE_BACKEND}' initialized.")
    return _store

def get_store() -> KeyValueStore:
    """
    Основная зависимость FastAPI для получения хранилища.
    В тестах переопределяется через app.dependency_overrides.
    """
    return get_store_instance()
