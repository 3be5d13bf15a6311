# app/crud/documents.py

import logging
from typing import Any, Callable, Dict, List, Type, TypeVar

from pydantic import BaseModel, TypeAdapter

from app.core.storage import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

raw_mapping_adapter = TypeAdapter(Dict[str, Any])
raw_list_adapter = TypeAdapter(List[Any])


def load_document(
    store: KeyValueStore,
    key: str,
    adapter: TypeAdapter[T],
    default_factory: Callable[[], T],
) -> T:
    """
    Читает и декодирует документ.
    Отсутствующий или битый документ заменяется значением по умолчанию.
    Ошибки самого хранилища (StorageError) пробрасываются вызывающему коду.
    """
    raw = store.get(key)
    if raw is None:
        return default_factory()
    try:
        return adapter.validate_json(raw)
    except ValueError as e:
        logger.warning(f"Document '{key}' is corrupt, falling back to empty default: {e}")
        return default_factory()


def load_mapping(store: KeyValueStore, key: str, model: Type[M]) -> Dict[str, M]:
    """
    Читает документ-словарь, проверяя каждую запись отдельно.
    Битая запись пропускается, остальные сохраняются.
    """
    entries = load_document(store, key, raw_mapping_adapter, dict)
    result = {}
    for entry_key, value in entries.items():
        try:
            result[entry_key] = model.model_validate(value)
        except ValueError as e:
            logger.warning(f"Entry '{entry_key}' in document '{key}' is corrupt, skipping it: {e}")
    return result


def load_list(store: KeyValueStore, key: str, model: Type[M]) -> List[M]:
    """То же для документа-списка: пропускаются только битые элементы."""
    items = load_document(store, key, raw_list_adapter, list)
    result = []
    for index, value in enumerate(items):
        try:
            result.append(model.model_validate(value))
        except ValueError as e:
            logger.warning(f"Item #{index} in document '{key}' is corrupt, skipping it: {e}")
    return result


def save_document(store: KeyValueStore, key: str, adapter: TypeAdapter[T], value: T) -> None:
    """Сериализует документ целиком и записывает его поверх старого."""
    payload = adapter.dump_json(value, by_alias=True, exclude_none=True).decode()
    store.set(key, payload)
