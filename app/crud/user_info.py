# app/crud/user_info.py
import logging
from typing import Optional

from pydantic import TypeAdapter

from app.core.storage import KeyValueStore, StorageError
from app.crud.documents import load_document, save_document
from app.schemas.user_info import UserInfo
from app.utils.ids import user_info_key

logger = logging.getLogger(__name__)

user_info_adapter = TypeAdapter(Optional[UserInfo])


def save_user_info(store: KeyValueStore, email: str) -> bool:
    """Перезаписывает единственный слот с данными текущего пользователя."""
    try:
        save_document(store, user_info_key(), user_info_adapter, UserInfo(email=email))
        return True
    except (StorageError, ValueError):
        logger.error("Failed to save user info.", exc_info=True)
        return False


def read_user_info(store: KeyValueStore) -> Optional[UserInfo]:
    try:
        return load_document(store, user_info_key(), user_info_adapter, lambda: None)
    except StorageError:
        logger.error("Failed to read user info.", exc_info=True)
        return None
