# app/core/limiter.py

import logging

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

logger = logging.getLogger(__name__)

# --- Создание и конфигурация лимитера ---

# Аутентификации нет, поэтому запросы идентифицируются только по IP-адресу.
# Лимит защищает счетчики переходов от накрутки одним клиентом.
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="moving-window",
)
