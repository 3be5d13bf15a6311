# app/core/redis.py
import redis
from app.core.config import settings

# Синхронный клиент: каждая операция репозитория выполняется целиком, без await.
# decode_responses=True автоматически декодирует ответы из байтов в строки
redis_client = redis.Redis.from_url(settings.REDIS_URL, decode_responses=True)
