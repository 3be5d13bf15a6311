from typing import List, Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "Referrify"

    # Настройки Redis (основное хранилище документов)
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0

    # 'redis' - продакшен, 'memory' - локальный запуск без Redis
    STORAGE_BACKEND: Literal["redis", "memory"] = "redis"
    STORAGE_KEY_PREFIX: str = ""

    # Ключи документов. Значения по умолчанию совпадают с ключами фронтенда
    CAMPAIGNS_KEY: str = "campaigns"
    REFERRALS_KEY: str = "referrify-referrals"
    REWARDS_KEY: str = "referrify-rewards"
    USER_INFO_KEY: str = "referrify-user-info"

    # Origin, который подставляется в реферальные ссылки
    PUBLIC_ORIGIN: str = "http://localhost:8080"

    CAMPAIGN_DURATION_DAYS: int = 30
    REWARD_VALIDITY_DAYS: int = 30

    CORS_ORIGINS_STR: str = Field(
        default="http://localhost,http://localhost:3000,http://localhost:8080,http://localhost:5173",
        alias="CORS_ORIGINS",
    )

    RATE_LIMIT_STORAGE_URI: str = "memory://"
    REFERRAL_RATE_LIMIT: str = "30/minute"

    LOG_LEVEL: str = "INFO"

    @property
    def CORS_ORIGINS(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS_STR.split(',') if origin.strip()]

    @property
    def REDIS_URL(self) -> str:
        return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"

    def storage_key(self, name: str) -> str:
        """Полное имя ключа документа с учетом префикса."""
        return f"{self.STORAGE_KEY_PREFIX}{name}"

    model_config = SettingsConfigDict(env_file=".env", populate_by_name=True, extra="ignore")

settings = Settings()
