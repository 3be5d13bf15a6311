# app/main.py

import logging
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

# Конфигурация и ядро
from app.core.config import settings as config
from app.core.limiter import limiter
from app.core.logging_config import setup_logging
from app.dependencies import get_store_instance

# Роутеры FastAPI
from app.routers import (
    analytics as analytics_router,
    campaign as campaign_router,
    referral as referral_router,
    reward as reward_router,
    user as user_router,
)

# --- Инициализация ---
logger = logging.getLogger(__name__)

# --- Обработчик критических ошибок ---
async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Глобальный обработчик для всех необработанных исключений.
    Логирует ошибку и возвращает клиенту обезличенный ответ.
    """
    logger.critical(f"Unhandled exception for request: {request.method} {request.url}", exc_info=exc)

    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error."},
    )

# --- Lifespan Manager (запуск и остановка приложения) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Application lifespan startup...")

    get_store_instance()
    logger.info(f"Referral links will use origin: {config.PUBLIC_ORIGIN}")

    yield

    logger.info("Application shutting down.")

# --- Создание FastAPI приложения ---
app = FastAPI(
    title=config.PROJECT_NAME,
    description="Referral campaigns, click tracking and discount rewards",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Лимитер запросов ---
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# --- Регистрация обработчика исключений ---
app.add_exception_handler(Exception, unhandled_exception_handler)

# --- Подключение роутеров FastAPI ---
api_router = APIRouter(prefix="/api/v1")

api_router.include_router(campaign_router.router, tags=["Campaigns"])
api_router.include_router(referral_router.router, tags=["Referrals"])
api_router.include_router(reward_router.router, tags=["Rewards"])
api_router.include_router(analytics_router.router, tags=["Analytics"])
api_router.include_router(user_router.router, tags=["User Info"])

app.include_router(api_router)
