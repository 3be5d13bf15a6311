# app/routers/analytics.py
from fastapi import APIRouter, Depends

from app.core.storage import KeyValueStore
from app.dependencies import get_store
from app.schemas.analytics import Analytics
from app.services import analytics as analytics_service

router = APIRouter()


@router.get("/analytics", response_model=Analytics)
def get_analytics(store: KeyValueStore = Depends(get_store)):
    """Сводная статистика: клики, конверсии, награды и конверсия по каждой кампании."""
    return analytics_service.compute_analytics(store)
