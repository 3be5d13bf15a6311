# app/routers/referral.py

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request

from app.core.config import settings
from app.core.limiter import limiter
from app.core.storage import KeyValueStore
from app.dependencies import get_store
from app.schemas.referral import ReferralClaimRequest, ReferralClaimResult, ReferralLanding
from app.services import referral as referral_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/referral", response_model=ReferralLanding)
@limiter.limit(settings.REFERRAL_RATE_LIMIT)
def open_referral_link(
    request: Request,
    campaign_id: Optional[str] = Query(None, alias="id"),
    store: KeyValueStore = Depends(get_store),
):
    """
    Вызывается при открытии ссылки <origin>/referral?id=<campaign_id>.
    Учитывает клик и возвращает данные кампании для страницы приглашения.
    """
    campaign = referral_service.visit_referral_link(store, campaign_id)
    return ReferralLanding(campaign=campaign)


@router.post("/referral/{campaign_id}/claim", response_model=ReferralClaimResult)
@limiter.limit(settings.REFERRAL_RATE_LIMIT)
def claim_referral_discount(
    request: Request,
    campaign_id: str,
    claim_data: ReferralClaimRequest,
    store: KeyValueStore = Depends(get_store),
):
    """Приглашенный оставляет email и получает награду со скидкой кампании."""
    return referral_service.claim_discount(store, campaign_id, str(claim_data.email))
