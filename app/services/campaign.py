# app/services/campaign.py

import logging
from typing import List

from fastapi import HTTPException, status

from app.core.config import settings
from app.core.storage import KeyValueStore
from app.crud import campaign as crud_campaign
from app.crud import referral as crud_referral
from app.schemas.campaign import Campaign, CampaignCreate

logger = logging.getLogger(__name__)


def create_campaign(store: KeyValueStore, data: CampaignCreate) -> Campaign:
    campaign = crud_campaign.create_campaign(store, data, origin=settings.PUBLIC_ORIGIN)
    if campaign is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Не удалось сохранить кампанию. Попробуйте позже.",
        )
    return campaign


def list_campaigns(store: KeyValueStore) -> List[Campaign]:
    """
    Список кампаний со свежими счетчиками.
    Сохраненные referrals/conversions не используются, источник правды - записи переходов.
    """
    campaigns = crud_campaign.list_campaigns(store)
    events = crud_referral.read_referral_events(store)

    result = []
    for campaign in campaigns:
        stats = events.get(campaign.id)
        result.append(
            campaign.model_copy(update={
                "referrals": stats.clicks if stats else 0,
                "conversions": stats.conversions if stats else 0,
            })
        )
    return result


def get_campaign(store: KeyValueStore, campaign_id: str) -> Campaign:
    campaign = crud_campaign.get_campaign(store, campaign_id)
    if campaign is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Кампания не найдена.")

    stats = crud_referral.get_campaign_events(store, campaign_id)
    return campaign.model_copy(update={"referrals": stats.clicks, "conversions": stats.conversions})
