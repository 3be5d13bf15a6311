# app/crud/campaign.py

import logging
from typing import List, Optional

from pydantic import TypeAdapter

from app.core.config import settings
from app.core.storage import KeyValueStore, StorageError
from app.crud.documents import load_list, save_document
from app.schemas.campaign import Campaign, CampaignCreate
from app.utils.ids import build_referral_link, campaigns_key, new_id

logger = logging.getLogger(__name__)

campaigns_adapter = TypeAdapter(List[Campaign])


def list_campaigns(store: KeyValueStore) -> List[Campaign]:
    try:
        return load_list(store, campaigns_key(), Campaign)
    except StorageError:
        logger.error("Failed to read campaigns.", exc_info=True)
        return []


def get_campaign(store: KeyValueStore, campaign_id: str) -> Optional[Campaign]:
    """Находит кампанию по ID."""
    return next((c for c in list_campaigns(store) if c.id == campaign_id), None)


def create_campaign(store: KeyValueStore, data: CampaignCreate, origin: str) -> Optional[Campaign]:
    """
    Создает кампанию. Ссылка вычисляется один раз и сохраняется как есть,
    при смене origin старые ссылки не пересчитываются.
    """
    campaign_id = new_id()
    campaign = Campaign(
        id=campaign_id,
        **data.model_dump(),
        referral_link=build_referral_link(campaign_id, origin),
        referrals=0,
        conversions=0,
        ends_in=settings.CAMPAIGN_DURATION_DAYS,
    )
    try:
        campaigns = load_list(store, campaigns_key(), Campaign)
        campaigns.append(campaign)
        save_document(store, campaigns_key(), campaigns_adapter, campaigns)
    except (StorageError, ValueError):
        logger.error(f"Failed to save campaign '{data.name}'.", exc_info=True)
        return None

    logger.info(f"Created campaign '{campaign.id}' ({campaign.name}, {campaign.discount}%).")
    return campaign
