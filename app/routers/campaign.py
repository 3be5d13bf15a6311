# app/routers/campaign.py

from typing import List
from fastapi import APIRouter, Depends, status

from app.core.storage import KeyValueStore
from app.dependencies import get_store
from app.schemas.campaign import Campaign, CampaignCreate
from app.services import campaign as campaign_service

router = APIRouter()


@router.get("/campaigns", response_model=List[Campaign])
def list_campaigns(store: KeyValueStore = Depends(get_store)):
    """Все кампании с актуальными счетчиками переходов и конверсий."""
    return campaign_service.list_campaigns(store)


@router.post("/campaigns", response_model=Campaign, status_code=status.HTTP_201_CREATED)
def create_campaign(
    campaign_data: CampaignCreate,
    store: KeyValueStore = Depends(get_store),
):
    return campaign_service.create_campaign(store, campaign_data)


@router.get("/campaigns/{campaign_id}", response_model=Campaign)
def get_campaign(campaign_id: str, store: KeyValueStore = Depends(get_store)):
    return campaign_service.get_campaign(store, campaign_id)
