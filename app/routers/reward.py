# app/routers/reward.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status

from app.core.storage import KeyValueStore
from app.dependencies import get_store
from app.schemas.reward import RedeemResult, Reward, RewardCreate
from app.services import reward as reward_service
from app.services.reward import RewardFilter

router = APIRouter()


@router.get("/rewards", response_model=List[Reward])
def list_rewards(
    status_filter: Optional[RewardFilter] = Query(None, alias="status"),
    store: KeyValueStore = Depends(get_store),
):
    """Награды пользователя. status=available|redeemed фильтрует список."""
    return reward_service.list_rewards(store, status_filter)


@router.post("/rewards", response_model=Reward, status_code=status.HTTP_201_CREATED)
def issue_reward(reward_data: RewardCreate, store: KeyValueStore = Depends(get_store)):
    return reward_service.issue_reward(store, reward_data)


@router.post("/rewards/{reward_id}/redeem", response_model=RedeemResult)
def redeem_reward(reward_id: str, store: KeyValueStore = Depends(get_store)):
    return reward_service.redeem_reward(store, reward_id)
