# app/services/reward.py

import logging
from typing import List, Literal, Optional

from fastapi import HTTPException, status

from app.core.storage import KeyValueStore
from app.crud import reward as crud_reward
from app.schemas.reward import RedeemResult, Reward, RewardCreate

logger = logging.getLogger(__name__)

RewardFilter = Literal["available", "redeemed"]


def list_rewards(store: KeyValueStore, status_filter: Optional[RewardFilter] = None) -> List[Reward]:
    rewards = crud_reward.list_rewards(store)
    if status_filter == "available":
        return [r for r in rewards if not r.is_redeemed]
    if status_filter == "redeemed":
        return [r for r in rewards if r.is_redeemed]
    return rewards


def issue_reward(store: KeyValueStore, data: RewardCreate) -> Reward:
    """Выдает награду напрямую, в том числе пригласившему (type='referrer')."""
    reward = crud_reward.create_reward(store, data)
    if reward is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Не удалось сохранить награду. Попробуйте позже.",
        )
    return reward


def redeem_reward(store: KeyValueStore, reward_id: str) -> RedeemResult:
    # Проверки "уже использована" нет, как и в хранилище
    if not crud_reward.redeem_reward(store, reward_id):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Не удалось использовать награду. Попробуйте позже.",
        )
    return RedeemResult(success=True, reward=crud_reward.get_reward(store, reward_id))
