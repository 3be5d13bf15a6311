# app/crud/reward.py

import logging
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import TypeAdapter

from app.core.storage import KeyValueStore, StorageError
from app.crud.documents import load_list, save_document
from app.schemas.reward import Reward, RewardCreate
from app.utils.ids import new_id, new_reward_code, rewards_key

logger = logging.getLogger(__name__)

rewards_adapter = TypeAdapter(List[Reward])


def create_reward(store: KeyValueStore, fields: RewardCreate) -> Optional[Reward]:
    """Создает награду и дописывает ее в конец списка. None - при сбое хранилища."""
    try:
        rewards = load_list(store, rewards_key(), Reward)
        reward = Reward(
            id=new_id(),
            code=new_reward_code(),
            **fields.model_dump(),
            created_at=datetime.now(timezone.utc),
            is_redeemed=False,
        )
        rewards.append(reward)
        save_document(store, rewards_key(), rewards_adapter, rewards)
    except (StorageError, ValueError):
        logger.error(f"Failed to save reward for campaign '{fields.campaign_id}'.", exc_info=True)
        return None

    logger.info(f"Created {reward.type} reward '{reward.id}' with code '{reward.code}' for campaign '{reward.campaign_id}'.")
    return reward


def list_rewards(store: KeyValueStore) -> List[Reward]:
    try:
        return load_list(store, rewards_key(), Reward)
    except StorageError:
        logger.error("Failed to read rewards.", exc_info=True)
        return []


def get_reward(store: KeyValueStore, reward_id: str) -> Optional[Reward]:
    return next((r for r in list_rewards(store) if r.id == reward_id), None)


def redeem_reward(store: KeyValueStore, reward_id: str) -> bool:
    """
    Помечает награду использованной.
    Предыдущее состояние не проверяется: повторный вызов заново проставит redeemed_at.
    Если награды с таким id нет, список просто перезаписывается без изменений.
    """
    try:
        rewards = load_list(store, rewards_key(), Reward)
        now = datetime.now(timezone.utc)
        updated = [
            r.model_copy(update={"is_redeemed": True, "redeemed_at": now}) if r.id == reward_id else r
            for r in rewards
        ]
        save_document(store, rewards_key(), rewards_adapter, updated)
    except (StorageError, ValueError):
        logger.error(f"Failed to redeem reward '{reward_id}'.", exc_info=True)
        return False

    if any(r.id == reward_id for r in rewards):
        logger.info(f"Reward '{reward_id}' redeemed.")
    else:
        logger.info(f"Redeem requested for unknown reward '{reward_id}'. Nothing changed.")
    return True
