# app/schemas/reward.py

from datetime import datetime
from typing import Literal, Optional
from pydantic import Field

from app.schemas.common import CamelModel

RewardType = Literal["referred", "referrer"]


class RewardCreate(CamelModel):
    """Поля награды, которые задает вызывающий код."""
    title: str
    description: str = ""
    expiry_date: str = Field(..., description="Дата окончания в виде строки для отображения")
    campaign_id: str
    type: RewardType = "referred"


class Reward(RewardCreate):
    id: str
    code: str
    created_at: datetime
    is_redeemed: bool = False
    redeemed_at: Optional[datetime] = None


class RedeemResult(CamelModel):
    success: bool
    reward: Optional[Reward] = None
