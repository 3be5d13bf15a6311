# app/schemas/referral.py

from datetime import datetime
from typing import List, Optional
from pydantic import EmailStr, Field

from app.schemas.common import CamelModel
from app.schemas.campaign import Campaign
from app.schemas.reward import Reward


class ReferredUser(CamelModel):
    email: Optional[str] = None
    date: Optional[datetime] = None  # в старых записях даты может не быть


class ReferralEventRecord(CamelModel):
    clicks: int = 0       # Сколько раз открыли ссылку
    conversions: int = 0  # Сколько раз оставили email
    users: List[ReferredUser] = Field(default_factory=list)


class ReferralOutcome(CamelModel):
    """Результат перехода по ссылке."""
    email: Optional[str] = None
    converted: bool = False


class ReferralClaimRequest(CamelModel):
    email: EmailStr


class ReferralLanding(CamelModel):
    """Данные для страницы, на которую ведет реферальная ссылка."""
    campaign: Campaign


class ReferralClaimResult(CamelModel):
    campaign_id: str
    discount: int
    reward: Reward
