# app/schemas/campaign.py

from typing import Literal
from pydantic import Field

from app.schemas.common import CamelModel

CampaignStatus = Literal["active", "draft", "completed"]


class CampaignCreate(CamelModel):
    """Тело запроса на создание кампании."""
    name: str = Field(..., min_length=2, description="Название кампании, минимум 2 символа")
    discount: int = Field(..., ge=1, le=100, description="Скидка в процентах, от 1 до 100")
    message: str = Field("", max_length=200, description="Сообщение для приглашенных, до 200 символов")
    status: CampaignStatus = "active"


class Campaign(CamelModel):
    """
    Кампания в том виде, в котором она лежит в хранилище.
    referrals/conversions - кеш, который перезаписывается из записи переходов при чтении.
    """
    id: str
    name: str
    discount: int
    message: str = ""
    status: CampaignStatus = "active"
    referral_link: str
    referrals: int = 0
    conversions: int = 0
    ends_in: int = 30
