# app/schemas/analytics.py
from typing import List
from pydantic import Field

from app.schemas.common import CamelModel


class CampaignAnalytics(CamelModel):
    id: str
    name: str = "Unknown Campaign"  # Название кампании или заглушка, если кампании нет
    clicks: int
    conversions: int
    conversion_rate: str  # "25.0%" или "0%"


class Analytics(CamelModel):
    total_clicks: int = 0
    total_conversions: int = 0
    total_rewards: int = 0
    redeemed_rewards: int = 0
    conversion_rate: str = "0%"
    campaign_data: List[CampaignAnalytics] = Field(default_factory=list)
