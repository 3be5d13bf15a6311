# app/services/analytics.py

import logging
from decimal import Decimal, ROUND_HALF_UP

from app.core.storage import KeyValueStore
from app.crud import campaign as crud_campaign
from app.crud import referral as crud_referral
from app.crud import reward as crud_reward
from app.schemas.analytics import Analytics, CampaignAnalytics

logger = logging.getLogger(__name__)

UNKNOWN_CAMPAIGN_NAME = "Unknown Campaign"


def format_conversion_rate(conversions: int, clicks: int) -> str:
    """
    Конверсия в процентах с одним знаком после запятой. При нуле кликов - '0%'.
    Половина округляется вверх: 1 из 80 -> '1.3%'.
    """
    if not clicks:
        return "0%"
    rate = Decimal(conversions / clicks * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rate}%"


def compute_analytics(store: KeyValueStore) -> Analytics:
    """
    Собирает сводную статистику по переходам и наградам.
    Ничего не кеширует: при каждом вызове документы читаются заново.
    """
    events = crud_referral.read_referral_events(store)
    names = {c.id: c.name for c in crud_campaign.list_campaigns(store)}

    total_clicks = 0
    total_conversions = 0
    campaign_data = []

    for campaign_id, record in events.items():
        total_clicks += record.clicks
        total_conversions += record.conversions
        campaign_data.append(
            CampaignAnalytics(
                id=campaign_id,
                name=names.get(campaign_id, UNKNOWN_CAMPAIGN_NAME),
                clicks=record.clicks,
                conversions=record.conversions,
                conversion_rate=format_conversion_rate(record.conversions, record.clicks),
            )
        )

    rewards = crud_reward.list_rewards(store)
    redeemed = sum(1 for r in rewards if r.is_redeemed)

    logger.debug(f"Analytics computed over {len(events)} campaigns and {len(rewards)} rewards.")

    return Analytics(
        total_clicks=total_clicks,
        total_conversions=total_conversions,
        total_rewards=len(rewards),
        redeemed_rewards=redeemed,
        conversion_rate=format_conversion_rate(total_conversions, total_clicks),
        campaign_data=campaign_data,
    )
