# app/services/referral.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import HTTPException, status

from app.core.config import settings
from app.core.storage import KeyValueStore
from app.crud import campaign as crud_campaign
from app.crud import referral as crud_referral
from app.crud import reward as crud_reward
from app.crud import user_info as crud_user_info
from app.schemas.campaign import Campaign
from app.schemas.referral import ReferralClaimResult, ReferralOutcome
from app.schemas.reward import RewardCreate

logger = logging.getLogger(__name__)

INVALID_LINK_DETAIL = "Реферальная ссылка недействительна или устарела."


def format_expiry_date(moment: datetime) -> str:
    """Дата окончания для отображения, в формате M/D/YYYY."""
    return f"{moment.month}/{moment.day}/{moment.year}"


def visit_referral_link(store: KeyValueStore, campaign_id: Optional[str]) -> Campaign:
    """
    Обрабатывает открытие реферальной ссылки.
    Клик учитывается до поиска кампании, поэтому засчитывается даже для несуществующих ID.
    """
    if not campaign_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=INVALID_LINK_DETAIL)

    if not crud_referral.record_referral_click(store, campaign_id, ReferralOutcome(converted=False)):
        # Сбой учета клика не мешает показать страницу
        logger.warning(f"Click for campaign '{campaign_id}' was not recorded.")

    campaign = crud_campaign.get_campaign(store, campaign_id)
    if campaign is None:
        logger.info(f"Referral link opened for unknown campaign '{campaign_id}'.")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=INVALID_LINK_DETAIL)
    return campaign


def claim_discount(store: KeyValueStore, campaign_id: str, email: str) -> ReferralClaimResult:
    """
    Приглашенный пользователь оставляет email и получает скидку.
    Конверсия записывается через тот же счетчик, поэтому clicks тоже растет.
    """
    campaign = crud_campaign.get_campaign(store, campaign_id)
    if campaign is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=INVALID_LINK_DETAIL)

    crud_user_info.save_user_info(store, email)
    crud_referral.record_referral_click(store, campaign_id, ReferralOutcome(email=email, converted=True))

    # Награда для пригласившего здесь не создается: его личность неизвестна
    expires = datetime.now(timezone.utc) + timedelta(days=settings.REWARD_VALIDITY_DAYS)
    reward = crud_reward.create_reward(
        store,
        RewardCreate(
            title=f"{campaign.discount}% Discount",
            description=f"{campaign.discount}% off your next purchase",
            expiry_date=format_expiry_date(expires),
            campaign_id=campaign_id,
            type="referred",
        ),
    )
    if reward is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Не удалось сохранить награду. Попробуйте позже.",
        )

    logger.info(f"Discount claimed for campaign '{campaign_id}', reward '{reward.id}' issued.")
    return ReferralClaimResult(campaign_id=campaign_id, discount=campaign.discount, reward=reward)
