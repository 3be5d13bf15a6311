# app/utils/ids.py

import secrets
import string

from app.core.config import settings

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 8


def new_id() -> str:
    """Короткий случайный идентификатор из 8 символов [a-z0-9]."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


def new_reward_code() -> str:
    # Уникальность не проверяется
    return f"REWARD{secrets.randbelow(10000)}"


def build_referral_link(campaign_id: str, origin: str | None = None) -> str:
    """Ссылка вида <origin>/referral?id=<campaign_id>."""
    base = (origin or settings.PUBLIC_ORIGIN).rstrip("/")
    return f"{base}/referral?id={campaign_id}"


def campaigns_key() -> str:
    return settings.storage_key(settings.CAMPAIGNS_KEY)


def referrals_key() -> str:
    return settings.storage_key(settings.REFERRALS_KEY)


def rewards_key() -> str:
    return settings.storage_key(settings.REWARDS_KEY)


def user_info_key() -> str:
    return settings.storage_key(settings.USER_INFO_KEY)
