# app/crud/referral.py

import logging
from datetime import datetime, timezone
from typing import Dict

from pydantic import TypeAdapter

from app.core.storage import KeyValueStore, StorageError
from app.crud.documents import load_mapping, save_document
from app.schemas.referral import ReferralEventRecord, ReferralOutcome, ReferredUser
from app.utils.ids import referrals_key

logger = logging.getLogger(__name__)

ReferralEvents = Dict[str, ReferralEventRecord]
events_adapter = TypeAdapter(ReferralEvents)


def record_referral_click(store: KeyValueStore, campaign_id: str, outcome: ReferralOutcome) -> bool:
    """
    Учитывает переход по реферальной ссылке.
    Клик засчитывается всегда, конверсия и email - только при outcome.converted.
    Возвращает False только при сбое хранилища или сериализации.
    """
    if not campaign_id:
        logger.warning("Refusing to record referral click without campaign id.")
        return False

    try:
        events = load_mapping(store, referrals_key(), ReferralEventRecord)

        record = events.setdefault(campaign_id, ReferralEventRecord())
        record.clicks += 1

        if outcome.converted:
            record.conversions += 1
            record.users.append(ReferredUser(email=outcome.email, date=datetime.now(timezone.utc)))

        save_document(store, referrals_key(), events_adapter, events)
    except (StorageError, ValueError):
        logger.error(f"Failed to record referral click for campaign '{campaign_id}'.", exc_info=True)
        return False

    logger.info(
        f"Recorded referral click for campaign '{campaign_id}' "
        f"(converted={outcome.converted}, clicks={record.clicks}, conversions={record.conversions})."
    )
    return True


def read_referral_events(store: KeyValueStore) -> ReferralEvents:
    """Все записи переходов по кампаниям. При любом сбое - пустой словарь."""
    try:
        return load_mapping(store, referrals_key(), ReferralEventRecord)
    except StorageError:
        logger.error("Failed to read referral events.", exc_info=True)
        return {}


def get_campaign_events(store: KeyValueStore, campaign_id: str) -> ReferralEventRecord:
    """Запись переходов одной кампании или нулевая запись."""
    return read_referral_events(store).get(campaign_id) or ReferralEventRecord()
