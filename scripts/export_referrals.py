# scripts/export_referrals.py

import csv
import logging

from app.core.storage import KeyValueStore
from app.crud import referral as crud_referral
from app.dependencies import get_store_instance
from app.services.analytics import compute_analytics

# Настройка логирования
logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)

REFERRED_USERS_CSV_PATH = 'referred_users.csv'

def export_referred_users(store: KeyValueStore, path: str = REFERRED_USERS_CSV_PATH) -> int:
    """
    Выгружает всех приглашенных пользователей (email и дату конверсии) в CSV.
    Возвращает количество записанных строк.
    """
    events = crud_referral.read_referral_events(store)
    rows = 0
    with open(path, mode='w', encoding='utf-8', newline='') as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(['campaign_id', 'email', 'date'])
        for campaign_id, record in events.items():
            for user in record.users:
                writer.writerow([campaign_id, user.email or '', user.date.isoformat() if user.date else ''])
                rows += 1
    logger.info(f"Exported {rows} referred users from {len(events)} campaigns to {path}.")
    return rows

def print_report(store: KeyValueStore):
    analytics = compute_analytics(store)

    print("\n" + "="*50)
    print(" " * 15 + "ОТЧЕТ ПО РЕФЕРАЛАМ")
    print("="*50 + "\n")
    print(f"   - Переходов по ссылкам: {analytics.total_clicks}")
    print(f"   - Конверсий: {analytics.total_conversions} ({analytics.conversion_rate})")
    print(f"   - Наград выдано / использовано: {analytics.total_rewards} / {analytics.redeemed_rewards}\n")
    for item in analytics.campaign_data:
        print(f"   {item.id}: {item.clicks} кликов, {item.conversions} конверсий, {item.conversion_rate}")

if __name__ == "__main__":
    store = get_store_instance()
    print_report(store)
    export_referred_users(store)
