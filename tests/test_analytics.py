# tests/test_analytics.py

import json

from app.crud import campaign as crud_campaign
from app.crud import referral as crud_referral
from app.crud import reward as crud_reward
from app.schemas.campaign import CampaignCreate
from app.schemas.referral import ReferralOutcome
from app.schemas.reward import RewardCreate
from app.services.analytics import compute_analytics, format_conversion_rate
from app.utils.ids import referrals_key


def test_empty_store(store):
    result = compute_analytics(store)

    assert result.model_dump(by_alias=True) == {
        "totalClicks": 0,
        "totalConversions": 0,
        "totalRewards": 0,
        "redeemedRewards": 0,
        "conversionRate": "0%",
        "campaignData": [],
    }


def test_per_campaign_rate(store):
    store.set(referrals_key(), json.dumps({"c1": {"clicks": 4, "conversions": 1, "users": []}}))

    result = compute_analytics(store)

    assert result.campaign_data[0].conversion_rate == "25.0%"
    assert result.conversion_rate == "25.0%"


def test_zero_clicks_campaign_rate_is_zero_percent(store):
    store.set(referrals_key(), json.dumps({"c1": {"clicks": 0, "conversions": 0, "users": []}}))

    assert compute_analytics(store).campaign_data[0].conversion_rate == "0%"


def test_totals_and_rewards(store):
    crud_referral.record_referral_click(store, "c1", ReferralOutcome())
    crud_referral.record_referral_click(store, "c1", ReferralOutcome(converted=True, email="a@b.com"))
    crud_referral.record_referral_click(store, "c2", ReferralOutcome())

    fields = RewardCreate(title="5% Discount", expiry_date="1/1/2027", campaign_id="c1")
    first = crud_reward.create_reward(store, fields)
    crud_reward.create_reward(store, fields)
    crud_reward.redeem_reward(store, first.id)

    result = compute_analytics(store)

    assert result.total_clicks == 3
    assert result.total_conversions == 1
    assert result.total_rewards == 2
    assert result.redeemed_rewards == 1
    assert result.conversion_rate == "33.3%"
    assert [(c.id, c.clicks, c.conversions) for c in result.campaign_data] == [("c1", 2, 1), ("c2", 1, 0)]


def test_is_idempotent(store):
    crud_referral.record_referral_click(store, "c1", ReferralOutcome(converted=True, email="a@b.com"))

    assert compute_analytics(store) == compute_analytics(store)


def test_format_conversion_rate():
    assert format_conversion_rate(0, 0) == "0%"
    assert format_conversion_rate(1, 3) == "33.3%"
    assert format_conversion_rate(2, 2) == "100.0%"


def test_rate_rounds_half_up():
    assert format_conversion_rate(1, 80) == "1.3%"
    assert format_conversion_rate(5, 400) == "1.3%"
    assert format_conversion_rate(0, 5) == "0.0%"


def test_tie_rate_in_campaign_data(store):
    store.set(referrals_key(), json.dumps({"c1": {"clicks": 80, "conversions": 1, "users": []}}))

    result = compute_analytics(store)

    assert result.campaign_data[0].conversion_rate == "1.3%"
    assert result.conversion_rate == "1.3%"


def test_campaign_names_are_joined(store):
    campaign = crud_campaign.create_campaign(store, CampaignCreate(name="Spring sale", discount=10), origin="https://shop.test")
    crud_referral.record_referral_click(store, campaign.id, ReferralOutcome())
    crud_referral.record_referral_click(store, "deleted", ReferralOutcome())

    names = {c.id: c.name for c in compute_analytics(store).campaign_data}

    assert names == {campaign.id: "Spring sale", "deleted": "Unknown Campaign"}
