# tests/v1/test_referral_api.py

import pytest
from httpx import AsyncClient

from app.crud import referral as crud_referral
from app.crud import user_info as crud_user_info

pytestmark = pytest.mark.asyncio


async def create_campaign(client: AsyncClient, discount: int = 20) -> dict:
    response = await client.post("/api/v1/campaigns", json={"name": "Friends", "discount": discount, "message": "Hi!"})
    return response.json()


async def test_open_link_records_click_and_returns_campaign(client: AsyncClient, store):
    campaign = await create_campaign(client)

    response = await client.get("/api/v1/referral", params={"id": campaign["id"]})

    assert response.status_code == 200
    assert response.json()["campaign"]["message"] == "Hi!"
    record = crud_referral.read_referral_events(store)[campaign["id"]]
    assert (record.clicks, record.conversions) == (1, 0)


async def test_open_link_for_unknown_campaign_still_counts_click(client: AsyncClient, store):
    response = await client.get("/api/v1/referral", params={"id": "ghost"})

    assert response.status_code == 404
    assert crud_referral.read_referral_events(store)["ghost"].clicks == 1


async def test_open_link_without_id(client: AsyncClient, store):
    response = await client.get("/api/v1/referral")

    assert response.status_code == 404
    assert crud_referral.read_referral_events(store) == {}


async def test_claim_discount_issues_referred_reward(client: AsyncClient, store):
    campaign = await create_campaign(client, discount=25)
    await client.get("/api/v1/referral", params={"id": campaign["id"]})

    response = await client.post(f"/api/v1/referral/{campaign['id']}/claim", json={"email": "friend@gmail.com"})

    assert response.status_code == 200
    data = response.json()
    assert data["discount"] == 25
    assert data["reward"]["title"] == "25% Discount"
    assert data["reward"]["description"] == "25% off your next purchase"
    assert data["reward"]["type"] == "referred"
    assert data["reward"]["isRedeemed"] is False

    # Конверсия идет через тот же счетчик, поэтому кликов становится два
    record = crud_referral.read_referral_events(store)[campaign["id"]]
    assert (record.clicks, record.conversions) == (2, 1)
    assert record.users[0].email == "friend@gmail.com"
    assert crud_user_info.read_user_info(store).email == "friend@gmail.com"


async def test_claim_for_unknown_campaign(client: AsyncClient, store):
    response = await client.post("/api/v1/referral/ghost/claim", json={"email": "friend@gmail.com"})

    assert response.status_code == 404
    assert crud_referral.read_referral_events(store) == {}


async def test_claim_requires_valid_email(client: AsyncClient):
    campaign = await create_campaign(client)

    response = await client.post(f"/api/v1/referral/{campaign['id']}/claim", json={"email": "not-an-email"})

    assert response.status_code == 422
