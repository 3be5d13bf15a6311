# tests/v1/test_rewards_api.py

import pytest
from httpx import AsyncClient

from app.core.storage import StorageError

pytestmark = pytest.mark.asyncio

REWARD_PAYLOAD = {
    "title": "Thanks for sharing",
    "description": "$10 credit",
    "expiryDate": "12/31/2026",
    "campaignId": "camp0001",
    "type": "referrer",
}


async def test_issue_and_redeem_reward(client: AsyncClient):
    response = await client.post("/api/v1/rewards", json=REWARD_PAYLOAD)
    assert response.status_code == 201
    reward = response.json()
    assert reward["type"] == "referrer"
    assert reward["code"].startswith("REWARD")

    response = await client.post(f"/api/v1/rewards/{reward['id']}/redeem")
    assert response.status_code == 200
    result = response.json()
    assert result["success"] is True
    assert result["reward"]["isRedeemed"] is True
    assert result["reward"]["redeemedAt"] is not None


async def test_filter_rewards_by_status(client: AsyncClient):
    first = (await client.post("/api/v1/rewards", json=REWARD_PAYLOAD)).json()
    second = (await client.post("/api/v1/rewards", json=REWARD_PAYLOAD)).json()
    await client.post(f"/api/v1/rewards/{first['id']}/redeem")

    available = (await client.get("/api/v1/rewards", params={"status": "available"})).json()
    redeemed = (await client.get("/api/v1/rewards", params={"status": "redeemed"})).json()
    everything = (await client.get("/api/v1/rewards")).json()

    assert [r["id"] for r in available] == [second["id"]]
    assert [r["id"] for r in redeemed] == [first["id"]]
    assert len(everything) == 2


async def test_redeem_unknown_reward_reports_success(client: AsyncClient):
    response = await client.post("/api/v1/rewards/unknown/redeem")

    assert response.status_code == 200
    assert response.json() == {"success": True, "reward": None}


async def test_redeem_storage_fault_is_503(client: AsyncClient, store, mocker):
    mocker.patch.object(store, "set", side_effect=StorageError("store is down"))

    response = await client.post("/api/v1/rewards/anything/redeem")

    assert response.status_code == 503
