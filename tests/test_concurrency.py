# tests/test_concurrency.py
import asyncio

import httpx

from sdk import StoreClient


async def _add_task(app, product_id, quantity):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await ac.post("/api/cart/items", json={"productId": product_id, "quantity": quantity},
                             headers={"Authorization": "Bearer mock-jwt-token"})


def test_concurrent_adds_all_land(app, client, auth_headers):
    async def run():
        return await asyncio.gather(*(_add_task(app, 1, n) for n in range(1, 11)))

    results = asyncio.run(run())
    assert [r.status_code for r in results] == [201] * 10

    items = client.get("/api/cart", headers=auth_headers).json()["items"]
    assert len(items) == 10
    assert sorted(i["quantity"] for i in items) == list(range(1, 11))


def test_sdk_async_add(app, client, auth_headers):
    c = StoreClient(base_url="http://test", token="mock-jwt-token")
    transport = httpx.ASGITransport(app=app)

    async def run():
        return await asyncio.gather(
            c.add_to_cart_async(3, 1, transport=transport),
            c.add_to_cart_async(3, 2, transport=transport),
        )

    assert asyncio.run(run()) == [{"productId": 3, "quantity": 1}, {"productId": 3, "quantity": 2}]
    assert len(client.get("/api/cart", headers=auth_headers).json()["items"]) == 2
