import asyncio

from sdk import FIXTURE_PASSWORD, StoreClient


async def main():
    c = StoreClient()
    c.reset()
    c.login("john.doe@example.com", FIXTURE_PASSWORD)

    print("\n⚡ Adding the same product from five concurrent clients...")
    await asyncio.gather(*(c.add_to_cart_async(2, n) for n in range(1, 6)))

    # every caller shares one cart and lines are never merged
    cart = c.get_cart()
    print(f"🛒 {len(cart['items'])} cart lines:", cart["items"])


if __name__ == "__main__":
    asyncio.run(main())
