#!/usr/bin/env python
from sdk import FIXTURE_PASSWORD, StoreApiError, StoreClient


def main():
    c = StoreClient()

    # -----------------------------
    # Reset everything for demo
    # -----------------------------
    print("Resetting store...")
    print(c.reset())
    print(c.health())

    # -----------------------------
    # Register and login
    # -----------------------------
    print("\nRegistering user...")
    user = c.register("demo@example.com", "Demo", "User", "whatever-i-like")
    print(user)

    print("\nLogging in with the registered password (rejected)...")
    try:
        c.login("demo@example.com", "whatever-i-like")
    except StoreApiError as e:
        print(e)

    print("\nLogging in with the fixture password...")
    print(c.login("demo@example.com", FIXTURE_PASSWORD))

    # -----------------------------
    # Catalog
    # -----------------------------
    print("\nListing electronics...")
    print(c.list_products(category="electronics"))

    print("\nSearching for 'mug'...")
    print(c.search_products("mug"))

    # -----------------------------
    # Cart
    # -----------------------------
    print("\nAdding product 1 twice (kept as two lines)...")
    c.add_to_cart(1, 1)
    c.add_to_cart(1, 2)
    print(c.get_cart())

    print("\nUpdating product 1 quantity to 5...")
    print(c.update_cart_item(1, 5))

    print("\nRemoving product 1...")
    c.remove_from_cart(1)
    print(c.get_cart())


if __name__ == "__main__":
    main()
