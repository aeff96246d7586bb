# sdk/factory.py
# Test data for driving the fixture API and the storefront e2e tests.
import itertools
import time
from typing import Any, Dict, List

FIXTURE_PASSWORD = "TestPassword123!"

_counter = itertools.count(1)


def _stamp() -> str:
    return f"{int(time.time() * 1000)}_{next(_counter)}"


class TestDataFactory:
    __test__ = False  # not a pytest test class

    @staticmethod
    def create_user(**overrides: Any) -> Dict[str, Any]:
        stamp = _stamp()
        user = {
            "id": f"user_{stamp}",
            "email": f"test.user.{stamp}@example.com",
            "firstName": "Test",
            "lastName": "User",
            "password": FIXTURE_PASSWORD,
        }
        user.update(overrides)
        return user

    @staticmethod
    def create_product(**overrides: Any) -> Dict[str, Any]:
        product = {
            "id": f"product_{_stamp()}",
            "name": "Test Product",
            "price": 29.99,
            "description": "A test product for automation testing",
            "category": "Electronics",
            "imageUrl": "https://via.placeholder.com/300x300",
            "inStock": True,
        }
        product.update(overrides)
        return product

    @classmethod
    def get_valid_users(cls) -> List[Dict[str, Any]]:
        return [
            cls.create_user(email="john.doe@example.com", firstName="John", lastName="Doe"),
            cls.create_user(email="jane.smith@example.com", firstName="Jane", lastName="Smith"),
        ]

    @staticmethod
    def get_invalid_users() -> List[Dict[str, str]]:
        return [
            {"email": "invalid-email", "password": "short"},
            {"email": "", "password": ""},
            {"email": "test@example.com", "password": ""},
            {"email": "", "password": "ValidPassword123!"},
        ]

    @classmethod
    def get_test_products(cls) -> List[Dict[str, Any]]:
        return [
            cls.create_product(name="Laptop", price=999.99, category="Electronics"),
            cls.create_product(name="Coffee Mug", price=15.99, category="Home & Kitchen"),
            cls.create_product(name="Running Shoes", price=89.99, category="Sports"),
        ]

    @staticmethod
    def get_search_terms() -> List[str]:
        return ["laptop", "coffee", "shoes", "electronics", "nonexistent-product-xyz"]
