# mockapi/database.py
# In-memory data store owned by one app instance. Nothing is persisted;
# a new Store (or reset()) starts from the seed data below.
import threading
from typing import Dict, List

from .models import Cart, Product, User

SEED_USERS = [
    {"id": 1, "email": "john.doe@example.com", "first_name": "John", "last_name": "Doe"},
    {"id": 2, "email": "jane.smith@example.com", "first_name": "Jane", "last_name": "Smith"},
]

SEED_PRODUCTS = [
    {"id": 1, "name": "Laptop", "price": 999.99, "category": "Electronics", "in_stock": True},
    {"id": 2, "name": "Coffee Mug", "price": 15.99, "category": "Home & Kitchen", "in_stock": True},
    {"id": 3, "name": "Running Shoes", "price": 89.99, "category": "Sports", "in_stock": True},
]


class Store:
    def __init__(self):
        self.lock = threading.RLock()
        self.users: List[User] = []
        self.products: List[Product] = []
        self.carts: Dict[str, Cart] = {}
        self.reset()

    def reset(self):
        with self.lock:
            self.users = [User(**u) for u in SEED_USERS]
            self.products = [Product(**p) for p in SEED_PRODUCTS]
            self.carts = {}
