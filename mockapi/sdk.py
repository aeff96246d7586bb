# mockapi/sdk.py
import logging
import re
from typing import List, Optional

from .config import Settings
from .core import CartItemIn, CartItemUpdateIn, LoginIn, RegisterIn, _missing
from .database import Store
from .errors import AuthenticationError, NotFoundError, ValidationError
from .models import Cart, CartItem, Product, PublicUser, User

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

# This file contains the core logic behind every API endpoint. Each
# function receives the Store it works on; the HTTP layer only maps
# requests onto these calls.


# Auth
def register_logic(store: Store, payload: RegisterIn) -> PublicUser:
    if _missing(payload, ["email", "first_name", "last_name", "password"]):
        raise ValidationError("All fields required")
    with store.lock:
        user = User(
            id=len(store.users) + 1,
            email=payload.email,
            first_name=payload.first_name,
            last_name=payload.last_name,
            password=payload.password,
        )
        store.users.append(user)
    logger.info("registered user %s (id=%d)", user.email, user.id)
    return user.public()


def login_logic(store: Store, settings: Settings, payload: LoginIn) -> dict:
    if _missing(payload, ["email", "password"]):
        raise ValidationError("Email and password required")
    with store.lock:
        user = next((u for u in store.users if u.email == payload.email), None)
    # the fixture never checks the user's own password
    if user is None or payload.password != settings.fixture_password:
        logger.info("rejected login for %s", payload.email)
        raise AuthenticationError("Invalid credentials")
    return {"token": settings.session_token, "user": user.public().to_wire()}


# Products
def _matches(value: str, term: Optional[str]) -> bool:
    return term.lower() in value.lower()


def list_products_logic(store: Store, category: Optional[str] = None,
                        query: Optional[str] = None) -> List[Product]:
    out = list(store.products)
    if category:
        out = [p for p in out if _matches(p.category, category)]
    if query:
        out = [p for p in out if _matches(p.name, query)]
    return out


def search_products_logic(store: Store, query: Optional[str]) -> List[Product]:
    term = query or ""
    return [p for p in store.products if _matches(p.name, term)]


def get_product_logic(store: Store, product_id: str) -> Product:
    # leading integer only, so "1abc" and "1.5" both address product 1
    m = _LEADING_INT.match(product_id)
    if m is None:
        raise NotFoundError("Product not found")
    pid = int(m.group(1))
    for p in store.products:
        if p.id == pid:
            return p
    raise NotFoundError("Product not found")


# Cart
def require_credential(authorization: Optional[str]) -> str:
    if not authorization or not authorization.strip():
        raise AuthenticationError("Authorization required")
    return authorization


def get_cart_logic(store: Store, session: str) -> Cart:
    with store.lock:
        cart = store.carts.get(session)
        return Cart(items=list(cart.items)) if cart is not None else Cart()


def add_item_logic(store: Store, session: str, payload: CartItemIn) -> CartItem:
    item = CartItem(product_id=payload.product_id, quantity=payload.quantity)
    with store.lock:
        cart = store.carts.setdefault(session, Cart())
        # appended, never merged with an existing entry for the same product
        cart.items.append(item)
    logger.debug("cart %s: added product %s x%s", session, item.product_id, item.quantity)
    return item


def update_item_logic(store: Store, session: str, product_id: str,
                      payload: CartItemUpdateIn) -> CartItem:
    with store.lock:
        cart = store.carts.get(session)
        if cart is None:
            raise NotFoundError("Cart not found")
        item = next((i for i in cart.items if i.matches(product_id)), None)
        if item is None:
            raise NotFoundError("Item not found")
        item.quantity = payload.quantity
    logger.debug("cart %s: product %s set to x%s", session, product_id, item.quantity)
    return item


def remove_item_logic(store: Store, session: str, product_id: str) -> None:
    with store.lock:
        cart = store.carts.get(session)
        if cart is None:
            raise NotFoundError("Cart not found")
        cart.items = [i for i in cart.items if not i.matches(product_id)]
    logger.debug("cart %s: removed product %s", session, product_id)


# Utility: reset (for tests/demo)
def reset_all_logic(store: Store) -> dict:
    store.reset()
    logger.info("store reset to seed data")
    return {"status": "reset"}
