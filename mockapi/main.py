# mockapi/main.py
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, FastAPI, Header, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings
from .core import CartItemIn, CartItemUpdateIn, LoginIn, RegisterIn
from .database import Store
from .errors import FixtureApiError
from .sdk import (
    add_item_logic, get_cart_logic, get_product_logic, list_products_logic,
    login_logic, register_logic, remove_item_logic, require_credential,
    reset_all_logic, search_products_logic, update_item_logic,
)

logger = logging.getLogger(__name__)


# ---------------------------
# Dependencies
# ---------------------------
def get_store(request: Request) -> Store:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session(request: Request, authorization: Optional[str] = Header(None)) -> str:
    """Bearer-presence check; the credential itself is never inspected.

    Every caller is mapped onto the configured shared session, so all
    authenticated clients see the same cart.
    """
    require_credential(authorization)
    return request.app.state.settings.shared_session


# ---------------------------
# App factory
# ---------------------------
def create_app(store: Optional[Store] = None, settings: Optional[Settings] = None) -> FastAPI:
    app = FastAPI(title="storefront fixture api (in-memory mock)")
    app.state.store = store if store is not None else Store()
    app.state.settings = settings if settings is not None else Settings.from_env()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(FixtureApiError)
    async def fixture_error_handler(request: Request, exc: FixtureApiError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def body_error_handler(request: Request, exc: RequestValidationError):
        logger.debug("rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    # ---------------------------
    # Auth endpoints
    # ---------------------------
    @app.post("/api/auth/login")
    async def login(payload: LoginIn, store: Store = Depends(get_store),
                    settings: Settings = Depends(get_settings)):
        return login_logic(store, settings, payload)

    @app.post("/api/auth/register", status_code=201)
    async def register(payload: RegisterIn, store: Store = Depends(get_store)):
        return register_logic(store, payload).to_wire()

    # ---------------------------
    # Product endpoints
    # ---------------------------
    @app.get("/api/products")
    async def list_products(category: Optional[str] = None, q: Optional[str] = None,
                            store: Store = Depends(get_store)):
        return [p.to_wire() for p in list_products_logic(store, category, q)]

    @app.get("/api/products/search")
    async def search_products(q: Optional[str] = None, store: Store = Depends(get_store)):
        return [p.to_wire() for p in search_products_logic(store, q)]

    @app.get("/api/products/{product_id}")
    async def get_product(product_id: str, store: Store = Depends(get_store)):
        return get_product_logic(store, product_id).to_wire()

    # ---------------------------
    # Cart endpoints
    # ---------------------------
    @app.get("/api/cart")
    async def view_cart(session: str = Depends(get_session), store: Store = Depends(get_store)):
        return get_cart_logic(store, session).to_wire()

    @app.post("/api/cart/items", status_code=201)
    async def cart_add(payload: Optional[CartItemIn] = None, session: str = Depends(get_session),
                       store: Store = Depends(get_store)):
        payload = payload if payload is not None else CartItemIn()
        return add_item_logic(store, session, payload).to_wire()

    @app.put("/api/cart/items/{product_id}")
    async def cart_update(product_id: str, payload: Optional[CartItemUpdateIn] = None,
                          session: str = Depends(get_session), store: Store = Depends(get_store)):
        payload = payload if payload is not None else CartItemUpdateIn()
        return update_item_logic(store, session, product_id, payload).to_wire()

    @app.delete("/api/cart/items/{product_id}", status_code=204)
    async def cart_remove(product_id: str, session: str = Depends(get_session),
                          store: Store = Depends(get_store)):
        remove_item_logic(store, session, product_id)
        return Response(status_code=204)

    # ---------------------------
    # Health / utility
    # ---------------------------
    @app.get("/health")
    async def health():
        return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.post("/reset")
    async def reset_all(store: Store = Depends(get_store)):
        return reset_all_logic(store)

    return app


app = create_app()
