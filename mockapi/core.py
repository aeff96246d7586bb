# mockapi/core.py
# Request bodies. Every field is optional at the schema level so that
# absent, empty or non-text values are reported by the handlers as
# ValidationError.
from typing import Any, List

from pydantic import BaseModel

from .models import CamelModel


class LoginIn(CamelModel):
    email: Any = None
    password: Any = None


class RegisterIn(CamelModel):
    email: Any = None
    first_name: Any = None
    last_name: Any = None
    password: Any = None


# Cart bodies keep whatever JSON values the caller sent.
class CartItemIn(CamelModel):
    product_id: Any = None
    quantity: Any = None


class CartItemUpdateIn(BaseModel):
    quantity: Any = None


def _missing(payload: BaseModel, fields: List[str]) -> List[str]:
    missing = []
    for f in fields:
        value = getattr(payload, f)
        if not isinstance(value, str) or not value:
            missing.append(f)
    return missing
