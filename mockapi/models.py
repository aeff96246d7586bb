# mockapi/models.py
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class PublicUser(CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str


class User(PublicUser):
    password: Optional[str] = None

    def public(self) -> PublicUser:
        return PublicUser(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
        )


class Product(CamelModel):
    id: int
    name: str
    price: float
    category: str
    in_stock: bool = True


class CartItem(CamelModel):
    # stored exactly as submitted; not checked against the catalog
    product_id: Any = None
    quantity: Any = None

    def matches(self, product_id: str) -> bool:
        return str(self.product_id) == product_id


class Cart(CamelModel):
    items: List[CartItem] = []
