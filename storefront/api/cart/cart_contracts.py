from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, NonNegativeFloat, PositiveInt

from storefront.store.cart_models import CartItem, NavigationIntent
from storefront.store.cart_store import CartStore
from storefront.store.product_models import Product


class CartItemResponse(BaseModel):
    id: int | str
    name: str
    image: str
    price: float
    quantity: int
    line_total: float

    @staticmethod
    def from_cart_item(item: CartItem) -> CartItemResponse:
        return CartItemResponse(
            id=item.id,
            name=item.name,
            image=item.image,
            price=item.price,
            quantity=item.quantity,
            line_total=item.line_total,
        )


class CartResponse(BaseModel):
    items: List[CartItemResponse]
    count: int
    total: float

    @staticmethod
    def from_store(store: CartStore) -> CartResponse:
        return CartResponse(
            items=[CartItemResponse.from_cart_item(item) for item in store.cart_items],
            count=store.cart_count,
            total=store.cart_total,
        )


class AddCartItemRequest(BaseModel):
    id: int | str
    name: str
    price: NonNegativeFloat
    image: str | None = None
    gallery: List[str] = []
    quantity: PositiveInt = 1

    def as_product(self) -> Product:
        return Product(
            id=self.id,
            name=self.name,
            price=self.price,
            image=self.image,
            gallery=list(self.gallery),
        )


class PatchCartItemRequest(BaseModel):
    quantity: int

    model_config = ConfigDict(extra="forbid")


class CheckoutResponse(BaseModel):
    product_id: int | str
    source: str

    @staticmethod
    def from_intent(intent: NavigationIntent) -> CheckoutResponse:
        return CheckoutResponse(product_id=intent.product_id, source=intent.provenance)
