from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from storefront.store.cart_store import CartStore

from .cart_contracts import (
    AddCartItemRequest,
    CartResponse,
    CheckoutResponse,
    PatchCartItemRequest,
)

cart_router = APIRouter(prefix="/cart")


def get_cart(request: Request) -> CartStore:
    return request.app.state.cart


Cart = Annotated[CartStore, Depends(get_cart)]


def resolve_id(cart: CartStore, raw: str) -> int | str:
    # path segments are strings, cart ids keep whatever type the product had
    for item in cart.cart_items:
        if str(item.id) == raw:
            return item.id
    return raw


@cart_router.get("/")
async def get_cart_contents(cart: Cart) -> CartResponse:
    return CartResponse.from_store(cart)


@cart_router.post("/items")
async def add_cart_item(info: AddCartItemRequest, cart: Cart) -> CartResponse:
    cart.add_item(info.as_product(), info.quantity)
    return CartResponse.from_store(cart)


@cart_router.patch(
    "/items/{id}",
    responses={
        HTTPStatus.OK: {
            "description": "Quantity updated; zero or less removes the item, unknown ids are ignored",
        },
    },
)
async def patch_cart_item(id: str, info: PatchCartItemRequest, cart: Cart) -> CartResponse:
    cart.update_quantity(resolve_id(cart, id), info.quantity)
    return CartResponse.from_store(cart)


@cart_router.delete("/items/{id}")
async def delete_cart_item(id: str, cart: Cart) -> CartResponse:
    cart.remove_item(resolve_id(cart, id))
    return CartResponse.from_store(cart)


@cart_router.post(
    "/checkout",
    responses={
        HTTPStatus.OK: {
            "description": "Checkout handed off to the first product in the cart",
        },
        HTTPStatus.NO_CONTENT: {
            "description": "Cart is empty, nothing to check out",
        },
    },
    response_model=CheckoutResponse,
)
async def checkout(cart: Cart, response: Response):
    intent = cart.proceed_to_checkout()

    if intent is None:
        return Response(status_code=HTTPStatus.NO_CONTENT)

    response.headers["location"] = intent.path
    return CheckoutResponse.from_intent(intent)
