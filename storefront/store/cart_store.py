"""In-memory cart aggregate.

One ``CartStore`` is built at application start and handed to every consumer
that reads or mutates the cart. Every mutation is synchronous and total:
unknown ids are ignored rather than raised, and so are non-positive
quantities passed to ``add_item``.

Zero-quantity policy: driving an item's quantity to zero (or below) through
``update_quantity`` removes the item from the cart.
"""
import logging
from dataclasses import replace
from typing import Iterable, List, Tuple

from storefront.store.cart_models import CartItem, NavigationIntent
from storefront.store.product_models import Product, pick_image

logger = logging.getLogger(__name__)


class CartStore:
    def __init__(self, items: Iterable[CartItem] = ()) -> None:
        self._items: List[CartItem] = []
        for item in items:
            if item.quantity >= 1 and self._find(item.id) is None:
                self._items.append(replace(item))

    def _find(self, id: int | str) -> CartItem | None:
        for item in self._items:
            if item.id == id:
                return item
        return None

    @property
    def cart_items(self) -> Tuple[CartItem, ...]:
        return tuple(replace(item) for item in self._items)

    @property
    def cart_count(self) -> int:
        return sum(item.quantity for item in self._items)

    @property
    def cart_total(self) -> float:
        return sum(item.line_total for item in self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def add_item(self, product: Product, quantity: int = 1) -> None:
        if quantity <= 0:
            return

        existing = self._find(product.id)
        if existing is not None:
            existing.quantity += quantity
        else:
            self._items.append(
                CartItem(
                    id=product.id,
                    name=product.name,
                    image=pick_image(product),
                    price=product.price,
                    quantity=quantity,
                )
            )
        logger.debug("Added %d x %r to cart", quantity, product.id)

    def update_quantity(self, id: int | str, new_quantity: int) -> None:
        item = self._find(id)
        if item is None:
            return

        if new_quantity <= 0:
            self._items.remove(item)
            logger.debug("Removed %r from cart (quantity %d)", id, new_quantity)
            return

        item.quantity = new_quantity

    def remove_item(self, id: int | str) -> None:
        item = self._find(id)
        if item is not None:
            self._items.remove(item)
            logger.debug("Removed %r from cart", id)

    def clear(self) -> None:
        self._items.clear()

    def proceed_to_checkout(self) -> NavigationIntent | None:
        """Hand the first cart item over to the product page.

        Returns ``None`` when the cart is empty; nothing is navigated then.
        """
        if not self._items:
            return None

        first = self._items[0]
        intent = NavigationIntent(product_id=first.id)
        logger.info("Checkout hand-off to %s", intent.path)
        return intent
