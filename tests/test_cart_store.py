from __future__ import annotations

import random

import pytest

from storefront.store.cart_models import CartItem
from storefront.store.cart_store import CartStore
from storefront.store.product_models import FALLBACK_IMAGE, Product


def make_cart() -> CartStore:
	return CartStore(
		[
			CartItem(id=1, name="Runner", image="https://img/1.png", price=100.0, quantity=2),
			CartItem(id=2, name="Socks", image="https://img/2.png", price=50.0, quantity=1),
		]
	)


def snapshot(cart: CartStore) -> list[tuple]:
	return [(i.id, i.price, i.quantity) for i in cart.cart_items]


def test_update_then_remove_scenario() -> None:
	cart = make_cart()
	assert cart.cart_count == 3

	cart.update_quantity(1, 3)
	cart.remove_item(2)

	assert snapshot(cart) == [(1, 100.0, 3)]
	assert cart.cart_count == 3
	assert cart.cart_total == pytest.approx(300.0)


def test_remove_item_is_idempotent() -> None:
	once = make_cart()
	once.remove_item(2)

	twice = make_cart()
	twice.remove_item(2)
	twice.remove_item(2)

	assert snapshot(once) == snapshot(twice) == [(1, 100.0, 2)]


@pytest.mark.parametrize("quantity", [0, -1, -10])
def test_non_positive_quantity_removes_item(quantity: int) -> None:
	cart = make_cart()
	cart.update_quantity(2, quantity)

	assert [i.id for i in cart.cart_items] == [1]
	assert cart.cart_count == 2


def test_decrement_from_one_removes() -> None:
	cart = make_cart()
	item = next(i for i in cart.cart_items if i.id == 2)
	cart.update_quantity(2, item.quantity - 1)
	assert all(i.id != 2 for i in cart.cart_items)


def test_unknown_ids_are_ignored() -> None:
	cart = make_cart()
	cart.update_quantity(99, 5)
	cart.update_quantity(99, 0)
	cart.remove_item(99)
	assert snapshot(cart) == [(1, 100.0, 2), (2, 50.0, 1)]


def test_line_totals_and_total() -> None:
	cart = make_cart()
	assert [i.line_total for i in cart.cart_items] == [200.0, 50.0]
	assert cart.cart_total == pytest.approx(250.0)


def test_cart_items_snapshot_does_not_leak_mutation() -> None:
	cart = make_cart()
	items = cart.cart_items
	items[0].quantity = 40
	assert cart.cart_count == 3


def test_add_item_appends_and_merges() -> None:
	cart = CartStore()
	cart.add_item(Product(id=7, name="Lamp", price=40.0, gallery=["https://img/lamp.png"]))
	cart.add_item(Product(id=8, name="Rug", price=10.0), quantity=2)
	cart.add_item(Product(id=7, name="Lamp", price=40.0), quantity=3)

	assert snapshot(cart) == [(7, 40.0, 4), (8, 10.0, 2)]
	images = {i.id: i.image for i in cart.cart_items}
	assert images == {7: "https://img/lamp.png", 8: FALLBACK_IMAGE}


def test_add_item_ignores_non_positive_quantity() -> None:
	cart = CartStore()
	cart.add_item(Product(id=1, name="x", price=1.0), quantity=0)
	assert cart.is_empty
	assert cart.cart_count == 0


def test_clear() -> None:
	cart = make_cart()
	cart.clear()
	assert cart.is_empty
	assert cart.cart_count == 0
	assert cart.proceed_to_checkout() is None


def test_checkout_picks_first_item() -> None:
	cart = make_cart()
	intent = cart.proceed_to_checkout()
	assert intent is not None
	assert intent.product_id == 1
	assert intent.provenance == "cart-checkout"
	assert intent.path == "/product/1"

	cart.remove_item(1)
	assert cart.proceed_to_checkout().product_id == 2


def test_checkout_on_empty_cart_is_noop() -> None:
	cart = CartStore()
	assert cart.proceed_to_checkout() is None
	assert cart.is_empty


def test_count_matches_quantities_for_random_operations() -> None:
	rng = random.Random(1234)
	cart = CartStore()
	for step in range(500):
		op = rng.choice(["add", "update", "remove"])
		pid = rng.randint(1, 8)
		if op == "add":
			cart.add_item(Product(id=pid, name=f"p{pid}", price=1.5), quantity=rng.randint(-1, 3))
		elif op == "update":
			cart.update_quantity(pid, rng.randint(-3, 6))
		else:
			cart.remove_item(pid)

		items = cart.cart_items
		assert cart.cart_count == sum(i.quantity for i in items) >= 0
		assert all(i.quantity >= 1 for i in items)
		assert len({i.id for i in items}) == len(items)
		assert (cart.cart_count == 0) == cart.is_empty
