from dataclasses import dataclass

CHECKOUT_PROVENANCE = "cart-checkout"


@dataclass(slots=True)
class CartItem:
    id: int | str
    name: str
    image: str
    price: float
    quantity: int

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


@dataclass(slots=True, frozen=True)
class NavigationIntent:
    product_id: int | str
    provenance: str = CHECKOUT_PROVENANCE

    @property
    def path(self) -> str:
        return f"/product/{self.product_id}"
