from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Protocol

from pydantic import BaseModel, NonNegativeFloat

from storefront.store.product_models import Product

Params = Dict[str, Any]


class CatalogError(Exception):
    """Catalog request failed; ``message`` is safe to show to a shopper."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


@dataclass(slots=True)
class CatalogResponse:
    data: List[Product]


class Catalog(Protocol):
    async def fetch_products(self, params: Params | None = None) -> CatalogResponse: ...

    async def fetch_products_by_category(
        self, slug: str, params: Params | None = None
    ) -> CatalogResponse: ...


class ProductPayload(BaseModel):
    id: int | str
    name: str
    price: NonNegativeFloat
    image: str | None = None
    gallery: List[str] = []
    category: str | None = None

    def as_product(self) -> Product:
        return Product(
            id=self.id,
            name=self.name,
            price=self.price,
            image=self.image,
            gallery=list(self.gallery),
            category=self.category,
        )
