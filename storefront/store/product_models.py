from dataclasses import dataclass, field
from typing import List

FALLBACK_IMAGE = "https://placehold.co/300x300/008ECC/FFFFFF.png?text=Category"


@dataclass(slots=True)
class Product:
    id: int | str
    name: str
    price: float
    image: str | None = None
    gallery: List[str] = field(default_factory=list)
    category: str | None = None


@dataclass(slots=True, frozen=True)
class CategorySummary:
    name: str
    image: str

    @property
    def link(self) -> str:
        return f"/category/{self.name.lower()}"


def pick_image(product: Product, fallback: str = FALLBACK_IMAGE) -> str:
    # explicit image, then first gallery entry, then placeholder
    return product.image or (product.gallery[0] if product.gallery else None) or fallback
