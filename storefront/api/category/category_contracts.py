from __future__ import annotations

from typing import List

from pydantic import BaseModel

from storefront.store.product_models import CategorySummary, Product
from storefront.views.category_views import CategoriesView, CategoryPageView


class CategorySummaryResponse(BaseModel):
    name: str
    image: str
    link: str

    @staticmethod
    def from_summary(summary: CategorySummary) -> CategorySummaryResponse:
        return CategorySummaryResponse(name=summary.name, image=summary.image, link=summary.link)


class CategoriesResponse(BaseModel):
    status: str
    message: str
    categories: List[CategorySummaryResponse]

    @staticmethod
    def from_view(view: CategoriesView) -> CategoriesResponse:
        display = view.display
        return CategoriesResponse(
            status=display.status,
            message=display.message,
            categories=[CategorySummaryResponse.from_summary(s) for s in view.summaries],
        )


class ProductResponse(BaseModel):
    id: int | str
    name: str
    price: float
    image: str | None
    gallery: List[str]
    category: str | None

    @staticmethod
    def from_product(product: Product) -> ProductResponse:
        return ProductResponse(
            id=product.id,
            name=product.name,
            price=product.price,
            image=product.image,
            gallery=list(product.gallery),
            category=product.category,
        )


class CategoryPageResponse(BaseModel):
    slug: str
    title: str
    status: str
    message: str
    products: List[ProductResponse]

    @staticmethod
    def from_view(view: CategoryPageView) -> CategoryPageResponse:
        display = view.display
        return CategoryPageResponse(
            slug=view.slug or "",
            title=view.title,
            status=display.status,
            message=display.message,
            products=[ProductResponse.from_product(p) for p in view.products],
        )
