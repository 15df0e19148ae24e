"""View models for the two catalog-backed list surfaces.

``CategoriesView`` backs the "top categories" strip: it samples the whole
catalog once and derives category summaries from it. ``CategoryPageView``
backs the category page grid and refetches whenever the selected slug
changes. Each owns its own fetch controller; they never share state.
"""
import re
from dataclasses import dataclass
from typing import List, Sequence

from storefront.catalog.contracts import Catalog
from storefront.store.category_aggregator import SUMMARY_LIMIT, aggregate_categories
from storefront.store.fetch_controller import ListFetchController
from storefront.store.fetch_models import ERROR, LOADING, SUCCESS, FetchState
from storefront.store.product_models import CategorySummary, Product

READY = "ready"
EMPTY = "empty"

_CATEGORIES_KEY = "all"


@dataclass(slots=True, frozen=True)
class Display:
    status: str
    message: str


@dataclass(slots=True, frozen=True)
class DisplayMessages:
    loading: str
    error: str
    empty: str


def display_for(state: FetchState, items: Sequence[object], messages: DisplayMessages) -> Display:
    if state.status == ERROR:
        return Display(ERROR, state.message)
    if state.status != SUCCESS:
        return Display(LOADING, messages.loading)
    if not items:
        return Display(EMPTY, messages.empty)
    return Display(READY, "")


def humanize_slug(slug: str) -> str:
    return re.sub(r"\b\w", lambda m: m.group().upper(), slug.replace("-", " "))


class CategoriesView:
    messages = DisplayMessages(
        loading="Loading categories...",
        error="Unable to load categories.",
        empty="No categories to display yet.",
    )

    def __init__(self, catalog: Catalog, sample_limit: int = 120) -> None:
        self.catalog = catalog
        self.sample_limit = sample_limit
        self.controller: ListFetchController[Product] = ListFetchController(
            self._fetch,
            name="categories",
            error_message=self.messages.error,
        )

    async def _fetch(self, _key: str) -> List[Product]:
        response = await self.catalog.fetch_products({"limit": self.sample_limit})
        return response.data

    def mount(self) -> None:
        self.controller.set_key(_CATEGORIES_KEY)

    def unmount(self) -> None:
        self.controller.teardown()

    async def settled(self) -> FetchState:
        return await self.controller.settled()

    @property
    def summaries(self) -> List[CategorySummary]:
        state = self.controller.state
        if state.status != SUCCESS:
            return []
        return aggregate_categories(state.data, limit=SUMMARY_LIMIT)

    @property
    def display(self) -> Display:
        return display_for(self.controller.state, self.summaries, self.messages)


class CategoryPageView:
    messages = DisplayMessages(
        loading="Loading category products...",
        error="Unable to load products for this category.",
        empty="No products found in this category yet.",
    )

    def __init__(self, catalog: Catalog, page_limit: int = 60) -> None:
        self.catalog = catalog
        self.page_limit = page_limit
        self.controller: ListFetchController[Product] = ListFetchController(
            self._fetch,
            name="category products",
            error_message=self.messages.error,
        )

    async def _fetch(self, slug: str) -> List[Product]:
        response = await self.catalog.fetch_products_by_category(slug, {"limit": self.page_limit})
        return response.data

    @property
    def slug(self) -> str | None:
        return self.controller.key

    @property
    def title(self) -> str:
        return humanize_slug(self.slug or "")

    def select(self, slug: str) -> None:
        self.controller.set_key(slug)

    def unmount(self) -> None:
        self.controller.teardown()

    async def settled(self) -> FetchState:
        return await self.controller.settled()

    @property
    def products(self) -> Sequence[Product]:
        return self.controller.state.data

    @property
    def display(self) -> Display:
        return display_for(self.controller.state, self.products, self.messages)
