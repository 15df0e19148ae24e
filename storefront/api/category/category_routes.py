"""Category list routes.

Every request mounts its own view, the way each page mount in a browser gets
its own fetch lifecycle, and unmounts it once the response is built.
Concurrent requests never see each other's cycles, and a failed fetch is
retried by the next request.
"""
from typing import Annotated, AsyncIterator

from fastapi import APIRouter, Depends, Request

from storefront.views.category_views import CategoriesView, CategoryPageView

from .category_contracts import CategoriesResponse, CategoryPageResponse

categories_router = APIRouter(prefix="/categories")
category_router = APIRouter(prefix="/category")


async def get_categories_view(request: Request) -> AsyncIterator[CategoriesView]:
    settings = request.app.state.settings
    view = CategoriesView(
        request.app.state.catalog,
        sample_limit=settings.category_sample_limit,
    )
    try:
        yield view
    finally:
        view.unmount()


async def get_category_page_view(request: Request) -> AsyncIterator[CategoryPageView]:
    settings = request.app.state.settings
    view = CategoryPageView(
        request.app.state.catalog,
        page_limit=settings.category_page_limit,
    )
    try:
        yield view
    finally:
        view.unmount()


@categories_router.get("/")
async def get_top_categories(
    view: Annotated[CategoriesView, Depends(get_categories_view)],
) -> CategoriesResponse:
    view.mount()
    await view.settled()
    return CategoriesResponse.from_view(view)


@category_router.get("/{slug}")
async def get_category_page(
    slug: str,
    view: Annotated[CategoryPageView, Depends(get_category_page_view)],
) -> CategoryPageResponse:
    view.select(slug)
    await view.settled()
    return CategoryPageResponse.from_view(view)
