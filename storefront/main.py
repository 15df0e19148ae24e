import logging

from fastapi import FastAPI

from storefront.api.cart.cart_routes import cart_router
from storefront.api.category.category_routes import categories_router, category_router
from storefront.catalog.contracts import Catalog
from storefront.catalog.http_catalog import HttpCatalog
from storefront.catalog.sql_catalog import SqlCatalog
from storefront.config import Settings, load_settings
from storefront.store.cart_store import CartStore

logger = logging.getLogger(__name__)


def build_catalog(settings: Settings) -> Catalog:
    if settings.catalog_backend == "http":
        return HttpCatalog(settings.catalog_url, timeout=settings.catalog_timeout)
    return SqlCatalog(settings.database_url)


def create_app(settings: Settings | None = None, catalog: Catalog | None = None) -> FastAPI:
    settings = settings or load_settings()
    catalog = catalog or build_catalog(settings)

    app = FastAPI(title="Storefront API")
    app.state.settings = settings
    app.state.catalog = catalog
    app.state.cart = CartStore()

    @app.on_event("startup")
    def _on_startup() -> None:
        if isinstance(catalog, SqlCatalog):
            catalog.init_db()
        logger.info("Storefront started with %s catalog", settings.catalog_backend)

    app.include_router(cart_router)
    app.include_router(categories_router)
    app.include_router(category_router)

    return app


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


if __name__ == "__main__":
    import uvicorn

    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=8000)
