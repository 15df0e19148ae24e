from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from storefront.catalog.contracts import CatalogError, CatalogResponse
from storefront.catalog.sql_catalog import SqlCatalog
from storefront.config import load_settings
from storefront.main import create_app


class FailingCatalog:
	def __init__(self, message: str = "") -> None:
		self.message = message

	async def fetch_products(self, params=None) -> CatalogResponse:
		raise CatalogError(self.message)

	async def fetch_products_by_category(self, slug, params=None) -> CatalogResponse:
		raise CatalogError(self.message)


@pytest.fixture()
def sql_catalog(tmp_path) -> Iterator[SqlCatalog]:
	catalog = SqlCatalog(f"sqlite+pysqlite:///{tmp_path / 'catalog.db'}")
	catalog.init_db()
	yield catalog
	catalog.drop_db()
	catalog.engine.dispose()


@pytest.fixture()
def seeded_catalog(sql_catalog: SqlCatalog) -> SqlCatalog:
	sql_catalog.add_product("Runner", 100.0, image="https://img/runner.png", category="Shoes")
	sql_catalog.add_product("Trail", 120.0, image="https://img/trail.png", category="Shoes")
	sql_catalog.add_product("Lamp", 40.0, gallery=["https://img/lamp-1.png"], category="Home Decor")
	sql_catalog.add_product("Mystery", 5.0)
	return sql_catalog


@pytest.fixture()
def client(seeded_catalog: SqlCatalog) -> Iterator[TestClient]:
	with TestClient(create_app(load_settings(), catalog=seeded_catalog)) as c:
		yield c


@pytest.fixture()
def failing_client() -> Iterator[TestClient]:
	with TestClient(create_app(load_settings(), catalog=FailingCatalog("Catalog is down"))) as c:
		yield c
