"""Remote catalog client built on httpx."""
import logging
from typing import List

import httpx
from pydantic import TypeAdapter, ValidationError

from storefront.store.product_models import Product
from storefront.catalog.contracts import (
    CatalogError,
    CatalogResponse,
    Params,
    ProductPayload,
)

logger = logging.getLogger(__name__)

_products_adapter = TypeAdapter(List[ProductPayload])


class HttpCatalog:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _get_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _get_products(self, path: str, params: Params | None) -> CatalogResponse:
        try:
            async with self._get_client() as client:
                response = await client.get(path, params=params or {})
        except httpx.RequestError as exc:
            raise CatalogError(str(exc) or "Catalog is unreachable") from exc

        if response.status_code != 200:
            logger.warning("Catalog %s answered %d", path, response.status_code)
            raise CatalogError(
                f"Catalog request failed with status {response.status_code}"
            )

        return CatalogResponse(data=_parse_products(response))

    async def fetch_products(self, params: Params | None = None) -> CatalogResponse:
        return await self._get_products("/products", params)

    async def fetch_products_by_category(
        self, slug: str, params: Params | None = None
    ) -> CatalogResponse:
        return await self._get_products(f"/products/category/{slug}", params)


def _parse_products(response: httpx.Response) -> List[Product]:
    try:
        payloads = _products_adapter.validate_json(response.content)
    except ValidationError as exc:
        raise CatalogError("Catalog returned an unexpected payload") from exc
    return [payload.as_product() for payload in payloads]
