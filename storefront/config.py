from __future__ import annotations

import os
from dataclasses import dataclass


def _get_env(key: str, default: str) -> str:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


@dataclass(frozen=True)
class Settings:
    catalog_backend: str
    catalog_url: str
    catalog_timeout: float
    database_url: str
    category_sample_limit: int
    category_page_limit: int
    log_level: str


def load_settings() -> Settings:
    backend = _get_env("CATALOG_BACKEND", "sql").lower()
    if backend not in ("http", "sql"):
        raise RuntimeError(f"CATALOG_BACKEND must be 'http' or 'sql', got {backend!r}")

    return Settings(
        catalog_backend=backend,
        catalog_url=_get_env("CATALOG_URL", "http://localhost:8080/api"),
        catalog_timeout=float(_get_env("CATALOG_TIMEOUT", "10.0")),
        database_url=_get_env("DATABASE_URL", "sqlite+pysqlite:///./storefront.db"),
        category_sample_limit=int(_get_env("CATEGORY_SAMPLE_LIMIT", "120")),
        category_page_limit=int(_get_env("CATEGORY_PAGE_LIMIT", "60")),
        log_level=_get_env("LOG_LEVEL", "INFO").upper(),
    )
