"""Local product catalog stored with SQLAlchemy.

Lets the storefront run without the remote catalog service; it answers the
same ``fetch_products`` / ``fetch_products_by_category`` calls.
"""
import logging
from decimal import Decimal

from sqlalchemy import JSON, Column, Integer, Numeric, String, create_engine, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from storefront.catalog.contracts import CatalogError, CatalogResponse, Params
from storefront.store.product_models import Product

logger = logging.getLogger(__name__)

Base = declarative_base()


class ProductOrm(Base):
    __tablename__ = "products"
    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    image = Column(String(1024), nullable=True)
    gallery = Column(JSON, nullable=False, default=list)
    category = Column(String(255), nullable=True)


def _to_product(orm: ProductOrm) -> Product:
    return Product(
        id=orm.id,
        name=orm.name,
        price=float(orm.price),
        image=orm.image,
        gallery=list(orm.gallery or []),
        category=orm.category,
    )


class SqlCatalog:
    def __init__(self, database_url: str) -> None:
        self.engine = create_engine(database_url, future=True)
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False, future=True)

    def init_db(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def drop_db(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def add_product(
        self,
        name: str,
        price: float,
        image: str | None = None,
        gallery: list[str] | None = None,
        category: str | None = None,
    ) -> Product:
        with self.SessionLocal.begin() as session:
            orm = ProductOrm(
                name=name,
                price=Decimal(str(price)),
                image=image,
                gallery=list(gallery or []),
                category=category,
            )
            session.add(orm)
            session.flush()
            session.refresh(orm)
            return _to_product(orm)

    def _query(self, stmt, params: Params | None) -> CatalogResponse:
        params = params or {}
        stmt = stmt.order_by(ProductOrm.id)
        if params.get("offset"):
            stmt = stmt.offset(int(params["offset"]))
        if params.get("limit"):
            stmt = stmt.limit(int(params["limit"]))

        try:
            with self.SessionLocal() as session:
                rows = session.execute(stmt).scalars().all()
                return CatalogResponse(data=[_to_product(orm) for orm in rows])
        except SQLAlchemyError as exc:
            logger.exception("Catalog query failed")
            raise CatalogError("Catalog database is unavailable") from exc

    async def fetch_products(self, params: Params | None = None) -> CatalogResponse:
        return self._query(select(ProductOrm), params)

    async def fetch_products_by_category(
        self, slug: str, params: Params | None = None
    ) -> CatalogResponse:
        slug = slug.strip().lower()
        category = func.lower(func.trim(ProductOrm.category))
        stmt = select(ProductOrm).where(
            or_(category == slug, category == slug.replace("-", " "))
        )
        return self._query(stmt, params)
