from typing import Dict, Iterable, List

from storefront.store.product_models import (
    FALLBACK_IMAGE,
    CategorySummary,
    Product,
    pick_image,
)

OTHER_CATEGORY = "Other"
SUMMARY_LIMIT = 7


def category_name(product: Product) -> str:
    return (product.category or "").strip() or OTHER_CATEGORY


def aggregate_categories(
    products: Iterable[Product],
    *,
    limit: int = SUMMARY_LIMIT,
    fallback_image: str = FALLBACK_IMAGE,
) -> List[CategorySummary]:
    """Collapse products into category summaries.

    Categories keep first-seen order, the first product of a category picks
    its image, and only the first ``limit`` categories are returned.
    """
    summaries: Dict[str, CategorySummary] = {}
    for product in products:
        name = category_name(product).strip()
        if not name:
            continue
        if name not in summaries:
            summaries[name] = CategorySummary(
                name=name,
                image=pick_image(product, fallback_image),
            )

    return list(summaries.values())[:limit]
