"""Pick the item a page should show."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from warinc_pages.context import KEYED_CATEGORIES
from warinc_pages.models import Catalog, Item


def category_items(catalog: Catalog, category: str) -> list[Item]:
    return catalog.get(category) or []


def select_item(catalog: Catalog, category: str, item_id: str | None) -> Item | None:
    """Return the item for ``category``/``item_id`` or ``None``.

    Characters and guides are matched by ``id`` (first match wins). Every other
    category ignores ``item_id`` and yields its first item.
    """
    items = category_items(catalog, category)
    if not items:
        return None
    if category in KEYED_CATEGORIES:
        return next((item for item in items if item.id == item_id), None)
    return items[0]


def duplicate_ids(items: Sequence[Item]) -> list[str]:
    counts = Counter(item.id for item in items if item.id is not None)
    return sorted(item_id for item_id, count in counts.items() if count > 1)
